# tests/test_signed_engine.py

import random
from datetime import date

import pytest

from calgreg.core.errors import ConfigurationError
from calgreg.core.types import Date, INT16, INT32, INT64, UINT32, UNIX_EPOCH
from calgreg.engines.signed import SignedEngine

from helpers import assert_round_trip_limits, assert_sharp_bounds, walk

UNIX_ORDINAL = date(1970, 1, 1).toordinal()

EPOCHS_16 = [
    Date(1970, 1, 1), Date(0, 3, 1), Date(0, 1, 1), Date(-1, 1, 1),
    Date(-400, 1, 1), Date(-1970, 1, 1), Date(-32768, 1, 1),
]
EPOCHS_32 = [Date(1970, 1, 1), Date(1912, 6, 23), Date(-1912, 6, 23), Date(-1, 1, 1)]

ENGINES = (
    [SignedEngine(INT16, INT32, e) for e in EPOCHS_16]
    + [SignedEngine(INT32, INT32, e) for e in EPOCHS_32]
    + [SignedEngine(INT64, INT64, e) for e in (UNIX_EPOCH, Date(-1, 1, 1))]
)
IDS = [e.id.name for e in ENGINES]


@pytest.fixture(scope="module")
def unix16():
    return SignedEngine(INT16, INT32)


@pytest.fixture(scope="module")
def unix32():
    return SignedEngine(INT32, INT32)


@pytest.mark.parametrize("eng", ENGINES, ids=IDS)
def test_epoch_is_day_zero(eng):
    assert eng.to_date(0) == eng.epoch
    assert eng.to_rata_die(eng.epoch) == 0


@pytest.mark.parametrize("eng", ENGINES, ids=IDS)
def test_walk_around_epoch(eng):
    lo = max(eng.round_rata_die_min, -1500)
    hi = min(eng.round_rata_die_max, 1500)
    walk(eng, lo, hi - lo + 1)


@pytest.mark.parametrize("eng", ENGINES, ids=IDS)
def test_walk_near_limits(eng):
    walk(eng, eng.round_rata_die_min, 1500)
    walk(eng, eng.round_rata_die_max - 1499, 1500)


@pytest.mark.parametrize("eng", ENGINES, ids=IDS)
def test_round_trip_limits(eng):
    assert_round_trip_limits(eng)


@pytest.mark.parametrize("eng", ENGINES, ids=IDS)
def test_bounds_are_sharp(eng):
    assert_sharp_bounds(eng)


def test_unix_scenario(unix32):
    assert unix32.to_rata_die(Date(1970, 1, 1)) == 0
    assert unix32.to_date(-1) == Date(1969, 12, 31)
    assert unix32.to_rata_die(Date(2000, 3, 1)) == 11017
    assert unix32.to_rata_die(Date(2000, 2, 29)) - unix32.to_rata_die(Date(2000, 1, 1)) == 59
    assert unix32.to_date(11016) == Date(2000, 2, 29)
    assert unix32.to_rata_die(Date(0, 3, 1)) == -719468


def test_matches_stdlib_ordinals(unix32):
    rng = random.Random(1970)
    for _ in range(20_000):
        d = date.fromordinal(rng.randint(1, date(9999, 12, 31).toordinal()))
        n = d.toordinal() - UNIX_ORDINAL
        assert unix32.to_rata_die(Date(d.year, d.month, d.day)) == n
        assert unix32.to_date(n) == Date(d.year, d.month, d.day)


def test_unix32_bounds(unix32):
    assert unix32.date_min == Date(-1468000, 3, 1)
    assert unix32.date_max == Date(1471745, 2, 28)
    assert unix32.offset.year == UINT32.wrap(-1468000)


def test_negative_epoch_bounds_int32():
    eng = SignedEngine(INT32, INT32, Date(-1, 1, 1))
    assert eng.offset.year == UINT32.wrap(-1469600)
    assert eng.date_min == Date(-1469600, 3, 1)
    assert eng.date_max == Date(1470145, 2, 28)
    assert eng.rata_die_min == -536759953
    assert eng.rata_die_max == 536981870
    assert SignedEngine(INT32, INT32, Date(-1912, 6, 23)).date_min == Date(-1471200, 3, 1)


@pytest.mark.parametrize("Y", [INT32, INT64])
def test_epoch_year_split_truncates_toward_zero(Y):
    # Years -399..399 share a cycle count; -400 is one cycle lower.
    base = SignedEngine(Y, Y, Date(1, 1, 1)).offset.year
    U = Y.unsigned()
    for year in (-1, -399, 399):
        assert SignedEngine(Y, Y, Date(year, 1, 1)).offset.year == base, year
    assert SignedEngine(Y, Y, Date(-400, 1, 1)).offset.year == U.wrap(base - 400)


def test_unix16_covers_the_whole_year_range(unix16):
    assert unix16.round_date_min == Date(-32768, 1, 1)
    assert unix16.round_date_max == Date(32767, 12, 31)
    assert unix16.round_rata_die_min == -12687794
    assert unix16.round_rata_die_max == 11248737


def test_unix16_year_wraps_past_the_year_range(unix16):
    assert unix16.to_date(unix16.round_rata_die_max + 1) == Date(-32768, 1, 1)


def test_cross_width_consistency(unix16, unix32):
    unix64 = SignedEngine(INT64, INT64)
    rng = random.Random(16)
    for _ in range(5000):
        n = rng.randint(unix16.round_rata_die_min, unix16.round_rata_die_max)
        d = unix16.to_date(n)
        assert unix32.to_date(n) == d
        assert unix64.to_date(n) == d
        assert unix64.to_rata_die(d) == n


def test_epoch_shift():
    jan0 = SignedEngine(INT16, INT32, Date(0, 1, 1))
    march0 = SignedEngine(INT16, INT32, Date(0, 3, 1))
    assert jan0.to_rata_die(Date(1970, 1, 1)) == 719528
    assert march0.to_rata_die(Date(1970, 1, 1)) == 719468
    assert march0.to_date(-60) == Date(0, 1, 1)


@pytest.mark.parametrize("Y,R,epoch", [
    (UINT32, INT32, UNIX_EPOCH),
    (INT32, INT16, UNIX_EPOCH),
    (INT16, INT32, Date(40000, 1, 1)),
    (INT16, INT32, Date(1970, 2, 30)),
    (INT16, INT32, Date(1970, 13, 1)),
])
def test_invalid_configurations(Y, R, epoch):
    with pytest.raises(ConfigurationError):
        SignedEngine(Y, R, epoch)


def test_info(unix32):
    info = unix32.info()
    assert info["family"] == "signed"
    assert info["year_type"] == "int32"
    assert info["epoch"] == "1970-01-01"
    assert info["offset"]["year"] == unix32.offset.year
