# tests/test_unsigned_engine.py

import random
from datetime import date

import pytest

from calgreg.core.errors import ConfigurationError
from calgreg.core.types import Date, INT32, UINT16, UINT32, UINT64
from calgreg.engines.unsigned import UnsignedEngine

from helpers import assert_round_trip_limits, assert_sharp_bounds, walk

# Day 0 of the unsigned engines is 0000-03-01, 305 days before 0001-01-01.
ORDINAL_SHIFT = 305

ENGINES = {
    "u16/u32": UnsignedEngine(UINT16, UINT32),
    "u32/u32": UnsignedEngine(UINT32, UINT32),
    "u64/u64": UnsignedEngine(UINT64, UINT64),
}


@pytest.mark.parametrize("name", sorted(ENGINES))
def test_epoch_is_day_zero(name):
    eng = ENGINES[name]
    assert eng.epoch == Date(0, 3, 1)
    assert eng.to_rata_die(Date(0, 3, 1)) == 0
    assert eng.to_date(0) == Date(0, 3, 1)


@pytest.mark.parametrize("name", sorted(ENGINES))
def test_known_dates(name):
    eng = ENGINES[name]
    assert eng.to_rata_die(Date(1970, 1, 1)) == 719468
    assert eng.to_date(719468) == Date(1970, 1, 1)
    assert eng.to_rata_die(Date(1, 1, 1)) == 306
    assert eng.to_rata_die(Date(0, 12, 31)) == 305
    assert eng.to_date(364) == Date(1, 2, 28)
    assert eng.to_date(365) == Date(1, 3, 1)


@pytest.mark.parametrize("name", sorted(ENGINES))
def test_matches_proleptic_ordinals(name):
    eng = ENGINES[name]
    rng = random.Random(2020)
    for _ in range(20_000):
        d = date.fromordinal(rng.randint(1, date(9999, 12, 31).toordinal()))
        n = d.toordinal() + ORDINAL_SHIFT
        assert eng.to_rata_die(Date(d.year, d.month, d.day)) == n
        assert eng.to_date(n) == Date(d.year, d.month, d.day)


def test_every_day_of_first_four_centuries():
    walk(ENGINES["u32/u32"], 0, 4 * 146097 + 10)


def test_bounds_u32():
    eng = ENGINES["u32/u32"]
    assert eng.date_min == Date(0, 3, 1)
    assert eng.date_max == Date(2939745, 2, 28)
    assert eng.rata_die_min == 0
    assert eng.rata_die_max == 1073741823
    assert eng.round_rata_die_max == 1073719812
    assert eng.round_date_max == Date(2939745, 2, 28)


def test_bounds_u16():
    eng = ENGINES["u16/u32"]
    assert eng.date_max == Date(65535, 12, 31)
    # 365*65535 + 65535//4 - 65535//100 + 65535//400 + days from 1 March to 31 December
    assert eng.rata_die_max == 23936471
    assert eng.round_date_max == Date(65535, 12, 31)
    assert eng.round_rata_die_max == 23936471


@pytest.mark.parametrize("name", sorted(ENGINES))
def test_round_trip_limits(name):
    assert_round_trip_limits(ENGINES[name])


@pytest.mark.parametrize("name", sorted(ENGINES))
def test_bounds_are_sharp(name):
    assert_sharp_bounds(ENGINES[name])


@pytest.mark.parametrize("name", sorted(ENGINES))
def test_walk_near_limits(name):
    eng = ENGINES[name]
    walk(eng, eng.round_rata_die_min, 2000)
    walk(eng, eng.round_rata_die_max - 1999, 2000)


def test_overflow_wraps_like_machine_integers():
    eng = ENGINES["u32/u32"]
    # 4 * 2**30 + 3 wraps to 3.
    assert eng.to_date(eng.rata_die_max + 1) == Date(0, 3, 1)
    assert eng.to_rata_die(Date(2939745, 3, 1)) != eng.round_rata_die_max + 1


def test_u16_years_wrap():
    eng = ENGINES["u16/u32"]
    assert eng.to_date(eng.rata_die_max + 1) == Date(0, 1, 1)


def test_cross_width_consistency():
    rng = random.Random(7)
    hi = ENGINES["u16/u32"].round_rata_die_max
    for _ in range(5000):
        n = rng.randint(0, hi)
        d = ENGINES["u16/u32"].to_date(n)
        assert ENGINES["u32/u32"].to_date(n) == d
        assert ENGINES["u64/u64"].to_date(n) == d
        assert ENGINES["u64/u64"].to_rata_die(d) == n


@pytest.mark.parametrize("Y,R", [(INT32, UINT32), (UINT32, INT32), (UINT64, UINT32), (UINT16, UINT16)])
def test_invalid_configurations(Y, R):
    with pytest.raises(ConfigurationError):
        UnsignedEngine(Y, R)


def test_info():
    info = ENGINES["u32/u32"].info()
    assert info["family"] == "unsigned"
    assert info["year_type"] == "uint32"
    assert info["epoch"] == "0000-03-01"
    assert info["bounds"]["rata_die_max"] == 1073741823
