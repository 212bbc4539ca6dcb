"""Diagnostics package.

- round_trip, bounds_table: always available, print to the console
- eaf_residuals: optional (requires the diagnostics extra for matplotlib)
"""

__all__ = ["round_trip", "bounds_table", "eaf_residuals"]
