"""Diagnostics package.

- round_trip, new_years_table, pretty_month: pure-Python checks and tables
- newroz_drift: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "newroz_drift"]
