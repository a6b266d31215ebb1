"""Diagnostics package.

Light-weight checks and tables built on the public API. The scatter plot needs
the optional extras: pip install "caljal[diagnostics]".
"""

__all__ = ["round_trip", "nowruz_table", "leap_years", "pretty_month", "nowruz_scatter"]
