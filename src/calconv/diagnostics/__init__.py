"""Diagnostics package.

- round_trip, new_years_table: always available (stdlib only)
- year_lengths: needs the diagnostics extras (numpy, matplotlib for --out)
"""

__all__ = ["round_trip", "new_years_table", "year_lengths"]
