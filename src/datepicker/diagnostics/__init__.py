"""Diagnostics package.

- pretty_month: text grid of a month, always available
- availability_map: yearly heat map (requires the diagnostics extra: numpy, matplotlib)
"""

__all__ = ["pretty_month", "availability_map"]
