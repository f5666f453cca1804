"""Routing-table neighbour extraction, change-degree history and unit helpers."""

__version__ = "0.1.0"
__all__ = ["table", "units"]