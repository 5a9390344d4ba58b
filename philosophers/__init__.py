"""Dining philosophers simulation built on threads and locks."""

__version__ = "1.0.0"
__all__ = ["args", "table", "philosopher", "monitor", "cli"]