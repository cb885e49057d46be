"""Argument checking and table set-up for a dining philosophers simulation."""

__version__ = "0.1.0"
__all__ = ["__version__"]