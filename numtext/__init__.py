"""Decimal text for integers and truncating fixed-point text for floats."""

__version__ = "0.1.0"
__all__ = ["support"]