"""A 96-bit fixed-point decimal type with conversions, comparisons, addition, division and floor."""

__version__ = "0.1.0"
__all__ = ["core", "convert", "compare", "arithmetic"]