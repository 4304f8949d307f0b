"""Physical quantities with exact-ratio prefixes, dimension checking and conversion."""

__version__ = "1.0.0"

__all__ = ["mpl", "traits", "conversion", "quantity", "imperial", "quantity_math"]