"""Building blocks for PDF content streams, dictionary objects, number formatting and units."""

__version__ = "0.1.0"

__all__ = ["binio", "content", "drawing", "numfmt", "objects", "options", "units"]