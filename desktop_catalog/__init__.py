"""Desktop application catalog and launcher core."""

__version__ = "0.1.0"
