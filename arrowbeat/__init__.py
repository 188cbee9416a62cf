"""A terminal arcade rhythm game: hit the falling arrows in time with the tune."""

__version__ = "0.1.0"
__all__ = ["__version__"]