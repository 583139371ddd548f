"""Dragon Ball character lookup over REST, with results cached in Redis."""

__version__ = "0.1.0"
__all__ = ["__version__"]