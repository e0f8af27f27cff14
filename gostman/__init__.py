"""Terminal client for composing, sending and saving HTTP requests."""

__version__ = "0.1.0"
__all__ = ["__version__"]