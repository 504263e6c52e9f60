"""Locale-independent ASCII lowercasing; see the ``util`` module."""

__version__ = "0.4.0"
__all__ = ["util"]