"""Shoe store catalog client."""

__version__ = "1.0.0"
