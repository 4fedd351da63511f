"""Shoe inventory list client."""

__version__ = "0.1.0"
