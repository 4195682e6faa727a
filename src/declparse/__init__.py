"""Pratt parser for a small declaration syntax."""

__version__ = "0.1.0"
