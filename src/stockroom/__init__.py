"""Stockroom - in-memory inventory tracker with a text menu."""

__version__ = "0.1.0"
