"""Minimal line editor: replace one line of a small file in place."""

__version__ = "0.1.0"
