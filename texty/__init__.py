"""Texty: create a text file and hand it to an editor."""

__version__ = "0.1.0"
