"""Clothing store customer measurements API."""

__version__ = "1.0.0"
