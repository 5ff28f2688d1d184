"""Filtering, sorting and pagination for a personal media catalog."""

__version__ = "0.1.0"
