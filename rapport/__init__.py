"""Rapport - relationship health tracking for small social networks."""

__version__ = "0.1.0"
