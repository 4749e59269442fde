"""Stable forward/backward cursor pagination over externally fetched pages."""

__version__ = "1.0.0"
