"""Data models, endpoint URLs, query options and stream reading for the Twitter v2 API."""

__version__ = "0.1.0"