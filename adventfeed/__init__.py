"""Atom feed for retailer advent calendars."""

__version__ = "1.0.0"
