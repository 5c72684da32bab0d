"""
Bookmark Mind-Map Organizer.

Turns browser bookmark exports into topical FreeMind mind maps.
"""

__version__ = "1.0.0"
