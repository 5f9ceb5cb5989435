"""Event registration API: attendees, attendance, email and checkout."""

__version__ = "1.0.0"
