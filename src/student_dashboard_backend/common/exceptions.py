"""
This file contains custom, application-specific exceptions.
"""

class CalendarEventNotFoundError(Exception):
    """Raised when a user event ID is not found in the database."""
    pass

class ReadOnlyEventError(Exception):
    """Raised when a user tries to modify an event they do not own (or a preloaded one)."""
    pass
