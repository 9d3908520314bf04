# travel_tracker/exceptions.py
"""Custom exceptions for the travel tracker."""


class TrackerException(Exception):
    """Base exception for all application-specific exceptions."""
    pass


# --- Validation Exceptions ---

class EmptyNameError(TrackerException):
    """Raised when a required name is blank or whitespace only."""
    pass


# --- Lookup Exceptions ---

class CountryNotFoundError(TrackerException):
    """Raised when no country name contains the submitted text."""
    pass


class NoUserSelectedError(TrackerException):
    """Raised when the current user pointer is empty or names a missing user."""
    pass


# --- Conflict Exceptions ---

class CountryAlreadyVisitedError(TrackerException):
    """Raised when the user already has the country in their visited list."""

    def __init__(self, user_id, country_code):
        super().__init__(f"User {user_id} already visited {country_code}")
        self.user_id = user_id
        self.country_code = country_code
