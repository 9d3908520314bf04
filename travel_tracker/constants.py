# travel_tracker/constants.py
"""Fixed values shared by the routes, services and templates."""


class TrackerConstants:
    """Data and display constants."""

    # Fallback tint when no user is selected or the user has no colour
    DEFAULT_COLOR = '#ffffff'

    # Applied to a resolved country code before it is stored.
    # British Indian Ocean Territory has no shape of its own on the map, so it is shown as India.
    COUNTRY_CODE_REMAP = {
        'IO': 'IN',
    }

    # Column sizes, mirrored by form validators
    USER_NAME_MAX_LENGTH = 15
    USER_COLOR_MAX_LENGTH = 15
    COUNTRY_CODE_LENGTH = 2
    COUNTRY_NAME_MAX_LENGTH = 100

    # Value of the `add` field that asks for the new-member form
    NEW_USER_SENTINEL = 'new'

    # Palette offered on the new-member form
    USER_COLORS = [
        ('red', '#e74c3c'),
        ('orange', '#e67e22'),
        ('yellow', '#f1c40f'),
        ('green', '#2ecc71'),
        ('teal', '#1abc9c'),
        ('blue', '#3498db'),
        ('purple', '#9b59b6'),
        ('pink', '#fd79a8'),
    ]


class ErrorMessages:
    """User-visible messages rendered inline on the home page."""

    FETCH_FAILED = 'Error fetching data'
    COUNTRY_EMPTY = 'Country name cannot be empty, please try again'
    COUNTRY_NOT_FOUND = 'Country name does not exist, try again'
    COUNTRY_ALREADY_ADDED = 'Country already added, try again'
    NAME_EMPTY = 'Name cannot be empty, please try again'
    ADD_USER_FAILED = 'Error adding new member, try again'
    NO_USER_SELECTED = 'No user selected, try again'
    DELETE_USER_FAILED = 'Error deleting user data, try again'
    TOO_MANY_CHANGES = 'Too many changes at once, please wait a minute and try again'
    FORM_EXPIRED = 'The form has expired, please try again'
