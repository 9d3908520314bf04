"""
Selected User Module

Keeps track of which family member the next request shows and edits.

The selection is stored in the signed session cookie, so every browser has
its own pointer. There is no login: any client may select any user.
"""

from flask import session, current_app

SESSION_KEY = 'current_user_id'


def coerce_user_id(value):
    """
    Turn a submitted user id into an int.

    Returns:
        int or None: None when the value is empty or not a number
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def get_current_user_id():
    """Return the selected user id, starting new clients at DEFAULT_USER_ID."""
    if SESSION_KEY not in session:
        return current_app.config.get('DEFAULT_USER_ID')
    return session[SESSION_KEY]


def set_current_user_id(user_id):
    """
    Point this client at `user_id`.

    The id is not checked against the database; an unknown id simply behaves
    as "no current user" on the next page load.
    """
    session[SESSION_KEY] = coerce_user_id(user_id)
    session.modified = True
    return session[SESSION_KEY]
