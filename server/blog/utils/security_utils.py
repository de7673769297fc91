"""Access to the authenticated user of the current request."""
from flask import g


def get_current_user():
    """User placed in the request context by JWT_required, or None."""
    return g.get("current_user")


def get_current_user_login():
    """Login of the authenticated user, or None outside an authenticated request."""
    user = get_current_user()
    return user.login if user is not None else None
