"""
Entry Controller Package
Flask Blueprint for the /api/entries and /api/_search/entries endpoints
"""

from flask import Blueprint


def init_app():
    """Build the entry blueprint and bind the controller's routes to it."""
    from .entry_controller import init_entry_controller
    entry_api = Blueprint("entry_api", __name__, url_prefix="/api")
    init_entry_controller(entry_api)
    return entry_api
