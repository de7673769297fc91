"""
Application-wide error handler.

Registered for ``Exception`` in create_app(); anything a controller does not
handle itself ends up here.
"""
import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from .common.exceptions import BlogError

logger = logging.getLogger(__name__)


def handle_exception(e):
    """Translate uncaught exceptions into JSON error responses."""
    if isinstance(e, HTTPException):
        return jsonify({
            "resultMessage": e.description,
            "resultCode": e.name.upper().replace(" ", "_")
        }), e.code

    if isinstance(e, BlogError):
        if e.status_code >= 500:
            logger.error(f"[ERROR] {e.__class__.__name__}: {e.message}", exc_info=True)
        else:
            logger.warning(f"[ERROR] {e.__class__.__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    logger.error(f"[ERROR] Unhandled exception: {e}", exc_info=True)
    return jsonify({
        "resultMessage": "An internal server error occurred",
        "resultCode": "INTERNAL_SERVER_ERROR"
    }), 500
