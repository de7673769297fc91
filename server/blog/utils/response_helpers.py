"""
Response helper functions.

Alert headers tell the client UI what happened to an entity
(``X-<app>-alert`` / ``X-<app>-error`` plus ``X-<app>-params``). The
application name comes from ``APP_NAME`` in the current app's config.
"""
from flask import current_app, jsonify


def _app_name():
    return current_app.config.get("APP_NAME", "blogApp")


def create_alert(message, param):
    """Generic success alert headers."""
    app_name = _app_name()
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": str(param),
    }


def create_entity_creation_alert(entity_name, param):
    return create_alert(f"A new {entity_name} is created with identifier {param}", param)


def create_entity_update_alert(entity_name, param):
    return create_alert(f"An {entity_name} is updated with identifier {param}", param)


def create_entity_deletion_alert(entity_name, param):
    return create_alert(f"An {entity_name} is deleted with identifier {param}", param)


def create_failure_alert(entity_name, error_key, default_message):
    """
    Failure alert headers.

    Args:
        entity_name: Entity the request was about (e.g. "entry")
        error_key: Short machine-readable key (e.g. "idexists")
        default_message: Human-readable message
    """
    app_name = _app_name()
    return {
        f"X-{app_name}-error": default_message,
        f"X-{app_name}-params": entity_name,
    }


def build_error_response(message, result_code, status_code=400, headers=None, details=None):
    """
    Build standardized error response.

    Args:
        message: Error message
        result_code: Application result code
        status_code: HTTP status code (default 400)
        headers: Optional extra response headers (alerts)
        details: Optional dict with additional error data

    Returns:
        tuple: (json_response, status_code, headers)

    Example:
        return build_error_response(
            "A new entry cannot already have an ID",
            "idexists",
            400,
            headers=create_failure_alert("entry", "idexists", "A new entry cannot already have an ID")
        )
    """
    body = {
        "resultMessage": message,
        "resultCode": result_code
    }
    if details:
        body["details"] = details
    return jsonify(body), status_code, headers or {}
