"""
Request body validation helpers.
"""
from flask import request
from pydantic import ValidationError as PydanticValidationError

from ..common.exceptions import ValidationError
from ..utils.response_helpers import build_error_response


def get_json_or_error(req=None):
    """
    Get JSON from request or return error response.

    Returns:
        tuple: (data, error_response) where error_response is None if successful
    """
    req = req or request
    data = req.get_json(silent=True)
    if not isinstance(data, dict):
        return None, build_error_response("Invalid JSON data.", "INVALID_JSON", 400)
    return data, None


def parse_body(schema, data):
    """
    Validate a JSON payload against a pydantic schema.

    Raises:
        ValidationError: With the pydantic error list in details["errors"]
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationError("Invalid request payload.", details={"errors": errors}) from e
