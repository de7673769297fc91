"""
Middleware package for Flask request interceptors.
"""

from .auth_middleware import JWT_required
from .validation_middleware import get_json_or_error, parse_body

__all__ = [
    'JWT_required',
    'get_json_or_error',
    'parse_body'
]
