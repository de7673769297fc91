"""JWT token helper functions."""
from datetime import datetime, timezone, timedelta
import jwt
import logging

from flask import current_app

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def _secret_key():
    return current_app.config["SECRET_KEY"]


def encode_jwt_token(login, expires_in_seconds):
    """
    Encode a JWT token for a user login.

    Args:
        login: User login, stored as the ``sub`` claim
        expires_in_seconds: Token lifetime in seconds

    Returns:
        str: Encoded JWT token
    """
    try:
        payload = {
            "sub": login,
            "exp": datetime.now(tz=timezone.utc) + timedelta(seconds=expires_in_seconds)
        }
        return jwt.encode(payload, _secret_key(), algorithm=ALGORITHM)
    except jwt.PyJWTError as e:
        logger.error(f"[AUTH] JWT encoding error: {str(e)}")
        raise


def decode_jwt_token(token):
    """
    Decode and verify a JWT token.

    Returns:
        dict: Decoded payload, or None if the token is invalid, expired or has no subject
    """
    try:
        payload = jwt.decode(token, _secret_key(), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.warning("[AUTH] JWT token expired")
        return None
    except jwt.InvalidTokenError:
        logger.warning("[AUTH] Invalid JWT token")
        return None

    if not payload.get("sub"):
        logger.warning("[AUTH] JWT token missing required claim: sub")
        return None
    return payload


def generate_access_token(login, remember_me=False):
    """
    Generate an access token for a user.

    Args:
        login: User login
        remember_me: Use the long remember-me validity instead of the default one
    """
    if remember_me:
        expires_in = current_app.config["TOKEN_VALIDITY_REMEMBER_ME_SEC"]
    else:
        expires_in = current_app.config["TOKEN_VALIDITY_SEC"]
    return encode_jwt_token(login, expires_in)
