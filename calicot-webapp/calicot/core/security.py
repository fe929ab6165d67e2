# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError, DecodeError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed stored hash
        return False


def _uses_shared_secret(algorithm: str) -> bool:
    return algorithm.upper().startswith("HS")


def jwt_signing_key() -> str:
    """
    Key used to sign issued tokens.

    HMAC algorithms share JWT_SECRET_KEY; RSA/EC algorithms sign with the
    PEM private key from JWT_PRIVATE_KEY.
    """
    settings = get_settings()
    if _uses_shared_secret(settings.jwt_algorithm):
        return settings.jwt_secret_key
    if not settings.jwt_private_key:
        raise RuntimeError(f"JWT_PRIVATE_KEY is required for {settings.jwt_algorithm} tokens")
    return settings.jwt_private_key


def jwt_verification_key() -> str:
    """Key used by the bearer validation to check token signatures"""
    settings = get_settings()
    if _uses_shared_secret(settings.jwt_algorithm):
        return settings.jwt_secret_key
    if not settings.jwt_public_key:
        raise RuntimeError(f"JWT_PUBLIC_KEY is required for {settings.jwt_algorithm} tokens")
    return settings.jwt_public_key


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub, unique_name)

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()
    issued_at = int(time.time())
    expires_at = issued_at + (settings.access_token_expire_minutes * 60)

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    token = jwt.encode(
        token_payload,
        jwt_signing_key(),
        algorithm=settings.jwt_algorithm
    )
    return token


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, expired or cannot be decoded
    """
    settings = get_settings()
    try:
        decoded = jwt.decode(
            token,
            jwt_verification_key(),
            algorithms=[settings.jwt_algorithm]
        )
        return decoded
    except (InvalidTokenError, DecodeError) as e:
        raise ValueError(f"Invalid token: {str(e)}")
