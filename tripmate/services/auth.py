from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from ..settings.config import settings
import bcrypt
import jwt


class InvalidTokenError(Exception):
    """The bearer token is missing a user, expired, or not signed by us"""


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, AttributeError):
        # Stored value is not a bcrypt hash
        return False


def create_access_token(user_id: str) -> str:
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT secret is not configured.")
    now = datetime.now(timezone.utc)
    payload = {
        "user": {"id": user_id},
        "iat": now,
        "exp": now + timedelta(hours=settings.JWT_EXPIRES_HOURS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm="HS256")


def decode_access_token(token: str) -> Dict[str, Any]:
    """Return the ``user`` claim of a valid token."""
    if not settings.JWT_SECRET:
        raise InvalidTokenError("JWT secret is not configured.")
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=["HS256"])
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError("Token is not valid") from e

    user = payload.get("user")
    if not isinstance(user, dict) or not user.get("id"):
        raise InvalidTokenError("Token carries no user")
    return user
