import math
from datetime import date, datetime, timezone
from numbers import Real
from typing import Any, Dict, Optional
from urllib.parse import quote


def parse_dob(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None


def is_coordinate(value: Any) -> bool:
    # bool is a subclass of int but never a valid coordinate
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def placeholder_image_url(name: str) -> str:
    return f"https://placehold.co/600x400/cccccc/ffffff?text={quote(str(name), safe='')}"


def transform_frontend_to_backend_format_signup(payload: Dict[str, Any], password_hash: str) -> Dict[str, Any]:
    user = {
        "username": payload["username"],
        "email": payload["email"],
        "password": password_hash,
        "state": payload["state"],
        "phone": (payload.get("phone") or "").strip() or None,
        "dob": parse_dob(payload["dob"]),
        "date": datetime.now(timezone.utc),
    }
    return user


def transform_frontend_to_backend_format_trip(payload: Dict[str, Any]) -> Dict[str, Any]:
    trip_params = {
        "interests": payload.get("interests", ""),
        "days": payload.get("days", ""),
        "budget": payload.get("budget", ""),
        "location": (payload.get("location") or "").strip(),
        "language": payload.get("language", "English"),
    }
    return {"trip_params": trip_params}


def serialize_user(document: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a users collection document into a JSON-safe profile without the password."""
    profile = {}
    for key, value in document.items():
        if key == "password":
            continue
        if key == "_id":
            profile["id"] = str(value)
        elif isinstance(value, (datetime, date)):
            profile[key] = value.isoformat()
        else:
            profile[key] = value
    return profile
