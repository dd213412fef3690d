from datetime import date, datetime, timezone

from flask import request

from errors import InvalidId, ValidationError

DATE_FORMAT = "%Y-%m-%d"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(value: datetime | None) -> str | None:
    """Serialize a timestamp; SQLite hands back naive values, treat them as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def parse_date(value, field: str = "date") -> date:
    """Parse a ``YYYY-MM-DD`` string or raise ValidationError."""
    try:
        return datetime.strptime(str(value), DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date") from None


def parse_clock(value, field: str = "time") -> int:
    """``HH:MM`` -> minutes since midnight."""
    text = str(value).strip()
    hours, sep, minutes = text.partition(":")
    if not sep or not hours.isdigit() or not minutes.isdigit() or len(minutes) != 2:
        raise ValidationError(f"{field} must be in HH:MM format")
    h, m = int(hours), int(minutes)
    if h > 23 or m > 59:
        raise ValidationError(f"{field} must be in HH:MM format")
    return h * 60 + m


def normalize_date(value, field: str = "date") -> str:
    """Canonical zero-padded ``YYYY-MM-DD``; stored dates compare as strings."""
    return parse_date(str(value).strip(), field).strftime(DATE_FORMAT)


def normalize_clock(value, field: str = "time") -> str:
    """Canonical zero-padded ``HH:MM``."""
    hours, minutes = divmod(parse_clock(value, field), 60)
    return f"{hours:02d}:{minutes:02d}"


def is_valid_id(value) -> bool:
    """Record ids are positive integers; they travel as opaque strings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    text = str(value or "")
    return text.isascii() and text.isdigit() and int(text) > 0


def require_id(value, message: str = "Invalid ID") -> int:
    if not is_valid_id(value):
        raise InvalidId(message)
    return int(value)


def json_body(allow_empty: bool = False) -> dict:
    """Parsed JSON object from the current request, or ValidationError."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    if not data and not allow_empty:
        raise ValidationError("Request body is empty")
    return data
