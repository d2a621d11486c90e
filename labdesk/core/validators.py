import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any

_PHONE_RE = re.compile(r"[0-9+ \-]+")

MIN_PHONE_LENGTH = 7


def is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def is_phone_like(value: Any) -> bool:
    """Digits, '+', spaces and dashes only; at least 7 characters once trimmed."""
    if not isinstance(value, str):
        return False
    return len(value.strip()) >= MIN_PHONE_LENGTH and bool(_PHONE_RE.fullmatch(value))


def parse_datetime(value: str) -> datetime:
    """
    Parse an ISO 8601 date/date-time (a trailing 'Z' means UTC) or an
    RFC 2822 date as sent by some browsers.
    Raises ValueError if neither format matches.
    """
    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        raise ValueError(f"Unrecognised date format: {value!r}") from None


def is_optional_date(value: Any) -> bool:
    """Empty/absent values are allowed; anything else must parse as a date."""
    if value is None or value == "":
        return True
    if not isinstance(value, str):
        return False
    try:
        parse_datetime(value)
    except ValueError:
        return False
    return True
