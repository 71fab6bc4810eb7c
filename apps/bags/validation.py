"""
Field validation for bag and brew request bodies.

Pure functions that turn a raw request value into either a typed value or a
field issue ``{'field': ..., 'message': ...}``. Nothing here raises for bad
input; callers collect the issues of every field and report them together.

Rules:
    - ``None`` or a blank string means "not provided" and is valid for optional fields
    - numbers may arrive as JSON numbers or numeric strings
    - booleans are not numbers
"""

import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Tuple

from django.utils.dateparse import parse_date, parse_datetime


MSG_REQUIRED = 'is required'
MSG_NOT_A_NUMBER = 'must be a number'
MSG_NOT_AN_INTEGER = 'must be an integer'
MSG_INVALID_DATE = 'must be a valid date'


def issue(field: str, message: str) -> dict:
    """Build a single field issue."""
    return {'field': field, 'message': message}


def is_blank(value: Any) -> bool:
    """True for values that mean "field not provided"."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_optional_number(value: Any) -> Optional[float]:
    """
    Parse a JSON number or numeric string.

    Returns:
        None when the value is blank, otherwise the parsed float.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a number")
    if isinstance(value, (int, float, Decimal)):
        parsed = float(value)
    elif isinstance(value, str):
        parsed = float(value.strip())
    else:
        raise ValueError(f"{value!r} is not a number")

    if not math.isfinite(parsed):
        raise ValueError(f"{value!r} is not a finite number")
    return parsed


def _range_message(minimum, maximum) -> str:
    return f'must be between {minimum} and {maximum}'


def validate_optional_integer(
    value: Any,
    field: str,
    minimum: int,
    maximum: int,
) -> Tuple[Optional[int], Optional[dict]]:
    """
    Validate an optional whole number within ``[minimum, maximum]``.

    Used for dose, grind setting, water amount and the taste sliders.

    Returns:
        ``(value, None)`` on success (value is None when not provided),
        ``(None, issue)`` otherwise.

    Example:
        >>> validate_optional_integer('18', 'dose', 0, 1000)
        (18, None)
        >>> validate_optional_integer(1001, 'dose', 0, 1000)
        (None, {'field': 'dose', 'message': 'must be between 0 and 1000'})
    """
    try:
        parsed = parse_optional_number(value)
    except (TypeError, ValueError, OverflowError):
        return None, issue(field, MSG_NOT_A_NUMBER)

    if parsed is None:
        return None, None
    if not parsed.is_integer():
        return None, issue(field, MSG_NOT_AN_INTEGER)
    if parsed < minimum or parsed > maximum:
        return None, issue(field, _range_message(minimum, maximum))
    return int(parsed), None


def validate_optional_number(
    value: Any,
    field: str,
    minimum: float,
    maximum: float,
) -> Tuple[Optional[float], Optional[dict]]:
    """
    Validate an optional decimal number within ``[minimum, maximum]``.

    Used for the brew rating (0.0 - 5.0).
    """
    try:
        parsed = parse_optional_number(value)
    except (TypeError, ValueError, OverflowError):
        return None, issue(field, MSG_NOT_A_NUMBER)

    if parsed is None:
        return None, None
    if parsed < minimum or parsed > maximum:
        return None, issue(field, _range_message(minimum, maximum))
    return parsed, None


def validate_required_text(value: Any, field: str) -> Tuple[Optional[str], Optional[dict]]:
    """Require a non-blank string; returns it stripped."""
    if not isinstance(value, str) or not value.strip():
        return None, issue(field, MSG_REQUIRED)
    return value.strip(), None


def parse_calendar_date(value: Any) -> date:
    """
    Parse a calendar date from ``YYYY-MM-DD`` or an ISO 8601 datetime.

    Raises:
        ValueError: If the value is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{value!r} is not a date")

    text = value.strip()
    # parse_date/parse_datetime return None for malformed input and raise
    # ValueError for well-formed but impossible dates (2026-02-30)
    parsed = parse_date(text)
    if parsed is not None:
        return parsed
    parsed_datetime = parse_datetime(text)
    if parsed_datetime is not None:
        return parsed_datetime.date()
    raise ValueError(f"{value!r} is not a date")


def validate_date(
    value: Any,
    field: str,
    required: bool = False,
) -> Tuple[Optional[date], Optional[dict]]:
    """
    Validate a date field.

    A blank value is an "is required" issue when ``required`` is set and a
    valid ``None`` otherwise.
    """
    if is_blank(value):
        if required:
            return None, issue(field, MSG_REQUIRED)
        return None, None
    try:
        return parse_calendar_date(value), None
    except (TypeError, ValueError):
        return None, issue(field, MSG_INVALID_DATE)
