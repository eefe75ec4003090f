"""
Value coercion - converts optional text input into typed payload values

Supports:
- ISO-8601 date-time text → epoch milliseconds
- JSON text → nested object, with a sentinel on failure
"""

import json
import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

INVALID_JSON_SENTINEL: Dict[str, str] = {"error": "Invalid JSON"}

DATE_ONLY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Extended format only (YYYY-MM-DD...), basic "20260218T0900" is rejected
EXTENDED_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}($|T)")


class TimestampCoercionError(ValueError):
    """Raised when text is not a valid ISO-8601 date-time."""

    def __init__(self, text: str):
        super().__init__(f"Invalid ISO-8601 date-time: {text!r}")
        self.text = text


def _resolve_zone(name: Optional[str]) -> tzinfo:
    """Zone used for date-times without an offset (UTC if unknown)."""
    if not name:
        return timezone.utc

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, TypeError, ValueError):
        logger.debug(f"Unknown time zone {name!r}, reading local time as UTC")
        return timezone.utc


def coerce_timestamp(iso_text: str, default_tz: Optional[str] = None) -> int:
    """
    Parse an ISO-8601 date-time into epoch milliseconds

    Args:
        iso_text: Date-time text (e.g. "2026-02-18T09:00:00Z")
        default_tz: IANA zone for text without an offset

    Returns:
        Milliseconds since the Unix epoch

    Raises:
        TimestampCoercionError: If the text cannot be parsed
    """
    text = (iso_text or "").strip()
    if not text:
        raise TimestampCoercionError(iso_text)

    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"

    if not EXTENDED_DATE_PATTERN.match(text):
        raise TimestampCoercionError(iso_text)

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampCoercionError(iso_text) from e

    if parsed.tzinfo is None:
        # Date-only forms are UTC; date-times without offset are local
        if DATE_ONLY_PATTERN.match(text):
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            parsed = parsed.replace(tzinfo=_resolve_zone(default_tz))

    return (parsed - EPOCH) // timedelta(milliseconds=1)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def coerce_json_extras(text: str) -> Tuple[Any, bool]:
    """
    Parse admin extras JSON

    Returns:
        (parsed_object, True) on success, or a copy of the
        {"error": "Invalid JSON"} sentinel and False on failure.
        Valid JSON that is not an object (an array, number, string or
        null) counts as a failure too, unlike a plain json.loads: the
        extras bundle on the device is always a key/value bundle.
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        logger.debug(f"Admin extras are not valid JSON: {e}")
        return dict(INVALID_JSON_SENTINEL), False

    if not isinstance(value, dict):
        logger.debug(f"Admin extras must be a JSON object, got {type(value).__name__}")
        return dict(INVALID_JSON_SENTINEL), False

    return value, True
