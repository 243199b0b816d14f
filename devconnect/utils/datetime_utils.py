"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in devconnect.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- to_datetime(): Coerce a date/datetime/ISO string to a timezone-aware datetime
- parse_iso(): Safely parse ISO 8601 string to datetime
"""
import logging
import zoneinfo
from datetime import date, datetime, time, timezone as dt_timezone, tzinfo
from typing import Optional, Union

from devconnect.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24")

    Returns:
        timezone-aware datetime object, or None if parsing fails
    """
    if not dt_str:
        return None

    try:
        dt = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())
    return dt


def to_datetime(value: Union[date, datetime, str, None]) -> Optional[datetime]:
    """
    Coerce a date, datetime or ISO string into a timezone-aware datetime.

    BSON has no date-only type, so calendar dates are stored as midnight.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return parse_iso(value)
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=_get_app_timezone())
    return value

