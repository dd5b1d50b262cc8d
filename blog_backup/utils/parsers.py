#!/usr/bin/env python3
"""
parsers.py
--------------------
Parsing utilities for frontmatter values.

Functions:
    parse_date: Parse a free-form date string into an aware datetime

Usage:
    from blog_backup.utils.parsers import parse_date

    parse_date("2023-06-15")       # 2023-06-15 00:00:00+00:00
    parse_date("June 15, 2023")    # local midnight, as an aware datetime
    parse_date("someday")          # None
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Optional

# Accepted after ISO-8601 fails; naive results are read as local time
FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a date string from frontmatter.

    Rules:
        - Date-only ISO strings (``YYYY-MM-DD``) are midnight UTC
        - ISO date-times without an offset are local time
        - ISO date-times with an offset (or ``Z``) keep it
        - A few human formats and RFC 2822 are accepted as fallbacks

    Args:
        value: Raw frontmatter value (may be None or empty)

    Returns:
        Timezone-aware datetime, or None when the value is not a date

    Examples:
        >>> parse_date("2023-01-01")
        datetime.datetime(2023, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        >>> parse_date("not a date") is None
        True
    """
    if value is None:
        return None

    text = value.strip()
    if not text:
        return None

    try:
        day = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)

    try:
        return _as_aware(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in FALLBACK_FORMATS:
        try:
            moment = datetime.strptime(text, fmt)
        except ValueError:
            continue
        return _as_aware(moment)

    try:
        moment = parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None
    return _as_aware(moment)


def _as_aware(moment: datetime) -> Optional[datetime]:
    """Attach the local zone to a naive datetime; None if it can't be placed."""
    if moment.tzinfo is not None:
        return moment
    try:
        return moment.astimezone()
    except (OverflowError, OSError, ValueError):
        # Near datetime.min/max the local offset pushes the instant out of range
        return None
