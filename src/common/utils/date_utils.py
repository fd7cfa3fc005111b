"""Utility functions for date manipulation."""

import re
from datetime import date, datetime

import pytz

from src.common.config.settings import settings

DATE_FORMAT = "%Y-%m-%d"
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def today() -> date:
    """Returns the current date in the configured timezone."""
    return datetime.now(pytz.timezone(settings.TIMEZONE)).date()


def parse_iso_date(date_str: str) -> date | None:
    """Parses a strict YYYY-MM-DD string, returning None when it is not a real calendar date."""
    if not isinstance(date_str, str):
        return None
    date_str = date_str.strip()
    if not _ISO_DATE_PATTERN.match(date_str):
        return None
    try:
        return datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        return None


def format_iso_date(value: date) -> str:
    """Formats a date as YYYY-MM-DD."""
    return value.strftime(DATE_FORMAT)
