"""Cell-level helpers shared by the classifier and the anonymization engine."""

import math
import re
from datetime import datetime

from dateutil import parser as dateparser

from app.table.models import CellValue

# Fills day/month when a date string omits them, so parsing is reproducible
_DATE_DEFAULT = datetime(2000, 1, 1)
_ALT_DEFAULT = datetime(2001, 2, 2)
_YEAR_RE = re.compile(r"^[1-9]\d{3}$")


def is_absent(value: CellValue) -> bool:
    """None and the empty string both count as a missing cell."""
    return value is None or value == ""


def to_text(value: CellValue) -> str:
    """Canonical string form of a present cell.

    Integral floats print without the trailing ``.0`` so ``1500.0`` and
    ``1500`` share one representation.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(value: CellValue) -> float | None:
    """Return the finite real number *value* denotes, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = value.strip()
        if not text or "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def parse_date(value: CellValue) -> datetime | None:
    """Parse *value* as a calendar date.

    Plain numbers and strings without any digit are rejected: dateutil would
    otherwise read ``"42"`` as a day of the current month and ``"Monday"`` as
    this week's Monday. The text must also carry its own year and month, so
    times of day (``"12:30"``) and ordinals (``"5th"``) are not dates.
    """
    if value is None or parse_number(value) is not None:
        return None
    text = str(value).strip()
    if not any(ch.isdigit() for ch in text):
        return None
    try:
        parsed = dateparser.parse(text, default=_DATE_DEFAULT, ignoretz=True)
        filled = dateparser.parse(text, default=_ALT_DEFAULT, ignoretz=True)
    except (ValueError, OverflowError):
        return None
    # Year or month came from the default, not from the text
    if (parsed.year, parsed.month) != (filled.year, filled.month):
        return None
    return parsed


def parse_year(value: CellValue) -> datetime | None:
    """Read a bare four-digit year (``"1985"``) as January 1st of that year."""
    if value is None:
        return None
    text = to_text(value).strip()
    if _YEAR_RE.match(text) is None:
        return None
    return datetime(int(text), 1, 1)
