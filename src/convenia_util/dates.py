"""
Date format detection and parsing.

Detection is lexical: it only looks at the digit/separator shape of the
start of the string. Whether the date exists in the calendar is decided
later by ``parse_date``.
"""
import calendar
import re
from datetime import datetime
from typing import Optional, Union

from .types import DASH_FORMAT, ISO_FORMAT, SLASH_FORMAT, DateFormatSpec, TypeTag, is_type

DateFormat = Union[str, DateFormatSpec]

MIN_DATE_LENGTH = 10

_LAYOUTS = (
    (re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}"), ISO_FORMAT),
    (re.compile(r"^[0-9]{2}-[0-9]{2}-[0-9]{4}"), DASH_FORMAT),
    (re.compile(r"^[0-9]{2}/[0-9]{2}/[0-9]{4}"), SLASH_FORMAT),
)

# Longest tokens first so "YYYY" is not read as two "YY".
_TOKENS = {
    "YYYY": "%Y",
    "YY": "%y",
    "MM": "%m",
    "DD": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
}
_TOKEN_RE = re.compile("|".join(sorted(_TOKENS, key=len, reverse=True)))


def detect_format(text: object) -> Optional[DateFormatSpec]:
    """
    Get the format spec of a date string.

    Examples:
        "2000-21-12" -> ISO_FORMAT (detected, even if not a real date)
        "21-12-2000" -> DASH_FORMAT
        "21/12/2000 23:59:18" -> SLASH_FORMAT
        "2000/12/21" -> None

    Args:
        text: Value to inspect

    Returns:
        The matching DateFormatSpec or None
    """
    if not is_type(text, TypeTag.STRING) or len(text.strip()) < MIN_DATE_LENGTH:
        return None

    for pattern, spec in _LAYOUTS:
        if pattern.match(text):
            return spec

    return None


def to_strptime(pattern: str) -> str:
    """Translate a display pattern such as "DD/MM/YYYY" to strptime directives."""
    escaped = pattern.replace("%", "%%")
    return _TOKEN_RE.sub(lambda match: _TOKENS[match.group(0)], escaped)


def _patterns(fmt: object) -> tuple:
    if is_type(fmt, TypeTag.STRING):
        return (fmt,)
    if is_type(fmt, TypeTag.ARRAY):
        return tuple(pattern for pattern in fmt if is_type(pattern, TypeTag.STRING))
    return ()


def parse_date(text: object, fmt: Optional[DateFormat] = None) -> Optional[datetime]:
    """
    Parse a date string strictly.

    Each pattern of the format is tried in order; the first one that
    parses the whole (stripped) string wins.

    Args:
        text: Date string
        fmt: Pattern or DateFormatSpec, detected when omitted

    Returns:
        Parsed datetime, or None if the text does not parse or is not
        a real calendar date
    """
    if not is_type(text, TypeTag.STRING):
        return None

    fmt = fmt or detect_format(text)
    if not fmt:
        return None

    for pattern in _patterns(fmt):
        try:
            return datetime.strptime(text.strip(), to_strptime(pattern))
        except ValueError:
            continue

    return None


def format_datetime(value: datetime, pattern: str) -> str:
    """Format a datetime with a display pattern such as "YYYY-MM-DD"."""
    return value.strftime(to_strptime(pattern))


def years_between(start: datetime, end: datetime) -> int:
    """
    Whole years from start to end, truncated toward zero.

    An anniversary that does not exist in the end year (Feb 29) falls on
    the last day of that month, so Feb 29 2000 to Feb 28 2001 is 1 year.

    Args:
        start: Earlier moment (a later one gives a negative result)
        end: Later moment

    Returns:
        Number of complete years elapsed
    """
    if start > end:
        return -years_between(end, start)

    last_day = calendar.monthrange(end.year, start.month)[1]
    anniversary = start.replace(year=end.year, day=min(start.day, last_day))

    years = end.year - start.year
    if end < anniversary:
        years -= 1
    return years
