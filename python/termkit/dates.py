"""ISO-8601 date rendering and parsing.

Dates use the basic ISO format with a numeric UTC offset:
    2015-06-01T14:30:00+0100
"""

from datetime import datetime, tzinfo
from typing import Optional

FORMAT_DATE_ISO = "%Y-%m-%dT%H:%M:%S%z"


class ParseError(ValueError):
    """Raised when text is not a date in the expected format."""

    def __init__(self, text: Optional[str], fmt: str = FORMAT_DATE_ISO):
        self.text = text
        self.fmt = fmt
        super().__init__(f"Unparseable date: {text!r} (expected {fmt})")


def from_iso_string(text: Optional[str], fmt: str = FORMAT_DATE_ISO) -> datetime:
    """Parse an ISO date string such as ``2015-06-01T14:30:00+0100``.

    Args:
        text: Date text.
        fmt: strptime format, FORMAT_DATE_ISO by default.

    Returns:
        Parsed datetime (timezone-aware for the default format).

    Raises:
        ParseError: If text is None or does not match fmt.
    """
    if text is None:
        raise ParseError(text, fmt)
    try:
        return datetime.strptime(text, fmt)
    except ValueError as e:
        raise ParseError(text, fmt) from e


def to_iso_string(
    date: datetime,
    fmt: Optional[str] = None,
    tz: Optional[tzinfo] = None,
) -> str:
    """Render a date.

    Args:
        date: Date to render. Naive dates are taken as local time.
        fmt: strftime format, FORMAT_DATE_ISO if not given.
        tz: Time zone to render in, the local time zone if not given.

    Returns:
        Formatted date string.
    """
    if fmt is None:
        fmt = FORMAT_DATE_ISO
    return date.astimezone(tz).strftime(fmt)
