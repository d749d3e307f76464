"""Date parsing for the ``to_date()`` conversion.

Parsing never raises: anything that cannot be turned into a
``datetime`` becomes the NaN sentinel, which ``is_not_nan()`` rejects.

Formats are either ``strftime`` directives (``"%Y-%m-%d"``) or
SimpleDateFormat-style patterns (``"dd-MM-yyyy"``), the same patterns
``sift.strings.is_date_format`` accepts.
"""

import logging
from datetime import date, datetime, time, tzinfo
from typing import Any

from dateutil import parser as dateutil_parser
from dateutil import tz

from sift._internal.values import NAN
from sift.strings import DATE_PATTERN_LETTERS

logger = logging.getLogger("sift.dates")

# Pattern letter -> strftime directive, keyed by (letter, run length).
# A run length of 0 means "any length not listed".
_DIRECTIVES: dict[tuple[str, int], str] = {
    ("y", 2): "%y",
    ("y", 0): "%Y",
    ("M", 1): "%m",
    ("M", 2): "%m",
    ("M", 3): "%b",
    ("M", 0): "%B",
    ("L", 1): "%m",
    ("L", 2): "%m",
    ("L", 3): "%b",
    ("L", 0): "%B",
    ("d", 0): "%d",
    ("D", 0): "%j",
    ("E", 4): "%A",
    ("E", 0): "%a",
    ("a", 0): "%p",
    ("H", 0): "%H",
    ("k", 0): "%H",
    ("h", 0): "%I",
    ("K", 0): "%I",
    ("m", 0): "%M",
    ("s", 0): "%S",
    ("S", 0): "%f",
    ("z", 0): "%Z",
    ("Z", 0): "%z",
    ("X", 0): "%z",
}


def translate_pattern(pattern: str) -> str:
    """Translate a SimpleDateFormat-style pattern into ``strptime`` directives.

    Patterns that already contain ``%`` are returned unchanged.

    Raises:
        ValueError: If the pattern uses a letter with no ``strptime``
            equivalent (era, week-year, week-in-month, ...) or has an
            unterminated quote.
    """
    if "%" in pattern:
        return pattern

    out: list[str] = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "'":
            end = i + 1
            literal: list[str] = []
            while True:
                if end >= len(pattern):
                    msg = f"Unterminated quote in date pattern: {pattern!r}"
                    raise ValueError(msg)
                if pattern[end] == "'":
                    if end + 1 < len(pattern) and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            # '' outside a literal is an escaped quote
            out.append("".join(literal) if end > i + 1 else "'")
            i = end + 1
            continue

        if char in DATE_PATTERN_LETTERS:
            run = 1
            while i + run < len(pattern) and pattern[i + run] == char:
                run += 1
            directive = _DIRECTIVES.get((char, run)) or _DIRECTIVES.get((char, 0))
            if directive is None:
                msg = f"Date pattern letter {char!r} is not supported"
                raise ValueError(msg)
            out.append(directive)
            i += run
            continue

        out.append(char)
        i += 1
    return "".join(out)


def resolve_timezone(timezone: str | tzinfo) -> tzinfo:
    """Resolve a timezone name (``"PST"``, ``"Europe/Vienna"``, ``"GMT-8:00"``).

    Names that cannot be resolved fall back to UTC.
    """
    if isinstance(timezone, tzinfo):
        return timezone
    resolved = tz.gettz(timezone)
    if resolved is None:
        logger.debug("Unknown timezone %r, falling back to UTC", timezone)
        return tz.UTC
    return resolved


def parse(
    value: Any,
    format: str | None = None,
    locale: str | None = None,
    timezone: str | tzinfo | None = None,
    lenient: bool = True,
) -> datetime | float:
    """Parse *value* into a ``datetime``, or NaN if that is not possible.

    Args:
        value: A string, ``datetime`` or ``date``. Anything else is NaN.
        format: Optional pattern the string must follow. Without it the
            string is parsed by ``dateutil``.
        locale: Accepted for interface compatibility. Month and day names
            are matched in English.
        timezone: Attached to results that carry no timezone of their own.
        lenient: With a format, fall back to ``dateutil`` when the string
            does not match it exactly. Without a format, ``False`` only
            accepts ISO 8601.

    Returns:
        The parsed ``datetime`` or the NaN sentinel.
    """
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime.combine(value, time())
    elif isinstance(value, str):
        try:
            result = _parse_string(value.strip(), format, lenient)
        except (ValueError, OverflowError) as exc:
            logger.debug("Cannot parse %r as a date: %s", value, exc)
            return NAN
    else:
        return NAN

    if timezone is not None and result.tzinfo is None:
        result = result.replace(tzinfo=resolve_timezone(timezone))
    return result


def _parse_string(text: str, format: str | None, lenient: bool) -> datetime:
    if format is not None:
        try:
            return datetime.strptime(text, translate_pattern(format))
        except ValueError:
            if not lenient:
                raise
        return dateutil_parser.parse(text)
    if lenient:
        return dateutil_parser.parse(text)
    return dateutil_parser.isoparse(text)
