"""String classification for the validation chain.

Each classifier has the signature::

    def is_shape(value: str) -> bool: ...

They accept only strings and always return a plain ``bool``. The chain
checks the value's type before delegating here, so these functions stay
small and can be swapped for any other string-matching library.
"""

import re

from email_validator import EmailNotValidError, validate_email

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

_ALPHA_RE = re.compile(r"[A-Za-z]+")
_ALPHANUMERIC_RE = re.compile(r"[A-Za-z0-9]+")
_NUMERIC_RE = re.compile(r"[0-9]+")


def is_alpha(value: str) -> bool:
    """Only ASCII letters, at least one."""
    return _ALPHA_RE.fullmatch(value) is not None


def is_alphanumeric(value: str) -> bool:
    """Only ASCII letters and digits, at least one."""
    return _ALPHANUMERIC_RE.fullmatch(value) is not None


def is_numeric(value: str) -> bool:
    """Only the digits 0-9, at least one. No sign, no decimal point."""
    return _NUMERIC_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Number literals
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+")

# A decimal point or an exponent is required; "123" is an int literal
_FLOAT_RE = re.compile(r"[+-]?(?:(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+)")


def is_int(value: str) -> bool:
    """An optionally signed integer literal such as ``-42``."""
    return _INT_RE.fullmatch(value) is not None


def is_float(value: str) -> bool:
    """An optionally signed decimal literal such as ``3.14``, ``-.5e3`` or ``1e5``."""
    return _FLOAT_RE.fullmatch(value) is not None


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------


def is_email(value: str) -> bool:
    """A syntactically valid email address. No DNS lookups."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


# Scheme and host shape only, no lookups
_URL_RE = re.compile(r"(?:https?|ftp)://[^\s/$.?#][^\s]*", re.IGNORECASE)


def is_url(value: str) -> bool:
    """An ``http``, ``https`` or ``ftp`` URL."""
    return _URL_RE.fullmatch(value) is not None


_FILENAME_FORBIDDEN_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def is_filename(value: str) -> bool:
    """A non-empty name without characters forbidden in file names."""
    return bool(value) and _FILENAME_FORBIDDEN_RE.search(value) is None


_HEX_COLOR_RE = re.compile(r"#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def is_hex_color(value: str) -> bool:
    """A 3- or 6-digit hexadecimal color, optionally prefixed with ``#``."""
    return _HEX_COLOR_RE.fullmatch(value) is not None


# Letters with a meaning in SimpleDateFormat-style patterns
DATE_PATTERN_LETTERS = frozenset("GyYMLwWDdFEuaHkKhmsSzZX")


def is_date_format(value: str) -> bool:
    """A date format pattern such as ``dd-MM-yyyy``.

    Letters outside single-quoted literals must be pattern letters
    (``''`` is an escaped quote). An unterminated quote is invalid.
    """
    if not value:
        return False
    quoted = False
    i = 0
    while i < len(value):
        char = value[i]
        if char == "'":
            if i + 1 < len(value) and value[i + 1] == "'":
                i += 2
                continue
            quoted = not quoted
        elif not quoted and char.isascii() and char.isalpha() and char not in DATE_PATTERN_LETTERS:
            return False
        i += 1
    return not quoted
