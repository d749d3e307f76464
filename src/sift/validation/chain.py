"""Validation chains — the per-field pipeline of predicates and conversions.

A ``Validation`` holds a field's working value, a validity flag and the
failure messages collected so far. Every method returns a chain, so
checks and conversions compose left to right::

    validator.validate("age").is_int("Not a number").to_int().greater_than(17, "Too young")

Predicates (``is_*``, ``has_*``, ``*_length``, ``equal``, ...) test the
*current* working value and record a message on failure. Conversions
(``to_*``) replace the working value and never fail.

When a stop-on-fail chain records its first failure it hands back an
``InertValidation`` instead of itself. The inert chain ignores every
further predicate, but still runs conversions against the same working
value, so ``get_value()`` reflects everything that was asked of it.
"""

import logging
import math
import operator
import re
from collections.abc import Callable
from datetime import tzinfo
from typing import Any, Final, Self, TypeAlias

from sift import dates, strings
from sift._internal.values import (
    MAX_SAFE_INTEGER,
    NAN,
    UNDEFINED,
    is_falsy,
    is_nan,
    is_nullish,
    is_number,
    loosely_equal,
    strictly_equal,
    to_number,
)
from sift.errors import NotCallableError

logger = logging.getLogger("sift.validation")

# Distinguishes optional() from optional(None)
_UNSET: Final = object()


# ---------------------------------------------------------------------------
# Conversions (shared by active and inert chains)
# ---------------------------------------------------------------------------


class _Conversions:
    """Conversions and value access, identical on every kind of chain."""

    __slots__ = ()

    value: Any

    def to_int(self, radix: int = 10) -> Self:
        """Convert to ``int``, or NaN if the value is not an integer literal."""
        self.value = _parse_int(self.value, radix)
        return self

    def to_float(self) -> Self:
        """Convert to ``float``, or NaN if the value is not a number literal."""
        self.value = _parse_float(self.value)
        return self

    def to_boolean(self, strict_true: bool = False) -> Self:
        """Convert to ``bool``.

        With *strict_true* only ``"1"`` and ``"true"`` become ``True``.
        Otherwise everything but ``None``, ``UNDEFINED``, ``"0"``,
        ``"false"`` and ``""`` becomes ``True``. Booleans are kept.
        """
        value = self.value
        if isinstance(value, bool):
            return self
        if strict_true:
            self.value = isinstance(value, str) and value in ("1", "true")
        else:
            self.value = not (is_nullish(value) or (isinstance(value, str) and value in ("0", "false", "")))
        return self

    def to_date(
        self,
        format: str | None = None,
        locale: str | None = None,
        timezone: str | tzinfo | None = None,
        lenient: bool = True,
    ) -> Self:
        """Convert to ``datetime``, or NaN if parsing fails.

        See ``sift.dates.parse`` for the meaning of the arguments.
        """
        self.value = dates.parse(self.value, format, locale, timezone, lenient)
        return self

    def to_value(self, converter: Callable[[Any], Any]) -> Self:
        """Replace the value with ``converter(value)``.

        Raises:
            NotCallableError: If *converter* is not callable.
        """
        if not callable(converter):
            raise NotCallableError(converter)
        self.value = converter(self.value)
        return self

    def get_value(self) -> Any:
        """Return the current working value."""
        return self.value


def _parse_int(value: Any, radix: int) -> int | float:
    if isinstance(value, str):
        if not strings.is_int(value):
            return NAN
        try:
            return int(value, radix)
        except ValueError:
            return NAN
    if not is_number(value):
        return NAN
    if isinstance(value, float):
        if not math.isfinite(value):
            return NAN
        # Truncates toward zero
        value = int(value)
    if radix == 10:
        return value
    try:
        return int(str(value), radix)
    except ValueError:
        return NAN


def _parse_float(value: Any) -> float:
    if isinstance(value, str):
        if not (strings.is_float(value) or strings.is_int(value)):
            return NAN
        return float(value)
    if is_number(value):
        return float(value)
    return NAN


# ---------------------------------------------------------------------------
# Active chain
# ---------------------------------------------------------------------------


class Validation(_Conversions):
    """The live validation of a single field.

    Created by ``Validator.validate()`` (stop on first failure) or
    ``Validator.validate_all()`` (collect every failure).

    Attributes:
        value: The working value, changed by conversions and ``optional()``.
        is_valid: ``False`` from the first failing predicate on.
        messages: Failure messages in the order they were recorded.
    """

    __slots__ = ("_key", "_stop_on_fail", "is_valid", "messages", "value")

    def __init__(self, key: str, value: Any = UNDEFINED, stop_on_fail: bool = True) -> None:
        self._key = key
        self._stop_on_fail = stop_on_fail
        self.value = value
        self.is_valid = True
        self.messages: list[str] = []

    @property
    def key(self) -> str:
        """The field name."""
        return self._key

    @property
    def stop_on_fail(self) -> bool:
        """``True`` if the chain goes inert after its first failure."""
        return self._stop_on_fail

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else f"invalid, {len(self.messages)} message(s)"
        return f"Validation({self._key!r}, {self.value!r}, {state})"

    # -- Core protocol --

    def check(self, passed: bool, message: str | None = None) -> "Chain":
        """Record the outcome of a custom predicate.

        A pass is silent. A failure marks the chain invalid and records
        *message*; in stop-on-fail mode an ``InertValidation`` is
        returned so that later predicates in the same expression are
        skipped.
        """
        return self._check(passed, message, "is invalid")

    def _check(self, passed: bool, message: str | None, reason: str) -> "Chain":
        if passed:
            return self
        text = message if message is not None else f"{self._key} {reason}"
        self.is_valid = False
        self.messages.append(text)
        logger.debug("Field %r failed: %s", self._key, text)
        if self._stop_on_fail:
            return InertValidation(self)
        return self

    def optional(self, default: Any = _UNSET, strict: bool = False) -> "Chain":
        """Skip the remaining predicates when the field was left out.

        Non-strict: a falsy value (``None``, ``UNDEFINED``, ``""``, ``0``,
        ``False``, NaN) is replaced by *default* (``""`` if none is given).
        Strict: only an absent value (``UNDEFINED``) is replaced; falsy
        values are data and the chain continues unchanged.

        After a replacement the returned chain is inert: predicates pass
        vacuously, conversions still run starting from the default.
        """
        missing = self.value is UNDEFINED if strict else is_falsy(self.value)
        if not missing:
            return self
        self.value = "" if default is _UNSET else default
        logger.debug("Field %r is optional and missing, using %r", self._key, self.value)
        return InertValidation(self)

    # -- String shape --

    def is_alpha(self, message: str | None = None) -> "Chain":
        """Passes if the value contains only letters."""
        return self._check(_is_str_and(self.value, strings.is_alpha), message, "must contain only letters")

    def is_alphanumeric(self, message: str | None = None) -> "Chain":
        """Passes if the value contains only letters and digits."""
        return self._check(
            _is_str_and(self.value, strings.is_alphanumeric),
            message,
            "must contain only letters and digits",
        )

    def is_date_format(self, message: str | None = None) -> "Chain":
        """Passes if the value is a date format pattern such as ``dd-MM-yyyy``."""
        return self._check(_is_str_and(self.value, strings.is_date_format), message, "must be a date format")

    def is_url(self, message: str | None = None) -> "Chain":
        """Passes if the value is a URL."""
        return self._check(_is_str_and(self.value, strings.is_url), message, "must be a valid URL")

    def is_email(self, message: str | None = None) -> "Chain":
        """Passes if the value is an email address."""
        return self._check(_is_str_and(self.value, strings.is_email), message, "must be a valid email address")

    def is_filename(self, message: str | None = None) -> "Chain":
        """Passes if the value contains no characters forbidden in file names."""
        return self._check(_is_str_and(self.value, strings.is_filename), message, "must be a valid file name")

    def is_hex_color(self, message: str | None = None) -> "Chain":
        """Passes if the value is a hexadecimal color, with or without ``#``."""
        return self._check(_is_str_and(self.value, strings.is_hex_color), message, "must be a hex color")

    # -- Numbers --

    def is_numeric(self, message: str | None = None) -> "Chain":
        """Passes if the value is a number or a string of digits."""
        value = self.value
        passed = is_number(value) or _is_str_and(value, strings.is_numeric)
        return self._check(passed, message, "must be numeric")

    def is_int(self, message: str | None = None) -> "Chain":
        """Passes if the value is an integer literal or a safe integer."""
        value = self.value
        passed = _is_str_and(value, strings.is_int) or _is_safe_integer(value)
        return self._check(passed, message, "must be an integer")

    def is_float(self, message: str | None = None) -> "Chain":
        """Passes if the value is a float literal or a number with a fraction."""
        value = self.value
        passed = _is_str_and(value, strings.is_float) or (is_number(value) and value % 1 != 0)
        return self._check(passed, message, "must be a decimal number")

    def is_number(self, message: str | None = None) -> "Chain":
        """Passes if the value is a number or a float or integer literal."""
        value = self.value
        passed = is_number(value) or (
            isinstance(value, str) and (strings.is_float(value) or strings.is_int(value))
        )
        return self._check(passed, message, "must be a number")

    def greater_than(self, right: Any, message: str | None = None) -> "Chain":
        """Passes if ``value > right``."""
        return self._check(_compare(self.value, right, operator.gt), message, f"must be greater than {right}")

    def less_than(self, right: Any, message: str | None = None) -> "Chain":
        """Passes if ``value < right``."""
        return self._check(_compare(self.value, right, operator.lt), message, f"must be less than {right}")

    def is_nan(self, message: str | None = None) -> "Chain":
        """Passes if the value is NaN."""
        return self._check(is_nan(self.value), message, "must not be a number")

    def is_not_nan(self, message: str | None = None) -> "Chain":
        """Passes if the value is not NaN."""
        return self._check(not is_nan(self.value), message, "must be a number")

    # -- Length --

    def min_length(self, min_length: int, message: str | None = None) -> "Chain":
        """Passes if the value is a string at least *min_length* long."""
        value = self.value
        passed = isinstance(value, str) and len(value) >= min_length
        return self._check(passed, message, f"must be at least {min_length} characters")

    def max_length(self, max_length: int, message: str | None = None) -> "Chain":
        """Passes if the value is a string at most *max_length* long."""
        value = self.value
        passed = isinstance(value, str) and len(value) <= max_length
        return self._check(passed, message, f"must be at most {max_length} characters")

    def length_between(self, min_length: int, max_length: int, message: str | None = None) -> "Chain":
        """Passes if the value is a string whose length is within the bounds."""
        value = self.value
        passed = isinstance(value, str) and min_length <= len(value) <= max_length
        return self._check(passed, message, f"must be between {min_length} and {max_length} characters")

    def has_length(self, length: int, message: str | None = None) -> "Chain":
        """Passes if the value is a string of exactly *length* characters."""
        value = self.value
        passed = isinstance(value, str) and len(value) == length
        return self._check(passed, message, f"must be exactly {length} characters")

    # -- Equality --

    def equal(self, other: Any, message: str | None = None) -> "Chain":
        """Passes if the value loosely equals *other* (``"1"`` equals ``1``)."""
        return self._check(loosely_equal(self.value, other), message, f"must equal {other!r}")

    def strict_equal(self, other: Any, message: str | None = None) -> "Chain":
        """Passes if the value equals *other* without any coercion."""
        return self._check(strictly_equal(self.value, other), message, f"must equal {other!r}")

    def is_true(self, message: str | None = None) -> "Chain":
        """Passes if the value is ``True``."""
        return self._check(self.value is True, message, "must be true")

    def is_false(self, message: str | None = None) -> "Chain":
        """Passes if the value is ``False``."""
        return self._check(self.value is False, message, "must be false")

    # -- Presence --

    def is_defined(self, message: str | None = None) -> "Chain":
        """Passes if the field is present in the source. ``None`` is present."""
        return self._check(self.value is not UNDEFINED, message, "is missing")

    def has_value(self, message: str | None = None) -> "Chain":
        """Passes if the value is neither null nor absent nor an empty string."""
        value = self.value
        passed = not is_nullish(value) and (not isinstance(value, str) or len(value) > 0)
        return self._check(passed, message, "is required")

    def not_null(self, message: str | None = None) -> "Chain":
        """Passes if the value is neither ``None`` nor absent."""
        return self._check(not is_nullish(self.value), message, "must not be null")

    def strict_not_null(self, message: str | None = None) -> "Chain":
        """Passes if the value is not exactly ``None``. Absent values pass."""
        return self._check(self.value is not None, message, "must not be null")

    def is_null(self, message: str | None = None) -> "Chain":
        """Passes if the value is ``None`` or absent."""
        return self._check(is_nullish(self.value), message, "must be null")

    def strict_is_null(self, message: str | None = None) -> "Chain":
        """Passes if the value is exactly ``None``."""
        return self._check(self.value is None, message, "must be null")

    # -- Custom --

    def matches(self, pattern: str | re.Pattern[str], message: str | None = None) -> "Chain":
        """Passes if the value is a string containing a match for *pattern*."""
        value = self.value
        passed = isinstance(value, str) and re.search(pattern, value) is not None
        return self._check(passed, message, "has an invalid format")

    def passes(self, func: Callable[[Any], Any], message: str | None = None) -> "Chain":
        """Passes if ``func(value)`` returns ``True``.

        Raises:
            NotCallableError: If *func* is not callable.
        """
        if not callable(func):
            raise NotCallableError(func)
        return self._check(func(self.value) is True, message, "is invalid")


def _is_str_and(value: Any, classify: Callable[[str], bool]) -> bool:
    return isinstance(value, str) and classify(value)


def _is_safe_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return abs(value) <= MAX_SAFE_INTEGER
    if isinstance(value, float):
        return value.is_integer() and abs(value) <= MAX_SAFE_INTEGER
    return False


def _compare(left: Any, right: Any, op: Callable[[Any, Any], Any]) -> bool:
    """Order two values: strings lexically, other scalars numerically.

    Values of other types (dates, decimals) are compared directly;
    values that cannot be ordered against each other fail.
    """
    if isinstance(left, str) and isinstance(right, str):
        return bool(op(left, right))
    if _is_scalar(left) and _is_scalar(right):
        return bool(op(to_number(left), to_number(right)))
    try:
        return bool(op(left, right))
    except TypeError:
        return False


def _is_scalar(value: Any) -> bool:
    return value is None or value is UNDEFINED or isinstance(value, str | int | float)


# ---------------------------------------------------------------------------
# Inert chain
# ---------------------------------------------------------------------------


def _skip(self: "InertValidation", *args: Any, **kwargs: Any) -> "InertValidation":
    return self


class InertValidation(_Conversions):
    """A chain that has stopped validating.

    Returned by a stop-on-fail ``Validation`` on its first failure and by
    ``optional()`` when it substitutes a default. Reads and writes of
    ``value`` go through to the ``Validation`` it replaced, so
    conversions still show up in ``Validator.get_value()``.

    Predicates are no-ops that return the inert chain; no further
    messages are recorded. Conversions and ``get_value()`` stay active.
    """

    __slots__ = ("_target",)

    def __init__(self, target: Validation) -> None:
        self._target = target

    @property
    def key(self) -> str:
        """The field name."""
        return self._target.key

    @property
    def value(self) -> Any:
        return self._target.value

    @value.setter
    def value(self, value: Any) -> None:
        self._target.value = value

    def __repr__(self) -> str:
        return f"InertValidation({self._target.key!r}, {self._target.value!r})"

    # Every predicate of Validation, as a no-op
    check = _skip
    optional = _skip
    is_alpha = _skip
    is_alphanumeric = _skip
    is_date_format = _skip
    is_url = _skip
    is_email = _skip
    is_filename = _skip
    is_hex_color = _skip
    is_numeric = _skip
    is_int = _skip
    is_float = _skip
    is_number = _skip
    greater_than = _skip
    less_than = _skip
    is_nan = _skip
    is_not_nan = _skip
    min_length = _skip
    max_length = _skip
    length_between = _skip
    has_length = _skip
    equal = _skip
    strict_equal = _skip
    is_true = _skip
    is_false = _skip
    is_defined = _skip
    has_value = _skip
    not_null = _skip
    strict_not_null = _skip
    is_null = _skip
    strict_is_null = _skip
    matches = _skip
    passes = _skip


# Either kind of chain; both expose the same methods
Chain: TypeAlias = Validation | InertValidation
