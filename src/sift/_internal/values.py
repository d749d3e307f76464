"""Value markers and loose-typing helpers shared by the validation chain.

Request parameters arrive untyped, so predicates need a consistent idea
of "nullish", "falsy" and "numeric" that does not depend on Python's
truthiness rules (``[]`` is a value, ``float("nan")`` is not).
"""

import math
from typing import Any, Final, final


@final
class _Undefined:
    """The absent-marker: a field that is missing from the source mapping.

    Distinct from ``None``, which is a present-but-null value.
    """

    __slots__ = ()
    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()
"""Working value of a field that is absent from the source."""

NAN: Final = float("nan")
"""Not-a-number sentinel produced by failed conversions."""

# Largest integer a double represents exactly
MAX_SAFE_INTEGER: Final = 2**53 - 1


def is_nullish(value: Any) -> bool:
    """True for ``None`` and ``UNDEFINED``."""
    return value is None or value is UNDEFINED


def is_number(value: Any) -> bool:
    """True for ``int`` and ``float`` values. Booleans are not numbers here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_nan(value: Any) -> bool:
    """True only for a float NaN."""
    return isinstance(value, float) and math.isnan(value)


def is_falsy(value: Any) -> bool:
    """Falsy in the sense of an absent or blank parameter.

    ``None``, ``UNDEFINED``, ``False``, ``""``, zero and NaN. Empty
    containers are values and are not falsy.
    """
    if is_nullish(value) or value is False or value == "":
        return True
    if is_number(value):
        return value == 0 or is_nan(value)
    return False


def to_number(value: Any) -> float:
    """Coerce *value* for a numeric comparison, NaN when not numeric.

    ``None`` counts as 0, ``bool`` as 0/1, strings are stripped and
    parsed (blank is 0). Everything else is NaN.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if is_number(value):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return NAN
    return NAN


def loosely_equal(left: Any, right: Any) -> bool:
    """Equality with nullish equivalence and numeric-string coercion.

    ``None`` and ``UNDEFINED`` equal each other and nothing else.
    A boolean compared with a non-boolean counts as 0 or 1. A string
    compared with a number is compared numerically.
    """
    if is_nullish(left) or is_nullish(right):
        return is_nullish(left) and is_nullish(right)
    if isinstance(left, bool) is not isinstance(right, bool):
        if isinstance(left, bool):
            left = to_number(left)
        else:
            right = to_number(right)
    if isinstance(left, str) and is_number(right):
        return to_number(left) == right
    if is_number(left) and isinstance(right, str):
        return left == to_number(right)
    return bool(left == right)


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality without coercion: identical, or same type and equal.

    ``int`` and ``float`` count as one number type; ``bool`` does not.
    """
    if is_nan(left) or is_nan(right):
        return False
    if left is right:
        return True
    if is_number(left) and is_number(right):
        return left == right
    return type(left) is type(right) and bool(left == right)
