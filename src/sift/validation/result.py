"""Validation result — immutable snapshot of a validator's outcome."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a mapping of fields.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = validator.result()
        if not result:
            return render_form(errors=result.errors)

    ``data`` maps each field that passed to its final (converted) value.

    ``errors`` maps each failing field to its messages::

        {"age": ["Too young"],
         "email": ["Invalid email address"]}
    """

    data: dict[str, Any]
    errors: dict[str, list[str]]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
