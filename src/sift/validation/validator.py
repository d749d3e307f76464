"""The validator — owns the input mapping and one chain per field."""

import logging
from collections.abc import Mapping
from typing import Any

from sift._internal.values import UNDEFINED
from sift.validation.chain import Validation
from sift.validation.result import ValidationResult

logger = logging.getLogger("sift.validation")


class Validator:
    """Validates and sanitizes the fields of a mapping.

    Each ``validate()`` / ``validate_all()`` call starts a fresh chain for
    one field and remembers it; the query methods aggregate over every
    chain started so far::

        validator = Validator({"email": "foo.bar@example.org", "age": "19"})

        validator.validate("email").is_defined("Email is missing").is_email("Invalid email")
        validator.validate("age").is_int("Not a number").to_int().greater_than(17, "Too young")

        if validator.has_failures():
            return validator.get_messages()
        age = validator.get_value("age")  # 19

    Validating the same name again replaces its chain. Fields keep the
    position of their first validation in ``get_messages()`` and
    ``get_values()``.
    """

    __slots__ = ("_source", "_validations")

    def __init__(self, source: Mapping[str, Any] | None = None) -> None:
        self._source: Mapping[str, Any] = source if source is not None else {}
        self._validations: dict[str, Validation] = {}

    @property
    def source(self) -> Mapping[str, Any]:
        """The mapping being validated."""
        return self._source

    def __contains__(self, name: object) -> bool:
        return name in self._validations

    def __repr__(self) -> str:
        return f"Validator(fields={list(self._validations)!r}, failures={self.has_failures()})"

    # -- Entry points --

    def validate(self, name: str, trim: bool = False) -> Validation:
        """Start a chain for *name* that stops at its first failure.

        Args:
            name: Field name in the source mapping. Missing fields start
                with the value ``UNDEFINED``.
            trim: Strip surrounding whitespace from string values.
        """
        return self._add(name, stop_on_fail=True, trim=trim)

    def validate_all(self, name: str, trim: bool = False) -> Validation:
        """Start a chain for *name* that runs every predicate.

        All failure messages of the chain are collected, in call order.
        """
        return self._add(name, stop_on_fail=False, trim=trim)

    def _add(self, name: str, *, stop_on_fail: bool, trim: bool) -> Validation:
        value = self._source[name] if name in self._source else UNDEFINED
        if trim and isinstance(value, str):
            value = value.strip()
        if name in self._validations:
            logger.debug("Replacing validation of field %r", name)
        validation = Validation(name, value, stop_on_fail)
        self._validations[name] = validation
        return validation

    # -- Queries --

    def has_failures(self, name: str | None = None) -> bool:
        """True if any field failed.

        With *name*, true if that field failed or was never validated.
        """
        if name is not None:
            validation = self._validations.get(name)
            return validation is None or not validation.is_valid
        return not all(v.is_valid for v in self._validations.values())

    def get_messages(self, name: str | None = None) -> list[str] | dict[str, list[str]]:
        """Return failure messages.

        With *name*, a list of that field's messages (empty when it
        passed or was never validated). Without, a dict mapping every
        validated field to its (possibly empty) list of messages.
        """
        if name is not None:
            validation = self._validations.get(name)
            if validation is None or validation.is_valid:
                return []
            return list(validation.messages)
        return {key: list(v.messages) for key, v in self._validations.items()}

    def all_messages(self) -> list[str]:
        """Every failure message as one list, field by field."""
        return [message for v in self._validations.values() for message in v.messages]

    def get_value(self, name: str) -> Any:
        """Return the working value of *name*, or ``UNDEFINED`` if never validated."""
        validation = self._validations.get(name)
        if validation is None:
            return UNDEFINED
        return validation.get_value()

    def get_values(self) -> dict[str, Any]:
        """Return a dict of every validated field and its working value."""
        return {key: v.get_value() for key, v in self._validations.items()}

    def unchecked_properties(self) -> list[str]:
        """Source keys that were never validated, in source order."""
        return [key for key in self._source if key not in self._validations]

    def has_unchecked_properties(self) -> bool:
        """True if the source has a key that was never validated."""
        return any(key not in self._validations for key in self._source)

    def result(self) -> ValidationResult:
        """Snapshot the outcome as a ``ValidationResult``."""
        data: dict[str, Any] = {}
        errors: dict[str, list[str]] = {}
        for key, validation in self._validations.items():
            if validation.is_valid:
                data[key] = validation.get_value()
            else:
                errors[key] = list(validation.messages)
        return ValidationResult(data=data, errors=errors)
