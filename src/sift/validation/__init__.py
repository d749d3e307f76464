"""Field validation — chainable predicates and conversions.

Usage::

    from sift.validation import Validator

    validator = Validator(params)
    validator.validate("email").is_defined("Email is missing").is_email("Invalid email")
    validator.validate("page").optional("1").to_int()
    validator.validate_all("pin", trim=True).has_length(4, "Four digits").is_numeric("Digits only")

    if validator.has_failures():
        return render_form(errors=validator.get_messages())
    page = validator.get_value("page")  # int

``validate()`` stops a field at its first failure; ``validate_all()``
collects every failure of the field. Conversions (``to_int``,
``to_float``, ``to_boolean``, ``to_date``, ``to_value``) always run.
"""

from sift._internal.values import NAN, UNDEFINED
from sift.validation.chain import Chain, InertValidation, Validation
from sift.validation.result import ValidationResult
from sift.validation.validator import Validator

__all__ = [
    "NAN",
    "UNDEFINED",
    "Chain",
    "InertValidation",
    "Validation",
    "ValidationResult",
    "Validator",
]
