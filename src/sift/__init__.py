"""Sift — chainable validation and sanitization of named input values.

Declare per field a chain of predicates and conversions, collect
readable failure messages, and read back the converted values.

Basic usage::

    from sift import Validator

    validator = Validator({"age": "19", "email": "me@example.org"})
    validator.validate("age").is_int("Not a number").to_int().greater_than(17, "Too young")
    validator.validate("email").is_email("Invalid email")

    if validator.has_failures():
        print(validator.get_messages())
    else:
        print(validator.get_values())  # {'age': 19, 'email': 'me@example.org'}

Request parameters::

    from sift.middleware import ValidatorMiddleware, validate, has_failures
"""

__version__ = "0.1.0-dev"
__all__ = [
    "NAN",
    "UNDEFINED",
    "BadRequest",
    "ConfigurationError",
    "InertValidation",
    "NotCallableError",
    "SiftError",
    "Validation",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "ValidatorMiddleware",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import sift`` fast while providing a clean top-level API.
    """
    if name in ("Validator", "Validation", "InertValidation", "ValidationResult", "NAN", "UNDEFINED"):
        from sift import validation as _validation

        return getattr(_validation, name)

    if name == "ValidatorConfig":
        from sift.config import ValidatorConfig

        return ValidatorConfig

    if name == "ValidatorMiddleware":
        from sift.middleware.validator import ValidatorMiddleware

        return ValidatorMiddleware

    if name in ("SiftError", "ConfigurationError", "NotCallableError", "BadRequest"):
        from sift import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
