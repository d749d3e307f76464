"""Validator middleware configuration.

ValidatorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Configuration for ``ValidatorMiddleware``. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(body_methods=("POST", "PUT", "PATCH"), trim=True)
    """

    # Requests with these methods validate body parameters; all others
    # validate the query string.
    body_methods: tuple[str, ...] = ("POST", "PUT")

    # Default for the request-scoped validate()/validate_all() when no
    # explicit trim argument is passed
    trim: bool = False

    # Log failing fields at DEBUG level once the request completes
    log_failures: bool = True
