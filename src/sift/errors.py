"""Sift exception hierarchy.

Validation failures are data, not exceptions: they are recorded as
messages on a field and never raised. Everything here signals either
API misuse or a request the middleware cannot read.
"""

from dataclasses import dataclass


class SiftError(Exception):
    """Base for all sift-specific errors."""


class ConfigurationError(SiftError):
    """Raised when a ``ValidatorConfig`` is invalid.

    Checked when ``ValidatorMiddleware`` is constructed.
    """


class NotCallableError(SiftError, TypeError):
    """A non-callable was passed where a function is required.

    Raised by ``Validation.passes()`` and ``Validation.to_value()``.
    This is a programming error and propagates to the caller unchanged.
    """

    def __init__(self, argument: object) -> None:
        super().__init__(f"Validator function argument is not callable: {argument!r}")
        self.argument = argument


@dataclass(frozen=True, slots=True)
class HTTPError(SiftError):
    """An error that maps directly to an HTTP status code.

    Raised by the middleware when request parameters cannot be read.
    The host application decides how to render it.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818
    """400 — the request body could not be decoded into parameters."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)
