"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    ValidatorMiddleware -- One request-scoped Validator over query or body parameters
"""

from sift.middleware.protocol import Middleware, Next
from sift.middleware.validator import (
    ValidatorMiddleware,
    failure_messages,
    get_validator,
    has_failures,
    validate,
    validate_all,
)

__all__ = [
    "Middleware",
    "Next",
    "ValidatorMiddleware",
    "failure_messages",
    "get_validator",
    "has_failures",
    "validate",
    "validate_all",
]
