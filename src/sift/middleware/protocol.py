"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> Response: ...

No base class required. The shape is checked, not the lineage.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from sift.http.request import Request
from sift.http.response import Response

# The next handler in the middleware chain
Next: TypeAlias = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """Protocol for request middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def reject_invalid(request: Request, next: Next) -> Response:
            response = await next(request)
            if has_failures():
                return Response("Invalid parameters", status=422)
            return response

        # Class middleware
        class ValidatorMiddleware:
            async def __call__(self, request: Request, next: Next) -> Response:
                ...
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...
