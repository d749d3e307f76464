"""HTTP response returned through the middleware chain.

The validator middleware never builds responses; handlers do, and the
middleware hands them back unchanged.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Response:
    """An immutable HTTP response."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()
