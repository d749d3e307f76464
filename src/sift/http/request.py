"""Immutable HTTP request.

Frozen metadata with async body access. Only what parameter validation
needs: method, headers, query string and a cached body.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from sift._internal.asgi import Receive, Scope
from sift.http.forms import FORM_CONTENT_TYPE, FORM_MEDIA_TYPES, FormData, parse_form_data
from sift.http.headers import Headers
from sift.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    Metadata is frozen at creation. The body is read once through the
    ASGI ``receive`` callable and cached; ``json()`` and ``form()`` parse
    from that cache.
    """

    method: str
    path: str
    headers: Headers
    query: QueryParams
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    # Private: ASGI receive callable for body streaming
    _receive: Receive | None = field(default=None, repr=False, compare=False)

    # Private: mutable cache for body and parsed form data
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    # -- Computed properties --

    @property
    def content_type(self) -> str | None:
        """The Content-Type header value."""
        return self.headers.get("content-type")

    @property
    def media_type(self) -> str:
        """The Content-Type without parameters, lower-cased (``""`` if absent)."""
        return (self.content_type or "").split(";")[0].strip().lower()

    @property
    def is_json(self) -> bool:
        """True for ``application/json`` and ``+json`` media types."""
        media_type = self.media_type
        return media_type == "application/json" or media_type.endswith("+json")

    @property
    def is_form(self) -> bool:
        """True for URL-encoded and multipart form bodies."""
        return self.media_type in FORM_MEDIA_TYPES

    # -- Async body access --

    async def body(self) -> bytes:
        """Read the full request body.

        Result is cached — the ASGI receive is consumed once, then
        the same bytes are returned on subsequent calls.
        """
        if "_body" in self._cache:
            return self._cache["_body"]
        chunks = [chunk async for chunk in self.stream()]
        result = b"".join(chunks)
        self._cache["_body"] = result
        return result

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            body = message.get("body", b"")
            if body:
                yield body
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON.
        """
        raw = await self.body()
        return json_module.loads(raw)

    async def form(self) -> FormData:
        """Parse the body as URL-encoded or multipart form data. Cached.

        Raises:
            ValueError: If the body cannot be decoded as a form.
        """
        if "_form" in self._cache:
            return self._cache["_form"]
        raw = await self.body()
        result = parse_form_data(raw, self.content_type or FORM_CONTENT_TYPE)
        self._cache["_form"] = result
        return result

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive | None = None) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"].upper(),
            path=scope["path"],
            headers=Headers(tuple(tuple(pair) for pair in scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
            _receive=receive,
        )
