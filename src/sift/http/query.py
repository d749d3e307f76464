"""Query string parameters, the validation source of non-body requests."""

from urllib.parse import parse_qs

from sift._internal.multimap import MultiDict


class QueryParams(MultiDict):
    """Immutable query string parameters.

    Blank values are kept (``?q=`` has ``q == ""``) so ``optional()``
    can tell them apart from missing ones. Percent-escapes are decoded
    as UTF-8; undecodable bytes become U+FFFD rather than failing the
    request.
    """

    __slots__ = ("_raw",)

    def __init__(self, query_string: bytes = b"") -> None:
        object.__setattr__(self, "_raw", query_string)
        text = query_string.decode("latin-1")
        super().__init__(parse_qs(text, keep_blank_values=True, errors="replace"))

    @property
    def raw(self) -> bytes:
        """The undecoded query string."""
        return self._raw
