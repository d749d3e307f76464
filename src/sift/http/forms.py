"""Form bodies — URL-encoded and multipart.

``FormData`` is a ``MultiDict`` like ``QueryParams``, so form fields and
query parameters validate the same way. Multipart bodies are parsed with
``python-multipart``; file parts are kept apart from the text fields in
``FormData.files``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs

from python_multipart.multipart import MultipartParser, parse_options_header

from sift._internal.multimap import MultiDict

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
MULTIPART_CONTENT_TYPE = "multipart/form-data"
FORM_MEDIA_TYPES = frozenset({FORM_CONTENT_TYPE, MULTIPART_CONTENT_TYPE})


@dataclass(frozen=True, slots=True)
class UploadFile:
    """A file part of a multipart body, held in memory."""

    filename: str
    content_type: str
    content: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)


class FormData(MultiDict):
    """Immutable parsed form data.

    ``__getitem__`` returns the first text value for a key;
    ``files`` maps field names to uploaded files.
    """

    __slots__ = ("_files",)

    def __init__(
        self,
        data: dict[str, list[str]] | None = None,
        files: dict[str, UploadFile] | None = None,
    ) -> None:
        super().__init__(data)
        object.__setattr__(self, "_files", files or {})

    @property
    def files(self) -> Mapping[str, UploadFile]:
        """Uploaded files by field name."""
        return self._files


def parse_form_data(body: bytes, content_type: str = FORM_CONTENT_TYPE) -> FormData:
    """Parse a form body into ``FormData``.

    Raises:
        ValueError: If *content_type* is not a form encoding, the body is
            not valid UTF-8, or a multipart body is malformed.
    """
    media_type = content_type.lower().split(";")[0].strip()
    if media_type == FORM_CONTENT_TYPE:
        return FormData(parse_qs(body.decode("utf-8"), keep_blank_values=True))
    if media_type == MULTIPART_CONTENT_TYPE:
        return _parse_multipart(body, content_type)
    msg = f"Unsupported form content type: {content_type!r}"
    raise ValueError(msg)


class _Part:
    __slots__ = ("content", "content_type", "filename", "name")

    def __init__(self) -> None:
        self.name: str | None = None
        self.filename: str | None = None
        self.content_type = "application/octet-stream"
        self.content = bytearray()


def _parse_multipart(body: bytes, content_type: str) -> FormData:
    _, options = parse_options_header(content_type)
    boundary = options.get(b"boundary")
    if not boundary:
        msg = "Multipart form data missing boundary parameter"
        raise ValueError(msg)

    data: dict[str, list[str]] = {}
    files: dict[str, UploadFile] = {}
    part = _Part()
    header_name = bytearray()
    header_value = bytearray()

    def on_part_begin() -> None:
        nonlocal part
        part = _Part()

    def on_header_field(chunk: bytes, start: int, end: int) -> None:
        header_name.extend(chunk[start:end])

    def on_header_value(chunk: bytes, start: int, end: int) -> None:
        header_value.extend(chunk[start:end])

    def on_header_end() -> None:
        name = bytes(header_name).decode("latin-1").lower()
        value = bytes(header_value)
        header_name.clear()
        header_value.clear()
        if name == "content-disposition":
            _, params = parse_options_header(value)
            if b"name" in params:
                part.name = params[b"name"].decode("utf-8")
            if b"filename" in params:
                part.filename = params[b"filename"].decode("utf-8")
        elif name == "content-type":
            part.content_type = value.decode("latin-1")

    def on_part_data(chunk: bytes, start: int, end: int) -> None:
        part.content.extend(chunk[start:end])

    def on_part_end() -> None:
        if part.name is None:
            return
        if part.filename is not None:
            files[part.name] = UploadFile(part.filename, part.content_type, bytes(part.content))
        else:
            data.setdefault(part.name, []).append(part.content.decode("utf-8"))

    callbacks: dict[str, Any] = {
        "on_part_begin": on_part_begin,
        "on_header_field": on_header_field,
        "on_header_value": on_header_value,
        "on_header_end": on_header_end,
        "on_part_data": on_part_data,
        "on_part_end": on_part_end,
    }
    parser = MultipartParser(boundary, callbacks)
    parser.write(body)
    parser.finalize()
    return FormData(data, files)
