"""Minimal HTTP primitives the validator middleware reads parameters from."""

from sift.http.forms import FormData, UploadFile, parse_form_data
from sift.http.headers import Headers
from sift.http.query import QueryParams
from sift.http.request import Request
from sift.http.response import Response

__all__ = [
    "FormData",
    "Headers",
    "QueryParams",
    "Request",
    "Response",
    "UploadFile",
    "parse_form_data",
]
