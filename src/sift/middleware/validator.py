"""Validator middleware — one request-scoped Validator per request.

The validator reads the body parameters for ``POST`` and ``PUT``
requests (configurable) and the query parameters for everything else.
It is stored in a ContextVar, so handlers can reach it through the
module-level accessors::

    from sift.middleware import ValidatorMiddleware, failure_messages, has_failures, validate

    app.add_middleware(ValidatorMiddleware())

    async def signup(request):
        validate("email").is_defined("Email missing").is_email("Invalid email")
        validate("pin", trim=True).has_length(4, "Invalid PIN")
        if has_failures():
            return Response("<br>".join(failure_messages("email")), status=422)
        ...
"""

import logging
from collections.abc import Mapping
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from sift.config import ValidatorConfig
from sift.errors import BadRequest, ConfigurationError
from sift.http.request import Request
from sift.http.response import Response
from sift.middleware.protocol import Next
from sift.validation.chain import Validation
from sift.validation.validator import Validator

logger = logging.getLogger("sift.middleware")


@dataclass(frozen=True, slots=True)
class _RequestScope:
    validator: Validator
    trim: bool


_scope_var: ContextVar[_RequestScope | None] = ContextVar("sift_validator", default=None)


# -- Request-scoped accessors --


def _current() -> _RequestScope:
    scope = _scope_var.get()
    if scope is None:
        msg = (
            "No active validator. Ensure ValidatorMiddleware is added "
            "to the app before validating request parameters."
        )
        raise LookupError(msg)
    return scope


def get_validator() -> Validator:
    """Return the current request's ``Validator``.

    Raises ``LookupError`` if called outside a request with
    ``ValidatorMiddleware`` active.
    """
    return _current().validator


def validate(name: str, trim: bool | None = None) -> Validation:
    """Start a stop-on-first-failure chain for a request parameter.

    *trim* defaults to ``ValidatorConfig.trim``.
    """
    scope = _current()
    return scope.validator.validate(name, scope.trim if trim is None else trim)


def validate_all(name: str, trim: bool | None = None) -> Validation:
    """Start a collect-all chain for a request parameter.

    *trim* defaults to ``ValidatorConfig.trim``.
    """
    scope = _current()
    return scope.validator.validate_all(name, scope.trim if trim is None else trim)


def has_failures(name: str | None = None) -> bool:
    """True if any (or the named) request parameter failed validation."""
    return _current().validator.has_failures(name)


def failure_messages(name: str | None = None) -> list[str] | dict[str, list[str]]:
    """Failure messages of the named parameter, or of all parameters by name."""
    return _current().validator.get_messages(name)


# -- Middleware --


class ValidatorMiddleware:
    """Creates a ``Validator`` over the request parameters.

    Usage::

        from sift.config import ValidatorConfig
        from sift.middleware import ValidatorMiddleware

        app.add_middleware(ValidatorMiddleware(ValidatorConfig(trim=True)))

    Body parameters come from JSON objects or URL-encoded and multipart
    forms; uploaded files appear as ``UploadFile`` values. Bodies
    with any other content type validate as an empty mapping, so every
    field is ``UNDEFINED``.

    Raises:
        BadRequest: From ``__call__`` when a JSON body is malformed or
            not an object, or a form body cannot be decoded.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        config = config or ValidatorConfig()
        if isinstance(config.body_methods, str):
            msg = "ValidatorConfig.body_methods must be a tuple of method names, not a string."
            raise ConfigurationError(msg)
        for method in config.body_methods:
            if not method or method != method.upper():
                msg = f"ValidatorConfig.body_methods must hold upper-case method names, got {method!r}."
                raise ConfigurationError(msg)
        self._config = config

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    async def load_params(self, request: Request) -> Mapping[str, Any]:
        """Return the parameters a request validates: body or query."""
        if request.method not in self._config.body_methods:
            return request.query
        if request.is_json:
            return await self._load_json(request)
        if request.is_form:
            try:
                form = await request.form()
            except ValueError as exc:
                logger.warning("Malformed form body on %s %s: %s", request.method, request.path, exc)
                raise BadRequest("Malformed form body") from exc
            if form.files:
                # Uploads validate as UploadFile values next to the text fields
                return {**form, **form.files}
            return form
        return {}

    async def _load_json(self, request: Request) -> Mapping[str, Any]:
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = await request.json()
        except ValueError as exc:
            logger.warning("Malformed JSON body on %s %s: %s", request.method, request.path, exc)
            raise BadRequest("Malformed JSON body") from exc
        if not isinstance(data, dict):
            raise BadRequest("JSON body must be an object")
        return data

    async def __call__(self, request: Request, next: Next) -> Response:
        """Install the request's validator, dispatch, then log failures."""
        validator = Validator(await self.load_params(request))
        token = _scope_var.set(_RequestScope(validator, self._config.trim))
        try:
            return await next(request)
        finally:
            _scope_var.reset(token)
            if self._config.log_failures and validator.has_failures():
                failing = {key: messages for key, messages in validator.get_messages().items() if messages}
                logger.debug("%s %s failed validation: %r", request.method, request.path, failing)
