"""Request facade merging query parameters and headers into one lookup."""

from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Iterable, Mapping
from typing import Any

from .config import DEFAULT_SETTINGS, Settings
from .encoding import decode_or_raw
from .forms import FORM_URLENCODED, parse_url_form_encoded
from .headers import HeaderStore
from .query import QUERY_SEPARATOR, QueryParams, parse_query_string, split_target

LOGGER = logging.getLogger("restfacade.request")

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"
HEAD = "HEAD"
OPTIONS = "OPTIONS"
PATCH = "PATCH"
TRACE = "TRACE"
CONNECT = "CONNECT"

KNOWN_METHODS = frozenset({GET, POST, PUT, DELETE, HEAD, OPTIONS, PATCH, TRACE, CONNECT})

METHOD_OVERRIDE_PARAM = "_method"
OVERRIDE_METHODS = frozenset({PUT, DELETE})

HOST_HEADER = "Host"
CONTENT_TYPE_HEADER = "Content-Type"
CONNECTION_HEADER = "Connection"


def normalize_method(method: str) -> str:
    """Upper-case a standard verb; any other token is returned unchanged."""

    candidate = method.upper()
    return candidate if candidate in KNOWN_METHODS else method


def resolve_effective_method(method: str, override: str | None) -> str:
    """Return the verb a handler should act on for *method* and *override*."""

    if override is None:
        return method
    candidate = override.upper()
    if candidate in OVERRIDE_METHODS:
        return candidate
    return method


class Request:
    """Represent an incoming HTTP request.

    Query string parameters are decoded once at construction and stored as
    headers, after the transport headers, so ``get_header("q")`` answers for
    both ``?q=...`` and a ``q:`` header.
    """

    def __init__(
        self,
        method: str = GET,
        target: str = "/",
        headers: Iterable[tuple[str, str]] | Mapping[str, str] | None = None,
        body: bytes | None = b"",
        *,
        http_version: str = "1.1",
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.method = normalize_method(method)
        self.target = target
        self.http_version = http_version
        self._body = body or b""
        self._headers = HeaderStore(headers)
        self._resource_path, self._query_string = split_target(target)
        raw_query = (
            None if self._query_string is None else QUERY_SEPARATOR + self._query_string
        )
        pairs = parse_query_string(raw_query, self.settings.charset)
        for key, value in pairs:
            self._headers.add(key, value)
        self._query = QueryParams(pairs)
        self._forms: dict[bool, dict[str, list[str]]] = {}
        self._attachments: dict[str, Any] = {}
        self._correlation_id: str | None = None

    @classmethod
    def from_asgi(
        cls,
        scope: Mapping[str, Any],
        body: bytes = b"",
        settings: Settings | None = None,
    ) -> Request:
        """Build a request from an ASGI HTTP *scope*."""

        raw_path = scope.get("raw_path")
        if raw_path:
            path = bytes(raw_path).decode("latin-1")
        else:
            path = str(scope.get("path", "/"))
        query = bytes(scope.get("query_string", b"")).decode("latin-1")
        target = f"{path}?{query}" if query else path
        headers = [
            (bytes(name).decode("latin-1"), bytes(value).decode("latin-1"))
            for name, value in scope.get("headers", ())
        ]
        return cls(
            str(scope.get("method", GET)),
            target,
            headers,
            body,
            http_version=str(scope.get("http_version", "1.1")),
            settings=settings,
        )

    def __repr__(self) -> str:
        return f"Request({self.method!r}, {self.target!r})"

    # URL accessors

    def get_url(self) -> str:
        """Return the base URL followed by the full request target."""
        return self.get_base_url() + self.get_path()

    def get_base_url(self) -> str:
        """Return scheme and host with no path.

        The scheme comes from ``Settings.base_url_scheme`` and is never read
        from the transport.
        """

        return f"{self.settings.base_url_scheme}://{self.get_host() or ''}"

    def get_path(self) -> str:
        """Return the request target as received, query string included."""
        return self.target

    def get_resource_path(self) -> str:
        """Return the request target without its query string."""
        return self._resource_path

    def get_query_string(self) -> str | None:
        """Return the raw text after the first ``?``, or ``None``."""
        return self._query_string

    def get_host(self) -> str | None:
        """Return the ``Host`` header, matched case-insensitively."""
        name = self._headers.find_name(HOST_HEADER)
        return self._headers.get(name) if name is not None else None

    # Methods

    def get_http_method(self) -> str:
        """Return the method the client actually used."""
        return self.method

    def get_effective_http_method(self) -> str:
        """Return the method after applying a ``_method`` override.

        Only ``PUT`` and ``DELETE`` (any case) override; other values are
        ignored.
        """

        name = self._headers.find_name(METHOD_OVERRIDE_PARAM)
        if name is None:
            return self.method
        override = self._headers.get(name)
        effective = resolve_effective_method(self.method, override)
        if effective == self.method:
            LOGGER.debug("Method override %r leaves %s unchanged", override, self.method)
        else:
            LOGGER.debug("Method override %s -> %s", self.method, effective)
        return effective

    def is_method_get(self) -> bool:
        """Return whether the effective method is ``GET``."""
        return self.get_effective_http_method() == GET

    def is_method_post(self) -> bool:
        """Return whether the effective method is ``POST``."""
        return self.get_effective_http_method() == POST

    def is_method_put(self) -> bool:
        """Return whether the effective method is ``PUT``."""
        return self.get_effective_http_method() == PUT

    def is_method_delete(self) -> bool:
        """Return whether the effective method is ``DELETE``."""
        return self.get_effective_http_method() == DELETE

    def is_method_head(self) -> bool:
        """Return whether the effective method is ``HEAD``."""
        return self.get_effective_http_method() == HEAD

    def is_method_options(self) -> bool:
        """Return whether the effective method is ``OPTIONS``."""
        return self.get_effective_http_method() == OPTIONS

    def is_method_patch(self) -> bool:
        """Return whether the effective method is ``PATCH``."""
        return self.get_effective_http_method() == PATCH

    # Headers and query parameters

    def add_header(self, name: str, value: str) -> None:
        """Append a raw header value; *value* is stored without decoding."""
        self._headers.add(name, value)

    def get_header(self, name: str, missing_message: str | None = None) -> str | None:
        """Return the first value of header or query parameter *name*.

        Raises :class:`~restfacade.exceptions.BadRequestError` when
        *missing_message* is given and nothing is stored under *name*.
        """

        return self._headers.get(name, missing_message)

    def get_url_decoded_header(
        self, name: str, missing_message: str | None = None
    ) -> str | None:
        """Like :meth:`get_header` but percent-decodes the stored value."""
        value = self._headers.get(name, missing_message)
        if value is None:
            return None
        return decode_or_raw(value, self.settings.charset)

    def get_headers(self, name: str) -> list[str]:
        """Return every value stored under *name*, or an empty list."""
        return self._headers.get_all(name)

    def get_header_names(self) -> set[str]:
        """Return the names of all headers and query parameters."""
        return self._headers.names()

    def has_header(self, name: str) -> bool:
        """Return whether anything is stored under *name*."""
        return name in self._headers

    @property
    def headers(self) -> HeaderStore:
        """Return the underlying header store."""
        return self._headers

    def get_query_string_map(self) -> dict[str, str]:
        """Return the first decoded value of each query parameter."""
        return self._query.to_dict()

    @property
    def query_params(self) -> QueryParams:
        """Return every decoded query parameter, repeated keys included."""
        return self._query

    # Body

    def get_body(self) -> bytes:
        """Return the raw body bytes."""
        return self._body

    def get_body_as_text(self, encoding: str | None = None) -> str:
        """Return the body decoded with *encoding* or the configured charset."""
        return self._body.decode(encoding or self.settings.charset)

    def get_body_from_json(self) -> Any:
        """Return the JSON-decoded body, or ``None`` when it is empty."""
        if not self._body:
            return None
        return json.loads(self.get_body_as_text())

    def get_body_from_url_form_encoded(self, decode: bool = True) -> dict[str, list[str]]:
        """Return the body parsed as ``application/x-www-form-urlencoded``."""

        form = self._forms.get(decode)
        if form is None:
            form = parse_url_form_encoded(self._body, decode, self.settings.charset)
            self._forms[decode] = form
        return {key: list(values) for key, values in form.items()}

    def get_content_type(self) -> str | None:
        """Return the ``Content-Type`` header, matched case-insensitively."""
        name = self._headers.find_name(CONTENT_TYPE_HEADER)
        return self._headers.get(name) if name is not None else None

    def is_form_url_encoded(self) -> bool:
        """Return whether the body is declared as a urlencoded form."""
        content_type = self.get_content_type() or ""
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type == FORM_URLENCODED

    # Connection and per-request state

    def is_keep_alive(self) -> bool:
        """Return whether the connection should stay open after this request."""
        name = self._headers.find_name(CONNECTION_HEADER)
        connection = (self._headers.get(name) or "") if name is not None else ""
        tokens = {token.strip().lower() for token in connection.split(",")}
        if "close" in tokens:
            return False
        if self.http_version == "1.0":
            return "keep-alive" in tokens
        return True

    def get_correlation_id(self) -> str:
        """Return the caller-supplied correlation id or a generated one."""
        if self._correlation_id is None:
            name = self._headers.find_name(self.settings.correlation_header)
            supplied = self._headers.get(name) if name is not None else None
            self._correlation_id = supplied or uuid.uuid4().hex
        return self._correlation_id

    def put_attachment(self, name: str, value: Any) -> None:
        """Store *value* for later processing stages."""
        self._attachments[name] = value

    def get_attachment(self, name: str) -> Any:
        """Return the attachment stored under *name*, or ``None``."""
        return self._attachments.get(name)

    def has_attachment(self, name: str) -> bool:
        """Return whether an attachment is stored under *name*."""
        return name in self._attachments


__all__ = [
    "CONNECT",
    "DELETE",
    "GET",
    "HEAD",
    "KNOWN_METHODS",
    "METHOD_OVERRIDE_PARAM",
    "OPTIONS",
    "OVERRIDE_METHODS",
    "PATCH",
    "POST",
    "PUT",
    "Request",
    "TRACE",
    "normalize_method",
    "resolve_effective_method",
]
