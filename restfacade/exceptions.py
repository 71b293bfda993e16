"""HTTP error types raised by the request facade."""

from __future__ import annotations

from typing import Any, Mapping

from .encoding import MalformedEncodingError

HTTP_400_BAD_REQUEST = 400
HTTP_500_INTERNAL_SERVER_ERROR = 500


class HTTPException(Exception):
    """Error carrying an HTTP status code and optional headers."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        status_code: int | None = None,
        detail: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(detail)
        if status_code is not None:
            self.status_code = status_code
        self.detail = detail
        self.headers = dict(headers or {})


class BadRequestError(HTTPException):
    """The client sent a request missing something the handler requires."""

    status_code = HTTP_400_BAD_REQUEST

    def __init__(
        self, detail: Any = None, headers: Mapping[str, str] | None = None
    ) -> None:
        super().__init__(HTTP_400_BAD_REQUEST, detail, headers)


__all__ = [
    "BadRequestError",
    "HTTPException",
    "MalformedEncodingError",
    "HTTP_400_BAD_REQUEST",
    "HTTP_500_INTERNAL_SERVER_ERROR",
]
