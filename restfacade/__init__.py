"""Uniform request facade over query strings, headers and form bodies."""

__version__ = "0.1.0"

from .config import DEFAULT_SETTINGS, Settings, load_settings, validate_settings
from .encoding import MalformedEncodingError, decode_or_raw, url_decode
from .exceptions import HTTP_400_BAD_REQUEST, BadRequestError, HTTPException
from .forms import parse_url_form_encoded
from .headers import HeaderStore
from .query import QueryParams, parse_query_string, split_target
from .request import Request, normalize_method, resolve_effective_method

__all__ = [
    "__version__",
    "BadRequestError",
    "DEFAULT_SETTINGS",
    "HTTPException",
    "HTTP_400_BAD_REQUEST",
    "HeaderStore",
    "MalformedEncodingError",
    "QueryParams",
    "Request",
    "Settings",
    "decode_or_raw",
    "load_settings",
    "normalize_method",
    "parse_query_string",
    "parse_url_form_encoded",
    "resolve_effective_method",
    "split_target",
    "url_decode",
    "validate_settings",
]
