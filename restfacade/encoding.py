"""Tolerant ``application/x-www-form-urlencoded`` decoding.

Query strings and form bodies share one grammar: ``&`` separated tokens,
each split on the first ``=``, with ``%XX`` escapes and ``+`` for a space.
Malformed client input must never break parsing, so :func:`decode_or_raw`
falls back to the undecoded text instead of raising.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote_plus

LOGGER = logging.getLogger("restfacade.encoding")

DEFAULT_ENCODING = "utf-8"
PAIR_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="

# A "%" that does not introduce two hex digits.
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MalformedEncodingError(ValueError):
    """Raised when a value is not valid percent-encoded text."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"cannot decode {value!r}: {reason}")
        self.value = value
        self.reason = reason


def url_decode(value: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode *value* strictly.

    Raises
    ------
    MalformedEncodingError
        If an escape is incomplete or the decoded bytes are not valid
        *encoding* text.
    """

    if "%" not in value and "+" not in value:
        return value
    bad = _BAD_ESCAPE.search(value)
    if bad is not None:
        raise MalformedEncodingError(value, f"incomplete escape at index {bad.start()}")
    try:
        return unquote_plus(value, encoding=encoding, errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedEncodingError(value, str(exc)) from exc


def decode_or_raw(value: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Return *value* decoded, or unchanged when it cannot be decoded."""

    try:
        return url_decode(value, encoding)
    except MalformedEncodingError as exc:
        LOGGER.debug("Keeping undecoded value: %s", exc.reason)
        return value


def split_pairs(raw: str) -> list[tuple[str, str]]:
    """Split *raw* into encoded ``(key, value)`` tokens.

    Empty tokens are skipped; a token without ``=`` has an empty value.
    """

    pairs: list[tuple[str, str]] = []
    for token in raw.split(PAIR_SEPARATOR):
        if not token:
            continue
        key, _, value = token.partition(KEY_VALUE_SEPARATOR)
        pairs.append((key, value))
    return pairs


__all__ = [
    "DEFAULT_ENCODING",
    "MalformedEncodingError",
    "decode_or_raw",
    "split_pairs",
    "url_decode",
]
