"""``application/x-www-form-urlencoded`` body parsing."""

from __future__ import annotations

from .encoding import DEFAULT_ENCODING, decode_or_raw, split_pairs

FORM_URLENCODED = "application/x-www-form-urlencoded"


def parse_url_form_encoded(
    body: bytes | None,
    decode: bool = True,
    encoding: str = DEFAULT_ENCODING,
) -> dict[str, list[str]]:
    """Parse a form *body* into field name -> values.

    Repeated fields keep every value in body order. With ``decode=False``
    names and values are returned exactly as sent.
    """

    if not body:
        return {}
    text = body.decode(encoding, errors="replace")
    form: dict[str, list[str]] = {}
    for key, value in split_pairs(text):
        if decode:
            key = decode_or_raw(key, encoding)
            value = decode_or_raw(value, encoding)
        form.setdefault(key, []).append(value)
    return form


__all__ = ["FORM_URLENCODED", "parse_url_form_encoded"]
