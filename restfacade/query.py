"""Query string parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .encoding import DEFAULT_ENCODING, decode_or_raw, split_pairs

QUERY_SEPARATOR = "?"


def split_target(target: str) -> tuple[str, str | None]:
    """Split a request *target* into its resource path and raw query string.

    The query string is ``None`` when the target has no ``?`` and ``""`` when
    the target ends right after it.
    """

    path, sep, query = target.partition(QUERY_SEPARATOR)
    if not sep:
        return path, None
    return path, query


def parse_query_string(
    raw: str | None, encoding: str = DEFAULT_ENCODING
) -> list[tuple[str, str]]:
    """Return decoded ``(key, value)`` pairs of *raw* in source order.

    One leading ``?`` is dropped, so both ``"a=1"`` and ``"?a=1"`` parse the
    same. Never raises: keys and values that cannot be decoded are kept
    verbatim.
    """

    if not raw:
        return []
    if raw.startswith(QUERY_SEPARATOR):
        raw = raw[1:]
    return [
        (decode_or_raw(key, encoding), decode_or_raw(value, encoding))
        for key, value in split_pairs(raw)
    ]


class QueryParams(Mapping[str, str]):
    """Immutable view over parsed query pairs.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    __slots__ = ("_data",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        data: dict[str, list[str]] = {}
        for key, value in pairs:
            data.setdefault(key, []).append(value)
        self._data = data

    @classmethod
    def from_string(
        cls, raw: str | None, encoding: str = DEFAULT_ENCODING
    ) -> QueryParams:
        return cls(parse_query_string(raw, encoding))

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"QueryParams({{{items}}})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def to_dict(self) -> dict[str, str]:
        """Return a plain ``dict`` of first values."""
        return {key: values[0] for key, values in self._data.items()}


__all__ = ["QueryParams", "parse_query_string", "split_target"]
