"""Multi-valued header storage."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from .exceptions import BadRequestError

LOGGER = logging.getLogger("restfacade.headers")


class HeaderStore:
    """Ordered multimap of header name to raw values.

    Names keep the spelling they were added with. Values are stored exactly
    as given; nothing here decodes them.
    """

    __slots__ = ("_values",)

    def __init__(
        self, headers: Iterable[tuple[str, str]] | Mapping[str, str] | None = None
    ) -> None:
        self._values: dict[str, list[str]] = {}
        if headers is None:
            return
        pairs = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in pairs:
            self.add(name, value)

    def add(self, name: str, value: str) -> None:
        """Append *value* to the values of *name*."""
        self._values.setdefault(name, []).append(value)

    def get(self, name: str, missing_message: str | None = None) -> str | None:
        """Return the first value of *name*.

        Without *missing_message* an absent header yields ``None``. With it,
        an absent header raises :class:`BadRequestError` carrying the message.
        """

        values = self._values.get(name)
        if values:
            return values[0]
        if missing_message is not None:
            LOGGER.info("Required header %r missing: %s", name, missing_message)
            raise BadRequestError(missing_message)
        return None

    def get_all(self, name: str) -> list[str]:
        """Return every value of *name* in insertion order."""
        return list(self._values.get(name, ()))

    def names(self) -> set[str]:
        return set(self._values)

    def find_name(self, name: str) -> str | None:
        """Return the stored spelling of *name*, compared case-insensitively."""
        if name in self._values:
            return name
        wanted = name.lower()
        for candidate in self._values:
            if candidate.lower() == wanted:
                return candidate
        return None

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield every ``(name, value)`` pair."""
        for name, values in self._values.items():
            for value in values:
                yield name, value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"HeaderStore({list(self.items())!r})"


__all__ = ["HeaderStore"]
