"""Key-value containers that carry task state across screen boundaries.

Two flavors exist on the host:
- `Bundle`: restart state, survives destruction/recreation of the same screen
- `Intent`: cross-boundary message used to explicitly launch a new screen

Both satisfy the `Container` protocol, so serialization code does not care which one it gets.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Container(Protocol):
    """Minimal string read/write surface shared by bundles and intents."""

    def get_string(self, key: str) -> str | None:
        raise NotImplementedError

    def put_string(self, key: str, value: str | None) -> None:
        raise NotImplementedError


class Bundle:
    """String-keyed state container.

    A key stored with `None` is present but reads back `None`; use `contains()`
    to tell it apart from a missing key.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def get_string(self, key: str) -> str | None:
        # Typed read: a value of another type reads as absent
        value = self._values.get(key)
        return value if isinstance(value, str) else None

    def put_string(self, key: str, value: str | None) -> None:
        self._values[key] = value

    def contains(self, key: str) -> bool:
        return key in self._values

    def keys(self) -> list[str]:
        return list(self._values)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bundle):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Bundle({self._values!r})"


class Intent:
    """Navigation message addressed to a target screen.

    The extras bundle is created lazily on the first `put_extra`, so an intent
    built without extras exposes `extras is None`.
    """

    def __init__(self, target: str, extras: Bundle | None = None) -> None:
        self.target = target
        self._extras = extras

    @property
    def extras(self) -> Bundle | None:
        return self._extras

    def put_extra(self, key: str, value: str | None) -> None:
        if self._extras is None:
            self._extras = Bundle()
        self._extras.put_string(key, value)

    def get_string_extra(self, key: str) -> str | None:
        if self._extras is None:
            return None
        return self._extras.get_string(key)

    # Container protocol
    def get_string(self, key: str) -> str | None:
        return self.get_string_extra(key)

    def put_string(self, key: str, value: str | None) -> None:
        self.put_extra(key, value)

    def __repr__(self) -> str:
        return f"Intent(target={self.target!r}, extras={self._extras!r})"
