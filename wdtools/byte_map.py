"""A byte-keyed trie supporting exact and prefix lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from wdtools.bytes_key import as_bytes

V = TypeVar("V")

_MISSING: Any = object()


@dataclass(eq=False)
class _Node:
    data: Any = _MISSING
    children: dict[int, "_Node"] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return self.data is not _MISSING


class ByteMap(Generic[V]):
    """Map from byte keys to values, walking the key one byte at a time.

    Keys are anything :func:`wdtools.bytes_key.as_bytes` accepts.
    """

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, key: Any, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        node = self._root
        for byte in as_bytes(key):
            node = node.children.setdefault(byte, _Node())
        node.data = value

    def _find(self, key: Any) -> Optional[_Node]:
        node: Optional[_Node] = self._root
        for byte in as_bytes(key):
            node = node.children.get(byte)
            if node is None:
                return None
        return node

    def get(self, key: Any) -> Optional[V]:
        """Value stored under exactly ``key``, or None."""
        node = self._find(key)
        if node is None or not node.has_data:
            return None
        return node.data

    def match_first(self, key: Any) -> Optional[V]:
        """Value of the shortest stored key that is a prefix of ``key``."""
        node = self._root
        if node.has_data:
            return node.data
        for byte in as_bytes(key):
            node = node.children.get(byte)
            if node is None:
                return None
            if node.has_data:
                return node.data
        return None

    def match_all(self, key: Any) -> list[V]:
        """Values of every stored key that is a prefix of ``key``, shortest first."""
        node = self._root
        found = [node.data] if node.has_data else []
        for byte in as_bytes(key):
            node = node.children.get(byte)
            if node is None:
                break
            if node.has_data:
                found.append(node.data)
        return found

    def remove(self, key: Any) -> Optional[V]:
        """Drop and return the value under ``key``; the path itself stays."""
        node = self._find(key)
        if node is None or not node.has_data:
            return None
        value = node.data
        node.data = _MISSING
        return value