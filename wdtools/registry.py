"""Process-wide registry holding one value per type."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

Out = TypeVar("Out")

_lock = threading.RLock()
_values: dict[type, Any] = {}


@dataclass
class _Slot:
    """Holder passed to fetch handlers; assigning ``value`` replaces the stored one."""

    value: Any


def init(value: Any) -> None:
    """Register ``value`` as the instance for its exact type, replacing any other."""
    with _lock:
        _values[type(value)] = value


def fetch(kind: type, handle: Callable[[Optional[_Slot]], Out]) -> Out:
    """Call ``handle`` with a slot for the value registered for ``kind``.

    ``handle`` gets None when nothing is registered. Whatever it leaves in
    ``slot.value`` is stored back. Its return value is returned.
    """
    if not isinstance(kind, type):
        raise TypeError("kind must be a type")
    with _lock:
        if kind not in _values:
            return handle(None)
        slot = _Slot(_values[kind])
        try:
            return handle(slot)
        finally:
            _values[kind] = slot.value