"""Conversion of key-like values into the byte strings used for lookups."""

from __future__ import annotations

from typing import Any

_INT_WIDTH = 8


def as_bytes(value: Any) -> bytes:
    """Return the byte representation of ``value`` used as a lookup key.

    * bytes-like objects are copied as they are;
    * ``str`` is encoded as UTF-8;
    * ``int`` becomes 8 little-endian bytes, two's complement when negative;
    * a list or tuple of ints in ``range(256)`` becomes those bytes;
    * a list or tuple of single characters becomes 4 little-endian bytes per
      character (UTF-32LE).
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        raise TypeError("bool cannot be used as a byte key")
    if isinstance(value, int):
        return value.to_bytes(_INT_WIDTH, "little", signed=value < 0)
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, int) and not isinstance(item, bool) for item in value):
            return bytes(value)
        if all(isinstance(item, str) and len(item) == 1 for item in value):
            return "".join(value).encode("utf-32-le")
        raise TypeError("sequence keys must hold only byte values or only characters")
    raise TypeError(f"{type(value).__name__} cannot be used as a byte key")