"""Hex, Base64 and digest helpers working on bytes or text."""

from __future__ import annotations

import base64
import binascii
import hashlib
import re
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

_URL_ALPHABET = re.compile(rb"[A-Za-z0-9_-]*")


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def hex_encode(data: BytesLike) -> str:
    """Lower-case hexadecimal form of ``data``."""
    return _to_bytes(data).hex()


def base64_encode_url(data: BytesLike) -> str:
    """URL-safe Base64 without padding."""
    return base64.urlsafe_b64encode(_to_bytes(data)).rstrip(b"=").decode("ascii")


def base64_decode_url(data: BytesLike) -> bytes:
    """Decode URL-safe Base64 that carries no padding.

    Raises ValueError on padding, foreign characters or a bad length.
    """
    raw = _to_bytes(data)
    if not _URL_ALPHABET.fullmatch(raw):
        raise ValueError("invalid character in url-safe base64 input")
    if len(raw) % 4 == 1:
        raise ValueError("invalid length for url-safe base64 input")
    padded = raw + b"=" * (-len(raw) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except binascii.Error as err:
        raise ValueError(f"invalid url-safe base64 input: {err}") from err


def base64_encode_std(data: BytesLike) -> str:
    """Standard Base64 with padding."""
    return base64.b64encode(_to_bytes(data)).decode("ascii")


def base64_decode_std(data: BytesLike) -> bytes:
    """Decode standard, padded Base64; raises ValueError when malformed."""
    raw = _to_bytes(data)
    if len(raw) % 4:
        raise ValueError("standard base64 input must be padded to a multiple of 4")
    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as err:
        raise ValueError(f"invalid standard base64 input: {err}") from err


def md5(data: BytesLike) -> bytes:
    """Raw 16-byte MD5 digest."""
    return hashlib.md5(_to_bytes(data)).digest()


def sha1(data: BytesLike) -> str:
    """SHA-1 digest as lower-case hex."""
    return hashlib.sha1(_to_bytes(data)).hexdigest()