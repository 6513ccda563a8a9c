"""UUID helpers."""

from __future__ import annotations

import enum
import hashlib
import uuid
from typing import Union


class UuidV5Namespace(enum.Enum):
    """Name spaces for version 5 UUIDs."""

    DNS = "dns"
    OID = "oid"
    URL = "url"
    X500 = "x500"


# X500 names are hashed in the DNS name space, as they always have been here.
_NAMESPACES = {
    UuidV5Namespace.DNS: uuid.NAMESPACE_DNS,
    UuidV5Namespace.OID: uuid.NAMESPACE_OID,
    UuidV5Namespace.URL: uuid.NAMESPACE_URL,
    UuidV5Namespace.X500: uuid.NAMESPACE_DNS,
}


def uuid_v4_raw() -> uuid.UUID:
    """A random UUID."""
    return uuid.uuid4()


def uuid_v4() -> str:
    """A random UUID in hyphenated text form."""
    return str(uuid_v4_raw())


def uuid_v5_raw(namespace: UuidV5Namespace, name: Union[bytes, str]) -> uuid.UUID:
    """The SHA-1 based UUID of ``name`` within ``namespace``."""
    if isinstance(name, str):
        name = name.encode("utf-8")
    digest = hashlib.sha1(_NAMESPACES[namespace].bytes + bytes(name)).digest()
    return uuid.UUID(bytes=digest[:16], version=5)


def uuid_v5(namespace: UuidV5Namespace, name: Union[bytes, str]) -> str:
    """The version 5 UUID of ``name`` in hyphenated text form."""
    return str(uuid_v5_raw(namespace, name))