"""Everyday helpers: encodings, hashing, UUIDs, byte-prefix maps, async channels, locks, pools and HTTP."""

__version__ = "0.14.6"