"""Simple regular-expression extraction."""

from __future__ import annotations

import re


def regex_captures(text: str, pattern: str) -> list[str]:
    """Return the single capture group of every match of ``pattern`` in ``text``.

    The pattern must hold exactly one capture group; ValueError is raised when it
    does not, or when it is not a valid expression.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as err:
        raise ValueError(f"invalid regular expression: {err}") from err
    if compiled.groups != 1:
        raise ValueError(
            f"pattern must have exactly one capture group, found {compiled.groups}"
        )
    return [match.group(1) or "" for match in compiled.finditer(text)]