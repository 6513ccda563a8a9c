"""File-system existence checks."""

from __future__ import annotations

import asyncio
import enum
import os
import stat
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class FileType(enum.Enum):
    """Kind of file-system entry to look for."""

    FILE = "file"
    DIR = "dir"
    SYMLINK = "symlink"


_CHECKS = {
    FileType.FILE: stat.S_ISREG,
    FileType.DIR: stat.S_ISDIR,
    FileType.SYMLINK: stat.S_ISLNK,
}


async def exist(path: PathLike, file_type: FileType) -> bool:
    """Whether ``path`` exists and is of ``file_type``.

    Links are followed, so a link is judged by its target. A missing path gives
    False; any other OS error is raised.
    """
    try:
        info = await asyncio.to_thread(os.stat, path)
    except FileNotFoundError:
        return False
    return _CHECKS[file_type](info.st_mode)