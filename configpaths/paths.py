"""Native path and filesystem capabilities."""

from __future__ import annotations

import ntpath
import os
import posixpath
import stat as stat_module
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, Optional

NATIVE_PATH: ModuleType = os.path
POSIX_PATH: ModuleType = posixpath
WINDOWS_PATH: ModuleType = ntpath

PATH_FLAVORS: Dict[str, ModuleType] = {
    "native": NATIVE_PATH,
    "posix": POSIX_PATH,
    "windows": WINDOWS_PATH,
}


def path_flavor(name: str) -> ModuleType:
    """Return the path module for ``name`` (native, posix or windows)."""
    try:
        return PATH_FLAVORS[name]
    except KeyError:
        choices = ", ".join(sorted(PATH_FLAVORS))
        raise ValueError(f"Unknown path flavor '{name}' (choose from: {choices})") from None


@dataclass(frozen=True)
class FileStats:
    mode: int

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "FileStats":
        return cls(mode=result.st_mode)

    def is_dir(self) -> bool:
        return stat_module.S_ISDIR(self.mode)

    def is_symlink(self) -> bool:
        return stat_module.S_ISLNK(self.mode)


class NativeFs:
    """Filesystem capability backed by ``os.stat`` / ``os.lstat``."""

    def stat(self, path: str) -> FileStats:
        return FileStats.from_stat_result(os.stat(path))

    def lstat(self, path: str) -> FileStats:
        return FileStats.from_stat_result(os.lstat(path))


def absolute_directory(start: Optional[str] = None) -> str:
    """Return ``start`` (default: cwd) as an absolute path."""
    if start is None:
        return os.getcwd()
    return os.path.abspath(os.path.expanduser(start))
