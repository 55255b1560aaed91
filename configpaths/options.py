"""Options and capability protocols shared by the candidate functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .paths import NATIVE_PATH, NativeFs

DEFAULT_CONFIG_DIRECTORY_NAME = ".config"


class PathCapability(Protocol):
    """Path manipulation library, e.g. ``os.path``, ``posixpath`` or ``ntpath``."""

    def dirname(self, path: str) -> str: ...

    def basename(self, path: str) -> str: ...

    def join(self, path: str, *paths: str) -> str: ...


class Stats(Protocol):
    def is_dir(self) -> bool: ...

    def is_symlink(self) -> bool: ...


class FsCapability(Protocol):
    """Filesystem host.

    Candidate enumeration never calls it; discovery uses it to check which
    candidates exist.
    """

    def stat(self, path: str) -> Stats: ...

    def lstat(self, path: str) -> Stats: ...


@dataclass(frozen=True)
class Options:
    path: PathCapability = NATIVE_PATH
    fs: FsCapability = field(default_factory=NativeFs)
    config_directory_name: str = DEFAULT_CONFIG_DIRECTORY_NAME


def resolve_options(options: Optional[Options] = None) -> Options:
    """Fill in defaults for a per-call ``options`` value."""
    return options if options is not None else Options()
