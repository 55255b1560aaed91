"""Enumerate the places a tool's config file may live.

For a starting directory every level of the ascent offers two forms of
candidate, checked in this order::

    <dir>/.config/<name>    nested form
    <dir>/<name>            bare form

The walk moves to the parent directory until ``dirname`` reaches its fixed
point (the filesystem root). No filesystem access happens here; see
:mod:`configpaths.discovery` for existence checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from .options import Options, resolve_options


@dataclass(frozen=True)
class ConfigCandidate:
    """A possible config file and the directory it would configure."""

    config_filename: str
    describes_directory: str


def get_described_directory(
    config_file_path: str, options: Optional[Options] = None
) -> str:
    """Return the directory configured by the file at ``config_file_path``.

    A file inside a config directory (``/x/.config/rc``) describes the
    config directory's parent (``/x``); any other file describes its own
    parent directory.
    """
    opts = resolve_options(options)
    path = opts.path
    directory = path.dirname(config_file_path)
    if path.basename(directory) == opts.config_directory_name:
        return path.dirname(directory)
    return directory


def config_paths(
    directory: str,
    config_file_names: Sequence[str],
    options: Optional[Options] = None,
) -> Iterator[ConfigCandidate]:
    """Yield every config file candidate for ``directory``, nearest first.

    Within one level the nested form precedes the bare form, and both follow
    the order of ``config_file_names``. A level whose own basename is the
    config directory name gets no bare candidates: files directly inside it
    describe its parent, which the parent level already covers.
    """
    opts = resolve_options(options)
    path = opts.path
    config_directory_name = opts.config_directory_name

    root = directory
    while True:
        for name in config_file_names:
            yield ConfigCandidate(
                config_filename=path.join(root, config_directory_name, name),
                describes_directory=root,
            )

        if path.basename(root) != config_directory_name:
            for name in config_file_names:
                yield ConfigCandidate(
                    config_filename=path.join(root, name),
                    describes_directory=root,
                )

        parent = path.dirname(root)
        if parent == root:
            return
        root = parent


def all_config_paths(
    directory: str,
    config_file_names: Sequence[str],
    options: Optional[Options] = None,
) -> List[ConfigCandidate]:
    """Eager form of :func:`config_paths`."""
    return list(config_paths(directory, config_file_names, options))
