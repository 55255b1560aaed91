"""Filesystem-backed lookup of existing config files."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from .candidates import ConfigCandidate, config_paths
from .logging import debug
from .options import Options, resolve_options


def existing_config_paths(
    directory: str,
    config_file_names: Sequence[str],
    options: Optional[Options] = None,
) -> Iterator[ConfigCandidate]:
    """Yield the candidates for ``directory`` that exist as files.

    Raises:
        OSError: for stat failures other than a missing path.
    """
    opts = resolve_options(options)
    for candidate in config_paths(directory, config_file_names, opts):
        try:
            stats = opts.fs.stat(candidate.config_filename)
        except (FileNotFoundError, NotADirectoryError):
            continue
        if stats.is_dir():
            debug(f"skipping directory {candidate.config_filename}")
            continue
        debug(f"found {candidate.config_filename}")
        yield candidate


def find_config_path(
    directory: str,
    config_file_names: Sequence[str],
    options: Optional[Options] = None,
) -> Optional[ConfigCandidate]:
    """Return the nearest existing candidate, or ``None``."""
    return next(existing_config_paths(directory, config_file_names, options), None)
