"""Recursive file search feeding the generator."""

import fnmatch
import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

log = logging.getLogger(__name__)


def _log_error(err: OSError) -> None:
    log.error("%s", err)


def search_files(
    root: str | Path,
    pattern: str,
    on_error: Callable[[OSError], None] = _log_error,
) -> Iterator[Path]:
    """Yield files under root whose name matches pattern.

    Directories and files are visited in sorted order so results are stable
    between runs. Errors are passed to on_error and the search goes on.
    """
    root = Path(root)
    if not root.is_dir():
        on_error(NotADirectoryError(f"{root}: not a directory"))
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for name in sorted(filenames):
            if fnmatch.fnmatch(name, pattern):
                yield Path(dirpath) / name
