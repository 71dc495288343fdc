from __future__ import annotations

import os
import logging
from typing import Iterator


def iter_regular_files(dir_path: str) -> Iterator[str]:
    """Yield names of regular files directly inside ``dir_path``, in listing order.

    Symlinks, subdirectories and special files are skipped. Raises ``OSError``
    if the directory cannot be opened.
    """
    with os.scandir(dir_path) as entries:
        for entry in entries:
            try:
                if entry.is_file(follow_symlinks=False):
                    yield entry.name
            except OSError:
                logging.debug("Skipping unreadable entry: %s", entry.path)


def ensure_dir(path: str) -> bool:
    """Create ``path`` if absent. Returns True if this call created it.

    An existing directory counts as success, including one created concurrently
    by another process. Any other failure is raised as ``OSError``.
    """
    try:
        os.mkdir(path)
    except FileExistsError:
        if not os.path.isdir(path):
            raise NotADirectoryError(f"Exists but is not a directory: {path}")
        return False
    return True
