from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from common.fs import ensure_dir, iter_regular_files
from exceptions.exceptions import DirectoryError, OutputDirectoryError
from subtitle_muxing.domain.model import FileEntry, FileSet


@dataclass(frozen=True)
class FilesystemFileSetSource:
    """Filesystem adapter: classify the regular files of one flat directory.

    A name containing the primary token is primary even if it also contains
    the secondary token. Names matching neither token are ignored.
    """

    def scan(self, *, directory: Path, primary_token: str,
             secondary_token: str) -> Tuple[FileSet, FileSet]:
        directory = Path(directory)
        primary = FileSet(token=primary_token)
        secondary = FileSet(token=secondary_token)
        try:
            for name in iter_regular_files(str(directory)):
                if primary_token in name:
                    primary.append(FileEntry(name=name, directory=directory))
                elif secondary_token in name:
                    secondary.append(FileEntry(name=name, directory=directory))
                else:
                    logging.debug("Ignoring unmatched file: %s", name)
        except OSError as exc:
            raise DirectoryError(
                f"Not an openable directory: {directory} ({exc.strerror or exc})",
                context="scan",
            ) from exc
        return primary, secondary


@dataclass(frozen=True)
class FilesystemOutputDirectory:
    """Filesystem adapter: create the output directory unless it already exists."""

    def ensure(self, path: Path) -> None:
        try:
            created = ensure_dir(str(path))
        except OSError as exc:
            raise OutputDirectoryError(
                f"Could not create output directory {path}: {exc}. Check permissions on the directory.",
                context="ensure",
            ) from exc
        if created:
            logging.info("Created output directory: %s", path)
        else:
            logging.debug("Output directory already exists: %s", path)
