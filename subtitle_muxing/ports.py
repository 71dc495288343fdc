from __future__ import annotations
from pathlib import Path
from typing import Protocol, Sequence, Tuple
from subtitle_muxing.domain.model import FileSet, Pair, ProcessOutcome


class FileSetSource(Protocol):
    """Port: split the regular files of one directory by two format tokens."""

    def scan(self, *, directory: Path, primary_token: str,
             secondary_token: str) -> Tuple[FileSet, FileSet]: ...


class ConfirmationPrompt(Protocol):
    """Port: ask the operator whether the proposed pairs are correct."""

    def confirm(self, pairs: Sequence[Pair]) -> bool: ...


class OutputDirectory(Protocol):
    """Port: create the output directory if it does not already exist."""

    def ensure(self, path: Path) -> None: ...


class ProcessRunner(Protocol):
    """Port: run one external command to completion.

    Raises JobLaunchError if the process cannot be started and JobWaitError if
    waiting for it fails. A non-zero exit is returned, not raised.
    """

    def run(self, command: Sequence[str]) -> ProcessOutcome: ...
