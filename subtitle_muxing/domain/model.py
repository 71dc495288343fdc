from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class FileEntry:
    """Value object: a regular file found directly inside the scanned directory."""

    name: str
    directory: Path

    @property
    def path(self) -> Path:
        return self.directory / self.name

    @property
    def sort_key(self) -> bytes:
        # byte-wise order of the on-disk name
        return os.fsencode(self.name)


@dataclass
class FileSet:
    """Files matched by one format token, kept in scan order until sorted."""

    token: str
    entries: List[FileEntry] = field(default_factory=list)

    def append(self, entry: FileEntry) -> None:
        self.entries.append(entry)

    def sorted(self) -> List[FileEntry]:
        return sorted(self.entries, key=lambda e: e.sort_key)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Pair:
    """One primary (media) file and the secondary (subtitle) file muxed into it."""

    primary: FileEntry
    secondary: FileEntry


class JobState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (JobState.SUCCEEDED, JobState.FAILED)


@dataclass
class Job:
    """One external muxing invocation for a pair, optionally preceded by a subtitle sync.

    Moves PENDING -> RUNNING -> SUCCEEDED | FAILED; any other transition is rejected.
    """

    index: int
    pair: Pair
    command: Tuple[str, ...]
    output_path: Path
    sync_command: Optional[Tuple[str, ...]] = None
    state: JobState = JobState.PENDING

    _TRANSITIONS = {
        JobState.PENDING: (JobState.RUNNING,),
        JobState.RUNNING: (JobState.SUCCEEDED, JobState.FAILED),
    }

    def transition(self, new_state: JobState) -> None:
        allowed = self._TRANSITIONS.get(self.state, ())
        if new_state not in allowed:
            raise ValueError(f"Job {self.index}: illegal transition {self.state.value} -> {new_state.value}")
        self.state = new_state


@dataclass(frozen=True)
class ProcessOutcome:
    """Exit status and captured output of a finished external process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


@dataclass(frozen=True)
class JobResult:
    index: int
    pair: Pair
    command: Tuple[str, ...]
    state: JobState
    returncode: Optional[int] = None
    error: str = ""
    duration: float = 0.0
    # "sync" or "mux" when FAILED
    failed_step: str = ""

    @property
    def succeeded(self) -> bool:
        return self.state is JobState.SUCCEEDED


class BatchStatus(str, Enum):
    ALL_SUCCEEDED = "all_succeeded"
    PARTIAL_FAILURE = "partial_failure"


@dataclass(frozen=True)
class BatchResult:
    """Final outcome of a batch: one JobResult per submitted pair, in pair order."""

    status: BatchStatus
    outcomes: Tuple[JobResult, ...]

    @property
    def failures(self) -> Tuple[JobResult, ...]:
        return tuple(r for r in self.outcomes if not r.succeeded)

    @property
    def succeeded_count(self) -> int:
        return len(self.outcomes) - len(self.failures)
