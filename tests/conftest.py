import threading
import time
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest

from exceptions.exceptions import JobLaunchError
from subtitle_muxing.domain.model import FileEntry, FileSet, Pair, ProcessOutcome


class RecordingRunner:
    """Fake ProcessRunner: records commands and tracks peak concurrency."""

    def __init__(self, returncodes: Optional[Dict[str, int]] = None, delay: float = 0.0,
                 raise_for: Optional[Dict[str, Exception]] = None):
        self.returncodes = returncodes or {}
        self.raise_for = raise_for or {}
        self.delay = delay
        self.commands: List[tuple] = []
        self.active = 0
        self.peak = 0
        self._lock = threading.Lock()

    def _primary_name(self, command: Sequence[str]) -> str:
        # sync commands are keyed "sync:<video name>"
        if len(command) > 2 and command[2] == "-i":
            return "sync:" + Path(command[1]).name
        return Path(command[3]).name

    def run(self, command: Sequence[str]) -> ProcessOutcome:
        name = self._primary_name(command)
        with self._lock:
            self.commands.append(tuple(command))
            self.active += 1
            self.peak = max(self.peak, self.active)
        try:
            if name in self.raise_for:
                raise self.raise_for[name]
            if self.delay:
                time.sleep(self.delay)
            code = self.returncodes.get(name, 0)
            return ProcessOutcome(returncode=code, stderr="" if code == 0 else f"error muxing {name}")
        finally:
            with self._lock:
                self.active -= 1


class RecordingOutputDirectory:
    def __init__(self, events: Optional[list] = None):
        self.ensured: List[Path] = []
        self.events = events if events is not None else []

    def ensure(self, path: Path) -> None:
        self.ensured.append(path)
        self.events.append(("ensure", path))


class StaticConfirmation:
    def __init__(self, answer: bool):
        self.answer = answer
        self.seen: List[Pair] = []

    def confirm(self, pairs):
        self.seen = list(pairs)
        return self.answer


def make_set(token: str, names: List[str], directory: Path = Path("/media")) -> FileSet:
    fs = FileSet(token=token)
    for name in names:
        fs.append(FileEntry(name=name, directory=directory))
    return fs


def make_pairs(names: List[str], directory: Path = Path("/media")) -> List[Pair]:
    return [
        Pair(primary=FileEntry(f"{n}.mkv", directory), secondary=FileEntry(f"{n}.srt", directory))
        for n in names
    ]


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    for name in ("b.mkv", "a.srt", "a.mkv", "b.srt"):
        (tmp_path / name).write_text("x")
    return tmp_path


@pytest.fixture
def launch_error() -> JobLaunchError:
    return JobLaunchError("mkvmerge command failed to run. Is mkvmerge installed?")
