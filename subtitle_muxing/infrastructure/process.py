from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

from exceptions.exceptions import JobLaunchError, JobWaitError
from subtitle_muxing.domain.model import ProcessOutcome


@dataclass(frozen=True)
class SubprocessRunner:
    """Process adapter: start the tool with ``subprocess.Popen`` and wait for it.

    Starting and waiting are separate so their failures map to different errors.
    """

    cwd: Optional[str] = None

    def run(self, command: Sequence[str]) -> ProcessOutcome:
        cmd = list(command)
        try:
            proc = subprocess.Popen(
                cmd,
                cwd=self.cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as exc:
            raise JobLaunchError(
                f"{cmd[0]} command failed to run. Is {cmd[0]} installed?",
                context="run",
            ) from exc
        except OSError as exc:
            raise JobLaunchError(f"Could not start {cmd[0]}: {exc}", context="run") from exc

        try:
            stdout, stderr = proc.communicate()
        except OSError as exc:
            proc.kill()
            raise JobWaitError(f"Waiting for {cmd[0]} failed: {exc}", context="run") from exc

        return ProcessOutcome(returncode=proc.returncode, stdout=stdout or "", stderr=stderr or "")
