"""Application service: run one muxing job per pair on a bounded worker pool."""
from __future__ import annotations

import logging
import shlex
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from exceptions.exceptions import JobLaunchError, JobWaitError
from subtitle_muxing.domain.model import Job, JobResult, JobState, Pair, ProcessOutcome
from subtitle_muxing.domain.services import CommandBuilder
from subtitle_muxing.ports import OutputDirectory, ProcessRunner

STDERR_TAIL_CHARS = 500


@dataclass(frozen=True)
class JobDispatcher:
    """Build every job, create the output directory once, then run the jobs.

    At most ``max_workers`` tool processes run at the same time. A job that
    exits non-zero is recorded as FAILED and its siblings keep running. When
    a job has a sync command it runs first in the same worker; if it exits
    non-zero the mux is skipped.
    Launch and wait errors abort the batch: jobs not yet started are
    cancelled, jobs already running are awaited, then the first such error
    is raised. Interrupting the interpreter does not kill running tool
    processes.
    """

    runner: ProcessRunner
    output_directory: OutputDirectory
    command_builder: CommandBuilder = field(default_factory=CommandBuilder)
    max_workers: int = 1

    def dispatch(
        self,
        pairs: Sequence[Pair],
        language_code: str,
        language_name: str,
        output_directory: Path,
    ) -> List[JobResult]:
        # All commands are rendered before anything touches the filesystem.
        jobs = self.command_builder.build_all(
            pairs,
            language_code=language_code,
            language_name=language_name,
            output_directory=output_directory,
        )

        self.output_directory.ensure(output_directory)

        if not jobs:
            return []

        workers = max(1, min(self.max_workers, len(jobs)))
        logging.info("Dispatching %d job(s) on %d worker(s)", len(jobs), workers)

        fatal: Optional[BaseException] = None
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="mux") as executor:
            futures: List[Future] = [executor.submit(self._run_job, job) for job in jobs]
            for fut in as_completed(futures):
                if fut.cancelled():
                    continue
                exc = fut.exception()
                if exc is None:
                    continue
                if fatal is None:
                    fatal = exc
                    cancelled = sum(1 for other in futures if other.cancel())
                    if cancelled:
                        logging.warning("Cancelled %d pending job(s) after: %s", cancelled, exc)
        # leaving the executor block waited for every started job

        if fatal is not None:
            raise fatal

        return [fut.result() for fut in futures]

    def _run_step(self, job: Job, command: Tuple[str, ...]) -> ProcessOutcome:
        logging.debug("Running: %s", shlex.join(command))
        try:
            outcome = self.runner.run(command)
        except (JobLaunchError, JobWaitError):
            job.transition(JobState.FAILED)
            raise
        if outcome.stdout:
            logging.debug("[%d] stdout: %s", job.index, outcome.stdout.strip())
        if outcome.stderr:
            logging.debug("[%d] stderr: %s", job.index, outcome.stderr.strip())
        return outcome

    def _run_job(self, job: Job) -> JobResult:
        job.transition(JobState.RUNNING)
        start = time.monotonic()

        step = "mux"
        outcome: Optional[ProcessOutcome] = None
        if job.sync_command:
            step = "sync"
            logging.info("[%d] Syncing %s to %s", job.index, job.pair.secondary.name, job.pair.primary.name)
            outcome = self._run_step(job, job.sync_command)

        if outcome is None or outcome.returncode == 0:
            step = "mux"
            logging.info("[%d] Muxing %s + %s", job.index, job.pair.primary.name, job.pair.secondary.name)
            outcome = self._run_step(job, job.command)
        duration = time.monotonic() - start

        if outcome.returncode == 0:
            job.transition(JobState.SUCCEEDED)
            logging.info("[%d] Wrote %s (%.1fs)", job.index, job.output_path, duration)
            error = ""
            failed_step = ""
        else:
            job.transition(JobState.FAILED)
            failed_command = job.sync_command if step == "sync" else job.command
            logging.warning("[%d] %s failed (%d) for %s",
                            job.index, failed_command[0], outcome.returncode, job.pair.primary.name)
            error = (outcome.stderr or outcome.stdout or "").strip()[-STDERR_TAIL_CHARS:]
            failed_step = step

        return JobResult(
            index=job.index,
            pair=job.pair,
            command=job.command,
            state=job.state,
            returncode=outcome.returncode,
            error=error,
            duration=duration,
            failed_step=failed_step,
        )
