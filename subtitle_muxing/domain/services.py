"""Domain services for subtitle muxing: pairing, command building, aggregation."""
from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from exceptions.exceptions import CommandBuildError, CountMismatchError, EmptySetError

from .model import BatchResult, BatchStatus, FileSet, Job, JobResult, Pair


# ---------------------------------------------------------------------------
# Pairing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PairingService:
    """Pair two file sets by position after sorting each one by name.

    Correspondence is positional only; the operator confirms it afterwards.
    """

    def validate(self, primary: FileSet, secondary: FileSet) -> List[Pair]:
        if len(primary) == 0 or len(secondary) == 0:
            raise EmptySetError(
                f"No files matched: {len(primary)} for {primary.token!r}, "
                f"{len(secondary)} for {secondary.token!r}",
                context="validate",
            )
        if len(primary) != len(secondary):
            raise CountMismatchError(
                f"Not the same amount of files: {len(primary)} {primary.token!r} "
                f"vs {len(secondary)} {secondary.token!r}",
                context="validate",
            )
        return [
            Pair(primary=p, secondary=s)
            for p, s in zip(primary.sorted(), secondary.sorted())
        ]


# ---------------------------------------------------------------------------
# Command building
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CommandBuilder:
    """Render the muxing tool invocation for a pair.

    The subtitle file comes last so the language and track-name options apply to it.
    With ``sync_tool`` set, each job also gets a subtitle sync command
    (``<sync_tool> <video> -i <sub> -o <sub>``) that rewrites the subtitle in
    place before muxing.
    """

    tool: str = "mkvmerge"
    max_length: int = 4096
    sync_tool: Optional[str] = None

    def _check_length(self, command: Tuple[str, ...], pair: Pair) -> None:
        rendered = shlex.join(command)
        if len(rendered) > self.max_length:
            raise CommandBuildError(
                f"Command for {pair.primary.name} is {len(rendered)} characters "
                f"(limit {self.max_length})",
                context="build",
            )

    def build_sync(self, pair: Pair) -> Optional[Tuple[str, ...]]:
        if not self.sync_tool:
            return None
        subtitle = str(pair.secondary.path)
        command = (self.sync_tool, str(pair.primary.path), "-i", subtitle, "-o", subtitle)
        self._check_length(command, pair)
        return command

    def build(
        self,
        *,
        index: int,
        pair: Pair,
        language_code: str,
        language_name: str,
        output_directory: Path,
    ) -> Job:
        output_path = output_directory / pair.primary.name
        command = (
            self.tool,
            "-o", str(output_path),
            str(pair.primary.path),
            "--language", f"0:{language_code}",
            "--track-name", f"0:{language_name}",
            str(pair.secondary.path),
        )
        self._check_length(command, pair)
        return Job(index=index, pair=pair, command=command, output_path=output_path,
                   sync_command=self.build_sync(pair))

    def build_all(
        self,
        pairs: Sequence[Pair],
        *,
        language_code: str,
        language_name: str,
        output_directory: Path,
    ) -> List[Job]:
        return [
            self.build(
                index=i,
                pair=pair,
                language_code=language_code,
                language_name=language_name,
                output_directory=output_directory,
            )
            for i, pair in enumerate(pairs)
        ]


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OutcomeAggregator:
    def aggregate(self, results: Sequence[JobResult]) -> BatchResult:
        ordered = tuple(sorted(results, key=lambda r: r.index))
        indices = [r.index for r in ordered]
        if indices != list(range(len(ordered))):
            raise ValueError(f"Expected exactly one result per job, got indices {indices}")
        status = (
            BatchStatus.ALL_SUCCEEDED
            if all(r.succeeded for r in ordered)
            else BatchStatus.PARTIAL_FAILURE
        )
        return BatchResult(status=status, outcomes=ordered)
