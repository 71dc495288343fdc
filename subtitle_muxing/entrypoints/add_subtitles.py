"""Entrypoint: add_subtitles function for orchestrators/CLIs."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from common.config import Config
from subtitle_muxing.application.dispatcher import JobDispatcher
from subtitle_muxing.application.use_case import AddSubtitlesRequest, AddSubtitlesUseCase
from subtitle_muxing.domain.languages import LanguageCatalog
from subtitle_muxing.domain.model import BatchResult
from subtitle_muxing.domain.services import CommandBuilder
from subtitle_muxing.infrastructure.console import AutoConfirmation, ConsoleConfirmationPrompt
from subtitle_muxing.infrastructure.filesystem import (
    FilesystemFileSetSource,
    FilesystemOutputDirectory,
)
from subtitle_muxing.infrastructure.process import SubprocessRunner
from subtitle_muxing.ports import ConfirmationPrompt, ProcessRunner


def add_subtitles(
    *,
    directory: Path,
    primary_token: str,
    secondary_token: str,
    language_code: str,
    cfg: Optional[Config] = None,
    assume_yes: bool = False,
    confirmation: Optional[ConfirmationPrompt] = None,
    runner: Optional[ProcessRunner] = None,
) -> BatchResult:
    """Mux every subtitle file in ``directory`` into its paired media file.

    This is the composition root for the subtitle muxing context. It wires
    the filesystem, console and subprocess adapters from ``cfg`` and runs the
    use case.

    Args:
        directory: Flat directory holding both media and subtitle files.
        primary_token: Substring identifying media files (e.g. "mkv").
        secondary_token: Substring identifying subtitle files (e.g. "srt").
        language_code: ISO 639-2 code of the subtitle track.
        cfg: Configuration; defaults are used if omitted.
        assume_yes: Accept the pairs without prompting.
        confirmation: Custom confirmation gate (overrides ``assume_yes``).
        runner: Custom process runner (defaults to subprocess).

    Returns:
        BatchResult with one outcome per pair, in pair order.
    """
    cfg = cfg or Config()

    if confirmation is None:
        confirmation = (
            AutoConfirmation()
            if assume_yes
            else ConsoleConfirmationPrompt(max_response_length=cfg.muxing.max_response_length)
        )

    dispatcher = JobDispatcher(
        runner=runner or SubprocessRunner(),
        output_directory=FilesystemOutputDirectory(),
        command_builder=CommandBuilder(
            tool=cfg.muxing.tool,
            max_length=cfg.muxing.max_command_length,
            sync_tool=cfg.muxing.sync_tool if cfg.muxing.sync else None,
        ),
        max_workers=cfg.worker_count,
    )

    use_case = AddSubtitlesUseCase(
        file_source=FilesystemFileSetSource(),
        confirmation=confirmation,
        dispatcher=dispatcher,
        languages=LanguageCatalog.with_overrides(cfg.languages),
    )

    request = AddSubtitlesRequest(
        directory=Path(directory),
        primary_token=primary_token,
        secondary_token=secondary_token,
        language_code=language_code,
        output_dir_name=cfg.paths.output_dir_name,
    )
    return use_case.run(request)
