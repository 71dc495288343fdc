from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from exceptions.exceptions import UnsupportedLanguageError, UserCancelled
from subtitle_muxing.application.dispatcher import JobDispatcher
from subtitle_muxing.domain.languages import LanguageCatalog
from subtitle_muxing.domain.model import BatchResult, Pair
from subtitle_muxing.domain.services import OutcomeAggregator, PairingService
from subtitle_muxing.ports import ConfirmationPrompt, FileSetSource


@dataclass(frozen=True)
class AddSubtitlesRequest:
    directory: Path
    primary_token: str
    secondary_token: str
    language_code: str
    output_dir_name: str = "output"

    @property
    def output_directory(self) -> Path:
        return self.directory / self.output_dir_name


@dataclass(frozen=True)
class AddSubtitlesUseCase:
    """Use case: pair media with subtitle files and mux each pair with the tool.

    Order of steps:
    - resolve the language name (no filesystem access before this succeeds)
    - scan the directory and pair both file sets by sorted position
    - ask for confirmation (nothing is created or launched before acceptance)
    - dispatch one job per pair and aggregate the outcomes in pair order
    """

    file_source: FileSetSource
    confirmation: ConfirmationPrompt
    dispatcher: JobDispatcher
    languages: LanguageCatalog = field(default_factory=LanguageCatalog)
    pairing_service: PairingService = field(default_factory=PairingService)
    aggregator: OutcomeAggregator = field(default_factory=OutcomeAggregator)

    def plan(self, request: AddSubtitlesRequest) -> List[Pair]:
        primary, secondary = self.file_source.scan(
            directory=request.directory,
            primary_token=request.primary_token,
            secondary_token=request.secondary_token,
        )
        logging.info("Matched %d %r file(s) and %d %r file(s) in %s",
                     len(primary), request.primary_token,
                     len(secondary), request.secondary_token, request.directory)
        return self.pairing_service.validate(primary, secondary)

    def run(self, request: AddSubtitlesRequest) -> BatchResult:
        language_name = self.languages.resolve(request.language_code)
        if language_name is None:
            raise UnsupportedLanguageError(
                f"Language not supported: {request.language_code}",
                context="run",
            )

        pairs = self.plan(request)

        if not self.confirmation.confirm(pairs):
            raise UserCancelled("User cancelled.", context="confirm")

        results = self.dispatcher.dispatch(
            pairs, request.language_code, language_name, request.output_directory)
        return self.aggregator.aggregate(results)
