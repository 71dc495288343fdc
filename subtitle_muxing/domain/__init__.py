"""Domain layer: value objects and domain services for subtitle muxing."""

from .languages import BUILTIN_LANGUAGES, LanguageCatalog
from .model import (
    BatchResult,
    BatchStatus,
    FileEntry,
    FileSet,
    Job,
    JobResult,
    JobState,
    Pair,
    ProcessOutcome,
)
from .services import CommandBuilder, OutcomeAggregator, PairingService

__all__ = [
    "BUILTIN_LANGUAGES",
    "BatchResult",
    "BatchStatus",
    "CommandBuilder",
    "FileEntry",
    "FileSet",
    "Job",
    "JobResult",
    "JobState",
    "LanguageCatalog",
    "OutcomeAggregator",
    "Pair",
    "PairingService",
    "ProcessOutcome",
]
