"""Application layer: use-cases for the subtitle_muxing bounded context."""

from .dispatcher import JobDispatcher
from .use_case import AddSubtitlesRequest, AddSubtitlesUseCase

__all__ = ["AddSubtitlesRequest", "AddSubtitlesUseCase", "JobDispatcher"]
