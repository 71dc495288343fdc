"""Infrastructure layer: concrete IO implementations for subtitle muxing."""

from .console import AutoConfirmation, ConsoleConfirmationPrompt
from .filesystem import FilesystemFileSetSource, FilesystemOutputDirectory
from .process import SubprocessRunner

__all__ = [
    "AutoConfirmation",
    "ConsoleConfirmationPrompt",
    "FilesystemFileSetSource",
    "FilesystemOutputDirectory",
    "SubprocessRunner",
]
