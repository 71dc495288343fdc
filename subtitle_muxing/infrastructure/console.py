from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from exceptions.exceptions import ConfirmationReadError
from subtitle_muxing.domain.model import Pair


def format_pairs(pairs: Sequence[Pair]) -> str:
    return "\n".join(f"{p.primary.name}\t{p.secondary.name}" for p in pairs)


@dataclass
class ConsoleConfirmationPrompt:
    """Console adapter: list the pairs and read one Y/n answer.

    Any answer containing a lowercase ``n`` rejects; everything else accepts,
    including ``No`` and ``NO``, which have no lowercase ``n``.
    """

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    max_response_length: int = 32

    def confirm(self, pairs: Sequence[Pair]) -> bool:
        self.stdout.write("Joining sub files to these video files.\n")
        self.stdout.write(format_pairs(pairs) + "\n")
        self.stdout.write("Are these pairs correct? (Y/n): ")
        self.stdout.flush()

        line = self.stdin.readline(self.max_response_length + 2)
        if not line:
            raise ConfirmationReadError("No response was read", context="confirm")
        answer = line.rstrip("\r\n")
        if len(answer) > self.max_response_length:
            raise ConfirmationReadError(
                f"Response was too long (limit {self.max_response_length} characters)",
                context="confirm",
            )
        return "n" not in answer


@dataclass(frozen=True)
class AutoConfirmation:
    """Non-interactive gate used with --yes: logs the pairs and accepts."""

    def confirm(self, pairs: Sequence[Pair]) -> bool:
        logging.info("Accepting %d pair(s) without prompting:\n%s", len(pairs), format_pairs(pairs))
        return True
