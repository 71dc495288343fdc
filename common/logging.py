import logging
from contextlib import contextmanager
from typing import Iterator, Optional


class CountingHandler(logging.Handler):
    """Counts WARNING and ERROR records emitted while attached."""

    def __init__(self, level: int = logging.WARNING):
        super().__init__(level)
        self.warnings = 0
        self.errors = 0

    def emit(self, record):
        if record.levelno >= logging.ERROR:
            self.errors += 1
        elif record.levelno >= logging.WARNING:
            self.warnings += 1

    def summary(self) -> str:
        return f"Warnings: {self.warnings}, Errors: {self.errors}"


@contextmanager
def counting(logger: Optional[logging.Logger] = None) -> Iterator[CountingHandler]:
    target = logger or logging.getLogger()
    counter = CountingHandler()
    target.addHandler(counter)
    try:
        yield counter
    finally:
        target.removeHandler(counter)
