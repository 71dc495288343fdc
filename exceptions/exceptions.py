from enum import IntEnum


class ExitCode(IntEnum):
    OK = 0
    LANGUAGE_UNSUPPORTED = 1
    NOT_A_DIRECTORY = 2
    NO_MATCHING_FILES = 3
    COUNT_MISMATCH = 4
    RESPONSE_UNREADABLE = 5
    USER_CANCELLED = 6
    OUTPUT_MKDIR_FAILED = 7
    COMMAND_TOO_LONG = 8
    ARG_COUNT = 9
    JOB_LAUNCH_FAILED = 10
    JOB_WAIT_FAILED = 11
    JOBS_FAILED = 12
    STEP_FAILED = 13


class StepPreconditionError(Exception):
    exit_code: ExitCode = ExitCode.STEP_FAILED

    def __init__(self, code: str, message: str, context: str = ""):
        super().__init__(message)
        self.code = code
        self.context = context


class BatchAbortError(StepPreconditionError):
    """Fatal error that stops the batch; ``code`` defaults to the exit code name."""

    def __init__(self, message: str, context: str = ""):
        super().__init__(self.exit_code.name, message, context)


class UnsupportedLanguageError(BatchAbortError):
    exit_code = ExitCode.LANGUAGE_UNSUPPORTED


class DirectoryError(BatchAbortError):
    exit_code = ExitCode.NOT_A_DIRECTORY


class EmptySetError(BatchAbortError):
    exit_code = ExitCode.NO_MATCHING_FILES


class CountMismatchError(BatchAbortError):
    exit_code = ExitCode.COUNT_MISMATCH


class ConfirmationReadError(BatchAbortError):
    exit_code = ExitCode.RESPONSE_UNREADABLE


class UserCancelled(BatchAbortError):
    exit_code = ExitCode.USER_CANCELLED


class OutputDirectoryError(BatchAbortError):
    exit_code = ExitCode.OUTPUT_MKDIR_FAILED


class CommandBuildError(BatchAbortError):
    exit_code = ExitCode.COMMAND_TOO_LONG


class ArgumentCountError(BatchAbortError):
    exit_code = ExitCode.ARG_COUNT


class JobLaunchError(BatchAbortError):
    exit_code = ExitCode.JOB_LAUNCH_FAILED


class JobWaitError(BatchAbortError):
    exit_code = ExitCode.JOB_WAIT_FAILED
