"""Central exception hierarchy and process exit codes."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    # 1 is left to unexpected crashes and 2 to Click usage errors
    OK = 0
    OPEN_FAILED = 3
    MULTIPLE_INPUTS = 4
    READ_ERROR = 5
    INTERNAL = 6


class FindccError(Exception):
    """Base exception for all failures"""

    exit_code: ExitCode = ExitCode.INTERNAL


class ConfigurationError(FindccError):
    """Raised for unusable settings, such as more than one input file"""

    exit_code = ExitCode.MULTIPLE_INPUTS


class InputOpenError(FindccError):
    """Raised when the named input file cannot be opened"""

    exit_code = ExitCode.OPEN_FAILED

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Unable to open {path}: {cause}")
        self.path = path
        self.cause = cause


class StreamReadError(FindccError):
    """Raised when reading the input stream fails before end-of-stream"""

    exit_code = ExitCode.READ_ERROR


class ScanInvariantError(FindccError):
    """Raised when the input source breaks the read contract"""

    exit_code = ExitCode.INTERNAL


__all__ = [
    "ExitCode",
    "FindccError",
    "ConfigurationError",
    "InputOpenError",
    "StreamReadError",
    "ScanInvariantError",
]
