#!/usr/bin/env python3

"""Error taxonomy and process exit codes for genpair."""

from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    FAILURE_PARSE = 1
    FAILURE_CREATE_FILE = 2
    FAILURE_FILE_EXISTS = 3


class GenPairError(Exception):
    """Base class for all terminal errors of a genpair run."""

    exit_code: ExitCode = ExitCode.FAILURE_PARSE


class ParseError(GenPairError):
    """Malformed command-line input."""

    exit_code = ExitCode.FAILURE_PARSE


class TargetExistsError(GenPairError):
    """One or both target files already exist."""

    exit_code = ExitCode.FAILURE_FILE_EXISTS

    def __init__(self, paths: list[Path]):
        self.paths = paths
        names = ", ".join(str(p) for p in paths)
        super().__init__(f"one of the files exists: {names}")


class FileCreateError(GenPairError):
    """A target file could not be opened or written."""

    exit_code = ExitCode.FAILURE_CREATE_FILE

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to create {path}: {reason}")
