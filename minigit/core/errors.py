"""MiniGit exception hierarchy.

Every failure raised by the engine is a ``MiniGitError`` carrying an
``ErrorKind``, so callers can either catch a specific subclass or branch on
``error.kind``.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Kinds of domain errors."""

    NOT_INITIALIZED = 'not_initialized'
    NOT_FOUND = 'not_found'
    ALREADY_EXISTS = 'already_exists'
    CORRUPT_INDEX = 'corrupt_index'
    CORRUPT_OBJECT = 'corrupt_object'
    INVALID_OPERATION = 'invalid_operation'
    UNSUPPORTED = 'unsupported'
    IO_FAILURE = 'io_failure'


class MiniGitError(Exception):
    """Base exception for all MiniGit errors."""

    kind: ErrorKind = ErrorKind.INVALID_OPERATION

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class NotInitializedError(MiniGitError):
    """Operation attempted outside an initialized repository."""

    kind = ErrorKind.NOT_INITIALIZED


class NotFoundError(MiniGitError):
    """Missing branch, commit, object or tracked path."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(MiniGitError):
    """Duplicate branch or repository."""

    kind = ErrorKind.ALREADY_EXISTS


class CorruptIndexError(MiniGitError):
    """Malformed INDEX record."""

    kind = ErrorKind.CORRUPT_INDEX


class CorruptObjectError(MiniGitError):
    """Malformed tree or commit object."""

    kind = ErrorKind.CORRUPT_OBJECT


class InvalidOperationError(MiniGitError):
    """Operation not allowed in the current state or with these arguments."""

    kind = ErrorKind.INVALID_OPERATION


class UnsupportedError(MiniGitError):
    """Operation that is not implemented."""

    kind = ErrorKind.UNSUPPORTED


class IOFailureError(MiniGitError):
    """Wrapped filesystem error."""

    kind = ErrorKind.IO_FAILURE

    @classmethod
    def wrap(cls, exc: OSError) -> 'IOFailureError':
        """Build an IOFailureError from an OSError."""
        path = getattr(exc, 'filename', None)
        details = {'path': str(path)} if path else None
        return cls(exc.strerror or str(exc), details)
