"""Exception hierarchy for the virtual filesystem."""

from typing import Optional


class VFSError(Exception):
    """Base error for all virtual filesystem operations."""

    pass


class InvalidPathError(VFSError):
    """Raised when a path argument is empty, malformed, or the wrong kind."""

    pass


class BadFilePrefixError(VFSError):
    """Raised when a listing prefix contains a path separator."""

    pass


class NotFoundError(VFSError):
    """Resource does not exist on the backend."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class BackendError(VFSError):
    """Raised when the underlying storage medium fails.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, op: str, path: str, reason: object = None):
        message = f"{op} failed for {path}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.op = op
        self.path = path


class UnknownSchemeError(VFSError):
    """Raised when no file system is registered for a scheme."""

    def __init__(self, scheme: str):
        super().__init__(f"No file system registered for scheme: {scheme!r}")
        self.scheme = scheme
