"""Error kinds carried inside ``Ng`` results.

These are exceptions so they keep a message and a traceback-friendly shape,
but the store hands them back as values instead of raising them.
"""

from __future__ import annotations

from typing import Optional


class EnvError(Exception):
    """Base class for every error reported by the store."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class VersionError(EnvError):
    """The running interpreter is older than the supported floor."""

    def __init__(self, runtime: str, required: str, current: str) -> None:
        self.runtime = runtime
        self.required = required
        self.current = current
        super().__init__(
            f"{runtime} version {required} or higher is required. Current version: {current}"
        )


class GenericError(EnvError):
    """Wraps an unexpected failure raised by a host environment primitive."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "GenericError":
        return cls(str(exc) or exc.__class__.__name__, cause=exc)
