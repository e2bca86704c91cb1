"""Custom exception hierarchy for dirlist.

All exceptions that cross layer boundaries must inherit from
:class:`DirlistError`.  Raw ``OSError`` / ``KeyError`` instances raised
by the operating system must NEVER propagate beyond the infrastructure
layer — they are caught there and re-raised as a typed subclass
defined here.

Hierarchy
---------
DirlistError
├── DirectoryUnavailableError
├── MetadataUnavailableError
├── IdentityResolutionError
├── InvalidFilenameError
└── EnvironmentError
"""

from __future__ import annotations


class DirlistError(Exception):
    """Base exception for all dirlist errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a single clean
    diagnostic line without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Directory access ------------------------------------------------------

class DirectoryUnavailableError(DirlistError):
    """Raised when the target path cannot be opened as a directory."""


# --- Per-entry resolution --------------------------------------------------

class MetadataUnavailableError(DirlistError):
    """Raised when mode, size or timestamp of an entry cannot be read."""


class IdentityResolutionError(DirlistError):
    """Raised when a numeric uid or gid has no resolvable name."""


class InvalidFilenameError(DirlistError):
    """Raised when an entry name is not valid UTF-8 text."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(DirlistError):
    """Raised when a required platform facility is not available."""


def describe_os_error(exc: OSError) -> str:
    """Return the human-readable part of *exc*.

    Prefers ``strerror`` (``"No such file or directory"``) and falls
    back to ``str(exc)`` for errors constructed without an errno.
    """
    return exc.strerror or str(exc)
