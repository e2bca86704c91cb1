"""Process exit statuses for ``dirlist``.

``SUCCESS`` means the whole listing reached stdout.  Any other status
means stdout was left empty and one diagnostic line went to stderr.
"""

from __future__ import annotations

from dirlist.exceptions import DirlistError

SUCCESS: int = 0

GENERAL_ERROR: int = 1
"""Directory, metadata, identity or filename resolution failed."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the :class:`DirlistError` hierarchy."""

KEYBOARD_INTERRUPT: int = 128 + 2
"""Interrupted by SIGINT (shell convention: 128 + signal number)."""


def for_exception(exc: BaseException) -> int:
    """Map an exception caught at the CLI boundary to an exit status."""
    if isinstance(exc, DirlistError):
        return GENERAL_ERROR
    if isinstance(exc, KeyboardInterrupt):
        return KEYBOARD_INTERRUPT
    return UNEXPECTED_ERROR
