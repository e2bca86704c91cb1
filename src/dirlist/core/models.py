"""Domain models for dirlist.

All models are **frozen** dataclasses or enums — immutable value
objects with no behaviour beyond data access.  They carry zero I/O and
no back-references to the directory handle they were read from.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

DEFAULT_PATH: str = "."
"""Directory listed when no path argument is given."""


class Option(enum.Enum):
    """A recognized command-line flag."""

    SHOW_ALL = "a"
    LONG_FORMAT = "l"


@dataclass(frozen=True, slots=True)
class Config:
    """Parsed invocation: the selected options and the target path."""

    options: frozenset[Option]
    """Recognized flags.  Only ever membership-tested."""

    path: str = DEFAULT_PATH
    """Directory to list."""

    @property
    def show_all(self) -> bool:
        return Option.SHOW_ALL in self.options

    @property
    def long_format(self) -> bool:
        return Option.LONG_FORMAT in self.options


# ---------------------------------------------------------------------------
# Raw directory child (as reported by the reader)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RawEntry:
    """Unresolved metadata for one directory child.

    Produced by a :class:`~dirlist.core.protocols.DirectoryReader`;
    identity lookup, timestamp formatting and name decoding happen in
    the core.
    """

    name: bytes
    """Entry name exactly as stored on disk."""

    mode: int
    """Full ``st_mode`` (file type and permission bits)."""

    uid: int
    gid: int

    size: int
    """Byte length."""

    mtime: float
    """Last modification time in POSIX seconds."""


# ---------------------------------------------------------------------------
# Resolved entry
# ---------------------------------------------------------------------------

class Visibility(enum.Enum):
    """Whether an entry is shown without ``-a``."""

    HIDDEN = "hidden"
    NORMAL = "normal"

    @classmethod
    def of(cls, filename: str) -> Visibility:
        """Classify *filename* by its leading character."""
        return cls.HIDDEN if filename.startswith(".") else cls.NORMAL


@dataclass(frozen=True, slots=True)
class Entry:
    """One fully resolved directory child."""

    permissions: int
    owner: str
    group: str
    size: int

    modified_at: str
    """Timestamp formatted as ``"Mon DD HH:MM"``."""

    filename: str
    visibility: Visibility


# ---------------------------------------------------------------------------
# Typed collection wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EntrySet:
    """Immutable, ordered collection of :class:`Entry` values.

    Produced by the build phase already sorted; the render phase only
    filters and formats it.
    """

    entries: tuple[Entry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)
