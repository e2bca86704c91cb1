"""Core listing service — the build phase of a run.

Turns the raw children reported by a
:class:`~dirlist.core.protocols.DirectoryReader` into a sorted
:class:`~dirlist.core.models.EntrySet`, resolving owner and group names
through an injected :class:`~dirlist.core.protocols.IdentityResolver`.

Guarantees
----------
* No direct OS calls — all I/O goes through the injected collaborators.
* Fail fast: the first resolution failure aborts the whole build and no
  partial entry set is returned.
* Only :class:`~dirlist.exceptions.DirlistError` subclasses escape.
"""

from __future__ import annotations

from datetime import datetime, timezone

from dirlist.core.models import Config, Entry, EntrySet, RawEntry, Visibility
from dirlist.core.ordering import sort_entries
from dirlist.core.protocols import DirectoryReader, IdentityResolver
from dirlist.exceptions import (
    DirlistError,
    IdentityResolutionError,
    InvalidFilenameError,
    MetadataUnavailableError,
)

TIMESTAMP_FORMAT: str = "%b %d %H:%M"
"""``strftime`` pattern for :attr:`Entry.modified_at` (``"Jan 05 14:32"``)."""


def format_timestamp(mtime: float) -> str:
    """Format POSIX seconds *mtime* as a UTC ``"Mon DD HH:MM"`` string.

    Raises
    ------
    MetadataUnavailableError
        If *mtime* is outside the range the platform can represent.
    """
    try:
        moment = datetime.fromtimestamp(mtime, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise MetadataUnavailableError(
            f"modification time {mtime!r} cannot be represented",
        ) from exc
    return moment.strftime(TIMESTAMP_FORMAT)


def decode_filename(name: bytes) -> str:
    """Decode an on-disk entry name as strict UTF-8.

    Raises
    ------
    InvalidFilenameError
        If *name* is not valid UTF-8.
    """
    try:
        return name.decode("utf-8")
    except UnicodeDecodeError as exc:
        shown = name.decode("utf-8", errors="replace")
        raise InvalidFilenameError(
            f"filename does not contain valid unicode: {shown}",
        ) from exc


class ListingService:
    """Builds the entry set for a single run.

    Parameters
    ----------
    reader:
        Any object satisfying the :class:`DirectoryReader` protocol.
    resolver:
        Any object satisfying the :class:`IdentityResolver` protocol.
    """

    def __init__(self, reader: DirectoryReader, resolver: IdentityResolver) -> None:
        self._reader: DirectoryReader = reader
        self._resolver: IdentityResolver = resolver

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, config: Config) -> EntrySet:
        """Read ``config.path`` and return its children sorted by name.

        Raises
        ------
        DirectoryUnavailableError
            If the directory cannot be opened.
        MetadataUnavailableError
            If an entry's metadata cannot be read or represented.
        IdentityResolutionError
            If an owner or group id has no name.
        InvalidFilenameError
            If an entry name is not valid UTF-8.
        """
        try:
            resolved = [self._resolve(raw) for raw in self._reader.read_entries(config.path)]
        except DirlistError:
            raise
        except Exception as exc:
            raise MetadataUnavailableError(
                f"Unexpected error while reading {config.path}: {exc}",
            ) from exc
        return EntrySet(entries=tuple(sort_entries(resolved)))

    # ------------------------------------------------------------------
    # Per-entry resolution
    # ------------------------------------------------------------------

    def _resolve(self, raw: RawEntry) -> Entry:
        """Resolve one raw child, in field order, or raise."""
        owner = self._resolver.resolve_user(raw.uid)
        if owner is None:
            raise IdentityResolutionError(f"owner lookup failed for uid {raw.uid}")

        group = self._resolver.resolve_group(raw.gid)
        if group is None:
            raise IdentityResolutionError(f"group lookup failed for gid {raw.gid}")

        modified_at = format_timestamp(raw.mtime)
        filename = decode_filename(raw.name)

        return Entry(
            permissions=raw.mode,
            owner=owner,
            group=group,
            size=raw.size,
            modified_at=modified_at,
            filename=filename,
            visibility=Visibility.of(filename),
        )
