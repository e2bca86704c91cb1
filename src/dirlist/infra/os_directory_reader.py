"""``os.scandir`` backed implementation of :class:`~dirlist.core.protocols.DirectoryReader`.

This module is the **only** place in the codebase that enumerates
directories or calls ``stat``.  Every ``OSError`` is caught here and
re-raised as a typed :class:`~dirlist.exceptions.DirlistError`
subclass — nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any

from dirlist.core.models import RawEntry
from dirlist.exceptions import (
    DirectoryUnavailableError,
    MetadataUnavailableError,
    describe_os_error,
)


class OsDirectoryReader:
    """Concrete :class:`DirectoryReader` backed by :func:`os.scandir`.

    Names are read as ``bytes`` so that undecodable entries reach the
    core intact, and metadata is taken without following symlinks.

    Usage::

        reader = OsDirectoryReader()
        for raw in reader.read_entries("."):
            ...
    """

    def read_entries(self, path: str) -> Iterator[RawEntry]:
        """Open *path* eagerly and return a lazy iterator over its children.

        Raises
        ------
        DirectoryUnavailableError
            When *path* cannot be opened for enumeration.  Raised from
            this call, before any entry is produced.
        """
        try:
            handle = os.scandir(os.fsencode(path))
        except OSError as exc:
            raise DirectoryUnavailableError(
                f"cannot open directory '{path}': {describe_os_error(exc)}",
                hint="check that the path exists and is a readable directory",
            ) from exc
        except ValueError as exc:
            # Embedded NUL: no such path can exist.
            raise DirectoryUnavailableError(
                f"cannot open directory {path!r}: {exc}",
            ) from exc
        return self._iterate(path, handle)

    @staticmethod
    def _iterate(path: str, handle: Any) -> Iterator[RawEntry]:
        # ``with`` releases the handle even when the consumer stops early.
        with handle:
            while True:
                try:
                    dir_entry = next(handle)
                except StopIteration:
                    return
                except OSError as exc:
                    raise MetadataUnavailableError(
                        f"cannot read directory '{path}': {describe_os_error(exc)}",
                    ) from exc
                yield _to_raw_entry(dir_entry)


def _to_raw_entry(dir_entry: os.DirEntry[bytes]) -> RawEntry:
    """Stat *dir_entry* (no symlink following) into a :class:`RawEntry`."""
    try:
        info = dir_entry.stat(follow_symlinks=False)
    except OSError as exc:
        shown = os.fsdecode(dir_entry.name)
        raise MetadataUnavailableError(
            f"cannot read metadata of '{shown}': {describe_os_error(exc)}",
        ) from exc
    return RawEntry(
        name=dir_entry.name,
        mode=info.st_mode,
        uid=info.st_uid,
        gid=info.st_gid,
        size=info.st_size,
        mtime=info.st_mtime,
    )
