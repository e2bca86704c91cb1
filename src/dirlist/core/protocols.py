"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on ``os``, ``pwd``
or ``grp`` directly — so the listing pipeline is testable without a
real filesystem or identity database.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from dirlist.core.models import RawEntry


class DirectoryReader(Protocol):
    """Contract for directory enumeration backends."""

    def read_entries(self, path: str) -> Iterable[RawEntry]:
        """Open *path* and return its immediate children.

        Order is whatever the backend supplies; the core sorts.

        Raises
        ------
        DirectoryUnavailableError
            When *path* is missing, not a directory, or unreadable.
            Must be raised by this call itself, not on first iteration.
        MetadataUnavailableError
            When a child's metadata cannot be read during iteration.
        """
        ...  # pragma: no cover


class IdentityResolver(Protocol):
    """Contract for numeric uid/gid → display-name lookups."""

    def resolve_user(self, uid: int) -> str | None:
        """Return the user name for *uid*, or ``None`` when unknown."""
        ...  # pragma: no cover

    def resolve_group(self, gid: int) -> str | None:
        """Return the group name for *gid*, or ``None`` when unknown."""
        ...  # pragma: no cover
