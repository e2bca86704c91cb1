"""Shared pytest fixtures and configuration for the dirlist test suite.

Guidelines
----------
* Core tests must be pure — fake readers and resolvers, no filesystem.
* Infra and CLI tests use real temporary directories (``tmp_path``).
* Tests must not depend on the contents of the user's account databases
  beyond the current process's own uid/gid.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from dirlist.core.models import RawEntry
from dirlist.exceptions import DirectoryUnavailableError

JAN_05_14_32_UTC: float = 1_704_465_120.0
"""POSIX timestamp of 2024-01-05 14:32:00 UTC."""


# ---------------------------------------------------------------------------
# Fakes for the core protocols
# ---------------------------------------------------------------------------

def make_raw(name: bytes | str, **overrides: object) -> RawEntry:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "name": name.encode("utf-8") if isinstance(name, str) else name,
        "mode": 0o100644,
        "uid": 1000,
        "gid": 1000,
        "size": 42,
        "mtime": JAN_05_14_32_UTC,
    }
    defaults.update(overrides)
    return RawEntry(**defaults)  # type: ignore[arg-type]


class FakeReader:
    """In-memory :class:`DirectoryReader` keyed by path."""

    def __init__(self, listings: dict[str, Iterable[RawEntry]]) -> None:
        self._listings = listings
        self.consumed: list[RawEntry] = []

    def read_entries(self, path: str) -> Iterator[RawEntry]:
        if path not in self._listings:
            raise DirectoryUnavailableError(
                f"cannot open directory '{path}': No such file or directory",
            )
        return self._iterate(self._listings[path])

    def _iterate(self, raws: Iterable[RawEntry]) -> Iterator[RawEntry]:
        for raw in raws:
            self.consumed.append(raw)
            yield raw


class FakeResolver:
    """In-memory :class:`IdentityResolver`."""

    def __init__(
        self,
        users: dict[int, str] | None = None,
        groups: dict[int, str] | None = None,
    ) -> None:
        self.users = users if users is not None else {1000: "alice"}
        self.groups = groups if groups is not None else {1000: "staff"}

    def resolve_user(self, uid: int) -> str | None:
        return self.users.get(uid)

    def resolve_group(self, gid: int) -> str | None:
        return self.groups.get(gid)


@pytest.fixture()
def resolver() -> FakeResolver:
    return FakeResolver()


# ---------------------------------------------------------------------------
# Real directories
# ---------------------------------------------------------------------------

@pytest.fixture()
def named_identity() -> tuple[str, str]:
    """Return the current user and group names, skipping when unnamed.

    Containers frequently run with a uid that has no ``passwd`` entry.
    """
    pwd = pytest.importorskip("pwd")
    grp = pytest.importorskip("grp")
    try:
        user = pwd.getpwuid(os.getuid()).pw_name
        group = grp.getgrgid(os.getgid()).gr_name
    except KeyError:
        pytest.skip("current uid/gid has no name in the account databases")
    return user, group


@pytest.fixture()
def test_dir(tmp_path: Path) -> Path:
    """A directory holding ``test_file.txt`` and ``.hidden_test_file``."""
    directory = tmp_path / "test_dir"
    directory.mkdir()
    (directory / "test_file.txt").write_text("hello\n")
    (directory / ".hidden_test_file").write_text("")
    for child in directory.iterdir():
        os.utime(child, (JAN_05_14_32_UTC, JAN_05_14_32_UTC))
    return directory
