"""``pwd``/``grp`` backed implementation of :class:`~dirlist.core.protocols.IdentityResolver`.

The POSIX account databases are imported lazily so that importing the
package never fails on platforms without them; constructing the
resolver there raises :class:`~dirlist.exceptions.EnvironmentError`.
"""

from __future__ import annotations

from types import ModuleType

from dirlist.exceptions import EnvironmentError


def _load_account_modules() -> tuple[ModuleType, ModuleType]:
    """Return the ``pwd`` and ``grp`` modules or raise ``EnvironmentError``."""
    try:
        import grp
        import pwd
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "user and group lookup requires a POSIX system (pwd/grp modules).",
        ) from exc
    return pwd, grp


class PosixIdentityResolver:
    """Concrete :class:`IdentityResolver` over the system account databases.

    Lookups are memoized per instance, including misses, since a
    directory's children usually share one owner and group.
    """

    def __init__(self) -> None:
        self._pwd, self._grp = _load_account_modules()
        self._users: dict[int, str | None] = {}
        self._groups: dict[int, str | None] = {}

    def resolve_user(self, uid: int) -> str | None:
        if uid not in self._users:
            try:
                self._users[uid] = self._pwd.getpwuid(uid).pw_name
            except KeyError:
                self._users[uid] = None
        return self._users[uid]

    def resolve_group(self, gid: int) -> str | None:
        if gid not in self._groups:
            try:
                self._groups[gid] = self._grp.getgrgid(gid).gr_name
            except KeyError:
                self._groups[gid] = None
        return self._groups[gid]
