"""Infrastructure layer — operating-system integration.

This layer wraps all interaction with directory enumeration, ``stat``
and the user/group databases.  Every raw ``OSError`` must be caught
here and re-raised as a :class:`~dirlist.exceptions.DirlistError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from dirlist.infra.os_directory_reader import OsDirectoryReader
from dirlist.infra.posix_identity import PosixIdentityResolver

__all__: list[str] = [
    "OsDirectoryReader",
    "PosixIdentityResolver",
]
