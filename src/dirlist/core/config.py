"""Argument-vector parsing into a :class:`~dirlist.core.models.Config`.

Pure and total: no I/O, never raises, and never reads ``sys.argv`` —
the caller passes the vector in explicitly.
"""

from __future__ import annotations

from collections.abc import Sequence

from dirlist.core.models import DEFAULT_PATH, Config, Option

_FLAG_CHARS: dict[str, Option] = {option.value: option for option in Option}


def _is_flag(token: str) -> bool:
    return token.startswith("-")


def parse_options(args: Sequence[str]) -> frozenset[Option]:
    """Collect recognized flag characters from every ``-`` token.

    Each character after the leading ``-`` is scanned on its own, so
    ``-la``, ``-al`` and ``-l -a`` are equivalent.  Unknown characters
    are ignored.
    """
    found: set[Option] = set()
    for token in args:
        if not _is_flag(token):
            continue
        for char in token[1:]:
            option = _FLAG_CHARS.get(char)
            if option is not None:
                found.add(option)
    return frozenset(found)


def parse_path(args: Sequence[str]) -> str:
    """Return the first non-flag token, or :data:`DEFAULT_PATH`."""
    return next((token for token in args if not _is_flag(token)), DEFAULT_PATH)


def parse_config(args: Sequence[str]) -> Config:
    """Parse a full argument vector (program name at index 0).

    Parameters
    ----------
    args:
        The process argument vector.  The first element is always
        discarded; an empty vector yields the defaults.
    """
    tokens = list(args[1:])
    return Config(options=parse_options(tokens), path=parse_path(tokens))
