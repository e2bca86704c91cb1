"""Text rendering of a resolved entry set.

Every function returns the complete stdout payload as a string; writing
it is the CLI layer's job.
"""

from __future__ import annotations

from collections.abc import Sequence

from dirlist.core.models import Config, Entry, EntrySet
from dirlist.core.ordering import select_entries


def render_short(entries: Sequence[Entry]) -> str:
    """Filenames on one line, each followed by a space, then a newline.

    An empty sequence still yields a bare ``"\\n"``.
    """
    return "".join(f"{entry.filename} " for entry in entries) + "\n"


def format_long_line(entry: Entry) -> str:
    """Tab-separated ``permissions owner group size modified_at filename``."""
    fields = (
        str(entry.permissions),
        entry.owner,
        entry.group,
        str(entry.size),
        entry.modified_at,
        entry.filename,
    )
    return "\t".join(fields)


def render_long(entries: Sequence[Entry]) -> str:
    """One newline-terminated line per entry; empty input yields ``""``."""
    return "".join(f"{format_long_line(entry)}\n" for entry in entries)


def render_listing(entry_set: EntrySet, config: Config) -> str:
    """Filter *entry_set* according to *config* and render it."""
    selected = select_entries(entry_set, config)
    if config.long_format:
        return render_long(selected)
    return render_short(selected)
