"""Pure entry ordering and visibility filtering.

Pipeline order:

1. **Sort** — ascending ordinal filename comparison (build phase).
2. **Filter** — drop hidden entries unless ``-a`` was given (render phase).
"""

from __future__ import annotations

from collections.abc import Iterable

from dirlist.core.models import Config, Entry, Visibility


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Sort by filename using plain codepoint comparison.

    No locale collation and no secondary key.
    """
    return sorted(entries, key=lambda entry: entry.filename)


def filter_visible(entries: Iterable[Entry]) -> list[Entry]:
    """Return only entries whose visibility is ``NORMAL``."""
    return [entry for entry in entries if entry.visibility is Visibility.NORMAL]


def select_entries(entries: Iterable[Entry], config: Config) -> list[Entry]:
    """Apply the option-driven filter for *config*."""
    if config.show_all:
        return list(entries)
    return filter_visible(entries)
