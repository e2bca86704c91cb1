"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or identity-database access.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from dirlist.core.config import parse_config
from dirlist.core.listing_service import ListingService
from dirlist.core.models import Config, Entry, EntrySet, Option, RawEntry, Visibility
from dirlist.core.protocols import DirectoryReader, IdentityResolver
from dirlist.core.render import render_listing

__all__: list[str] = [
    "Config",
    "DirectoryReader",
    "Entry",
    "EntrySet",
    "IdentityResolver",
    "ListingService",
    "Option",
    "RawEntry",
    "Visibility",
    "parse_config",
    "render_listing",
]
