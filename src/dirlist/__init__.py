"""dirlist — list the immediate children of a directory.

Short name-only output or a tab-separated long format, built on a
strict cli / core / infra layering.
"""

from dirlist.version import __version__

__all__: list[str] = ["__version__"]
