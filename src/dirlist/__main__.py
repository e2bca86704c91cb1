"""Allow ``python -m dirlist`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m dirlist`` behaves identically to the ``dirlist`` console
script.
"""

from __future__ import annotations

from dirlist.cli.app import cli

if __name__ == "__main__":
    cli()
