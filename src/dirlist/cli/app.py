"""CLI application entry point for dirlist.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dirlist.exceptions.DirlistError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering a diagnostic on stderr via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — parsing, building and rendering are
  delegated to the core layer, OS access to the infrastructure layer.
* The listing is written to stdout verbatim and only after it has been
  rendered in full, so a failed run leaves stdout empty.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dirlist.cli import exit_codes
from dirlist.cli.console import console
from dirlist.exceptions import DirlistError


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------

def _run_listing(argv: Sequence[str]) -> str:
    """Parse *argv*, build the entry set, and return the rendered text."""
    from dirlist.core.config import parse_config
    from dirlist.core.listing_service import ListingService
    from dirlist.core.render import render_listing
    from dirlist.infra.os_directory_reader import OsDirectoryReader
    from dirlist.infra.posix_identity import PosixIdentityResolver

    config = parse_config(argv)
    service = ListingService(OsDirectoryReader(), PosixIdentityResolver())
    entry_set = service.build(config)
    return render_listing(entry_set, config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the dirlist CLI.

    Parameters
    ----------
    argv:
        Full argument vector, program name first.  When ``None``
        (default), ``sys.argv`` is used.  Accepting *argv* enables
        deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    DirlistError
        Propagated unchanged; :func:`cli` turns it into a diagnostic.
    """
    if argv is None:
        argv = sys.argv

    output = _run_listing(argv)
    sys.stdout.write(output)
    sys.stdout.flush()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DirlistError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.for_exception(exc))
    except KeyboardInterrupt as exc:
        console.print("[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.for_exception(exc))
    except Exception as exc:  # noqa: BLE001
        console.error(
            f"unexpected {type(exc).__name__}: {exc}",
            "please report this issue",
        )
        sys.exit(exit_codes.for_exception(exc))
