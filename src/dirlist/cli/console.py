"""CLI console helpers with optional Rich support.

Diagnostics go to stderr only; the listing itself is never routed
through this module.  Rich is imported lazily so that a missing
installation degrades to plain ``print`` instead of breaking the tool.
"""

from __future__ import annotations

import sys
from typing import Any

from dirlist.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr.

	Emoji codes and automatic highlighting are off so that paths such as
	``:thumbs_up:`` are printed as written.
	"""
	console_class = _load_rich_console_class()
	return console_class(stderr=True, soft_wrap=True, emoji=False, highlight=False)


def format_diagnostic(message: str, hint: str | None = None) -> str:
	"""Join *message* and *hint* into the single plain diagnostic line."""
	if hint:
		return f"Error: {message} (hint: {hint})"
	return f"Error: {message}"


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render exactly one ``Error:`` line, with *hint* appended inline.

		*message* and *hint* are literal text: square brackets are
		escaped and emoji codes are left alone.
		"""
		try:
			rich_console = get_rich_console()
			from rich.markup import escape
		except (EnvironmentError, ModuleNotFoundError):
			print(format_diagnostic(message, hint), file=sys.stderr)
			return
		line = f"[bold red]Error:[/bold red] {escape(message)}"
		if hint:
			line += f" [yellow](hint: {escape(hint)})[/yellow]"
		rich_console.print(line)


console = _ConsoleProxy()
