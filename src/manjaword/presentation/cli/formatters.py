"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, JSON) out of the command module.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from manjaword.domain.models.grammar import GrammarResponse

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """Route ``logging`` output through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "ManjaWord") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    err_console.print(f"[bold red]{escape(message)}[/]")


def json_output(data: Any) -> None:
    """Print *data* as highlighted JSON."""
    console.print_json(json.dumps(data, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Grammar report
# ---------------------------------------------------------------------------


def grammar_table(text: str, response: GrammarResponse) -> None:
    """Print one row per grammar match, with the flagged text."""
    if not response.matches:
        success_panel("No issues found.", title="Grammar")
        return

    table = Table(title="Grammar check", show_header=True, border_style="blue")
    table.add_column("Offset", justify="right", width=7)
    table.add_column("Text", style="red")
    table.add_column("Message", style="cyan")
    table.add_column("Suggestions", style="green")

    for m in response.matches:
        table.add_row(
            str(m.offset),
            text[m.offset : m.offset + m.length],
            m.message,
            ", ".join(m.replacements[:5]),
        )

    console.print(table)
