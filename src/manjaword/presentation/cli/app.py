"""Thin CLI wrapper: Typer commands that delegate to EditorCommands.

All backend logic is reached through the Container (bootstrap.py). Paths
given on the command line stand in for the editor's file dialogs.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.markup import escape

from manjaword.domain.models.enums import ExportFormat
from manjaword.presentation.cli.formatters import (
    configure_logging,
    console,
    error_message,
    grammar_table,
    json_output,
    success_panel,
)

app = typer.Typer(
    name="manjaword",
    help="ManjaWord backend: open, save, export and grammar-check editor documents.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for settings commands
config_app = typer.Typer(
    name="config",
    help="Show, change or reset ManjaWord settings.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    lang: Annotated[str, typer.Option("--lang", help="Language of error messages (en/es)")] = "en",
) -> None:
    """ManjaWord backend command line."""
    configure_logging(verbose)
    ctx.obj = {"lang": lang}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_content(source: Optional[Path]) -> Any:
    """Load an editor payload (JSON) from *source* or stdin."""
    try:
        raw = source.read_text(encoding="utf-8") if source else sys.stdin.read()
        return json.loads(raw)
    except OSError as exc:
        error_message(f"Cannot read content: {exc}")
        raise typer.Exit(code=1) from exc
    except json.JSONDecodeError as exc:
        error_message(f"Content is not valid JSON: {exc}")
        raise typer.Exit(code=1) from exc


def _commands(ctx: typer.Context, path: Optional[Path] = None):
    from manjaword.bootstrap import Container
    from manjaword.infrastructure.dialogs.static_dialog import StaticFileDialog
    from manjaword.presentation.commands import EditorCommands

    lang = (ctx.obj or {}).get("lang", "en")
    return EditorCommands(Container(), StaticFileDialog(path), lang=lang)


ContentOption = Annotated[
    Optional[Path],
    typer.Option("--content", "-c", help="JSON file with the editor delta (stdin if omitted)"),
]


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


@app.command("open")
def open_cmd(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Document to open (*.manjaword.json)")],
) -> None:
    """Open a document and print its path and content as JSON."""
    from manjaword.presentation.commands import CommandError

    try:
        opened = _commands(ctx, path).open_file()
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    json_output(opened.model_dump(mode="json"))


@app.command()
def save(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Destination; .manjaword.json is appended if missing")],
    content: ContentOption = None,
) -> None:
    """Save an editor delta as a ManjaWord document."""
    from manjaword.presentation.commands import CommandError

    payload = _read_content(content)
    try:
        written = _commands(ctx, path).save_file(payload)
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    success_panel(f"Saved: [bold]{written}[/]")


@app.command()
def export(
    ctx: typer.Context,
    fmt: Annotated[ExportFormat, typer.Argument(help="Target format")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Output file")],
    content: ContentOption = None,
) -> None:
    """Export an editor delta to DOCX or PDF."""
    from manjaword.presentation.commands import CommandError

    payload = _read_content(content)
    commands = _commands(ctx, output)
    try:
        if fmt == ExportFormat.PDF:
            written = commands.export_pdf(payload)
        else:
            written = commands.export_docx(payload)
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    success_panel(f"Exported: [bold]{written}[/]")


# ---------------------------------------------------------------------------
# Autosave
# ---------------------------------------------------------------------------


@app.command()
def autosave(ctx: typer.Context, content: ContentOption = None) -> None:
    """Replace the autosave snapshot with an editor delta."""
    from manjaword.presentation.commands import CommandError

    payload = _read_content(content)
    try:
        _commands(ctx).autosave_document(payload)
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    success_panel("Autosave written.")


@app.command()
def recover(ctx: typer.Context) -> None:
    """Print the autosave snapshot, if there is one."""
    from manjaword.presentation.commands import CommandError

    try:
        document = _commands(ctx).recover_unsaved_document()
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    if document is None:
        console.print("No unsaved document to recover.")
        return
    json_output(document.model_dump(mode="json", by_alias=True))


@app.command()
def discard(ctx: typer.Context) -> None:
    """Delete the autosave snapshot after a successful save."""
    from manjaword.presentation.commands import CommandError

    try:
        _commands(ctx).discard_autosave()
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    success_panel("Autosave discarded.")


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------


@app.command()
def grammar(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Text to check")],
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """Check text against the local grammar service."""
    from manjaword.presentation.commands import CommandError

    try:
        response = _commands(ctx).grammar_check(text)
    except CommandError as exc:
        error_message(exc.message)
        raise typer.Exit(code=1) from exc
    if as_json:
        json_output(response.model_dump(mode="json"))
    else:
        grammar_table(text, response)


# ---------------------------------------------------------------------------
# manjaword config
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show() -> None:
    """Print the effective settings."""
    from manjaword.infrastructure.config.settings_manager import SettingsManager

    manager = SettingsManager()
    console.print(f"[dim]{manager.settings_path}[/]")
    json_output(manager.load().model_dump(mode="json"))


@config_app.command("reset")
def config_reset() -> None:
    """Delete saved settings and restore defaults."""
    from manjaword.infrastructure.config.settings_manager import SettingsManager

    SettingsManager().reset_to_defaults()
    success_panel("Settings reset to defaults.")


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Setting as section.field, e.g. export.paginate_pdf")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Change one setting and save it."""
    from manjaword.infrastructure.config.settings_manager import SettingsManager

    try:
        SettingsManager().set_value(key, value)
    except (ValueError, OSError) as exc:
        error_message(f"Cannot set {key}: {exc}")
        raise typer.Exit(code=1) from exc
    success_panel(f"{escape(key)} = [bold]{escape(value)}[/]")
