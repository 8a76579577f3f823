"""CLI for smart lists (render, progress, edit, MCP server)."""

import dataclasses
import json
import uuid
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from smart_list.core.importer.json_reader import load_list_file, save_list_file
from smart_list.core.tree.markdown import format_progress, icon_text
from smart_list.core.write.actions import ACTIONS, apply_action
from smart_list.icon_sets import default_registry
from smart_list.logging_config import configure_logging
from smart_list.models.config import ListDocument
from smart_list.session import ListSession

app = typer.Typer(help="Smart lists: render, step through and edit hierarchical lists.")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load(path: Path) -> ListDocument:
    """Load a list document, exiting with an error if it cannot be read."""
    if not path.exists():
        logger.error("List file not found: {}", path)
        raise typer.Exit(1)
    try:
        return load_list_file(path)
    except (ValueError, json.JSONDecodeError) as e:
        logger.error("Cannot read list {}: {}", path, e)
        raise typer.Exit(1) from e


@app.command()
def render(
    path: Path = typer.Argument(..., help="List document (.json)"),
    editing: bool = typer.Option(False, "--editing", "-e", help="Render in editing mode"),
    step: int = typer.Option(0, "--step", "-s", help="Disclosure steps to advance"),
    expand: Annotated[
        str | None,
        typer.Option("--expand", help="Open the detail pane of this item"),
    ] = None,
    toggle: Annotated[
        list[str] | None,
        typer.Option("--toggle", "-t", help="Flip the collapse state of an item"),
    ] = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output rows as JSON"),
) -> None:
    """Render a list as markdown."""
    session = ListSession(_load(path), is_editing=editing)
    for item_id in toggle or []:
        session.toggle_collapse(item_id)
    if expand:
        session.toggle_detail(expand)
    for _ in range(step):
        session.press_key("ArrowRight")

    if output_json:
        rows = [dataclasses.asdict(row) for row in session.rows()]
        typer.echo(json.dumps(rows, indent=2, ensure_ascii=False, default=str))
        return

    typer.echo(session.render_markdown(), nl=False)
    if editing:
        visible, total = session.visibility_counts()
        if visible < total:
            typer.echo(f"\nShowing {visible} of {total} items")


@app.command()
def progress(
    path: Path = typer.Argument(..., help="List document (.json)"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show the status breakdown of a list."""
    session = ListSession(_load(path))
    result = session.progress()
    if output_json:
        typer.echo(json.dumps(dataclasses.asdict(result), indent=2, ensure_ascii=False))
    elif result.total:
        typer.echo(format_progress(result))
    else:
        typer.echo("Nothing to summarize.")


@app.command(name="icon-sets")
def icon_sets() -> None:
    """List the built-in icon sets."""
    for icon_set in default_registry.all_icon_sets():
        typer.echo(f"{icon_set.name} [id={icon_set.id}]")
        for entry in icon_set.entries:
            typer.echo(f"  {icon_text(entry.icon)}  {entry.id}: {entry.label}")


@app.command()
def edit(
    path: Path = typer.Argument(..., help="List document (.json)"),
    action: str = typer.Argument(..., help=f"One of: {', '.join(ACTIONS)}"),
    item_id: Annotated[str | None, typer.Option("--id", "-i", help="Target item id")] = None,
    value: Annotated[
        str | None,
        typer.Option("--value", help="Text, icon id or status for the action"),
    ] = None,
    to_id: Annotated[str | None, typer.Option("--to", help="Drop target for 'move'")] = None,
    in_place: bool = typer.Option(False, "--in-place", help="Write the result back to PATH"),
) -> None:
    """Apply an edit to a list and print (or save) the result."""
    doc = _load(path)
    try:
        items = apply_action(
            doc.items,
            action,
            item_id=item_id,
            value=value,
            to_id=to_id,
            icon_set_id=doc.config.icon_set_id,
            secondary_icon_set_id=doc.config.secondary_icon_set_id,
            new_id=f"item-{uuid.uuid4().hex[:12]}",
        )
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    if items is doc.items:
        logger.warning("Nothing changed")

    new_doc = dataclasses.replace(doc, items=items)
    if in_place:
        save_list_file(path, new_doc)
        logger.info("Saved {}", path)
    else:
        typer.echo(ListSession(new_doc, is_editing=True).render_markdown(), nl=False)


@app.command()
def serve() -> None:
    """Start the MCP server (stdio transport)."""
    from smart_list.mcp.server import run_mcp_server

    run_mcp_server()
