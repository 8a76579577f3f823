"""MCP server exposing smart list rendering, playback and editing tools."""

import dataclasses
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from smart_list.config import resolve_list_directory
from smart_list.core.importer.json_reader import load_list_file, save_list_file
from smart_list.core.state.disclosure import max_step
from smart_list.core.tree.markdown import format_progress
from smart_list.core.write.actions import apply_action
from smart_list.session import ListSession


@dataclass
class ListStore:
    """List documents in a directory, each with a lazily opened session."""

    list_dir: Path
    sessions: dict[str, ListSession] = field(default_factory=dict)

    def names(self) -> list[str]:
        if not self.list_dir.is_dir():
            return []
        return sorted(p.stem for p in self.list_dir.glob("*.json"))

    def path(self, name: str) -> Path:
        """Return the document file for a list name.

        Raises:
            ValueError: If the name would point outside list_dir.
        """
        if not name or "/" in name or "\\" in name or ".." in name:
            msg = f"Invalid list name '{name}'"
            raise ValueError(msg)
        return self.list_dir / f"{name}.json"

    def get(self, name: str) -> ListSession | None:
        """Return the session for a list, loading it on first use."""
        if name in self.sessions:
            return self.sessions[name]
        path = self.path(name)
        if not path.exists():
            return None
        self.sessions[name] = ListSession(load_list_file(path))
        return self.sessions[name]

    def save(self, name: str) -> None:
        save_list_file(self.path(name), self.sessions[name].document)


def _not_found(name: str) -> dict[str, Any]:
    return {"error": f"List '{name}' not found."}


def _open(store: ListStore, name: str) -> ListSession | dict[str, Any]:
    try:
        store.path(name)
    except ValueError as e:
        return {"error": str(e)}
    try:
        session = store.get(name)
    except ValueError as e:
        return {"error": f"List '{name}' is malformed: {e}"}
    return session if session is not None else _not_found(name)


# --- Core functions (testable without MCP context) ---


def smart_list_list_documents(store: ListStore) -> dict[str, Any]:
    """List the available list documents."""
    documents = []
    for name in store.names():
        opened = _open(store, name)
        if isinstance(opened, dict):
            logger.warning("Skipping {}: {}", name, opened["error"])
            continue
        visible, total = opened.visibility_counts()
        documents.append(
            {"name": name, "title": opened.document.title, "items": total, "visible": visible}
        )
    return {"documents": documents, "count": len(documents)}


def smart_list_render(
    store: ListStore,
    *,
    name: str,
    editing: bool = False,
    output_format: str = "markdown",
) -> dict[str, Any]:
    """Render a list in editing or presentation mode.

    Args:
        name: List document name.
        editing: Editing mode shows hidden items; presentation drops them.
        output_format: "markdown" or "json" (row views).
    """
    session = _open(store, name)
    if isinstance(session, dict):
        return session
    session.is_editing = editing
    output: dict[str, Any] = {"name": name, "title": session.document.title}
    if output_format == "json":
        output["rows"] = [dataclasses.asdict(row) for row in session.rows()]
    else:
        output["content"] = session.render_markdown()
    return output


def smart_list_progress(store: ListStore, *, name: str) -> dict[str, Any]:
    """Status breakdown of every non-header item in a list."""
    session = _open(store, name)
    if isinstance(session, dict):
        return session
    progress = session.progress()
    return {
        "name": name,
        "total": progress.total,
        "segments": [dataclasses.asdict(s) for s in progress.segments],
        "summary": format_progress(progress),
    }


def smart_list_step(store: ListStore, *, name: str, direction: str = "next") -> dict[str, Any]:
    """Advance or rewind presentation playback by one step."""
    session = _open(store, name)
    if isinstance(session, dict):
        return session
    if direction not in ("next", "prev"):
        return {"error": f"Unknown direction '{direction}', use 'next' or 'prev'."}
    session.is_editing = False
    session.press_key("ArrowRight" if direction == "next" else "ArrowLeft")
    flat = session.flat()
    reveal = session.reveal(flat)
    return {
        "name": name,
        "step": session.disclosure.step,
        "max_step": max_step(flat, session.config.reveal_mode),
        "focused_id": reveal.focused_id if reveal else None,
        "content": session.render_markdown(),
    }


def smart_list_toggle_collapse(store: ListStore, *, name: str, item_id: str) -> dict[str, Any]:
    """Expand or collapse an item's children."""
    session = _open(store, name)
    if isinstance(session, dict):
        return session
    session.toggle_collapse(item_id)
    return {
        "name": name,
        "item_id": item_id,
        "collapsed": session.collapse_state.get(item_id),
        "content": session.render_markdown(),
    }


def smart_list_toggle_detail(store: ListStore, *, name: str, item_id: str) -> dict[str, Any]:
    """Open or close an item's detail pane (one at a time)."""
    session = _open(store, name)
    if isinstance(session, dict):
        return session
    session.toggle_detail(item_id)
    return {
        "name": name,
        "expanded_id": session.expanded_detail_id,
        "content": session.render_markdown(),
    }


def smart_list_edit(
    store: ListStore,
    *,
    name: str,
    action: str,
    item_id: str | None = None,
    value: str | None = None,
    to_id: str | None = None,
    save: bool = False,
) -> dict[str, Any]:
    """Apply an edit action to a list; write it to disk only if save is set."""
    session = _open(store, name)
    if isinstance(session, dict):
        return session
    try:
        items = apply_action(
            session.items,
            action,
            item_id=item_id,
            value=value,
            to_id=to_id,
            icon_set_id=session.config.icon_set_id,
            secondary_icon_set_id=session.config.secondary_icon_set_id,
            new_id=f"item-{uuid.uuid4().hex[:12]}",
        )
    except ValueError as e:
        return {"success": False, "error": str(e)}

    changed = items is not session.items
    if changed:
        session.replace_items(items)
        if save:
            store.save(name)
            logger.info("Saved list {} after {}", name, action)
    # Render the result in editing mode, then restore the session's mode.
    was_editing = session.is_editing
    session.is_editing = True
    content = session.render_markdown()
    session.is_editing = was_editing
    return {"success": True, "changed": changed, "content": content}


# --- MCP Server Setup ---


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ListStore]:
    """Open the list directory on startup."""
    list_dir = resolve_list_directory()
    if not list_dir.is_dir():
        logger.warning("List directory {} does not exist", list_dir)
    yield ListStore(list_dir=list_dir)


mcp_server = FastMCP(
    "smart-list",
    instructions="""\
Smart lists are hierarchical, icon-annotated lists used on presentation slides.

1. Call smart_list_list_documents_tool to find list names.
2. Render with smart_list_render_tool (editing=true shows hidden items).
3. Step through presentation playback with smart_list_step_tool.
4. Edit with smart_list_edit_tool; pass save=true to write the file.
""",
    lifespan=server_lifespan,
)


def _store(mcp_ctx: Context) -> ListStore:
    return mcp_ctx.request_context.lifespan_context  # type: ignore[return-value]


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def smart_list_list_documents_tool(ctx: Context) -> dict[str, Any]:
    """List all smart list documents with item counts."""
    return smart_list_list_documents(_store(ctx))


@mcp_server.tool()
async def smart_list_render_tool(
    ctx: Context,
    name: str,
    editing: bool = False,
    output_format: str = "markdown",
) -> dict[str, Any]:
    """Render a list as markdown or as structured rows.

    Args:
        name: List document name.
        editing: Show hidden items (struck through) instead of dropping them.
        output_format: "markdown" or "json".
    """
    return smart_list_render(_store(ctx), name=name, editing=editing, output_format=output_format)


@mcp_server.tool()
async def smart_list_progress_tool(ctx: Context, name: str) -> dict[str, Any]:
    """Count items per status across the whole list."""
    return smart_list_progress(_store(ctx), name=name)


@mcp_server.tool()
async def smart_list_step_tool(ctx: Context, name: str, direction: str = "next") -> dict[str, Any]:
    """Step presentation playback forward ("next") or back ("prev")."""
    return smart_list_step(_store(ctx), name=name, direction=direction)


@mcp_server.tool()
async def smart_list_toggle_collapse_tool(ctx: Context, name: str, item_id: str) -> dict[str, Any]:
    """Expand or collapse the children of an item."""
    return smart_list_toggle_collapse(_store(ctx), name=name, item_id=item_id)


@mcp_server.tool()
async def smart_list_toggle_detail_tool(ctx: Context, name: str, item_id: str) -> dict[str, Any]:
    """Open or close the detail text of an item."""
    return smart_list_toggle_detail(_store(ctx), name=name, item_id=item_id)


@mcp_server.tool()
async def smart_list_edit_tool(
    ctx: Context,
    name: str,
    action: str,
    item_id: str | None = None,
    value: str | None = None,
    to_id: str | None = None,
    save: bool = False,
) -> dict[str, Any]:
    """Edit a list.

    Args:
        name: List document name.
        action: set-text, set-icon, set-secondary-icon, hide, show, toggle-visible,
            show-all, hide-all, show-only, move, delete-empty or insert-after.
        item_id: Target item.
        value: Text, icon id or status.
        to_id: Drop target for move.
        save: Write the edited list back to its file.
    """
    return smart_list_edit(
        _store(ctx),
        name=name,
        action=action,
        item_id=item_id,
        value=value,
        to_id=to_id,
        save=save,
    )


def run_mcp_server() -> None:
    """Run the MCP server with stdio transport."""
    from smart_list.logging_config import configure_logging

    configure_logging(verbose=False)
    mcp_server.run(transport="stdio")
