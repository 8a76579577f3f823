"""Render list rows as indented markdown."""

import io
from collections.abc import Sequence

from smart_list.core.tree.progress import Progress
from smart_list.core.tree.rows import RowView
from smart_list.models.item import Custom, Glyph, IconDisplay, Reference


def icon_text(icon: IconDisplay | None) -> str:
    """Plain-text stand-in for an icon representation."""
    match icon:
        case Glyph(text=text):
            return text
        case Reference(set_id=set_id, icon_id=icon_id):
            return f"[{set_id}:{icon_id}]"
        case Custom(handle=handle):
            return f"[{handle}]"
        case _:
            return ""


def format_progress(progress: Progress) -> str:
    """One-line status summary, e.g. ``Progress: Done 2 · To Do 1 (3 items)``."""
    if not progress.total:
        return ""
    parts = " · ".join(f"{s.label} {s.count}" for s in progress.segments)
    noun = "item" if progress.total == 1 else "items"
    return f"Progress: {parts} ({progress.total} {noun})"


def render_rows_as_markdown(
    rows: Sequence[RowView],
    *,
    progress: Progress | None = None,
    progress_position: str = "hidden",
) -> str:
    """Render rows as a markdown bullet hierarchy.

    Args:
        rows: Row views in render order.
        progress: Progress summary to print, if any.
        progress_position: "above", "below" or "hidden".

    Returns:
        Markdown text. Unrevealed rows are left out, dimmed rows are set in
        italics and rows hidden from presentation are struck through.
    """
    summary = format_progress(progress) if progress and progress_position != "hidden" else ""

    out = io.StringIO()
    if summary and progress_position == "above":
        out.write(f"{summary}\n\n")

    for row in rows:
        if row.opacity == 0.0:
            continue
        indent = "    " * row.depth

        text = row.text
        if row.hidden_in_presentation:
            text = f"~~{text}~~"
        elif row.opacity < 1.0:
            text = f"_{text}_"

        if row.is_header:
            out.write(f"{indent}**{text}**\n")
            continue

        lead = " ".join(
            part
            for part in (icon_text(row.icon), row.number_label, icon_text(row.secondary_icon))
            if part
        )
        out.write(f"{indent}- {lead} {text}\n" if lead else f"{indent}- {text}\n")

        if row.description:
            out.write(f"{indent}  {row.description}\n")

        if row.detail:
            for detail_line in row.detail.split("\n"):
                out.write(f"{indent}  > {detail_line}\n")

        # Collapsed indicator in place of the hidden children
        if row.is_collapsed and row.child_count > 0:
            child_indent = "    " * (row.depth + 1)
            noun = "child" if row.child_count == 1 else "children"
            out.write(f"{child_indent}- ... ({row.child_count} hidden {noun}, id={row.item_id})\n")

    if summary and progress_position == "below":
        out.write(f"\n{summary}\n")

    return out.getvalue()
