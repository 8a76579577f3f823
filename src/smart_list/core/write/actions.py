"""Named edit actions shared by the CLI and the MCP server."""

from collections.abc import Sequence

from smart_list.core.write import mutations
from smart_list.models.item import IconRef, ListItem

ACTIONS: tuple[str, ...] = (
    "set-text",
    "set-icon",
    "set-secondary-icon",
    "hide",
    "show",
    "toggle-visible",
    "show-all",
    "hide-all",
    "show-only",
    "move",
    "delete-empty",
    "insert-after",
)

# Actions that address one node through item_id.
_NEEDS_ID = frozenset(ACTIONS) - {"show-all", "hide-all", "show-only"}


def apply_action(
    items: Sequence[ListItem],
    action: str,
    *,
    item_id: str | None = None,
    value: str | None = None,
    to_id: str | None = None,
    icon_set_id: str = "",
    secondary_icon_set_id: str | None = None,
    new_id: str | None = None,
) -> tuple[ListItem, ...]:
    """Apply one named edit and return the new tree.

    Args:
        items: Current tree.
        action: One of ACTIONS.
        item_id: Target node for single-node actions.
        value: Text, icon id or status, depending on the action.
        to_id: Drop target for ``move``.
        icon_set_id: Icon set for ``set-icon``.
        secondary_icon_set_id: Icon set for ``set-secondary-icon``.
        new_id: Id for the node created by ``insert-after``.

    Raises:
        ValueError: For an unknown action or a missing argument.
    """
    if action not in ACTIONS:
        msg = f"Unknown action {action!r} (expected one of {', '.join(ACTIONS)})"
        raise ValueError(msg)
    if action in _NEEDS_ID and not item_id:
        msg = f"Action {action!r} needs an item id"
        raise ValueError(msg)
    target = item_id or ""

    match action:
        case "set-text":
            return mutations.set_text(items, target, value or "")
        case "set-icon":
            ref = IconRef(icon_set_id, value) if value else None
            return mutations.set_primary_icon(items, target, ref)
        case "set-secondary-icon":
            ref = IconRef(secondary_icon_set_id or icon_set_id, value) if value else None
            return mutations.set_secondary_icon(items, target, ref)
        case "hide" | "show":
            return mutations.set_visible(items, target, action == "show")
        case "toggle-visible":
            return mutations.toggle_visible(items, target)
        case "show-all" | "hide-all":
            return mutations.set_all_visible(items, action == "show-all")
        case "show-only":
            if not value:
                msg = "Action 'show-only' needs a status value"
                raise ValueError(msg)
            return mutations.show_only_status(items, value)
        case "move":
            if not to_id:
                msg = "Action 'move' needs a target id"
                raise ValueError(msg)
            return mutations.reorder_top_level(items, target, to_id)
        case "delete-empty":
            return mutations.delete_if_empty(items, target)
        case _:
            if not new_id:
                msg = "Action 'insert-after' needs a new item id"
                raise ValueError(msg)
            return mutations.insert_after(items, target, ListItem(id=new_id, text=value or ""))
