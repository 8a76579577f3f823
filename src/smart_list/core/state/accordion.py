"""Accordion detail controller: at most one detail pane open."""

from collections.abc import Sequence

from smart_list.core.tree.navigation import find_item
from smart_list.models.item import ListItem


def toggle_detail(
    expanded_id: str | None,
    item_id: str,
    *,
    items: Sequence[ListItem],
    detail_mode: str,
) -> str | None:
    """Open item_id's detail, or close it if it is the open one.

    Opening a detail implicitly closes the previous one. The open pane always
    closes on its own id, even if its node lost its detail. Otherwise nodes
    without detail text, unknown ids, and lists with detail mode "none" leave
    the state as is.
    """
    if expanded_id is not None and expanded_id == item_id:
        return None
    if detail_mode == "none":
        return expanded_id
    item = find_item(items, item_id)
    if item is None or not item.detail:
        return expanded_id
    return item_id


def prune_detail(
    expanded_id: str | None, *, items: Sequence[ListItem], detail_mode: str
) -> str | None:
    """Close the open pane if its node is gone or no longer has detail."""
    if expanded_id is None:
        return None
    item = find_item(items, expanded_id)
    if detail_mode == "none" or item is None or not item.detail:
        return None
    return expanded_id
