"""Collapse state store: per-node expand/collapse flags kept beside the tree."""

from collections.abc import Mapping, Sequence

from loguru import logger

from smart_list.core.tree.navigation import iter_items
from smart_list.core.tree.sections import section_index_by_id
from smart_list.models.item import ListItem

CollapseState = Mapping[str, bool]


def _default_collapsed(collapse_default: str, *, depth: int, section: int) -> bool:
    if collapse_default == "all-collapsed":
        return True
    if collapse_default == "first-expanded":
        return section > 0
    if collapse_default == "top-level-only":
        return depth > 0
    return False


def initialize_collapse(items: Sequence[ListItem], collapse_default: str) -> dict[str, bool]:
    """Seed collapse flags for every node that has children.

    An explicit ``collapsed`` on the node wins over the policy default.
    """
    sections = section_index_by_id(item for item, _depth in iter_items(items))
    state: dict[str, bool] = {}
    for item, depth in iter_items(items):
        if not item.children:
            continue
        if item.collapsed is not None:
            state[item.id] = item.collapsed
        else:
            state[item.id] = _default_collapsed(
                collapse_default, depth=depth, section=sections[item.id]
            )
    return state


def toggle_collapse(state: CollapseState, item_id: str) -> CollapseState:
    """Return a new state with one node flipped; unknown ids leave it unchanged."""
    if item_id not in state:
        logger.debug("Collapse toggle ignored for unknown item {}", item_id)
        return state
    return {**state, item_id: not state[item_id]}
