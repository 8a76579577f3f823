"""Tree transform pipeline: visibility, status filter, grouping, flattening."""

from collections.abc import Mapping, Sequence
from dataclasses import replace

from loguru import logger

from smart_list.config import GROUP_HEADER_PREFIX, NO_STATUS_ID, NO_STATUS_LABEL
from smart_list.core.state.collapse import initialize_collapse
from smart_list.core.tree.numbering import format_for_depth, format_number
from smart_list.icon_sets import default_registry
from smart_list.models.config import ListConfig
from smart_list.models.item import FlatListItem, ListItem
from smart_list.protocols import IconRegistryProtocol


def filter_visible(items: Sequence[ListItem]) -> tuple[ListItem, ...]:
    """Drop hidden non-header nodes together with their whole subtree."""
    result: list[ListItem] = []
    for item in items:
        if item.is_hidden:
            continue
        if item.children:
            item = _with_children(item, filter_visible(item.children))
        result.append(item)
    return tuple(result)


def filter_by_status(items: Sequence[ListItem], allowed: frozenset[str]) -> tuple[ListItem, ...]:
    """Keep headers and nodes whose status is in allowed, at every depth.

    A node without a primary icon never matches.
    """
    result: list[ListItem] = []
    for item in items:
        if not item.is_header and item.status not in allowed:
            continue
        if item.children:
            item = _with_children(item, filter_by_status(item.children, allowed))
        result.append(item)
    return tuple(result)


def group_by_status(
    items: Sequence[ListItem],
    icon_set_id: str,
    registry: IconRegistryProtocol = default_registry,
) -> tuple[ListItem, ...]:
    """Rebuild the top level as one synthetic header per status bucket.

    Existing headers are discarded. Buckets follow the icon set's entry order,
    with nodes lacking a known status collected last under "No status".
    Nested children travel with their top-level parent.
    """
    icon_set = registry.get_icon_set(icon_set_id)
    if icon_set is None:
        logger.debug("Icon set {!r} not found, grouping everything as no status", icon_set_id)
    entries = icon_set.entries if icon_set else ()
    known = {entry.id for entry in entries}

    buckets: dict[str, list[ListItem]] = {entry.id: [] for entry in entries}
    buckets[NO_STATUS_ID] = []
    for item in items:
        if item.is_header:
            continue
        key = item.status if item.status in known else NO_STATUS_ID
        buckets[key].append(item)

    labels = [(entry.id, entry.label) for entry in entries]
    labels.append((NO_STATUS_ID, NO_STATUS_LABEL))

    result: list[ListItem] = []
    for key, label in labels:
        group = buckets[key]
        if not group:
            continue
        suffix = "none" if key == NO_STATUS_ID else key
        result.append(
            ListItem(
                id=f"{GROUP_HEADER_PREFIX}{suffix}",
                text=f"{label} ({len(group)})",
                is_header=True,
            )
        )
        result.extend(group)
    return tuple(result)


def effective_items(
    items: Sequence[ListItem],
    config: ListConfig,
    *,
    is_editing: bool,
    registry: IconRegistryProtocol = default_registry,
) -> tuple[ListItem, ...]:
    """Apply the visibility filter, status filter and grouping stages."""
    result = tuple(items)
    if not is_editing:
        result = filter_visible(result)
    if config.filter_by_statuses:
        result = filter_by_status(result, frozenset(config.filter_by_statuses))
    if config.group_by_status:
        result = group_by_status(result, config.icon_set_id, registry)
    return result


def flatten_items(
    items: Sequence[ListItem],
    config: ListConfig,
    collapse_state: Mapping[str, bool],
) -> tuple[FlatListItem, ...]:
    """Linearize the tree depth-first, numbering non-header rows per sibling group.

    Children of collapsed nodes are skipped.
    """
    result: list[FlatListItem] = []

    def walk(siblings: Sequence[ListItem], depth: int) -> None:
        fmt = format_for_depth(depth, config.numbering_format, config.child_numbering_format)
        counter = 0
        for item in siblings:
            number_label: str | None = None
            if not item.is_header:
                counter += 1
                if config.show_numbering:
                    number_label = format_number(counter, fmt)
            is_collapsed = bool(item.children) and collapse_state.get(item.id, False)
            result.append(
                FlatListItem(
                    item=item,
                    depth=depth,
                    flat_index=len(result),
                    number_label=number_label,
                    is_collapsed=is_collapsed,
                )
            )
            if item.children and not is_collapsed:
                walk(item.children, depth + 1)

    walk(items, 0)
    return tuple(result)


def render_sequence(
    items: Sequence[ListItem],
    config: ListConfig,
    *,
    is_editing: bool,
    collapse_state: Mapping[str, bool] | None = None,
    registry: IconRegistryProtocol = default_registry,
) -> tuple[FlatListItem, ...]:
    """Produce the flat, numbered sequence a list renders.

    Args:
        items: Top-level nodes of the tree.
        config: List configuration.
        is_editing: Editing mode keeps hidden nodes; presentation drops them.
        collapse_state: Collapse side-table (initialized from config if None).
        registry: Icon registry used for status grouping order.

    Returns:
        Tuple of FlatListItem in render order.
    """
    if collapse_state is None:
        collapse_state = initialize_collapse(items, config.collapse_default)
    shown = effective_items(items, config, is_editing=is_editing, registry=registry)
    return flatten_items(shown, config, collapse_state)


def _with_children(item: ListItem, children: tuple[ListItem, ...]) -> ListItem:
    if len(children) == len(item.children) and all(
        new is old for new, old in zip(children, item.children, strict=True)
    ):
        return item
    return replace(item, children=children)
