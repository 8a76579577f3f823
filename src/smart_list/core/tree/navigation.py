"""Tree navigation: pre-order walks, lookups and counts."""

from collections import Counter
from collections.abc import Iterator, Sequence

from smart_list.models.item import ListItem


def iter_items(items: Sequence[ListItem], depth: int = 0) -> Iterator[tuple[ListItem, int]]:
    """Yield (node, depth) pairs in depth-first pre-order, ignoring collapse state."""
    for item in items:
        yield item, depth
        if item.children:
            yield from iter_items(item.children, depth + 1)


def find_item(items: Sequence[ListItem], item_id: str) -> ListItem | None:
    """Return the first node with this id, or None."""
    for item, _depth in iter_items(items):
        if item.id == item_id:
            return item
    return None


def find_duplicate_ids(items: Sequence[ListItem]) -> tuple[str, ...]:
    """Return ids used by more than one node, sorted."""
    counts = Counter(item.id for item, _depth in iter_items(items))
    return tuple(sorted(item_id for item_id, n in counts.items() if n > 1))


def count_visibility(items: Sequence[ListItem]) -> tuple[int, int]:
    """Count (visible, total) non-header nodes across the whole tree.

    A hidden parent does not hide the count of its children: every node is
    counted on its own flag, as the editing toolbar shows them.
    """
    visible = 0
    total = 0
    for item, _depth in iter_items(items):
        if item.is_header:
            continue
        total += 1
        if item.visible is not False:
            visible += 1
    return visible, total
