"""Progress aggregation over the full item tree."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from smart_list.config import NO_STATUS_COLOR, NO_STATUS_ID, NO_STATUS_LABEL
from smart_list.core.tree.navigation import iter_items
from smart_list.icon_sets import default_registry
from smart_list.models.item import ListItem
from smart_list.protocols import IconRegistryProtocol


@dataclass(frozen=True)
class ProgressSegment:
    """Count of nodes sharing one status."""

    icon_id: str
    label: str
    color: str
    count: int


@dataclass(frozen=True)
class Progress:
    """Status breakdown of every non-header node."""

    segments: tuple[ProgressSegment, ...]
    total: int

    def percent(self, icon_id: str) -> float:
        """Share of the total held by one status, 0.0 for an empty tree."""
        if not self.total:
            return 0.0
        count = sum(s.count for s in self.segments if s.icon_id == icon_id)
        return 100.0 * count / self.total


def compute_progress(
    items: Sequence[ListItem],
    icon_set_id: str,
    registry: IconRegistryProtocol = default_registry,
) -> Progress:
    """Count non-header nodes per status, in icon set order.

    Walks the unfiltered tree regardless of collapse state or visibility.
    Statuses the icon set does not declare fall into the no-status bucket,
    which comes last.
    """
    icon_set = registry.get_icon_set(icon_set_id)
    entries = icon_set.entries if icon_set else ()
    known = {entry.id for entry in entries}

    counts: Counter[str] = Counter()
    for item, _depth in iter_items(items):
        if item.is_header:
            continue
        counts[item.status if item.status in known else NO_STATUS_ID] += 1

    segments = [
        ProgressSegment(icon_id=e.id, label=e.label, color=e.color, count=counts[e.id])
        for e in entries
        if counts[e.id]
    ]
    if counts[NO_STATUS_ID]:
        segments.append(
            ProgressSegment(
                icon_id=NO_STATUS_ID,
                label=NO_STATUS_LABEL,
                color=NO_STATUS_COLOR,
                count=counts[NO_STATUS_ID],
            )
        )
    return Progress(segments=tuple(segments), total=sum(counts.values()))
