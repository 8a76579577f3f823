"""Protocols for the collaborators the list engine depends on."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from smart_list.models.item import IconSet, ListItem, ResolvedIcon


@runtime_checkable
class IconRegistryProtocol(Protocol):
    """Protocol for icon set registries."""

    def get_icon_set(self, set_id: str) -> IconSet | None:
        """Return the icon set with this id, or None if unknown."""
        ...

    def resolve_icon_ref(self, set_id: str, icon_id: str) -> ResolvedIcon | None:
        """Resolve one icon, or None if the set or icon is unknown."""
        ...


class DataChangeHandler(Protocol):
    """Host callback receiving every edited tree.

    Returning False rejects the change; any other value accepts it.
    """

    def __call__(self, items: Sequence[ListItem]) -> bool | None: ...
