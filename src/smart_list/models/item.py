"""Domain models for smart list trees."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IconRef:
    """A reference to one icon inside an icon set."""

    set_id: str
    icon_id: str


@dataclass(frozen=True)
class Glyph:
    """An icon drawn as plain text (emoji or symbol)."""

    text: str


@dataclass(frozen=True)
class Reference:
    """An icon that still has to be resolved through the registry."""

    set_id: str
    icon_id: str


@dataclass(frozen=True)
class Custom:
    """An icon the renderer knows how to draw from an opaque handle."""

    handle: object


IconDisplay = Glyph | Reference | Custom


@dataclass(frozen=True)
class IconSetEntry:
    """A single icon definition within an icon set."""

    id: str
    label: str
    icon: IconDisplay
    color: str


@dataclass(frozen=True)
class IconSet:
    """An ordered vocabulary of icons; entry order is the status order."""

    id: str
    name: str
    entries: tuple[IconSetEntry, ...]
    description: str = ""
    built_in: bool = False


@dataclass(frozen=True)
class ResolvedIcon:
    """What an IconRef resolves to."""

    icon: IconDisplay
    color: str
    label: str


@dataclass(frozen=True)
class ListItem:
    """A single node in a smart list tree.

    Nodes are never mutated; edits build a new tree that shares every
    untouched subtree with the previous one.
    """

    id: str
    text: str = ""
    is_header: bool = False
    primary_icon: IconRef | None = None
    secondary_icon: IconRef | None = None
    description: str | None = None
    detail: str | None = None
    visible: bool | None = None
    collapsed: bool | None = None
    children: tuple["ListItem", ...] = ()

    @property
    def status(self) -> str | None:
        """The primary icon id, used for filtering, grouping and progress."""
        return self.primary_icon.icon_id if self.primary_icon else None

    @property
    def is_hidden(self) -> bool:
        """Whether the node is omitted in presentation mode."""
        return not self.is_header and self.visible is False


@dataclass(frozen=True)
class FlatListItem:
    """A render-ready projection of a node after flattening."""

    item: ListItem
    depth: int
    flat_index: int
    number_label: str | None = None
    is_collapsed: bool = False
