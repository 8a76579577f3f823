"""List configuration and document models."""

from dataclasses import dataclass, field
from typing import Literal

from smart_list.models.item import ListItem

CollapseDefault = Literal["all-expanded", "all-collapsed", "first-expanded", "top-level-only"]
RevealMode = Literal["all-at-once", "one-by-one-focus", "one-by-one-accumulate", "by-section"]
NumberingFormat = Literal["1.", "01.", "a.", "a)", "i.", "Step N"]
Intensity = Literal["subtle", "medium", "strong"]
ProgressPosition = Literal["hidden", "above", "below"]
DetailMode = Literal["none", "inline"]

COLLAPSE_DEFAULTS: tuple[str, ...] = (
    "all-expanded",
    "all-collapsed",
    "first-expanded",
    "top-level-only",
)
REVEAL_MODES: tuple[str, ...] = (
    "all-at-once",
    "one-by-one-focus",
    "one-by-one-accumulate",
    "by-section",
)
NUMBERING_FORMATS: tuple[str, ...] = ("1.", "01.", "a.", "a)", "i.", "Step N")
INTENSITIES: tuple[str, ...] = ("subtle", "medium", "strong")
PROGRESS_POSITIONS: tuple[str, ...] = ("hidden", "above", "below")
DETAIL_MODES: tuple[str, ...] = ("none", "inline")


@dataclass(frozen=True)
class ListConfig:
    """Per-render settings of a smart list widget."""

    icon_set_id: str
    collapse_default: CollapseDefault = "all-expanded"
    reveal_mode: RevealMode = "all-at-once"
    show_numbering: bool = False
    numbering_format: NumberingFormat = "1."
    child_numbering_format: NumberingFormat | None = None
    secondary_icon_set_id: str | None = None
    filter_by_statuses: frozenset[str] = field(default_factory=frozenset)
    group_by_status: bool = False
    conditional_formatting: bool = False
    intensity: Intensity = "subtle"
    progress_summary: ProgressPosition = "hidden"
    detail_mode: DetailMode = "none"


@dataclass(frozen=True)
class ListDocument:
    """A titled list: its configuration plus the item tree."""

    title: str
    config: ListConfig
    items: tuple[ListItem, ...] = ()
