"""One UI session over a list document."""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from loguru import logger

from smart_list.core.state.accordion import prune_detail, toggle_detail
from smart_list.core.state.collapse import CollapseState, initialize_collapse, toggle_collapse
from smart_list.core.state.disclosure import (
    DisclosureState,
    RevealOverride,
    RevealState,
    handle_disclosure_key,
    resolve_reveal,
)
from smart_list.core.tree.markdown import render_rows_as_markdown
from smart_list.core.tree.navigation import count_visibility
from smart_list.core.tree.pipeline import render_sequence
from smart_list.core.tree.progress import Progress, compute_progress
from smart_list.core.tree.rows import RowView, build_rows
from smart_list.core.write.editor import ListEditor
from smart_list.icon_sets import default_registry
from smart_list.models.config import ListConfig, ListDocument
from smart_list.models.item import FlatListItem, ListItem
from smart_list.protocols import DataChangeHandler, IconRegistryProtocol


@dataclass
class ListSession:
    """Session state kept beside a list tree.

    The tree itself is only replaced through ``replace_items``; the collapse
    side-table, disclosure step and open detail pane live here.
    """

    document: ListDocument
    is_editing: bool = False
    registry: IconRegistryProtocol = default_registry
    override: RevealOverride | None = None
    expanded_detail_id: str | None = None
    collapse_state: CollapseState = field(init=False)
    disclosure: DisclosureState = field(init=False)

    def __post_init__(self) -> None:
        self.collapse_state = initialize_collapse(self.items, self.config.collapse_default)
        self.disclosure = DisclosureState(mode=self.config.reveal_mode)

    @property
    def items(self) -> tuple[ListItem, ...]:
        return self.document.items

    @property
    def config(self) -> ListConfig:
        return self.document.config

    def flat(self) -> tuple[FlatListItem, ...]:
        return render_sequence(
            self.items,
            self.config,
            is_editing=self.is_editing,
            collapse_state=self.collapse_state,
            registry=self.registry,
        )

    def reveal(self, flat: Sequence[FlatListItem] | None = None) -> RevealState | None:
        """Reveal state for presentation; None while editing (everything shown)."""
        if self.is_editing:
            return None
        return resolve_reveal(
            self.flat() if flat is None else flat, self.disclosure, override=self.override
        )

    def rows(self) -> tuple[RowView, ...]:
        flat = self.flat()
        return build_rows(
            flat,
            self.config,
            registry=self.registry,
            reveal=self.reveal(flat),
            expanded_detail_id=self.expanded_detail_id,
            is_editing=self.is_editing,
        )

    def progress(self) -> Progress:
        return compute_progress(self.items, self.config.icon_set_id, self.registry)

    def visibility_counts(self) -> tuple[int, int]:
        """(visible, total) non-header items, for the editing toolbar."""
        return count_visibility(self.items)

    def render_markdown(self) -> str:
        return render_rows_as_markdown(
            self.rows(),
            progress=self.progress(),
            progress_position=self.config.progress_summary,
        )

    # --- Interactions ---

    def toggle_collapse(self, item_id: str) -> None:
        self.collapse_state = toggle_collapse(self.collapse_state, item_id)

    def toggle_detail(self, item_id: str) -> None:
        self.expanded_detail_id = toggle_detail(
            self.expanded_detail_id,
            item_id,
            items=self.items,
            detail_mode=self.config.detail_mode,
        )

    def press_key(self, key: str, *, has_focus: bool = True) -> bool:
        """Feed a key to the disclosure machine; returns True if the step changed."""
        new_state = handle_disclosure_key(
            self.disclosure,
            key,
            self.flat(),
            is_editing=self.is_editing,
            has_focus=has_focus,
            override=self.override,
        )
        changed = new_state != self.disclosure
        self.disclosure = new_state
        return changed

    def replace_items(self, items: Sequence[ListItem]) -> None:
        """Adopt a new tree, keeping collapse flags of nodes that still exist.

        An open detail pane whose node is gone or lost its detail is closed.
        """
        new_items = tuple(items)
        seeded = initialize_collapse(new_items, self.config.collapse_default)
        self.collapse_state = {
            item_id: self.collapse_state.get(item_id, collapsed)
            for item_id, collapsed in seeded.items()
        }
        self.expanded_detail_id = prune_detail(
            self.expanded_detail_id, items=new_items, detail_mode=self.config.detail_mode
        )
        self.document = replace(self.document, items=new_items)
        logger.debug("List {!r} now has {} top-level items", self.document.title, len(new_items))

    def editor(self, on_data_change: DataChangeHandler | None = None) -> ListEditor:
        """Return an editor whose accepted changes also update this session.

        Without a host handler every change is accepted.
        """

        def handle(items: Sequence[ListItem]) -> bool | None:
            if on_data_change is not None and on_data_change(items) is False:
                return False
            self.replace_items(items)
            return True

        return ListEditor(self.items, on_data_change=handle, is_editing=self.is_editing)
