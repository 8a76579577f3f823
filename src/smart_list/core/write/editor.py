"""Editing-mode interactions over the mutation engine."""

import uuid
from collections.abc import Callable, Sequence

from loguru import logger

from smart_list.core.tree.navigation import find_item
from smart_list.core.write import mutations
from smart_list.models.item import FlatListItem, IconRef, ListItem
from smart_list.protocols import DataChangeHandler


def _new_item_id() -> str:
    return f"item-{uuid.uuid4().hex[:12]}"


class ListEditor:
    """Keyboard and toolbar editing for one list.

    The editor never persists anything: each edit is handed to the host through
    ``on_data_change``. A handler returning False rejects the edit and the
    editor keeps its current tree.
    """

    def __init__(
        self,
        items: Sequence[ListItem],
        *,
        on_data_change: DataChangeHandler | None = None,
        is_editing: bool = True,
        new_id: Callable[[], str] = _new_item_id,
    ) -> None:
        self.items: tuple[ListItem, ...] = tuple(items)
        self.on_data_change = on_data_change
        self.is_editing = is_editing
        self.new_id = new_id
        self.focus_id: str | None = None
        self.quick_pick_id: str | None = None
        self.secondary_pick_id: str | None = None

    @property
    def enabled(self) -> bool:
        return self.is_editing and self.on_data_change is not None

    def _commit(self, new_items: tuple[ListItem, ...]) -> bool:
        handler = self.on_data_change
        if not self.is_editing or handler is None or new_items is self.items:
            return False
        if handler(new_items) is False:
            logger.info("Host rejected list change")
            return False
        self.items = new_items
        return True

    # --- Field edits ---

    def change_text(self, item_id: str, text: str) -> bool:
        return self._commit(mutations.set_text(self.items, item_id, text))

    def change_icon(self, item_id: str, ref: IconRef) -> bool:
        """Set the primary icon and close the quick-pick."""
        changed = self._commit(mutations.set_primary_icon(self.items, item_id, ref))
        self.quick_pick_id = None
        return changed

    def change_secondary_icon(self, item_id: str, ref: IconRef) -> bool:
        changed = self._commit(mutations.set_secondary_icon(self.items, item_id, ref))
        self.secondary_pick_id = None
        return changed

    def open_icon_pick(self, item_id: str) -> None:
        """Toggle the icon quick-pick for a row (icon click)."""
        if self.is_editing:
            self.quick_pick_id = None if self.quick_pick_id == item_id else item_id

    # --- Toolbar ---

    def toggle_visibility(self, item_id: str) -> bool:
        return self._commit(mutations.toggle_visible(self.items, item_id))

    def set_all_visibility(self, visible: bool) -> bool:
        return self._commit(mutations.set_all_visible(self.items, visible))

    def show_only_status(self, icon_id: str) -> bool:
        return self._commit(mutations.show_only_status(self.items, icon_id))

    # --- Drag and drop ---

    def drag_end(self, active_id: str, over_id: str | None) -> bool:
        """Drop a dragged row onto another; only top-level rows move."""
        if over_id is None or active_id == over_id:
            return False
        return self._commit(mutations.reorder_top_level(self.items, active_id, over_id))

    # --- Keyboard ---

    def handle_key(self, item_id: str, key: str, flat: Sequence[FlatListItem]) -> bool:
        """Handle a key press on a row; returns True if the key was consumed.

        Args:
            item_id: Row that has keyboard focus.
            key: Key name (``Enter``, ``Backspace``, ``ArrowUp``, ...).
            flat: The currently rendered sequence, for focus movement.
        """
        if not self.enabled:
            return False
        ids = [f.item.id for f in flat]
        index = ids.index(item_id) if item_id in ids else -1

        if key == "Enter":
            new_item = ListItem(id=self.new_id(), text="")
            if self._commit(mutations.insert_after(self.items, item_id, new_item)):
                self.focus_id = new_item.id
            return True
        if key == "Backspace":
            item = find_item(self.items, item_id)
            if item is None or item.text != "":
                return False
            # Focus moves to the previous rendered row, not into collapsed children.
            if self._commit(mutations.delete_if_empty(self.items, item_id)) and index > 0:
                self.focus_id = ids[index - 1]
            return True
        if key == "ArrowUp" and index > 0:
            self.focus_id = ids[index - 1]
            return True
        if key == "ArrowDown" and 0 <= index < len(ids) - 1:
            self.focus_id = ids[index + 1]
            return True
        if key == "/":
            self.quick_pick_id = item_id
            return True
        if key == "Escape":
            self.focus_id = None
            return True
        return False
