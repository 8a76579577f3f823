"""Disclosure state machine for step-by-step presentation playback."""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from loguru import logger

from smart_list.config import DIMMED_OPACITY
from smart_list.core.tree.sections import split_sections
from smart_list.models.config import RevealMode
from smart_list.models.item import FlatListItem

NEXT_KEYS = frozenset({"ArrowRight", " "})
PREV_KEYS = frozenset({"ArrowLeft"})


@dataclass(frozen=True)
class DisclosureState:
    """Self-managed playback position."""

    mode: RevealMode
    step: int = 0


@dataclass(frozen=True)
class RevealOverride:
    """Reveal state supplied by the host's slide-step driver."""

    revealed_ids: frozenset[str]
    focused_id: str | None = None


@dataclass(frozen=True)
class RevealState:
    """Which rows are revealed at a step, and which one has focus."""

    step: int
    revealed_ids: frozenset[str]
    focused_id: str | None = None


def max_step(flat: Sequence[FlatListItem], mode: str) -> int:
    """Return the last reachable step for a mode (0 when there is nothing to step)."""
    if mode == "all-at-once":
        return 0
    if mode == "by-section":
        count = len(split_sections(f.item for f in flat))
    else:
        count = sum(1 for f in flat if not f.item.is_header)
    return max(count - 1, 0)


def next_step(state: DisclosureState, flat: Sequence[FlatListItem]) -> DisclosureState:
    """Advance one step, stopping at the last one."""
    step = min(state.step + 1, max_step(flat, state.mode))
    return state if step == state.step else replace(state, step=step)


def prev_step(state: DisclosureState, flat: Sequence[FlatListItem]) -> DisclosureState:
    """Go back one step, stopping at zero."""
    step = max(min(state.step, max_step(flat, state.mode)) - 1, 0)
    return state if step == state.step else replace(state, step=step)


def handle_disclosure_key(
    state: DisclosureState,
    key: str,
    flat: Sequence[FlatListItem],
    *,
    is_editing: bool = False,
    has_focus: bool = True,
    override: RevealOverride | None = None,
) -> DisclosureState:
    """Apply a key press to the playback state.

    Right arrow and space advance, left arrow goes back. Keys are ignored while
    editing, without input focus, in all-at-once mode, or when the host drives
    the reveal.
    """
    if is_editing or not has_focus or override is not None or state.mode == "all-at-once":
        return state
    if key in NEXT_KEYS:
        new_state = next_step(state, flat)
    elif key in PREV_KEYS:
        new_state = prev_step(state, flat)
    else:
        return state
    logger.debug("Disclosure {} step {} -> {}", state.mode, state.step, new_state.step)
    return new_state


def compute_reveal(flat: Sequence[FlatListItem], state: DisclosureState) -> RevealState:
    """Compute the revealed and focused rows for the current step.

    Headers are revealed once any item after them is revealed.
    """
    if state.mode == "all-at-once":
        return RevealState(step=0, revealed_ids=frozenset(f.item.id for f in flat))

    step = max(0, min(state.step, max_step(flat, state.mode)))
    if state.mode == "by-section":
        sections = split_sections(f.item for f in flat)
        if not sections:
            return RevealState(step=step, revealed_ids=frozenset())
        revealed = {item.id for section in sections[: step + 1] for item in section}
        focused = sections[step][0].id
    else:
        items = [f.item for f in flat if not f.item.is_header]
        if not items:
            return RevealState(step=step, revealed_ids=frozenset())
        revealed = {item.id for item in items[: step + 1]}
        focused = items[step].id

    last_index = max(f.flat_index for f in flat if f.item.id in revealed)
    revealed.update(f.item.id for f in flat if f.item.is_header and f.flat_index < last_index)
    return RevealState(step=step, revealed_ids=frozenset(revealed), focused_id=focused)


def resolve_reveal(
    flat: Sequence[FlatListItem],
    state: DisclosureState,
    *,
    override: RevealOverride | None = None,
) -> RevealState:
    """Return the host's reveal state when given, otherwise the self-managed one."""
    if override is not None:
        return RevealState(
            step=state.step,
            revealed_ids=override.revealed_ids,
            focused_id=override.focused_id,
        )
    return compute_reveal(flat, state)


def item_opacity(item_id: str, reveal: RevealState, mode: str) -> float:
    """Opacity of a row: 0 if unrevealed, dimmed if revealed but unfocused in focus mode."""
    if item_id not in reveal.revealed_ids:
        return 0.0
    if mode == "one-by-one-focus" and reveal.focused_id is not None:
        return 1.0 if item_id == reveal.focused_id else DIMMED_OPACITY
    return 1.0
