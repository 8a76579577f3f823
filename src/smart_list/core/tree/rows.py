"""Row views: the render boundary between the list engine and a renderer."""

from collections.abc import Sequence
from dataclasses import dataclass

from smart_list.config import DEFAULT_ACCENT_COLOR, DEFAULT_BULLET, FORMAT_ALPHA
from smart_list.core.state.disclosure import RevealState, item_opacity
from smart_list.icon_sets import default_registry
from smart_list.models.config import ListConfig
from smart_list.models.item import FlatListItem, Glyph, IconDisplay, IconRef, ResolvedIcon
from smart_list.protocols import IconRegistryProtocol


@dataclass(frozen=True)
class RowView:
    """Everything a renderer needs to draw one row."""

    item_id: str
    text: str
    depth: int
    flat_index: int
    is_header: bool = False
    number_label: str | None = None
    icon: IconDisplay | None = None
    secondary_icon: IconDisplay | None = None
    accent_color: str = DEFAULT_ACCENT_COLOR
    background: str | None = None
    opacity: float = 1.0
    hidden_in_presentation: bool = False
    description: str | None = None
    child_count: int = 0
    is_collapsed: bool = False
    has_detail_toggle: bool = False
    detail: str | None = None


def _resolve(registry: IconRegistryProtocol, ref: IconRef | None) -> ResolvedIcon | None:
    if ref is None:
        return None
    return registry.resolve_icon_ref(ref.set_id, ref.icon_id)


def build_rows(
    flat: Sequence[FlatListItem],
    config: ListConfig,
    *,
    registry: IconRegistryProtocol = default_registry,
    reveal: RevealState | None = None,
    expanded_detail_id: str | None = None,
    is_editing: bool = False,
) -> tuple[RowView, ...]:
    """Resolve icons, opacity and formatting for each flattened row.

    Args:
        flat: Output of the transform pipeline.
        config: List configuration.
        registry: Icon registry for resolving icon references.
        reveal: Disclosure reveal state; None renders every row fully opaque.
        expanded_detail_id: The row whose detail pane is open, if any.
        is_editing: Editing mode marks hidden rows instead of dropping them.
    """
    rows: list[RowView] = []
    for f in flat:
        item = f.item
        resolved = _resolve(registry, item.primary_icon)
        secondary = (
            _resolve(registry, item.secondary_icon) if config.secondary_icon_set_id else None
        )

        icon: IconDisplay | None = None
        if resolved is not None:
            icon = resolved.icon
        elif not item.is_header and f.number_label is None:
            # The number label is the bullet when numbering is shown.
            icon = Glyph(DEFAULT_BULLET)

        background = None
        if config.conditional_formatting and resolved is not None:
            background = resolved.color + FORMAT_ALPHA.get(config.intensity, FORMAT_ALPHA["subtle"])

        has_detail_toggle = config.detail_mode != "none" and bool(item.detail)
        rows.append(
            RowView(
                item_id=item.id,
                text=item.text,
                depth=f.depth,
                flat_index=f.flat_index,
                is_header=item.is_header,
                number_label=f.number_label,
                icon=icon,
                secondary_icon=secondary.icon if secondary else None,
                accent_color=resolved.color if resolved else DEFAULT_ACCENT_COLOR,
                background=background,
                opacity=1.0 if reveal is None else item_opacity(item.id, reveal, config.reveal_mode),
                hidden_in_presentation=is_editing and item.is_hidden,
                description=item.description,
                child_count=len(item.children),
                is_collapsed=f.is_collapsed,
                has_detail_toggle=has_detail_toggle,
                detail=item.detail if has_detail_toggle and expanded_detail_id == item.id else None,
            )
        )
    return tuple(rows)
