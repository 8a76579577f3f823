"""Built-in icon sets and the registry that serves them."""

from smart_list.models.item import Custom, Glyph, IconSet, IconSetEntry, ResolvedIcon


def _set(set_id: str, name: str, description: str, *entries: IconSetEntry) -> IconSet:
    return IconSet(id=set_id, name=name, description=description, entries=entries, built_in=True)


ICON_SET_BULLETS = _set(
    "bullets",
    "Bullets",
    "Simple bullet point styles",
    IconSetEntry("filled", "Filled", Glyph("●"), "#94a3b8"),
    IconSetEntry("hollow", "Hollow", Glyph("○"), "#94a3b8"),
    IconSetEntry("dash", "Dash", Glyph("—"), "#94a3b8"),
    IconSetEntry("arrow", "Arrow", Glyph("→"), "#94a3b8"),
    IconSetEntry("check", "Check", Glyph("✓"), "#22c55e"),
)

ICON_SET_TASK_STATUS = _set(
    "task-status",
    "Task Status",
    "To-do, in progress, done, blocked",
    IconSetEntry("todo", "To Do", Glyph("○"), "#94a3b8"),
    IconSetEntry("in-progress", "In Progress", Glyph("◐"), "#3b82f6"),
    IconSetEntry("done", "Done", Glyph("●"), "#22c55e"),
    IconSetEntry("blocked", "Blocked", Glyph("⊘"), "#ef4444"),
)

ICON_SET_PRIORITY = _set(
    "priority",
    "Priority",
    "P1 critical through P4 low",
    IconSetEntry("p1", "P1 Critical", Glyph("🔴"), "#ef4444"),
    IconSetEntry("p2", "P2 High", Glyph("🟠"), "#f97316"),
    IconSetEntry("p3", "P3 Medium", Glyph("🟡"), "#eab308"),
    IconSetEntry("p4", "P4 Low", Glyph("🟢"), "#22c55e"),
)

ICON_SET_RISK = _set(
    "risk",
    "Risk / Warning",
    "OK, warning, issue, risk, critical",
    IconSetEntry("ok", "OK", Glyph("✅"), "#22c55e"),
    IconSetEntry("warning", "Warning", Glyph("⚠️"), "#eab308"),
    IconSetEntry("issue", "Issue", Glyph("⛔"), "#f97316"),
    IconSetEntry("risk", "Risk", Glyph("🔥"), "#ef4444"),
)

# Drawn by the host's icon library; the handle names the component.
ICON_SET_CHECKBOX = _set(
    "checkbox",
    "Checkbox",
    "Square checkbox icons: unchecked, checked, partial, cancelled",
    IconSetEntry("unchecked", "Unchecked", Custom("lucide:square"), "#94a3b8"),
    IconSetEntry("checked", "Checked", Custom("lucide:square-check"), "#22c55e"),
    IconSetEntry("partial", "Partial", Custom("lucide:square-minus"), "#3b82f6"),
    IconSetEntry("cancelled", "Cancelled", Custom("lucide:square-x"), "#ef4444"),
)

ICON_SET_CIRCLE_CHECK = _set(
    "circle-check",
    "Circle Status",
    "Circle icons: empty, active, done, blocked, cancelled",
    IconSetEntry("empty", "To Do", Custom("lucide:circle"), "#94a3b8"),
    IconSetEntry("active", "In Progress", Custom("lucide:circle-dot"), "#3b82f6"),
    IconSetEntry("done", "Done", Custom("lucide:circle-check"), "#22c55e"),
    IconSetEntry("blocked", "Blocked", Custom("lucide:circle-slash"), "#ef4444"),
    IconSetEntry("cancelled", "Cancelled", Custom("lucide:circle-x"), "#6b7280"),
)

BUILT_IN_ICON_SETS: dict[str, IconSet] = {
    s.id: s
    for s in (
        ICON_SET_BULLETS,
        ICON_SET_TASK_STATUS,
        ICON_SET_PRIORITY,
        ICON_SET_RISK,
        ICON_SET_CHECKBOX,
        ICON_SET_CIRCLE_CHECK,
    )
}


class BuiltInIconRegistry:
    """Registry over a fixed mapping of icon sets (the built-ins by default)."""

    def __init__(self, icon_sets: dict[str, IconSet] | None = None) -> None:
        self.icon_sets = dict(BUILT_IN_ICON_SETS if icon_sets is None else icon_sets)

    def get_icon_set(self, set_id: str) -> IconSet | None:
        return self.icon_sets.get(set_id)

    def all_icon_sets(self) -> tuple[IconSet, ...]:
        return tuple(self.icon_sets.values())

    def resolve_icon_ref(self, set_id: str, icon_id: str) -> ResolvedIcon | None:
        icon_set = self.get_icon_set(set_id)
        if icon_set is None:
            return None
        for entry in icon_set.entries:
            if entry.id == icon_id:
                return ResolvedIcon(icon=entry.icon, color=entry.color, label=entry.label)
        return None


default_registry = BuiltInIconRegistry()
