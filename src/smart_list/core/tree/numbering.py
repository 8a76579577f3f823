"""Auto-numbering labels for list rows."""

from smart_list.models.config import NumberingFormat

_ROMANS = ("", "i", "ii", "iii", "iv", "v", "vi", "vii", "viii", "ix", "x")

_CHILD_FORMATS: dict[str, NumberingFormat] = {
    "1.": "a)",
    "01.": "a)",
    "Step N": "a)",
    "a.": "i.",
    "a)": "i.",
    "i.": "a)",
}


def _letter(n: int) -> str:
    return chr(ord("a") + (n - 1) % 26)


def format_number(n: int, fmt: str) -> str:
    """Format the 1-based counter n in the given numbering style."""
    if fmt == "01.":
        return f"{n:02d}."
    if fmt == "a.":
        return f"{_letter(n)}."
    if fmt == "a)":
        return f"{_letter(n)})"
    if fmt == "i.":
        # Roman numerals only up to ten, arabic past that.
        return f"{_ROMANS[n] if 0 < n < len(_ROMANS) else n}."
    if fmt == "Step N":
        return f"Step {n}"
    return f"{n}."


def default_child_format(parent_format: str) -> NumberingFormat:
    """Derive the nested numbering style from the top-level one."""
    return _CHILD_FORMATS.get(parent_format, "a)")


def format_for_depth(
    depth: int,
    numbering_format: str | None,
    child_numbering_format: str | None,
) -> str:
    """Pick the numbering style used for rows at this depth."""
    top = numbering_format or "1."
    if depth == 0:
        return top
    return child_numbering_format or default_child_format(top)
