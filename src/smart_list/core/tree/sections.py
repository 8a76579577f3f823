"""Sections: maximal runs of non-header items between headers."""

from collections.abc import Iterable

from smart_list.models.item import ListItem


def split_sections(items: Iterable[ListItem]) -> list[list[ListItem]]:
    """Split an ordered item sequence into sections.

    Headers close the current run. Runs without any item are not sections,
    so consecutive headers (or a leading header) do not create empty ones.
    """
    sections: list[list[ListItem]] = []
    current: list[ListItem] = []
    for item in items:
        if item.is_header:
            if current:
                sections.append(current)
            current = []
        else:
            current.append(item)
    if current:
        sections.append(current)
    return sections


def section_index_by_id(items: Iterable[ListItem]) -> dict[str, int]:
    """Map every item id to the index of its section.

    Indexes agree with split_sections. Headers map to the section they open.
    """
    index_by_id: dict[str, int] = {}
    index = 0
    run_open = False
    for item in items:
        if item.is_header:
            if run_open:
                index += 1
                run_open = False
        else:
            run_open = True
        index_by_id[item.id] = index
    return index_by_id
