"""Plain-text rendering of grouped and flat record views."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .constants import EMPTY_LIST_TEXT, EMPTY_SEARCH_TEXT
from .models import Group
from .records import Record


def format_flat(
    records: Sequence[Record],
    label: Callable[[Record], str],
    *,
    empty_text: str = EMPTY_LIST_TEXT,
) -> str:
    """Render records as a numbered list."""
    if not records:
        return empty_text

    num_width = len(str(len(records)))
    lines = []
    for num, record in enumerate(records, 1):
        lines.append(f"{str(num).rjust(num_width)}. {label(record)}")
    return "\n".join(lines)


def format_search_results(records: Sequence[Record], label: Callable[[Record], str]) -> str:
    return format_flat(records, label, empty_text=EMPTY_SEARCH_TEXT)


def format_grouped(
    groups: Sequence[Group],
    label: Callable[[Record], str],
    group_label: Callable[[str, Sequence[Record]], str],
) -> str:
    """Render groups as headed blocks separated by blank lines.

    Row numbers run across all groups so every row has a unique number.
    """
    if not groups:
        return EMPTY_LIST_TEXT

    total_count = sum(len(group.records) for group in groups)
    num_width = len(str(total_count))

    lines: list[str] = []
    num = 0
    for group_index, group in enumerate(groups):
        lines.append(group_label(group.name, group.records))
        for record in group.records:
            num += 1
            lines.append(f"  {str(num).rjust(num_width)}. {label(record)}")
        if group_index < len(groups) - 1:
            lines.append("")

    return "\n".join(lines)
