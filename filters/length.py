"""Filter: character count of the selection."""

from __future__ import annotations

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "Length",
    "name_key": "Length",
    "description_key": "LengthDesc",
    "aliases": ["len", "chars", "charcount"],
}


def run(context: SelectionContext) -> int:
    return len(context.selection_text)
