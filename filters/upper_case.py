"""Filter: convert the selection to upper case."""

from __future__ import annotations

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "UpperCase",
    "name_key": "Uppercase",
    "description_key": "UppercaseDesc",
    "aliases": ["upper", "uppercase"],
}


def run(context: SelectionContext) -> str:
    return context.selection_text.upper()
