"""Filter: convert the selection to lower case."""

from __future__ import annotations

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "LowerCase",
    "name_key": "Lowercase",
    "description_key": "LowercaseDesc",
    "aliases": ["lower", "lowercase"],
}


def run(context: SelectionContext) -> str:
    return context.selection_text.lower()
