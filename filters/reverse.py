"""Filter: reverse the selection character by character."""

from __future__ import annotations

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "Reverse",
    "name_key": "Reverse",
    "description_key": "ReverseDesc",
    "aliases": ["reverse", "rev"],
}


def run(context: SelectionContext) -> str:
    return context.selection_text[::-1]
