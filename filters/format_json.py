"""Filter: pretty-print JSON through the formatter collaborator."""

from __future__ import annotations

from exsel.capabilities import Formatter
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "FormatJSON",
    "name_key": "FormatJSON",
    "description_key": "FormatJSONDesc",
    "aliases": ["json", "formatjson"],
    "requires": "formatter",
}


def run(context: SelectionContext, formatter: Formatter) -> str:
    return formatter.json(context.selection_text)
