"""Filter: pretty-print SQL through the formatter collaborator."""

from __future__ import annotations

from exsel.capabilities import Formatter
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "FormatSQL",
    "name_key": "FormatSQL",
    "description_key": "FormatSQLDesc",
    "aliases": ["sql", "formatsql"],
    "requires": "formatter",
}


def run(context: SelectionContext, formatter: Formatter) -> str:
    return formatter.sql(context.selection_text)
