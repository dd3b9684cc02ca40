"""Filter: pretty-print XML through the formatter collaborator."""

from __future__ import annotations

from exsel.capabilities import Formatter
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "FormatXML",
    "name_key": "FormatXML",
    "description_key": "FormatXMLDesc",
    "aliases": ["xml", "formatxml"],
    "requires": "formatter",
}


def run(context: SelectionContext, formatter: Formatter) -> str:
    return formatter.xml(context.selection_text)
