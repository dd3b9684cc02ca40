"""Filter: pretty-print CSS through the formatter collaborator."""

from __future__ import annotations

from exsel.capabilities import Formatter
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "FormatCSS",
    "name_key": "FormatCSS",
    "description_key": "FormatCSSDesc",
    "aliases": ["css", "formatcss"],
    "requires": "formatter",
}


def run(context: SelectionContext, formatter: Formatter) -> str:
    return formatter.css(context.selection_text)
