"""Filter: remove space characters.

Only U+0020 is removed; tabs and line breaks are kept on purpose.
"""

from __future__ import annotations

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "RemoveWhitespace",
    "name_key": "RemoveWhitespace",
    "description_key": "RemoveWhitespaceDesc",
    "aliases": ["nospace", "removespaces", "trimspaces"],
}


def run(context: SelectionContext) -> str:
    return context.selection_text.replace(" ", "")
