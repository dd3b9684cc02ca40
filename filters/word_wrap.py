"""Filter: wrap the selection to a fixed line width.

The width is asked for interactively. Hard-cut mode is optional and off
unless the ``cut`` input is truthy; it is never prompted for.
"""

from __future__ import annotations

import re

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "WordWrap",
    "name_key": "WordWrap",
    "description_key": "WordWrapDesc",
    "aliases": ["wrap", "wordwrap", "fold"],
    "inputs": [
        {"name": "width", "label": "Line Width:"},
        {"name": "cut", "label": "Hard cut (y/n):", "required": False},
    ],
}

DEFAULT_WIDTH = 75
LINE_BREAK = "\n"
TRUTHY = {"1", "true", "yes", "y", "on"}


def parse_width(raw: str) -> int:
    try:
        width = int(str(raw).strip())
    except ValueError:
        return DEFAULT_WIDTH
    return width if width > 0 else DEFAULT_WIDTH


def wordwrap(text: str, width: int = DEFAULT_WIDTH, line_break: str = LINE_BREAK, cut: bool = False) -> str:
    if not text:
        return text

    if cut:
        pattern = rf".{{1,{width}}}(\s|\Z)|.{{{width}}}|.+\Z"
    else:
        pattern = rf".{{1,{width}}}(\s|\Z)|\S+?(\s|\Z)"
    pieces = [match.group(0) for match in re.finditer(pattern, text)]
    return line_break.join(pieces)


def run(context: SelectionContext) -> str:
    width = parse_width(context.get_input("width"))
    cut = context.get_input("cut").strip().lower() in TRUTHY
    return wordwrap(context.selection_text, width, LINE_BREAK, cut)
