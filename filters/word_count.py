"""Filter: whitespace-delimited word count."""

from __future__ import annotations

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "WordCount",
    "name_key": "WordCount",
    "description_key": "WordCountDesc",
    "aliases": ["words", "wordcount", "wc"],
}


def run(context: SelectionContext) -> int:
    return len(context.selection_text.split())
