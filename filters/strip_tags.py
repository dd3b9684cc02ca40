"""Filter: naive HTML tag removal.

Not parser-accurate: anything between ``<`` and the next ``>`` is dropped, so
a tag with ``>`` inside an attribute value leaves its tail behind.
"""

from __future__ import annotations

import re

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "StripTags",
    "name_key": "StripTags",
    "description_key": "StripTagsDesc",
    "aliases": ["striptags", "untag", "notags"],
}

TAG_PATTERN = re.compile(r"(<([^>]+)>)", re.IGNORECASE)


def run(context: SelectionContext) -> str:
    return TAG_PATTERN.sub("", context.selection_text)
