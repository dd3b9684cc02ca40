"""Filter: percent-encode the selection for use in a URL."""

from __future__ import annotations

from urllib.parse import quote

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "UrlEncode",
    "name_key": "URLEncode",
    "description_key": "URLEncodeDesc",
    "aliases": ["urlencode", "escape", "url"],
}

# Alphanumerics and "_.-~" are always kept by quote().
SAFE_CHARS = "@*+/"


def run(context: SelectionContext) -> str:
    return quote(context.selection_text, safe=SAFE_CHARS)
