"""Filter: Base64 encoding of the UTF-8 encoded selection."""

from __future__ import annotations

import base64

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "Base64Encode",
    "name_key": "Base64Encode",
    "description_key": "Base64EncodeDesc",
    "aliases": ["b64encode", "base64"],
}


def run(context: SelectionContext) -> str:
    return base64.b64encode(context.selection_text.encode("utf-8")).decode("ascii")
