"""Filter: Base64 decoding back to UTF-8 text.

Malformed Base64 raises ``binascii.Error`` and undecodable bytes raise
``UnicodeDecodeError``; both propagate to the caller.
"""

from __future__ import annotations

import base64

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "Base64Decode",
    "name_key": "Base64Decode",
    "description_key": "Base64DecodeDesc",
    "aliases": ["b64decode", "unbase64"],
}


def run(context: SelectionContext) -> str:
    payload = "".join(context.selection_text.split())
    return base64.b64decode(payload, validate=True).decode("utf-8")
