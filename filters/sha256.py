"""Filter: SHA-256 hex digest of the selection."""

from __future__ import annotations

from exsel.capabilities import Digester
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "SHA256",
    "title": "SHA256",
    "description_key": "SHA256Desc",
    "aliases": ["sha256"],
    "requires": "digester",
}


def run(context: SelectionContext, digester: Digester) -> str:
    return digester.hexdigest("sha256", context.selection_text)
