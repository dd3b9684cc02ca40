"""Filter: SHA-1 hex digest of the selection."""

from __future__ import annotations

from exsel.capabilities import Digester
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "SHA1",
    "title": "SHA1",
    "description_key": "SHA1Desc",
    "aliases": ["sha1"],
    "requires": "digester",
}


def run(context: SelectionContext, digester: Digester) -> str:
    return digester.hexdigest("sha1", context.selection_text)
