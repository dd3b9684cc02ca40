"""Filter: SHA-512 hex digest of the selection."""

from __future__ import annotations

from exsel.capabilities import Digester
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "SHA512",
    "title": "SHA512",
    "description_key": "SHA512Desc",
    "aliases": ["sha512"],
    "requires": "digester",
}


def run(context: SelectionContext, digester: Digester) -> str:
    return digester.hexdigest("sha512", context.selection_text)
