"""Filter: MD5 hex digest of the selection."""

from __future__ import annotations

from exsel.capabilities import Digester
from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "MD5",
    "title": "MD5",
    "description_key": "MD5Desc",
    "aliases": ["md5"],
    "requires": "digester",
}


def run(context: SelectionContext, digester: Digester) -> str:
    return digester.hexdigest("md5", context.selection_text)
