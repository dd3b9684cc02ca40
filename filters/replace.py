"""Filter: regular-expression search and replace.

Both the pattern and the replacement are auxiliary inputs. Every match is
replaced. The replacement understands ``$1``..``$99`` group references, ``$&``
for the whole match and ``$$`` for a literal dollar sign; everything else,
backslashes included, is inserted literally.
"""

from __future__ import annotations

import re

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "Replace",
    "name_key": "Replace",
    "description_key": "ReplaceDesc",
    "aliases": ["replace", "sub", "regex"],
    "inputs": [
        {"name": "search", "label": "Search:"},
        {"name": "replace", "label": "Replace:"},
    ],
}

TOKEN_PATTERN = re.compile(r"\$(\$|&|\d{1,2})")


def expand_replacement(match: re.Match, template: str) -> str:
    group_count = match.re.groups

    def _token(token: re.Match) -> str:
        value = token.group(1)
        if value == "$":
            return "$"
        if value == "&":
            return match.group(0)
        index = int(value)
        if index > group_count and len(value) == 2 and 1 <= int(value[0]) <= group_count:
            # "$12" with a single group means group 1 followed by "2".
            return (match.group(int(value[0])) or "") + value[1]
        if index == 0 or index > group_count:
            return token.group(0)
        return match.group(index) or ""

    return TOKEN_PATTERN.sub(_token, template)


def run(context: SelectionContext) -> str:
    pattern = re.compile(context.get_input("search"))
    template = context.get_input("replace")
    return pattern.sub(lambda match: expand_replacement(match, template), context.selection_text)
