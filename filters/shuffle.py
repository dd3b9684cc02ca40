"""Filter: random permutation of the selection's characters.

The only intentionally non-deterministic filter. It draws from the
process-wide ``random`` source and exposes no seeding contract.
"""

from __future__ import annotations

import random

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "Shuffle",
    "name_key": "Shuffle",
    "description_key": "ShuffleDesc",
    "aliases": ["shuffle", "scramble"],
}


def run(context: SelectionContext) -> str:
    chars = list(context.selection_text)
    # Fisher-Yates, walking down from the last index.
    for i in range(len(chars) - 1, 0, -1):
        j = random.randint(0, i)
        chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)
