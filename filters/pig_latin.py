"""Filter: Pig Latin.

Two ordered passes over the selection. The first suffixes vowel-initial words
with "way"; the second moves the leading consonant cluster of the remaining
words to the end and appends "ay". The second pass reads the original text,
not the first pass's output, so it wins whenever it changes anything: mixed
input such as "pig apple" comes out as "igpay apple". The first pass's
result is kept only when the second pass leaves the text untouched.
"""

from __future__ import annotations

import re

from exsel.selection import SelectionContext


FILTER_SPEC = {
    "id": "PigLatin",
    "title": "Pig Latin",
    "description_key": "PigLatinDesc",
    "aliases": ["piglatin", "pig"],
}

FIRST_PASS = re.compile(r"\b([aeiou][a-z]*)\b", re.IGNORECASE | re.ASCII)
SECOND_PASS = re.compile(r"\b([bcdfghjklmnpqrstvwxy]+)([a-z]*)\b", re.IGNORECASE | re.ASCII)


def run(context: SelectionContext) -> str:
    original = context.selection_text
    text = FIRST_PASS.sub(r"\1way", original)
    second = SECOND_PASS.sub(r"\2\1ay", original)
    if second != original:
        text = second
    return text
