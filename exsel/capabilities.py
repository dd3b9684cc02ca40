"""Delegated collaborators used by the formatter and digest filters.

The core only relies on the input/output contract of these capabilities:
text in, text out, or an exception for malformed input. Any exception raised
here is propagated to the caller of the dispatch engine untouched.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Protocol

import cssbeautifier
import sqlparse
from defusedxml import minidom


INDENT = "    "
SUPPORTED_DIGESTS = ("md5", "sha1", "sha256", "sha512")


class Formatter(Protocol):
    def xml(self, text: str) -> str: ...

    def json(self, text: str) -> str: ...

    def css(self, text: str) -> str: ...

    def sql(self, text: str) -> str: ...


class Digester(Protocol):
    def hexdigest(self, algorithm: str, text: str) -> str: ...


class BeautifyFormatter:
    """Pretty-printer backed by defusedxml, json, cssbeautifier and sqlparse."""

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent

    def xml(self, text: str) -> str:
        document = minidom.parseString(text.strip())
        pretty = document.toprettyxml(indent=self.indent)
        lines = [line for line in pretty.splitlines() if line.strip()]
        if lines and lines[0].startswith("<?xml") and not text.lstrip().startswith("<?xml"):
            lines = lines[1:]
        return "\n".join(lines)

    def json(self, text: str) -> str:
        return json.dumps(json.loads(text), indent=len(self.indent), ensure_ascii=False)

    def css(self, text: str) -> str:
        options = cssbeautifier.default_options()
        options.indent_size = len(self.indent)
        options.indent_char = " "
        return cssbeautifier.beautify(text, options)

    def sql(self, text: str) -> str:
        return sqlparse.format(text, reindent=True, indent_width=len(self.indent)).strip()


class HashlibDigester:
    def hexdigest(self, algorithm: str, text: str) -> str:
        name = algorithm.strip().lower()
        if name not in SUPPORTED_DIGESTS:
            raise ValueError(f"Unsupported digest algorithm: {algorithm}")
        return hashlib.new(name, text.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class Capabilities:
    formatter: Formatter = field(default_factory=BeautifyFormatter)
    digester: Digester = field(default_factory=HashlibDigester)

    def get(self, name: str) -> object:
        if name == "formatter":
            return self.formatter
        if name == "digester":
            return self.digester
        raise KeyError(f"Unknown capability: {name}")
