"""Per-invocation selection snapshot handed to filters."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping


def _freeze(values: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType({str(key): str(value) for key, value in (values or {}).items()})


@dataclass(frozen=True)
class SelectionContext:
    selection_text: str = ""
    page_url: str = ""
    inputs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "selection_text", "" if self.selection_text is None else str(self.selection_text))
        object.__setattr__(self, "page_url", "" if self.page_url is None else str(self.page_url))
        object.__setattr__(self, "inputs", _freeze(self.inputs))

    def has_input(self, name: str) -> bool:
        return name in self.inputs

    def get_input(self, name: str, default: str = "") -> str:
        return self.inputs.get(name, default)

    def with_inputs(self, **values: str) -> "SelectionContext":
        merged = dict(self.inputs)
        merged.update(values)
        return replace(self, inputs=merged)


def parse_input_pairs(pairs: list[str] | None) -> dict[str, str]:
    """Parse repeated ``name=value`` CLI tokens into an inputs mapping."""

    values: dict[str, str] = {}
    for raw in pairs or []:
        name, sep, value = raw.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Input must use name=value form: {raw!r}")
        values[name] = value
    return values
