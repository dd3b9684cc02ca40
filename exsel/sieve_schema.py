"""Filter descriptor schema definitions for Excellent Selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from exsel.selection import SelectionContext


TransformOutput = Union[str, int]
TransformFn = Callable[[SelectionContext], TransformOutput]


@dataclass(frozen=True)
class FilterInput:
    """Auxiliary input a filter needs beyond the selected text."""

    name: str
    label: str
    required: bool = True


@dataclass(frozen=True)
class FilterSpec:
    filter_id: str
    name: str
    description: str
    transform: TransformFn
    inputs: tuple[FilterInput, ...] = ()
    aliases: tuple[str, ...] = ()
    version: str = "1.0"

    def required_inputs(self) -> tuple[FilterInput, ...]:
        return tuple(item for item in self.inputs if item.required)


@dataclass(frozen=True)
class MenuEntry:
    filter_id: str
    label: str
