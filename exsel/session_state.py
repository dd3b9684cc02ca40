"""Prompt session state helpers."""

from __future__ import annotations

from dataclasses import dataclass, field


def _compact_prompt_value(value: str, *, max_length: int = 24) -> str:
    if not value:
        return "-"
    if len(value) <= max_length:
        return value
    return f"{value[: max_length - 3]}..."


@dataclass
class PromptSessionState:
    page_url: str = ""
    inputs: dict[str, str] = field(default_factory=dict)
    notify: bool = True
    menu_size: int = 0

    def inputs_label(self) -> str:
        if not self.inputs:
            return "none"
        return ",".join(sorted(self.inputs))

    def module_prompt(self) -> str:
        return (
            f"(exsel menu={self.menu_size} url={_compact_prompt_value(self.page_url)} "
            f"notify={'on' if self.notify else 'off'})>>"
        )
