"""Terminal implementations of the menu and interactive-input collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from exsel.colors import Colors, c
from exsel.dispatch import MenuTrigger
from exsel.selection import SelectionContext
from exsel.sieve_schema import TransformOutput


@dataclass(frozen=True)
class MenuItem:
    label: str
    trigger: MenuTrigger


class ConsoleMenuHost:
    """Keeps the created menu items so the CLI can list and pick them."""

    def __init__(self) -> None:
        self.items: list[MenuItem] = []

    def remove_all_menu_items(self) -> None:
        self.items.clear()

    def create_menu_item(self, label: str, trigger: MenuTrigger) -> None:
        self.items.append(MenuItem(label=label, trigger=trigger))

    def labels(self) -> list[str]:
        return [item.label for item in self.items]

    def pick(self, index: int, context: SelectionContext) -> TransformOutput:
        """Fire the 1-based menu item ``index`` with ``context``."""

        if index < 1 or index > len(self.items):
            raise IndexError(f"Menu item {index} does not exist (1-{len(self.items)}).")
        return self.items[index - 1].trigger(context)


class ConsoleInputProvider:
    """Blocking single-line prompt; end-of-input counts as an empty answer."""

    def request(self, label: str) -> str | None:
        try:
            return input(c(f"{label} ", Colors.YELLOW))
        except EOFError:
            return ""
