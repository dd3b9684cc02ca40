"""ANSI color helpers for console output."""

from __future__ import annotations

import os
import sys


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GREY = "\033[90m"


def colors_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    return bool(getattr(sys.stdout, "isatty", lambda: False)())


def c(text: str, color: str) -> str:
    if not colors_enabled():
        return text
    return f"{color}{text}{Colors.RESET}"
