"""Prompt command parsing and session-state mutation helpers."""

from __future__ import annotations

import argparse
from typing import Callable

from exsel.cli_config import PROMPT_KEYWORDS
from exsel.colors import Colors, c
from exsel.session_state import PromptSessionState


ON_VALUES = {"on", "yes", "true", "1"}
OFF_VALUES = {"off", "no", "false", "0"}
CLEAR_VALUES = {"none", "off", "clear", "-"}


def keyword_to_command(value: str) -> str | None:
    lowered = value.strip().lower()
    for command, keywords in PROMPT_KEYWORDS.items():
        if lowered in keywords:
            return command
    return None


def rewrite_tokens_with_keywords(tokens: list[str]) -> list[str]:
    if not tokens:
        return tokens
    mapped = keyword_to_command(tokens[0])
    if mapped:
        return [mapped, *tokens[1:]]
    return tokens


def parse_menu_pick(tokens: list[str]) -> tuple[int, str] | None:
    """``3 some text`` or ``pick 3 some text`` selects menu item 3."""

    if tokens and tokens[0].lower() in {"pick", "#"}:
        tokens = tokens[1:]
    if not tokens or not tokens[0].isdigit():
        return None
    return int(tokens[0]), " ".join(tokens[1:])


def apply_prompt_defaults(args: argparse.Namespace, session: PromptSessionState) -> argparse.Namespace:
    if str(getattr(args, "command", "")) not in {"apply", "run", "transform"}:
        return args

    if not getattr(args, "url", ""):
        args.url = session.page_url
    if session.inputs:
        # Explicit --input pairs come last so they override session values.
        session_pairs = [f"{name}={value}" for name, value in session.inputs.items()]
        args.inputs = [*session_pairs, *(getattr(args, "inputs", None) or [])]
    if not session.notify:
        args.no_notify = True
    return args


def handle_prompt_set_command(
    command_text: str,
    session: PromptSessionState,
    *,
    on_message: Callable[[str, str], None] | None = None,
) -> bool:
    def _emit(message: str, color: str) -> None:
        if on_message is None:
            print(c(message, color))
            return
        on_message(message, color)

    tokens = command_text.strip().split(maxsplit=2)
    if len(tokens) != 3:
        _emit("Usage: set <url|input|notify> <value>", Colors.YELLOW)
        return True

    _, key, value = tokens
    key = key.strip().lower()
    value = value.strip()

    if key == "url":
        session.page_url = "" if value.lower() in CLEAR_VALUES else value
        _emit(f"Source URL set to: {session.page_url or '-'}", Colors.GREEN)
        return True

    if key == "input":
        if value.lower() in CLEAR_VALUES:
            session.inputs = {}
            _emit("Session inputs cleared.", Colors.GREEN)
            return True
        name, sep, raw = value.partition("=")
        name = name.strip()
        if not sep or not name:
            _emit("Usage: set input <name=value|none>", Colors.YELLOW)
            return True
        session.inputs[name] = raw
        _emit(f"Session inputs: {session.inputs_label()}", Colors.GREEN)
        return True

    if key == "notify":
        lowered = value.lower()
        if lowered in ON_VALUES:
            session.notify = True
        elif lowered in OFF_VALUES:
            session.notify = False
        else:
            _emit(f"Invalid notify value: {value} (use on/off)", Colors.RED)
            return True
        _emit(f"Notifications: {'on' if session.notify else 'off'}", Colors.GREEN)
        return True

    _emit(f"Unknown set key: {key}", Colors.YELLOW)
    return True
