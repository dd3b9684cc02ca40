"""CLI parser construction helpers for root and prompt modes."""

from __future__ import annotations

import argparse
from typing import NoReturn

from exsel.cli_config import APPLY_ALIASES, HISTORY_ALIASES
from exsel.settings import SETTING_KEYS


class InteractiveArgumentParser(argparse.ArgumentParser):
    """Arg parser variant that raises ValueError instead of exiting."""

    def error(self, message: str) -> NoReturn:  # pragma: no cover - argparse hook
        raise ValueError(message)


def positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Value must be an integer.") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Value must be greater than zero.")
    return parsed


def setting_assignment(value: str) -> tuple[str, str]:
    key, sep, raw = value.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError("Use KEY=VALUE.")
    if key not in SETTING_KEYS:
        raise argparse.ArgumentTypeError(f"Unknown setting '{key}'. Known: {', '.join(SETTING_KEYS)}.")
    return key, raw


def _add_toggle_flags(parser: argparse.ArgumentParser, name: str, label: str) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        f"--{name}",
        dest=name,
        action="store_const",
        const=True,
        default=None,
        help=f"Enable {label}.",
    )
    group.add_argument(
        f"--no-{name}",
        dest=name,
        action="store_const",
        const=False,
        help=f"Disable {label}.",
    )


def _add_apply_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("filter_name", help="Filter id or alias (see `filters`).")
    parser.add_argument(
        "text",
        nargs="*",
        help="Selected text; words are joined with single spaces. Use - to read stdin.",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read the selected text from standard input.",
    )
    parser.add_argument("--url", default="", help="Source page URL reported with the result.")
    parser.add_argument(
        "--input",
        dest="inputs",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Auxiliary filter input, e.g. --input search=foo (repeatable).",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Print only the modified value.",
    )
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Skip every notification channel (history, log, clipboard, webhook).",
    )
    parser.add_argument(
        "--notify-url",
        default=None,
        help="POST each result as JSON to this http(s) endpoint.",
    )
    _add_toggle_flags(parser, "desktop", "the on-screen result notification")
    _add_toggle_flags(parser, "clipboard", "copying the result to the clipboard")


def _add_filters_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--active",
        action="store_true",
        help="Only list filters that are on the active menu.",
    )


def _add_history_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--limit",
        type=positive_int,
        default=25,
        help="Maximum number of recorded results to list from output/data.",
    )


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=setting_assignment,
        default=[],
        metavar="KEY=VALUE",
        help="Persist a setting (repeatable).",
    )
    group.add_argument(
        "--filters",
        dest="filter_list",
        default=None,
        help="Persist the active filter list as comma-separated ids (empty for none).",
    )
    group.add_argument("--unset", choices=list(SETTING_KEYS), default=None, help="Remove one setting.")
    group.add_argument("--reset", action="store_true", help="Remove every persisted setting.")


def _add_global_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--settings",
        dest="settings_path",
        default=None,
        help="Settings JSON file (default: $EXSEL_SETTINGS or output/config/settings.json).",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="Display-string locale (default: $EXSEL_LOCALE or en).",
    )


def build_root_parser(*, project_name: str, version: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="excellent-selection.py",
        description=f"{project_name} v{version} text filter runner (flags + prompt + keyword system).",
    )
    parser.add_argument(
        "--about",
        dest="about_flag",
        action="store_true",
        help="Show framework description and exit.",
    )
    parser.add_argument(
        "--explain",
        dest="explain_flag",
        action="store_true",
        help="Show plain-language command and filter explanations and exit.",
    )
    _add_global_args(parser)
    subparsers = parser.add_subparsers(dest="command")

    apply_parser = subparsers.add_parser(
        "apply",
        aliases=list(APPLY_ALIASES),
        help="Run one filter over the selected text.",
    )
    _add_apply_args(apply_parser)

    subparsers.add_parser("menu", help="Build and show the active filter menu.")
    filters_parser = subparsers.add_parser("filters", help="List every registered filter.")
    _add_filters_args(filters_parser)
    history_parser = subparsers.add_parser(
        "history",
        aliases=list(HISTORY_ALIASES),
        help="List recorded filter results from output/data.",
    )
    _add_history_args(history_parser)
    config_parser = subparsers.add_parser("config", help="Show or change persisted settings.")
    _add_config_args(config_parser)
    subparsers.add_parser("keywords", help="List prompt keyword mappings.")
    subparsers.add_parser("help", help="Show command-line usage help.")
    subparsers.add_parser("about", help="Display framework metadata.")
    subparsers.add_parser("explain", help="Display plain-language command and filter explanations.")
    subparsers.add_parser("prompt", help="Start interactive prompt mode.")
    return parser


def build_prompt_parser() -> InteractiveArgumentParser:
    parser = InteractiveArgumentParser(prog="", add_help=False)
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    apply_parser = subparsers.add_parser("apply", aliases=list(APPLY_ALIASES), add_help=False)
    _add_apply_args(apply_parser)

    subparsers.add_parser("menu", add_help=False)
    filters_parser = subparsers.add_parser("filters", add_help=False)
    _add_filters_args(filters_parser)
    history_parser = subparsers.add_parser("history", aliases=list(HISTORY_ALIASES), add_help=False)
    _add_history_args(history_parser)
    config_parser = subparsers.add_parser("config", add_help=False)
    _add_config_args(config_parser)
    subparsers.add_parser("keywords", add_help=False)
    subparsers.add_parser("help", add_help=False)
    subparsers.add_parser("about", add_help=False)
    subparsers.add_parser("explain", add_help=False)
    return parser
