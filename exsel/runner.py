"""Main runner orchestration for Excellent Selection."""

from __future__ import annotations

import argparse
import os
import shlex
import sys
from dataclasses import dataclass
from typing import Any, Sequence

from exsel.about import build_about_text
from exsel.banner import show_banner
from exsel.cli_config import PROMPT_KEYWORDS
from exsel.cli_parsers import build_prompt_parser as _build_prompt_parser
from exsel.cli_parsers import build_root_parser as _build_root_parser
from exsel.colors import Colors, c
from exsel.console_host import ConsoleInputProvider, ConsoleMenuHost
from exsel.dispatch import DispatchEngine, InputProvider, NoInputProvider
from exsel.explain import build_explain_text
from exsel.help_menu import show_flag_help, show_prompt_help
from exsel.i18n import load_localizer
from exsel.metadata import PROJECT_NAME, VERSION, framework_signature
from exsel.network import get_notify_url
from exsel.notify import (
    ClipboardNotifier,
    ConsoleNotifier,
    FrameworkLogNotifier,
    HistoryNotifier,
    Notifier,
    WebhookNotifier,
)
from exsel.output import append_framework_log, print_history, print_menu
from exsel.prompt_handlers import (
    apply_prompt_defaults as _apply_prompt_defaults_impl,
    handle_prompt_set_command as _handle_prompt_set_command_impl,
    keyword_to_command as _keyword_to_command_impl,
    parse_menu_pick,
    rewrite_tokens_with_keywords as _rewrite_tokens_with_keywords_impl,
)
from exsel.reporter import ResultReporter
from exsel.selection import SelectionContext, parse_input_pairs
from exsel.session_state import PromptSessionState
from exsel.settings import (
    FALSE_VALUES,
    KEY_CLIPBOARD_WRITE,
    KEY_DESKTOP_NOTIFICATION,
    KEY_VISIBLE_FILTERS,
    TRUE_VALUES,
    Configuration,
    ConfigurationStore,
    JsonFileBackend,
)
from exsel.signal_sieve import FilterRegistry, UnknownFilterError, build_default_registry, list_filter_descriptors
from exsel.storage import ensure_output_tree


EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

BOOLEAN_SETTINGS = {KEY_DESKTOP_NOTIFICATION, KEY_CLIPBOARD_WRITE}


@dataclass
class RunnerState:
    settings_path: str | None = None
    locale: str | None = None


@dataclass
class Runtime:
    registry: FilterRegistry
    store: ConfigurationStore
    host: ConsoleMenuHost
    engine: DispatchEngine
    console_output: bool


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def ask(message: str) -> str:
    return input(c(message, Colors.YELLOW)).strip()


def _can_prompt_user() -> bool:
    return bool(getattr(sys.stdin, "isatty", lambda: False)())


def build_registry(state: RunnerState) -> FilterRegistry:
    return build_default_registry(localizer=load_localizer(state.locale))


def settings_backend(state: RunnerState) -> JsonFileBackend:
    return JsonFileBackend(state.settings_path)


def build_notifiers(
    configuration: Configuration,
    *,
    desktop: bool | None = None,
    clipboard: bool | None = None,
    notify_url: str | None = None,
) -> list[Notifier]:
    """Notification channels for one run; flag overrides win over settings."""

    show_desktop = configuration.desktop_notification if desktop is None else desktop
    write_clipboard = configuration.clipboard_write if clipboard is None else clipboard

    notifiers: list[Notifier] = []
    if show_desktop:
        notifiers.append(ConsoleNotifier())
    if write_clipboard:
        notifiers.append(ClipboardNotifier())
    notifiers.append(FrameworkLogNotifier())
    notifiers.append(HistoryNotifier())
    if notify_url:
        notifiers.append(WebhookNotifier(notify_url))
    return notifiers


def build_runtime(
    state: RunnerState,
    *,
    registry: FilterRegistry | None = None,
    desktop: bool | None = None,
    clipboard: bool | None = None,
    notify_url: str | None = None,
    integrated: bool = True,
    input_provider: InputProvider | None = None,
) -> Runtime:
    registry = registry or build_registry(state)
    store = ConfigurationStore(settings_backend(state))
    notifiers = build_notifiers(store.load(), desktop=desktop, clipboard=clipboard, notify_url=notify_url)
    reporter = ResultReporter(notifiers, integrated=integrated)
    host = ConsoleMenuHost()
    engine = DispatchEngine(
        registry,
        store,
        host,
        input_provider=input_provider,
        reporter=reporter,
    )
    console_output = integrated and any(isinstance(item, ConsoleNotifier) for item in notifiers)
    return Runtime(registry=registry, store=store, host=host, engine=engine, console_output=console_output)


def _keyword_to_command(value: str) -> str | None:
    return _keyword_to_command_impl(value)


def _print_keyword_inventory() -> None:
    print(c("\n[ Prompt Keywords ]", Colors.BLUE))
    print(c("------------------------------------", Colors.BLUE))
    for command, keywords in PROMPT_KEYWORDS.items():
        print(c(f"{command}: {', '.join(sorted(keywords))}", Colors.CYAN))
    print()


def _print_filter_inventory(registry: FilterRegistry, active_ids: Sequence[str], *, active_only: bool = False) -> None:
    active = set(active_ids)
    rows = list_filter_descriptors(registry)
    if active_only:
        rows = [row for row in rows if row["id"] in active]
    title_suffix = "active" if active_only else f"{len(rows)} registered"
    print(c(f"\n[ Filters ] ({title_suffix})", Colors.BLUE))
    print(c("------------------------------------", Colors.BLUE))
    if not rows:
        print(c("No filters to list.", Colors.YELLOW))
        print()
        return

    for row in rows:
        marker = "*" if row["id"] in active else " "
        aliases = row.get("aliases", [])
        alias_text = ", ".join(aliases) if aliases else "-"
        inputs = row.get("inputs", [])
        print(c(f"{marker} {row.get('id')} - {row.get('name') or row.get('id')}", Colors.CYAN))
        print(c(f"  aliases: {alias_text}", Colors.GREY))
        if inputs:
            print(c(f"  inputs: {', '.join(inputs)}", Colors.GREY))
        if row.get("description"):
            print(c(f"  desc: {row.get('description')}", Colors.GREY))
    print(c("\n* on the active menu", Colors.GREY))
    print()


def _print_configuration(state: RunnerState, registry: FilterRegistry, session: PromptSessionState | None = None) -> None:
    backend = settings_backend(state)
    configuration = ConfigurationStore(backend).load()
    print(c("\n[ Configuration ]", Colors.BLUE))
    print(c("------------------------------------", Colors.BLUE))
    print(c(f"settings file: {backend.path}", Colors.CYAN))
    active_ids = configuration.active_filter_ids
    print(c(f"active filters ({len(active_ids)}): {', '.join(active_ids) or 'none'}", Colors.CYAN))
    unknown = [item for item in active_ids if item not in registry]
    if unknown:
        print(c(f"  not registered (skipped on the menu): {', '.join(unknown)}", Colors.YELLOW))
    style = configuration.selection_style
    print(c(f"selection color: {style.color or 'default'}", Colors.CYAN))
    print(c(f"selection background: {style.background or 'default'}", Colors.CYAN))
    print(c(f"desktop notification: {'on' if configuration.desktop_notification else 'off'}", Colors.CYAN))
    print(c(f"clipboard write: {'on' if configuration.clipboard_write else 'off'}", Colors.CYAN))
    if session is not None:
        print(c(f"prompt: {session.module_prompt()}", Colors.CYAN))
        print(c(f"source url: {session.page_url or '-'}", Colors.CYAN))
        print(c(f"session inputs: {session.inputs_label()}", Colors.CYAN))
    print()


def _resolve_filter_names(registry: FilterRegistry, raw: str) -> tuple[list[str], list[str]]:
    selected: list[str] = []
    rejected: list[str] = []
    for name in (item.strip() for item in raw.split(",")):
        if not name:
            continue
        spec = registry.resolve(name)
        if spec is None:
            rejected.append(name)
            continue
        if spec.filter_id not in selected:
            selected.append(spec.filter_id)
    return selected, rejected


def _coerce_setting(key: str, raw: str, registry: FilterRegistry) -> Any:
    if key == KEY_VISIBLE_FILTERS:
        selected, rejected = _resolve_filter_names(registry, raw)
        if rejected:
            print(c(f"Ignored unknown filters: {', '.join(rejected)}", Colors.YELLOW))
        return selected
    if key in BOOLEAN_SETTINGS:
        lowered = raw.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise ValueError(f"{key} expects on/off, got '{raw}'.")
    return raw.strip()


def _handle_config_command(args: argparse.Namespace, state: RunnerState, session: PromptSessionState | None = None) -> int:
    registry = build_registry(state)
    backend = settings_backend(state)
    try:
        if args.reset:
            backend.reset()
            append_framework_log("settings_updated", f"path={backend.path} reset=true")
        elif args.unset:
            backend.remove(args.unset)
            append_framework_log("settings_updated", f"path={backend.path} unset={args.unset}")
        elif args.filter_list is not None:
            value = _coerce_setting(KEY_VISIBLE_FILTERS, args.filter_list, registry)
            backend.set(KEY_VISIBLE_FILTERS, value)
            append_framework_log("settings_updated", f"path={backend.path} {KEY_VISIBLE_FILTERS}={value}")
        else:
            for key, raw in args.assignments:
                value = _coerce_setting(key, raw, registry)
                backend.set(key, value)
                append_framework_log("settings_updated", f"path={backend.path} {key}={value}")
    except ValueError as exc:
        print(c(f"[!] {exc}", Colors.RED))
        return EXIT_USAGE
    except OSError as exc:
        print(c(f"[!] Could not write settings: {exc}", Colors.RED))
        append_framework_log("settings_write_failed", str(exc), level="ERROR")
        return EXIT_FAILURE

    _print_configuration(state, registry, session)
    return EXIT_SUCCESS


def _read_selection_text(args: argparse.Namespace) -> str:
    if getattr(args, "stdin", False) or list(args.text) == ["-"]:
        text = sys.stdin.read()
        return text[:-1] if text.endswith("\n") else text
    return " ".join(args.text)


def _run_filter(runtime: Runtime, filter_id: str, context: SelectionContext, *, label: str) -> int:
    try:
        result = runtime.engine.invoke(filter_id, context)
    except UnknownFilterError:
        print(c(f"[!] Unknown filter: {filter_id}", Colors.RED))
        return EXIT_USAGE
    except Exception as exc:
        append_framework_log("filter_failed", f"filter={filter_id} error={exc!r}", level="ERROR")
        print(c(f"[!] Filter '{label}' failed: {exc}", Colors.RED))
        return EXIT_FAILURE

    if not runtime.console_output:
        print(result)
    return EXIT_SUCCESS


def _handle_apply_command(args: argparse.Namespace, state: RunnerState, *, prompt_mode: bool) -> int:
    registry = build_registry(state)
    spec = registry.resolve(args.filter_name)
    if spec is None:
        print(c(f"[!] Unknown filter: {args.filter_name} (run `filters` to list them)", Colors.RED))
        return EXIT_USAGE

    try:
        inputs = parse_input_pairs(args.inputs)
    except ValueError as exc:
        print(c(f"[!] {exc}", Colors.RED))
        return EXIT_USAGE

    try:
        notify_url = get_notify_url(args.notify_url, enabled=not args.no_notify)
    except RuntimeError as exc:
        print(c(f"[!] {exc}", Colors.RED))
        return EXIT_FAILURE

    text = _read_selection_text(args)
    input_provider: InputProvider
    if prompt_mode or (_can_prompt_user() and not args.stdin):
        input_provider = ConsoleInputProvider()
    else:
        input_provider = NoInputProvider()

    runtime = build_runtime(
        state,
        registry=registry,
        desktop=False if args.raw else args.desktop,
        clipboard=args.clipboard,
        notify_url=notify_url,
        integrated=not args.no_notify,
        input_provider=input_provider,
    )
    context = SelectionContext(selection_text=text, page_url=args.url, inputs=inputs)
    return _run_filter(runtime, spec.filter_id, context, label=spec.name or spec.filter_id)


def _handle_menu_command(state: RunnerState) -> int:
    runtime = build_runtime(state, integrated=False)
    print_menu(runtime.engine.build_menu())
    return EXIT_SUCCESS


def _handle_filters_command(args: argparse.Namespace, state: RunnerState) -> int:
    registry = build_registry(state)
    configuration = ConfigurationStore(settings_backend(state)).load()
    _print_filter_inventory(registry, configuration.active_filter_ids, active_only=args.active)
    return EXIT_SUCCESS


def _handle_history_command(args: argparse.Namespace) -> int:
    print_history(limit=args.limit)
    return EXIT_SUCCESS


def build_root_parser() -> argparse.ArgumentParser:
    return _build_root_parser(project_name=PROJECT_NAME, version=VERSION)


def build_prompt_parser() -> argparse.ArgumentParser:
    return _build_prompt_parser()


def _rewrite_tokens_with_keywords(tokens: list[str]) -> list[str]:
    return _rewrite_tokens_with_keywords_impl(tokens)


def _apply_prompt_defaults(args: argparse.Namespace, session: PromptSessionState) -> argparse.Namespace:
    return _apply_prompt_defaults_impl(args, session)


def _handle_prompt_set_command(command_text: str, session: PromptSessionState) -> bool:
    return _handle_prompt_set_command_impl(command_text, session)


def _dispatch(
    args: argparse.Namespace,
    state: RunnerState,
    prompt_mode: bool,
    session: PromptSessionState | None = None,
) -> int:
    if args.command in {"apply", "run", "transform"}:
        return _handle_apply_command(args, state, prompt_mode=prompt_mode)
    if args.command == "menu":
        return _handle_menu_command(state)
    if args.command == "filters":
        return _handle_filters_command(args, state)
    if args.command in {"history", "recent", "results"}:
        return _handle_history_command(args)
    if args.command == "config":
        return _handle_config_command(args, state, session)
    if args.command == "keywords":
        _print_keyword_inventory()
        return EXIT_SUCCESS
    if args.command == "help":
        show_flag_help()
        return EXIT_SUCCESS
    if args.command == "about":
        print(c(build_about_text(), Colors.CYAN))
        return EXIT_SUCCESS
    if args.command == "explain":
        print(c(build_explain_text(build_registry(state)), Colors.CYAN))
        return EXIT_SUCCESS
    return EXIT_USAGE


def _build_prompt_runtime(state: RunnerState, session: PromptSessionState) -> Runtime:
    try:
        notify_url = get_notify_url(enabled=session.notify)
    except RuntimeError as exc:
        print(c(f"[!] {exc} Webhook notifications disabled.", Colors.YELLOW))
        notify_url = None
    runtime = build_runtime(
        state,
        notify_url=notify_url,
        integrated=session.notify,
        input_provider=ConsoleInputProvider(),
    )
    session.menu_size = len(runtime.engine.build_menu())
    return runtime


def _menu_status(session: PromptSessionState) -> str:
    if not session.menu_size:
        return "No active filters"
    return f"{session.menu_size} active filters"


def _run_menu_pick(runtime: Runtime, session: PromptSessionState, index: int, text: str) -> int:
    if index < 1 or index > len(runtime.host.items):
        print(c(f"No menu item {index}. Type 'menu' to list them.", Colors.RED))
        return EXIT_USAGE
    if not text:
        text = ask("Selection: ")

    context = SelectionContext(selection_text=text, page_url=session.page_url, inputs=session.inputs)
    item = runtime.host.items[index - 1]
    try:
        result = runtime.host.pick(index, context)
    except Exception as exc:
        append_framework_log("filter_failed", f"filter={item.label} error={exc!r}", level="ERROR")
        print(c(f"[!] Filter '{item.label}' failed: {exc}", Colors.RED))
        return EXIT_FAILURE

    if not runtime.console_output:
        print(result)
    return EXIT_SUCCESS


def run_prompt_mode(initial_state: RunnerState | None = None) -> int:
    state = initial_state or RunnerState()
    session = PromptSessionState()
    runtime = _build_prompt_runtime(state, session)
    clear_screen()
    show_banner(_menu_status(session))
    prompt_parser = build_prompt_parser()

    while True:
        try:
            user_input = ask(f"{session.module_prompt()} ")
        except (KeyboardInterrupt, EOFError):
            print(c("\nInterrupted. Exiting.", Colors.RED))
            return EXIT_SUCCESS

        command_text = user_input.strip()
        if not command_text:
            continue

        lowered = command_text.lower()
        keyword_match = _keyword_to_command(lowered)
        if lowered in PROMPT_KEYWORDS["exit"]:
            print(c(f"\nExiting {PROJECT_NAME}.", Colors.RED))
            return EXIT_SUCCESS
        if lowered in PROMPT_KEYWORDS["help"]:
            show_prompt_help()
            continue
        if lowered == "clear":
            clear_screen()
            continue
        if keyword_match == "banner":
            show_banner(_menu_status(session))
            continue
        if lowered == "version":
            print(c(framework_signature(), Colors.CYAN))
            continue
        if keyword_match == "menu":
            print_menu(runtime.engine.build_menu())
            continue
        if keyword_match == "reload":
            runtime = _build_prompt_runtime(state, session)
            print(c(f"Menu rebuilt: {_menu_status(session)}", Colors.GREEN))
            continue
        if lowered.startswith("set "):
            _handle_prompt_set_command(command_text, session)
            if lowered.split()[1:2] == ["notify"]:
                runtime = _build_prompt_runtime(state, session)
            continue

        try:
            tokens = shlex.split(command_text)
        except ValueError as exc:
            print(c(f"Invalid command syntax: {exc}", Colors.RED))
            continue

        pick = parse_menu_pick(tokens)
        if pick is not None:
            _run_menu_pick(runtime, session, *pick)
            continue

        tokens = _rewrite_tokens_with_keywords(tokens)
        if tokens and tokens[0] == "apply" and len(tokens) == 2:
            tokens = [*tokens, ask("Selection: ")]

        try:
            args = prompt_parser.parse_args(tokens)
        except ValueError as exc:
            print(c(f"Invalid command usage. Type 'help' for options. ({exc})", Colors.RED))
            continue

        args = _apply_prompt_defaults(args, session)
        try:
            _dispatch(args, state=state, prompt_mode=True, session=session)
        except Exception as exc:  # pragma: no cover - prompt safety guard
            append_framework_log("prompt_dispatch_error", str(exc), level="ERROR")
            print(c(f"[!] Command failed: {exc}", Colors.RED))
        if args.command == "config":
            runtime = _build_prompt_runtime(state, session)


def run(argv: Sequence[str] | None = None) -> int:
    ensure_output_tree()
    parser = build_root_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    rendered_argv = " ".join(str(item) for item in (argv or []))
    append_framework_log("framework_start", f"argv={rendered_argv}")
    state = RunnerState(settings_path=args.settings_path, locale=args.locale)

    if (getattr(args, "about_flag", False) or getattr(args, "explain_flag", False)) and args.command is not None:
        print(
            c(
                "Global flags --about/--explain cannot be combined with a command. "
                "Run them alone (example: python excellent-selection.py --about).",
                Colors.RED,
            )
        )
        append_framework_log("framework_exit", f"status={EXIT_USAGE}")
        return EXIT_USAGE

    if getattr(args, "about_flag", False) or getattr(args, "explain_flag", False):
        if getattr(args, "about_flag", False):
            print(c(build_about_text(), Colors.CYAN))
        if getattr(args, "explain_flag", False):
            print(c(build_explain_text(build_registry(state)), Colors.CYAN))
        append_framework_log("framework_exit", f"status={EXIT_SUCCESS}")
        return EXIT_SUCCESS

    if args.command in (None, "prompt"):
        status = run_prompt_mode(initial_state=state)
        append_framework_log("framework_exit", f"status={status}")
        return status

    status = _dispatch(args, state=state, prompt_mode=False)
    append_framework_log("framework_exit", f"status={status}")
    return status


def main() -> None:
    raise SystemExit(run())
