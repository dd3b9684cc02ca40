"""Console, history, and framework-log output helpers."""

from __future__ import annotations

import json
from typing import Any, Iterable

from exsel.colors import Colors, c
from exsel.metadata import framework_signature, utc_timestamp
from exsel.storage import ensure_output_tree, framework_log_path, history_path


PREVIEW_LIMIT = 180


def preview_value(value: object) -> str:
    text = str(value)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) > PREVIEW_LIMIT:
        return f"{text[:PREVIEW_LIMIT]}..."
    return text


def display_result(original: str, modified: object, filter_label: str, source_url: str = "") -> None:
    print(c(f"\n[ {filter_label or 'Filter'} ]", Colors.BLUE))
    print(c("------------------------------------", Colors.BLUE))
    print(c(f"  original: {preview_value(original)}", Colors.GREY))
    print(c(f"  modified: {preview_value(modified)}", Colors.GREEN))
    if source_url:
        print(c(f"  source: {source_url}", Colors.GREY))


def print_menu(entries: Iterable[Any]) -> None:
    rows = list(entries)
    print(c("\n[ Active Filter Menu ]", Colors.BLUE))
    print(c("------------------------------------", Colors.BLUE))
    if not rows:
        print(c("No active filters configured.", Colors.YELLOW))
        print()
        return
    for index, entry in enumerate(rows, start=1):
        print(c(f"{index:>2}. {entry.label or entry.filter_id}", Colors.CYAN) + c(f"  ({entry.filter_id})", Colors.GREY))
    print()


def append_framework_log(event: str, details: str = "", *, level: str = "INFO") -> str:
    ensure_output_tree()
    path = framework_log_path()
    line = f"[{utc_timestamp()}] [{level.upper()}] {event}"
    if details:
        line = f"{line} | {details}"
    with path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")
    return str(path)


def append_history_entry(message: dict[str, Any]) -> str:
    ensure_output_tree()
    path = history_path()
    row = {"recorded_at_utc": utc_timestamp(), **message}
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(row, ensure_ascii=False) + "\n")
    return str(path)


def list_history(limit: int = 25) -> list[dict[str, Any]]:
    path = history_path()
    if not path.exists():
        return []

    rows: list[dict[str, Any]] = []
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line:
                continue
            try:
                row = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(row, dict):
                rows.append(row)
    rows.reverse()
    return rows[: max(1, int(limit))]


def print_history(limit: int = 25) -> None:
    rows = list_history(limit=limit)
    print(c("\n[ Selection History ]", Colors.BLUE))
    print(c("------------------------------------", Colors.BLUE))
    if not rows:
        print(c("No filter results recorded under output/data.", Colors.YELLOW))
        print()
        return

    for index, row in enumerate(rows, start=1):
        print(c(f"{index}. {row.get('filter') or '-'}", Colors.CYAN))
        print(c(f"  when: {row.get('recorded_at_utc', '-')}", Colors.GREY))
        print(c(f"  original: {preview_value(row.get('original', ''))}", Colors.GREY))
        print(c(f"  modified: {preview_value(row.get('modified', ''))}", Colors.GREY))
        if row.get("url"):
            print(c(f"  source: {row['url']}", Colors.GREY))
    print(c(f"\n{framework_signature()}", Colors.GREY))
