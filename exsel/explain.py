"""Human-readable explain output for commands and filters."""

from __future__ import annotations

from exsel.metadata import PROJECT_NAME, VERSION
from exsel.signal_sieve import FilterRegistry, list_filter_descriptors


COMMAND_EXPLANATIONS: dict[str, str] = {
    "apply": "Runs one filter over the selected text and reports the original/modified pair.",
    "menu": "Reads the active filter list from settings and builds the numbered filter menu.",
    "filters": "Lists every registered filter with its aliases and auxiliary inputs.",
    "config": "Shows persisted settings, or sets/unsets/resets them in the settings JSON file.",
    "history": "Shows recorded filter results from output/data, newest first.",
    "keywords": "Lists prompt keyword aliases that map casual words to core commands.",
    "about": "Shows framework identity, authorship, and core tool description.",
    "explain": "Shows plain-language command/filter explanations for quick onboarding.",
    "prompt": "Interactive mode: pick menu items by number and reuse a source URL or inputs.",
}


def build_explain_text(registry: FilterRegistry) -> str:
    filters = list_filter_descriptors(registry)

    lines: list[str] = []
    lines.append(f"{PROJECT_NAME} v{VERSION} - Explain Mode")
    lines.append("")
    lines.append("What this tool does:")
    lines.append(
        "- Applies a configurable menu of text filters to a selection, then reports the result to the"
        " console, clipboard, history, and optional webhook."
    )
    lines.append("")
    lines.append("Global flags:")
    lines.append("- --about: print tool description and identity block.")
    lines.append("- --explain: print this explain guide and exit.")
    lines.append("")
    lines.append("Commands:")
    for command, description in sorted(COMMAND_EXPLANATIONS.items()):
        lines.append(f"- {command}: {description}")
    lines.append("")
    lines.append("Filters:")
    for row in filters:
        inputs = ", ".join(row.get("inputs", [])) or "none"
        description = row.get("description") or row.get("name") or "-"
        lines.append(f"- {row.get('id')}: {description} (inputs: {inputs})")
    lines.append("")
    lines.append("Prompt-only controls:")
    lines.append("- <n> [text]: run menu item n over the text.")
    lines.append("- banner: print the banner again.")
    lines.append("- clear: clear terminal only.")
    lines.append("- set url/input/notify: session defaults applied to every run.")
    lines.append("- Prompt format: (exsel menu=<count> url=<source> notify=<on|off>)>>")
    lines.append("")
    lines.append("Flag parity notes:")
    lines.append("- explain command and --explain flag produce the same explain output.")
    lines.append("- Missing auxiliary inputs are asked for on a terminal and default to empty otherwise.")
    return "\n".join(lines)
