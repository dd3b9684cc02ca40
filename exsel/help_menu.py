"""Help menu renderers for flag mode and prompt mode."""

from __future__ import annotations

from exsel.colors import Colors, c
from exsel.metadata import PROJECT_NAME, VERSION


def show_flag_help() -> None:
    print(c(f"\n{PROJECT_NAME} v{VERSION} Flag Help\n", Colors.BOLD + Colors.CYAN))
    print("Usage: python excellent-selection.py [--settings PATH] [--locale LANG] <command> [flags]\n")

    print(c("Global Flags", Colors.BLUE))
    print("• --about - Show framework description and exit.")
    print("• --explain - Show plain-language command and filter guide and exit.")
    print("• --settings PATH - Read and write settings in PATH instead of output/config/settings.json.")
    print("• --locale LANG - Pick the display-string catalog (en, de).\n")

    print(c("Core Commands", Colors.BLUE))
    print("• apply <filter> [text...] - Run one filter over the selected text.")
    print("• menu - Build and show the active filter menu.")
    print("• filters [--active] - List registered filters.")
    print("• config [--set KEY=VALUE | --filters IDS | --unset KEY | --reset] - Show or change settings.")
    print("• history [--limit N] - List recorded filter results.")
    print("• keywords - Show prompt keyword shortcuts.")
    print("• about - Show tool metadata.")
    print("• explain - Show simple command and filter explanations.")
    print("• prompt - Start interactive prompt mode.")
    print("• help - Show this help menu.\n")

    print("Apply flags: --stdin --url --input NAME=VALUE --raw --no-notify --notify-url --[no-]desktop --[no-]clipboard.")
    print("Output paths: output/data output/config output/logs.\n")


def show_prompt_help() -> None:
    print(c(f"\n{PROJECT_NAME} v{VERSION} Prompt Help\n", Colors.BOLD + Colors.CYAN))
    print("Type one command and press Enter.\n")

    print(c("Prompt Commands", Colors.BLUE))
    print("• menu - Show the active filter menu.")
    print("• <n> [text] - Run menu item n; asks for the text when omitted.")
    print("• apply <filter> [text] - Run a filter by id or alias.")
    print("• filters [--active] - List filters.")
    print("• history [--limit N] - List recorded results.")
    print("• config - Show settings and prompt state.")
    print("• reload - Re-read settings and rebuild the menu.")
    print("• set url <value|none> - Source URL reported with each result.")
    print("• set input <name=value|none> - Reuse an auxiliary input for every run.")
    print("• set notify <on|off> - Toggle notification channels for this session.")
    print("• banner - Show banner.")
    print("• explain - Show plain-language guide.")
    print("• keywords - Show shortcut keywords.")
    print("• about - Show tool metadata.")
    print("• clear - Clear terminal only.")
    print("• help - Show this help menu.")
    print("• exit - Close prompt.\n")

    print("Prompt format: (exsel menu=<count> url=<source> notify=<on|off>)>>")
    print("Run 'keywords' to see full alias mappings.\n")
