"""Shared CLI prompt keyword maps and command aliases."""

from __future__ import annotations


PROMPT_KEYWORDS = {
    "apply": {"apply", "run", "filter", "transform", "exec"},
    "menu": {"menu", "active", "contextmenu", "ctx"},
    "filters": {"filters", "catalog", "list", "registry"},
    "history": {"history", "recent", "results", "log"},
    "config": {"config", "settings", "options", "prefs"},
    "keywords": {"keywords", "keyword", "verbs", "commands", "lexicon"},
    "reload": {"reload", "rebuild", "refresh"},
    "about": {"about", "info", "details"},
    "explain": {"explain", "understand", "describe"},
    "banner": {"banner"},
    "help": {"help", "-h", "--help"},
    "exit": {"exit", "quit"},
}

APPLY_ALIASES = ("run", "transform")
HISTORY_ALIASES = ("recent", "results")
