"""Display-string lookup backed by bundled ``messages.json`` catalogs."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol


LOCALES_DIR = Path(__file__).resolve().parent / "locales"
DEFAULT_LOCALE = "en"
LOCALE_ENV_VAR = "EXSEL_LOCALE"


class Localizer(Protocol):
    def get(self, key: str) -> str: ...


class NullLocalizer:
    """Stands in when no catalog is available; every key resolves to ''."""

    def get(self, key: str) -> str:
        return ""


class CatalogLocalizer:
    def __init__(self, messages: dict[str, str], locale: str = DEFAULT_LOCALE) -> None:
        self.locale = locale
        self._messages = dict(messages)

    def get(self, key: str) -> str:
        return self._messages.get(key, "")


def _read_catalog(path: Path) -> dict[str, str]:
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, dict):
        return {}

    messages: dict[str, str] = {}
    for key, entry in raw.items():
        if isinstance(entry, dict):
            messages[str(key)] = str(entry.get("message") or "")
        elif isinstance(entry, str):
            messages[str(key)] = entry
    return messages


def available_locales() -> list[str]:
    if not LOCALES_DIR.is_dir():
        return []
    return sorted(path.parent.name for path in LOCALES_DIR.glob("*/messages.json"))


def load_localizer(locale: str | None = None) -> Localizer:
    requested = (locale or os.environ.get(LOCALE_ENV_VAR) or DEFAULT_LOCALE).strip()
    candidates = [requested]
    if "_" in requested:
        candidates.append(requested.split("_", 1)[0])
    candidates.append(DEFAULT_LOCALE)

    for name in candidates:
        path = LOCALES_DIR / name / "messages.json"
        if not path.is_file():
            continue
        try:
            return CatalogLocalizer(_read_catalog(path), locale=name)
        except (OSError, json.JSONDecodeError):
            continue
    return NullLocalizer()
