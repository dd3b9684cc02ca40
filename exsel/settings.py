"""Configuration store: active filters and selection style.

The store only reads. Persisted values that fail to decode are replaced by
the built-in defaults field by field; a broken settings file is never fatal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from exsel.storage import settings_path


KEY_VISIBLE_FILTERS = "visibleFilters"
KEY_SELECTION_COLOR = "selectionColor"
KEY_SELECTION_BACKGROUND = "selectionBackground"
KEY_DESKTOP_NOTIFICATION = "desktopNotification"
KEY_CLIPBOARD_WRITE = "clipboardWrite"

SETTING_KEYS = (
    KEY_VISIBLE_FILTERS,
    KEY_SELECTION_COLOR,
    KEY_SELECTION_BACKGROUND,
    KEY_DESKTOP_NOTIFICATION,
    KEY_CLIPBOARD_WRITE,
)

DEFAULT_ACTIVE_FILTERS: tuple[str, ...] = (
    "LowerCase",
    "UpperCase",
    "Length",
    "Shuffle",
    "Reverse",
    "Replace",
    "WordCount",
    "WordWrap",
    "Base64Encode",
    "Base64Decode",
    "UrlEncode",
    "StripTags",
    "RemoveWhitespace",
    "MD5",
    "SHA1",
    "SHA256",
    "SHA512",
    "FormatXML",
    "FormatJSON",
    "FormatCSS",
    "FormatSQL",
)
DEFAULT_SELECTION_COLOR: str | None = None
DEFAULT_SELECTION_BACKGROUND: str | None = None
DEFAULT_DESKTOP_NOTIFICATION = True
DEFAULT_CLIPBOARD_WRITE = False

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


class SettingsBackend(Protocol):
    def get(self, key: str) -> Any: ...


class MemoryBackend:
    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str) -> Any:
        return self.values.get(key)


class JsonFileBackend:
    """Settings persisted as one JSON object on disk."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else settings_path()

    def read_all(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return {}
        return raw if isinstance(raw, dict) else {}

    def get(self, key: str) -> Any:
        return self.read_all().get(key)

    # Settings-surface writes; the dispatch core never calls these.
    def set(self, key: str, value: Any) -> None:
        values = self.read_all()
        values[key] = value
        self._write(values)

    def remove(self, key: str) -> None:
        values = self.read_all()
        if key in values:
            del values[key]
            self._write(values)

    def reset(self) -> None:
        self._write({})

    def _write(self, values: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(values, handle, indent=4)


@dataclass(frozen=True)
class SelectionStyle:
    color: str | None = None
    background: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {"color": self.color, "background": self.background}


@dataclass(frozen=True)
class Configuration:
    active_filter_ids: tuple[str, ...] = DEFAULT_ACTIVE_FILTERS
    selection_style: SelectionStyle = field(default_factory=SelectionStyle)
    desktop_notification: bool = DEFAULT_DESKTOP_NOTIFICATION
    clipboard_write: bool = DEFAULT_CLIPBOARD_WRITE


def decode_filter_ids(value: Any) -> tuple[str, ...] | None:
    """Structural decode of a persisted id list; None means decoding failed."""

    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            return None
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return tuple(value)


def _decode_style_field(value: Any, default: str | None) -> str | None:
    if isinstance(value, str) and value:
        return value
    return default


def _decode_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    return default


class ConfigurationStore:
    def __init__(self, backend: SettingsBackend | None = None) -> None:
        self.backend = backend if backend is not None else JsonFileBackend()

    def get_active_filter_ids(self) -> tuple[str, ...]:
        decoded = decode_filter_ids(self.backend.get(KEY_VISIBLE_FILTERS))
        if decoded is None:
            return DEFAULT_ACTIVE_FILTERS
        return decoded

    def get_selection_style(self) -> SelectionStyle:
        return SelectionStyle(
            color=_decode_style_field(self.backend.get(KEY_SELECTION_COLOR), DEFAULT_SELECTION_COLOR),
            background=_decode_style_field(
                self.backend.get(KEY_SELECTION_BACKGROUND),
                DEFAULT_SELECTION_BACKGROUND,
            ),
        )

    def get_desktop_notification(self) -> bool:
        return _decode_bool(self.backend.get(KEY_DESKTOP_NOTIFICATION), DEFAULT_DESKTOP_NOTIFICATION)

    def get_clipboard_write(self) -> bool:
        return _decode_bool(self.backend.get(KEY_CLIPBOARD_WRITE), DEFAULT_CLIPBOARD_WRITE)

    def load(self) -> Configuration:
        return Configuration(
            active_filter_ids=self.get_active_filter_ids(),
            selection_style=self.get_selection_style(),
            desktop_notification=self.get_desktop_notification(),
            clipboard_write=self.get_clipboard_write(),
        )
