"""Output storage path utilities for Excellent Selection."""

from __future__ import annotations

import os
from pathlib import Path


OUTPUT_ROOT = Path("output")
DATA_DIR = OUTPUT_ROOT / "data"
CONFIG_DIR = OUTPUT_ROOT / "config"
LOG_DIR = OUTPUT_ROOT / "logs"

SETTINGS_ENV_VAR = "EXSEL_SETTINGS"


def ensure_output_tree() -> None:
    for path in (OUTPUT_ROOT, DATA_DIR, CONFIG_DIR, LOG_DIR):
        path.mkdir(parents=True, exist_ok=True)


def settings_path() -> Path:
    override = os.environ.get(SETTINGS_ENV_VAR, "").strip()
    if override:
        return Path(override)
    return CONFIG_DIR / "settings.json"


def history_path() -> Path:
    return DATA_DIR / "history.ndjson"


def framework_log_path() -> Path:
    return LOG_DIR / "framework.log.txt"
