"""Central project metadata for Excellent Selection."""

from __future__ import annotations

from datetime import datetime, timezone


PROJECT_NAME = "Excellent Selection"
VERSION = "2.0"
AUTHOR = "exsel contributors"
REPOSITORY_URL = "https://github.com/exsel/excellent-selection"
TAGLINE = "Transform selected text with a configurable menu of filters"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def framework_signature() -> str:
    return f"{PROJECT_NAME} v{VERSION}"
