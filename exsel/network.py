"""Webhook endpoint settings for the notification channel."""

from __future__ import annotations

import os
from urllib.parse import urlsplit


ALLOWED_WEBHOOK_SCHEMES = {"http", "https"}
NOTIFY_URL_ENV_VAR = "EXSEL_NOTIFY_URL"
DEFAULT_NOTIFY_TIMEOUT_SECONDS = 10


def _validate_webhook_url(webhook_url: str, source: str) -> str:
    value = webhook_url.strip()
    if not value:
        raise RuntimeError(f"{source} is set but empty.")

    parsed = urlsplit(value)
    scheme = (parsed.scheme or "").lower()
    if scheme not in ALLOWED_WEBHOOK_SCHEMES:
        allowed = ", ".join(sorted(ALLOWED_WEBHOOK_SCHEMES))
        raise RuntimeError(
            f"{source} uses unsupported scheme '{parsed.scheme}'. "
            f"Supported schemes: {allowed}."
        )

    if not parsed.hostname:
        raise RuntimeError(f"{source} must include a host.")

    return value


def get_notify_url(cli_value: str | None = None, *, enabled: bool = True) -> str | None:
    """Resolve the webhook URL from --notify-url, then EXSEL_NOTIFY_URL."""

    if not enabled:
        return None

    if cli_value is not None:
        return _validate_webhook_url(cli_value, "--notify-url")

    env_value = os.environ.get(NOTIFY_URL_ENV_VAR)
    if env_value is None:
        return None
    return _validate_webhook_url(env_value, NOTIFY_URL_ENV_VAR)
