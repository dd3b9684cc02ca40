"""Notification channels that receive filter results from the reporter.

Every channel takes the same message shape::

    {"original": str, "modified": str | int, "filter": str, "url": str}

Channels may raise; the reporter drops the error so a broken channel never
affects the returned result.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Protocol

import aiohttp
import pyperclip

from exsel.network import DEFAULT_NOTIFY_TIMEOUT_SECONDS
from exsel.output import append_framework_log, append_history_entry, display_result, preview_value


Message = dict[str, Any]


class Notifier(Protocol):
    def notify(self, message: Message) -> None: ...


def build_message(original: str, modified: object, filter_label: str, source_url: str) -> Message:
    return {
        "original": original,
        "modified": modified,
        "filter": filter_label,
        "url": source_url,
    }


class ConsoleNotifier:
    """Terminal stand-in for the desktop notification."""

    def notify(self, message: Message) -> None:
        display_result(
            message.get("original", ""),
            message.get("modified", ""),
            message.get("filter", ""),
            message.get("url", ""),
        )


class ClipboardNotifier:
    def notify(self, message: Message) -> None:
        pyperclip.copy(str(message.get("modified", "")))


class FrameworkLogNotifier:
    def notify(self, message: Message) -> None:
        append_framework_log(
            "selection_filtered",
            (
                f"filter={message.get('filter', '')} "
                f"original={preview_value(message.get('original', ''))} "
                f"modified={preview_value(message.get('modified', ''))}"
            ),
        )


class HistoryNotifier:
    def notify(self, message: Message) -> None:
        append_history_entry(message)


class WebhookNotifier:
    """POST the message as JSON from a worker thread; nothing waits for it."""

    def __init__(self, url: str, timeout_seconds: int = DEFAULT_NOTIFY_TIMEOUT_SECONDS) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds

    def notify(self, message: Message) -> None:
        worker = threading.Thread(
            target=self._deliver,
            args=(dict(message),),
            name="exsel-webhook",
        )
        worker.start()

    def _deliver(self, message: Message) -> None:
        try:
            status = asyncio.run(self._post(message))
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            append_framework_log("webhook_failed", f"url={self.url} error={exc}", level="WARN")
            return
        if status >= 400:
            append_framework_log("webhook_rejected", f"url={self.url} status={status}", level="WARN")

    async def _post(self, message: Message) -> int:
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout, trust_env=True) as session:
            async with session.post(self.url, json=message) as response:
                return response.status
