"""Result reporter: hands filter output back to the caller and the host."""

from __future__ import annotations

from typing import Iterable, TypeVar

from exsel.notify import Notifier, build_message


T = TypeVar("T")


class ResultReporter:
    """Return the modified value and, when integrated, notify the host.

    With ``integrated=False`` (tests, library use) no notifier is touched and
    only the return value matters. A notifier that raises is skipped; report()
    itself never raises.
    """

    def __init__(self, notifiers: Iterable[Notifier] = (), *, integrated: bool = True) -> None:
        self.notifiers = list(notifiers)
        self.integrated = integrated

    def report(self, original: str, modified: T, filter_label: str, source_url: str) -> T:
        if not self.integrated or not self.notifiers:
            return modified

        message = build_message(original, modified, filter_label, source_url)
        for notifier in self.notifiers:
            try:
                notifier.notify(dict(message))
            except Exception:  # notification channel guard
                continue
        return modified
