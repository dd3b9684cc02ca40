import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

import aiohttp

from exsel.notify import (
    ClipboardNotifier,
    ConsoleNotifier,
    FrameworkLogNotifier,
    HistoryNotifier,
    WebhookNotifier,
    build_message,
)
from exsel.output import list_history
from exsel.reporter import ResultReporter


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


class ExplodingNotifier:
    def notify(self, message):
        raise OSError("channel unavailable")


class TestResultReporter(unittest.TestCase):
    def test_returns_modified_value(self):
        reporter = ResultReporter([RecordingNotifier()])
        self.assertEqual(reporter.report("abc", "cba", "Reverse", ""), "cba")
        self.assertEqual(reporter.report("abc", 3, "Length", ""), 3)

    def test_message_shape(self):
        notifier = RecordingNotifier()
        ResultReporter([notifier]).report("a", "A", "Uppercase", "https://example.com")
        self.assertEqual(
            notifier.messages,
            [{"original": "a", "modified": "A", "filter": "Uppercase", "url": "https://example.com"}],
        )

    def test_failing_notifier_is_skipped(self):
        after = RecordingNotifier()
        reporter = ResultReporter([ExplodingNotifier(), after])
        self.assertEqual(reporter.report("a", "b", "X", ""), "b")
        self.assertEqual(len(after.messages), 1)

    def test_never_throws_when_every_notifier_fails(self):
        reporter = ResultReporter([ExplodingNotifier(), ExplodingNotifier()])
        self.assertEqual(reporter.report("a", "b", "X", ""), "b")

    def test_not_integrated_has_no_side_effects(self):
        notifier = RecordingNotifier()
        reporter = ResultReporter([notifier], integrated=False)
        self.assertEqual(reporter.report("a", "b", "X", ""), "b")
        self.assertEqual(notifier.messages, [])

    def test_each_notifier_gets_its_own_message(self):
        class Mutating:
            def notify(self, message):
                message["modified"] = "tampered"

        after = RecordingNotifier()
        ResultReporter([Mutating(), after]).report("a", "b", "X", "")
        self.assertEqual(after.messages[0]["modified"], "b")


class TestNotifiers(unittest.TestCase):
    def test_console_notifier_prints_pair(self):
        stream = io.StringIO()
        with patch.dict("os.environ", {"NO_COLOR": "1"}), redirect_stdout(stream):
            ConsoleNotifier().notify(build_message("hello", "HELLO", "Uppercase", "https://example.com"))
        output = stream.getvalue()
        self.assertIn("Uppercase", output)
        self.assertIn("original: hello", output)
        self.assertIn("modified: HELLO", output)
        self.assertIn("source: https://example.com", output)

    def test_clipboard_notifier_copies_modified_text(self):
        with patch("exsel.notify.pyperclip.copy") as copy:
            ClipboardNotifier().notify(build_message("a", 42, "Length", ""))
        copy.assert_called_once_with("42")

    def test_framework_log_notifier(self):
        with patch("exsel.notify.append_framework_log") as log:
            FrameworkLogNotifier().notify(build_message("a\nb", "A\nB", "Uppercase", ""))
        event, details = log.call_args.args
        self.assertEqual(event, "selection_filtered")
        self.assertIn("filter=Uppercase", details)
        self.assertIn("original=a\\nb", details)

    def test_history_notifier_round_trip(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "history.ndjson"
            with patch("exsel.output.ensure_output_tree"), patch("exsel.output.history_path", return_value=path):
                notifier = HistoryNotifier()
                notifier.notify(build_message("one", "ONE", "Uppercase", ""))
                notifier.notify(build_message("two", 3, "Length", "https://example.com"))
                with path.open("a", encoding="utf-8") as handle:
                    handle.write("not json\n")

                rows = list_history(limit=10)
                self.assertEqual([row["original"] for row in rows], ["two", "one"])
                self.assertEqual(rows[0]["modified"], 3)
                self.assertIn("recorded_at_utc", rows[0])
                self.assertEqual(len(list_history(limit=1)), 1)

    def test_history_missing_file(self):
        with patch("exsel.output.history_path", return_value=Path("/nonexistent/history.ndjson")):
            self.assertEqual(list_history(), [])


class TestWebhookNotifier(unittest.TestCase):
    def test_notify_delivers_on_worker_thread(self):
        with patch("exsel.notify.threading.Thread") as thread_cls:
            notifier = WebhookNotifier("https://hooks.example.com/x")
            notifier.notify(build_message("a", "b", "X", ""))
        kwargs = thread_cls.call_args.kwargs
        self.assertEqual(kwargs["target"], notifier._deliver)
        self.assertEqual(kwargs["args"][0]["modified"], "b")
        thread_cls.return_value.start.assert_called_once_with()

    def test_delivery_failure_is_logged(self):
        notifier = WebhookNotifier("https://hooks.example.com/x")

        async def failing_post(message):
            raise aiohttp.ClientConnectionError("refused")

        with patch.object(notifier, "_post", side_effect=failing_post), patch("exsel.notify.append_framework_log") as log:
            notifier._deliver(build_message("a", "b", "X", ""))
        self.assertEqual(log.call_args.args[0], "webhook_failed")
        self.assertEqual(log.call_args.kwargs["level"], "WARN")

    def test_rejected_status_is_logged(self):
        notifier = WebhookNotifier("https://hooks.example.com/x")

        async def rejected_post(message):
            return 503

        with patch.object(notifier, "_post", side_effect=rejected_post), patch("exsel.notify.append_framework_log") as log:
            notifier._deliver(build_message("a", "b", "X", ""))
        self.assertEqual(log.call_args.args[0], "webhook_rejected")
        self.assertIn("status=503", log.call_args.args[1])

    def test_accepted_status_is_silent(self):
        notifier = WebhookNotifier("https://hooks.example.com/x")

        async def ok_post(message):
            return 204

        with patch.object(notifier, "_post", side_effect=ok_post), patch("exsel.notify.append_framework_log") as log:
            notifier._deliver(build_message("a", "b", "X", ""))
        log.assert_not_called()


if __name__ == "__main__":
    unittest.main()
