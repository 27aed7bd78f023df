"""Tests for notifiers"""
import logging

from shopcart.services.notifications import CollectingNotifier, LogNotifier


def test_log_notifier_logs_warning(caplog):
    """Test failures are reported to the log"""
    with caplog.at_level(logging.WARNING, logger="shopcart.services.notifications"):
        LogNotifier().error("Failed to add product")

    assert "Failed to add product" in caplog.text


def test_log_notifier_escapes_newlines(caplog):
    with caplog.at_level(logging.WARNING, logger="shopcart.services.notifications"):
        LogNotifier().error("line1\nFAKE ENTRY")

    assert "line1\\nFAKE ENTRY" in caplog.text


def test_collecting_notifier_drain():
    notifier = CollectingNotifier()
    notifier.error("a")
    notifier.error("b")

    assert notifier.drain() == ["a", "b"]
    assert notifier.messages == []
