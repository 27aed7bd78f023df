"""
Notifier implementations.

The UI layer normally plugs in its own toast/snackbar notifier; these
cover headless use and embedding apps that poll for messages.
"""
from typing import List

from shopcart.cart.ports import Notifier
from shopcart.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)


class LogNotifier(Notifier):
    """Reports failures to the log."""

    def error(self, message: str) -> None:
        logger.warning(f"Cart notification: {sanitize_string_for_logging(message, max_length=120)}")


class CollectingNotifier(Notifier):
    """Keeps every message until drained."""

    def __init__(self):
        self.messages: List[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> List[str]:
        messages, self.messages = self.messages, []
        return messages
