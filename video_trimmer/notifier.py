"""
Notifiers surface user-facing messages (validation errors, results).

Callers receive a notifier explicitly instead of looking one up globally;
:class:`NullNotifier` is the default and drops everything.
"""
import logging
from typing import Callable, Optional, Protocol


class Notifier(Protocol):
    def notify(self, message: str) -> None:
        ...


class NullNotifier:
    """Notifier that ignores every message."""

    def notify(self, message: str) -> None:
        pass


class ConsoleNotifier:
    """Print messages, optionally through a custom writer (e.g. for tests)."""

    def __init__(self, writer: Optional[Callable[[str], None]] = None, prefix: str = '! '):
        self.writer = writer or print
        self.prefix = prefix

    def notify(self, message: str) -> None:
        self.writer(f"{self.prefix}{message}")


class LoggingNotifier:
    """Forward messages to a logger at WARNING level."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def notify(self, message: str) -> None:
        self.logger.warning("%s", message)
