"""
Notification sinks for console TicTacToe.
A GameSession broadcasts its events to every registered sink.
"""

from abc import ABC, abstractmethod
from typing import List


class NotificationSink(ABC):
    """Receives human-readable game events."""

    @abstractmethod
    def notify(self, message: str):
        ...


class ConsoleNotifier(NotificationSink):
    """Prints every event to the console."""

    def __init__(self, prefix: str = "[INFO]"):
        self.prefix = prefix

    def notify(self, message: str):
        print(f"{self.prefix} {message}")


class RecordingNotifier(NotificationSink):
    """Keeps every event in memory, in the order received."""

    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str):
        self.messages.append(message)

    def clear(self):
        self.messages.clear()
