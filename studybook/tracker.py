"""A tracker that warns through a messenger as a value nears its limit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod


class Messenger(ABC):
    """Something that can deliver a message."""

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Deliver the message."""


class MockMessenger(Messenger):
    """A messenger that only records what it was asked to send."""

    def __init__(self) -> None:
        self.sent_messages: list[str] = []

    def send_message(self, message: str) -> None:
        self.sent_messages.append(message)

    def sent_message_count(self) -> int:
        return len(self.sent_messages)


class LimitTracker:
    """Sends a warning whenever the value is set at or above 75% of the maximum."""

    def __init__(self, messenger: Messenger, maximum: int) -> None:
        self.messenger = messenger
        self.value = 0
        self.maximum = maximum

    def _fraction(self) -> float:
        if self.maximum == 0:
            return math.inf if self.value > 0 else math.nan
        return self.value / self.maximum

    def set_value(self, value: int) -> None:
        self.value = value
        fraction = self._fraction()
        if fraction >= 1.0:
            self.messenger.send_message("错误：已超过配额！")
        elif fraction >= 0.9:
            self.messenger.send_message("紧急警告：已使用超过90%的配额！")
        elif fraction >= 0.75:
            self.messenger.send_message("警告：已使用超过75%的配额！")