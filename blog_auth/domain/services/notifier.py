"""Notifier interface - one-shot user-facing messages (flash)."""

from abc import ABC, abstractmethod
from enum import StrEnum


class FlashKind(StrEnum):
    """Kind tag carried with every flash message."""

    SUCCESS = "success_msg"
    ERROR = "error_msg"


class INotifier(ABC):
    """
    Carries a message forward to the next rendered view.

    Owned by the transport layer; handlers receive one per call.
    """

    @abstractmethod
    def push(self, kind: FlashKind, text: str) -> None:
        """Queue a message of the given kind."""
        pass
