"""Session-backed flash messages.

Messages are queued in the signed session cookie and removed the first
time a view reads them.
"""

from collections.abc import MutableMapping
from typing import Any

from pydantic import BaseModel

from blog_auth.domain.services.notifier import FlashKind, INotifier

FLASH_SESSION_KEY = "_flash"


class FlashMessage(BaseModel):
    """A queued flash message as handed to a view."""

    kind: FlashKind
    text: str


class SessionFlashNotifier(INotifier):
    """INotifier that stores messages in the request session."""

    def __init__(self, session: MutableMapping[str, Any]):
        self._session = session

    def push(self, kind: FlashKind, text: str) -> None:
        queued = list(self._session.get(FLASH_SESSION_KEY, []))
        queued.append({"kind": str(kind), "text": text})
        self._session[FLASH_SESSION_KEY] = queued


def pop_flashed_messages(session: MutableMapping[str, Any]) -> list[FlashMessage]:
    """Return and clear every queued message, oldest first."""
    return [FlashMessage(**message) for message in session.pop(FLASH_SESSION_KEY, [])]
