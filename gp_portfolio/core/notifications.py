"""Single-slot notification service shared by the form and the review."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from gp_portfolio.config import settings


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notification:
    message: str
    kind: NotificationKind
    created_at: float
    title: str = ""
    seen: bool = field(default=False, compare=False)

    def expires_at(self, ttl: float) -> float:
        return self.created_at + ttl


class NotificationCenter:
    """Holds at most one notification; a new one replaces the old outright.

    A notification stops being active ``ttl`` seconds after it was posted.
    """

    def __init__(self, ttl: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl if ttl is not None else settings.app.notification_seconds
        self._clock = clock
        self._current: Optional[Notification] = None

    def notify(self, message: str, kind: NotificationKind, title: str = "") -> Notification:
        notification = Notification(
            message=message,
            kind=NotificationKind(kind),
            created_at=self._clock(),
            title=title,
        )
        self._current = notification
        return notification

    def success(self, message: str, title: str = "Success") -> Notification:
        return self.notify(message, NotificationKind.SUCCESS, title=title)

    def error(self, message: str, title: str = "Error") -> Notification:
        return self.notify(message, NotificationKind.ERROR, title=title)

    def active(self) -> Optional[Notification]:
        current = self._current
        if current is None:
            return None
        if self._clock() >= current.expires_at(self.ttl):
            self._current = None
            return None
        return current

    def pop_unseen(self) -> Optional[Notification]:
        """Return the active notification the first time only."""
        current = self.active()
        if current is None or current.seen:
            return None
        current.seen = True
        return current

    def clear(self) -> None:
        self._current = None


__all__ = ["Notification", "NotificationKind", "NotificationCenter"]
