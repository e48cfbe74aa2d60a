"""
agent_inbox.inbox.notices

User-facing notices and the sink that delivers them.

Delivery (toasts, chat messages, ...) belongs to the host; the inbox only
describes what to show through the ``Notifier`` protocol.
"""

from dataclasses import dataclass
from typing import List, Literal, Protocol

from agent_inbox import config
from agent_inbox.sentry import get_logger

logger = get_logger(__name__)

NoticeKind = Literal["error", "success"]


@dataclass(frozen=True)
class Notice:
    """A notification for the user."""

    kind: NoticeKind
    title: str
    description: str
    duration_ms: int = config.NOTICE_DURATION_MS


class Notifier(Protocol):
    """Sink for user-facing notices."""

    def notify(self, notice: Notice) -> None:
        ...


class LoggingNotifier:
    """Notifier that writes notices to the log, used when the host provides none."""

    def notify(self, notice: Notice) -> None:
        if notice.kind == "error":
            logger.warning("[notice] %s: %s", notice.title, notice.description)
        else:
            logger.info("[notice] %s: %s", notice.title, notice.description)


class RecordingNotifier:
    """Notifier that keeps every notice in memory."""

    def __init__(self) -> None:
        self.notices: List[Notice] = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)

    @property
    def last(self) -> Notice:
        return self.notices[-1]


def error_notice(description: str, title: str = "Error") -> Notice:
    return Notice(kind="error", title=title, description=description)


def success_notice(description: str, title: str = "Success") -> Notice:
    return Notice(kind="success", title=title, description=description)
