"""Pytest configuration and shared fixtures."""

import asyncio
from typing import Any, Callable, Dict, List, Optional

import pytest

from agent_inbox.inbox import RecordingNotifier
from agent_inbox.types import HumanInterrupt, create_action_interrupt


class FakeTransport:
    """Resume transport that records payloads and optionally fails."""

    def __init__(self, error: Optional[BaseException] = None):
        self.error = error
        self.payloads: List[List[Dict[str, Any]]] = []
        self.resolved = 0

    async def resume(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return {"status": "success"}

    async def resolve(self):
        self.resolved += 1
        if self.error is not None:
            raise self.error
        return None


class BlockingTransport(FakeTransport):
    """Resume transport that holds the call open until released."""

    def __init__(self, error: Optional[BaseException] = None):
        super().__init__(error)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def resume(self, payload):
        self.payloads.append(payload)
        self.started.set()
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return None


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_interrupt() -> Callable[..., HumanInterrupt]:
    """
    Build an interrupt for the ``book_trip`` action.

    Capability flags default to False so each test states what it allows.
    """

    def _make(
        args: Optional[Dict[str, Any]] = None,
        *,
        allow_accept: bool = False,
        allow_edit: bool = False,
        allow_respond: bool = False,
        allow_ignore: bool = False,
        description: Optional[str] = None,
    ) -> HumanInterrupt:
        return create_action_interrupt(
            "book_trip",
            {"city": "NYC"} if args is None else args,
            {
                "allow_accept": allow_accept,
                "allow_edit": allow_edit,
                "allow_respond": allow_respond,
                "allow_ignore": allow_ignore,
            },
            description,
        )

    return _make
