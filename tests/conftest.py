import json

import pytest

from rendezvous import (
    ConnectionLifecycle,
    ConnectionSession,
    LobbyBroadcaster,
    MessageRouter,
    RoomRegistry,
    SessionSet,
)


class FakeChannel:
    def __init__(self, fail: bool = False) -> None:
        self.sent = []
        self.fail = fail

    async def send_json(self, payload):
        if self.fail:
            raise RuntimeError("channel closed")
        self.sent.append(payload)

    def of_type(self, message_type):
        return [m for m in self.sent if m["type"] == message_type]


class Hub:
    """The signaling core wired the same way the server wires it."""

    def __init__(self) -> None:
        self.registry = RoomRegistry()
        self.sessions = SessionSet()
        self.broadcaster = LobbyBroadcaster(self.registry, self.sessions)
        self.router = MessageRouter(self.registry, self.broadcaster)
        self.lifecycle = ConnectionLifecycle(self.registry, self.sessions, self.broadcaster)

    def connect(self, fail: bool = False):
        return self.lifecycle.connect(FakeChannel(fail=fail))

    async def send(self, session, payload):
        await self.router.dispatch(session, json.dumps(payload))


@pytest.fixture
def hub():
    return Hub()


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def new_session():
    """Factory for lobby sessions on fresh fake channels."""

    def make():
        return ConnectionSession(FakeChannel())

    return make
