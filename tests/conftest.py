"""Common pytest fixtures for seeder tests.

The store is an in-memory SQLite database; the remote spell API is an
httpx.MockTransport serving canned payloads keyed by spell index.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any, Dict, List

import httpx
import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import shared_models.spell  # noqa: F401

API_BASE_URL = "https://spells.test/api/spells"

SPELL_PAYLOADS: Dict[str, Dict[str, Any]] = {
    "acid-arrow": {
        "index": "acid-arrow",
        "name": "Acid Arrow",
        "level": 2,
        "desc": [
            "A shimmering green arrow streaks toward a target within range and bursts in a spray of acid.",
            "The target takes 4d4 acid damage immediately and 2d4 at the end of its next turn.",
        ],
        "higher_level": ["The damage increases by 1d4 for each slot level above 2nd."],
        "ritual": False,
        "concentration": False,
        "url": "/api/spells/acid-arrow",
    },
    "animal-messenger": {
        "index": "animal-messenger",
        "name": "Animal Messenger",
        "level": 2,
        "desc": ["By means of this spell, you use an animal to deliver a message."],
        "ritual": True,
    },
    "calm-emotions": {
        "index": "calm-emotions",
        "name": "Calm Emotions",
        "level": 2,
        "desc": ["You attempt to suppress strong emotions in a group of people.", "Each humanoid must save."],
    },
    "charm-person": {
        "index": "charm-person",
        "name": "Charm Person",
        "level": 1,
        "desc": ["You attempt to charm a humanoid you can see within range."],
    },
}


class FakeSpellApi:
    """Routes GET /api/spells/{index} to canned payloads and records calls."""

    def __init__(self, payloads: Dict[str, Dict[str, Any]]) -> None:
        self.payloads = dict(payloads)
        self.raw_bodies: Dict[str, str] = {}
        self.statuses: Dict[str, int] = {}
        self.requested: List[str] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        index = request.url.path.rsplit("/", 1)[-1]
        self.requested.append(index)
        if index in self.statuses:
            return httpx.Response(self.statuses[index], json={"error": "boom"})
        if index in self.raw_bodies:
            return httpx.Response(200, content=self.raw_bodies[index].encode(), headers={"Content-Type": "application/json"})
        if index not in self.payloads:
            return httpx.Response(404, json={"error": "Not found"})
        return httpx.Response(200, json=self.payloads[index])


@pytest.fixture()
def engine() -> Iterator[Any]:
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def session(engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def spell_api() -> FakeSpellApi:
    return FakeSpellApi(SPELL_PAYLOADS)


@pytest.fixture()
def make_client(spell_api) -> Iterator[Callable[..., httpx.Client]]:
    clients: List[httpx.Client] = []

    def _make(*_: Any, **__: Any) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(spell_api))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture()
def client(make_client) -> httpx.Client:
    return make_client()


@pytest.fixture()
def restore_root_logging() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
