from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import create_app
from store import InMemoryBlogStore

SAMPLE_USER_ID = "553e5015-ce17-4c10-abf3-e7329f063dc9"
SAMPLE_USER_ID_2 = "553e5015-ce17-4c10-abf3-e7329f063dd0"
SAMPLE_POST_ID = "85b02cdf-0021-4c82-a80a-9e8788503734"
SAMPLE_POST_ID_2 = "85b02cdf-0021-4c82-a80a-9e87885037aa"


class StubIdProvider:
    """
    Hands out queued ids in order; keeps repeating the last one once the
    queue is drained.
    """

    def __init__(self, *ids: str) -> None:
        self._ids = list(ids)
        self._last = ""

    def queue(self, *ids: str) -> None:
        self._ids.extend(ids)

    def new_id(self) -> str:
        if self._ids:
            self._last = self._ids.pop(0)
        return self._last


@pytest.fixture
def ids() -> StubIdProvider:
    return StubIdProvider()


@pytest.fixture
def store(ids: StubIdProvider) -> InMemoryBlogStore:
    return InMemoryBlogStore(ids)


@pytest.fixture
def client(store: InMemoryBlogStore):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


def call(client: TestClient, method: str, path: str, body: dict | None = None):
    return client.request(method, path, json=body if body is not None else {})


def create_user(client: TestClient, name: str, email: str):
    return call(client, "POST", "/users", {"name": name, "email": email})


def create_post(client: TestClient, user_id: str, title: str, content: str):
    return call(client, "POST", "/posts", {"user_id": user_id, "title": title, "content": content})
