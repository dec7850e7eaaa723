# tests/conftest.py
import json
from collections import deque
from pathlib import Path

import pytest
import requests

from gamma_mcp.config import Config

# -------- Fakes for requests --------
class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, *, text: str = None, content: bytes = b""):
        self.status_code = status_code
        self._payload = payload
        self.content = content
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400  # same rule as requests.Response.ok

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """
    Minimal stand-in for requests.Session.
    Queue responses (or exceptions) per method; every call is recorded.
    """
    def __init__(self):
        self.queues = {"GET": deque(), "POST": deque()}
        self.calls = []
        self.closed = False

    def queue(self, method: str, *responses):
        self.queues[method.upper()].extend(responses)
        return self

    def _next(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self.queues[method]:
            raise AssertionError(f"unexpected {method} {url}")
        item = self.queues[method].popleft()
        if isinstance(item, Exception):
            raise item
        return item

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def close(self):
        self.closed = True

    def calls_for(self, method: str):
        return [c for c in self.calls if c[0] == method.upper()]


class FakeClock:
    """clock() and sleep() pair: sleeping advances time instantly."""
    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps = []

    def clock(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def status(state: str, **fields) -> FakeResponse:
    return FakeResponse(200, {"generationId": "gen-1", "status": state, **fields})


def created(generation_id: str = "gen-1") -> FakeResponse:
    return FakeResponse(200, {"generationId": generation_id})


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(
        api_key="sk-test",
        api_base="https://gamma.test/v0.2",
        poll_interval=3.0,
        poll_timeout=300.0,
        http_timeout=5.0,
        output_dir=tmp_path / "output",
    )


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
