"""
Pytest configuration and fixtures
"""

import threading
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterator, List, Optional, Tuple

import pytest

from twitter_api_kit import (
    BaseURLType,
    BodyContentType,
    Bearer,
    CallbackQueue,
    Environment,
    HTTPMethod,
    SessionConfig,
    TwitterAPIRequest,
    TwitterAPISession,
)
from twitter_api_kit.builder import BuiltRequest
from twitter_api_kit.exceptions import TransportError
from twitter_api_kit.http.adapter import HTTPAdapter, TransportResponse

TEST_ENVIRONMENT = Environment(
    api_url="https://api.example.com",
    upload_url="https://upload.example.com",
)


class SimpleRequest(TwitterAPIRequest):
    """Request description with every field supplied by the test."""

    def __init__(
        self,
        method: HTTPMethod = HTTPMethod.GET,
        path: str = "/1.1/test.json",
        parameters: Optional[Dict[str, Any]] = None,
        body_content_type: BodyContentType = BodyContentType.WWW_FORM_URL_ENCODED,
        base_url_type: BaseURLType = BaseURLType.API,
    ):
        self._method = method
        self._path = path
        self._parameters = parameters or {}
        self._body_content_type = body_content_type
        self._base_url_type = base_url_type

    @property
    def method(self) -> HTTPMethod:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    @property
    def parameters(self) -> Dict[str, Any]:
        return self._parameters

    @property
    def body_content_type(self) -> BodyContentType:
        return self._body_content_type

    @property
    def base_url_type(self) -> BaseURLType:
        return self._base_url_type


class DummyResponse(TransportResponse):
    """Scripted response. ``chunks`` may contain Events that pause the stream."""

    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b"",
        chunks: Optional[List[Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        url: str = "https://api.example.com/1.1/test.json",
        read_error: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.chunks = chunks if chunks is not None else [body]
        self.headers = headers or {"content-type": "application/json"}
        self.url = url
        self.read_error = read_error
        self.closed = threading.Event()

    def read(self) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return self.body

    def iter_chunks(self) -> Iterator[bytes]:
        for chunk in self.chunks:
            if isinstance(chunk, threading.Event):
                chunk.wait(5)
                continue
            if self.closed.is_set():
                return
            yield chunk
        if self.read_error is not None:
            raise self.read_error

    def close(self) -> None:
        self.closed.set()


class DummyAdapter(HTTPAdapter):
    """Mock HTTP adapter for testing."""

    def __init__(self) -> None:
        self.requests: List[Tuple[BuiltRequest, bool]] = []
        self.responses: Deque[DummyResponse] = deque()
        self.error: Optional[Exception] = None
        self.gate: Optional[threading.Event] = None
        self.sent = threading.Event()
        self.closed = False

    def send(
        self,
        request: BuiltRequest,
        stream: bool = False,
        timeout: Tuple[float, float] = (5.0, 30.0),
    ) -> TransportResponse:
        self.requests.append((request, stream))
        self.sent.set()
        if self.gate is not None:
            self.gate.wait(5)
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.popleft()
        return DummyResponse(body=b"{}")

    @property
    def last_request(self) -> BuiltRequest:
        return self.requests[-1][0]

    def close(self) -> None:
        self.closed = True


def wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def make_request():
    """Factory for request descriptions"""
    return SimpleRequest


@pytest.fixture
def adapter():
    return DummyAdapter()


@pytest.fixture
def queue():
    """Callback queue owned by the test"""
    q = CallbackQueue("test.callbacks")
    yield q
    q.shutdown(wait=True)


@pytest.fixture
def environment():
    return TEST_ENVIRONMENT


@pytest.fixture
def make_session(adapter):
    """Factory for sessions wired to the dummy adapter"""
    sessions: List[TwitterAPISession] = []

    def factory(auth=None, **kwargs) -> TwitterAPISession:
        kwargs.setdefault("environment", TEST_ENVIRONMENT)
        kwargs.setdefault("config", SessionConfig(max_workers=2))
        kwargs.setdefault("adapter", adapter)
        kwargs.setdefault("nonce_factory", lambda: "nonce1")
        kwargs.setdefault("clock", lambda: 1000000000)
        session = TwitterAPISession(auth or Bearer(token="test-token"), **kwargs)
        sessions.append(session)
        return session

    yield factory

    for session in sessions:
        session.close()


@pytest.fixture
def transport_error():
    return TransportError("connection reset")
