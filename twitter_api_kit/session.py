"""
TwitterAPISession: builds signed requests and hands them to the transport.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Union

from .auth import AuthenticationMethod
from .builder import BuiltRequest, build_request
from .config import Environment, SessionConfig
from .encoding import new_boundary
from .exceptions import RequestFailed, TransportError
from .http.adapter import HTTPAdapter
from .http.operation import TransportOperation
from .http.requests_adapter import RequestsAdapter
from .logging_setup import setup_logging
from .oauth import make_nonce
from .request import TwitterAPIRequest
from .session_delegate import SessionDelegate
from .tasks import DataTask, FailedTask, StreamTask

logger = logging.getLogger("twitter_api_kit.session")


def _closed_task() -> FailedTask:
    return FailedTask(TransportError("Session has been closed"))


class TwitterAPISession:
    """
    Owns the transport and the credentials used to sign every request.

    Features:
    - OAuth 1.0a, Basic and Bearer authorization
    - Buffered and streaming requests on a shared thread pool
    - Callback delivery on caller-chosen queues
    - Pluggable HTTP adapter

    Examples:
        >>> session = TwitterAPISession(Bearer(token="AAAA..."))
        >>> session.send(request).on_json(print)
        >>> session.close()
    """

    def __init__(
        self,
        auth: AuthenticationMethod,
        environment: Optional[Environment] = None,
        config: Optional[SessionConfig] = None,
        adapter: Optional[HTTPAdapter] = None,
        nonce_factory: Callable[[], str] = make_nonce,
        clock: Callable[[], float] = time.time,
        boundary_factory: Callable[[], str] = new_boundary,
    ):
        """
        Initialize session.

        Args:
            auth: Authentication method, fixed for the session's lifetime
            environment: Base URLs (default: public Twitter hosts)
            config: Transport configuration
            adapter: Optional custom HTTP adapter
            nonce_factory: OAuth nonce source
            clock: OAuth timestamp source (epoch seconds)
            boundary_factory: Multipart boundary source
        """
        self.auth = auth
        self.environment = environment or Environment()
        self.config = config or SessionConfig()

        if self.config.debug:
            setup_logging(debug=True)

        self._owns_adapter = adapter is None
        self.adapter = adapter or RequestsAdapter(
            pool_maxsize=self.config.pool_maxsize,
            verify_ssl=self.config.verify_ssl,
        )
        self.nonce_factory = nonce_factory
        self.clock = clock
        self.boundary_factory = boundary_factory

        self.delegate = SessionDelegate()
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="twitter_api_kit.transport",
        )
        self._closed = False
        self._lock = threading.Lock()

        logger.debug("Session initialized (auth=%r, environment=%r)", auth, self.environment)

    def __enter__(self) -> "TwitterAPISession":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def build(self, request: TwitterAPIRequest) -> BuiltRequest:
        """
        Build the signed HTTP request for ``request``.

        Raises:
            RequestFailed: If the request cannot be constructed
        """
        return build_request(
            request,
            self.environment,
            self.auth,
            user_agent=self.config.user_agent,
            boundary_factory=self.boundary_factory,
            nonce=self.nonce_factory(),
            timestamp=int(self.clock()),
        )

    def send(self, request: TwitterAPIRequest) -> DataTask:
        """
        Send a request expecting one buffered response.

        Returns:
            A running data task, or a FailedTask when the request cannot be
            built or the session is closed
        """
        built = self._prepare(request)
        if isinstance(built, FailedTask):
            return built

        operation = TransportOperation(
            self.adapter,
            built,
            stream=False,
            timeout=(self.config.timeout_connect, self.config.timeout_read),
        )
        with self._lock:
            if self._closed:
                return _closed_task()
            return self.delegate.append_and_resume(operation, self._executor)

    def send_stream(self, request: TwitterAPIRequest) -> StreamTask:
        """
        Send a request whose response is an unbounded chunk stream.

        Returns:
            A running stream task, or a FailedTask
        """
        built = self._prepare(request)
        if isinstance(built, FailedTask):
            return built

        operation = TransportOperation(
            self.adapter,
            built,
            stream=True,
            timeout=(self.config.timeout_connect, self.config.stream_timeout_read),
        )
        with self._lock:
            if self._closed:
                return _closed_task()
            return self.delegate.append_and_resume_stream(operation, self._executor)

    def _prepare(self, request: TwitterAPIRequest) -> Union[BuiltRequest, FailedTask]:
        if self._closed:
            return _closed_task()
        try:
            return self.build(request)
        except RequestFailed as e:
            logger.warning("Cannot build %r: %s", request, e)
            return FailedTask(e)

    def close(self) -> None:
        """Cancel every in-flight task and release the transport. Idempotent."""
        with self._lock:
            if self._closed:
                return
            self._closed = True

        self.delegate.invalidate_and_cancel()
        self._executor.shutdown(wait=False, cancel_futures=True)
        if self._owns_adapter:
            self.adapter.close()

        logger.debug("Session closed")
