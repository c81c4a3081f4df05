"""
Transport operations.

A ``TransportOperation`` is one HTTP exchange running on the session's
thread pool. It reports progress to a delegate (``did_receive_response``,
``did_receive_data``, ``did_complete``) from the pool thread.
"""

import itertools
import logging
import threading
import time
from concurrent.futures import Executor
from typing import Optional, Protocol, Tuple

from ..builder import BuiltRequest
from ..exceptions import TaskCancelled, TransportError, TwitterAPIKitError
from ..response import HTTPURLResponse
from .adapter import HTTPAdapter, TransportResponse

logger = logging.getLogger("twitter_api_kit.http")

_identifiers = itertools.count(1)


class OperationDelegate(Protocol):
    def did_receive_response(
        self, operation: "TransportOperation", response: HTTPURLResponse
    ) -> None: ...

    def did_receive_data(self, operation: "TransportOperation", data: bytes) -> None: ...

    def did_complete(
        self, operation: "TransportOperation", error: Optional[TwitterAPIKitError]
    ) -> None: ...


class TransportOperation:
    """
    One request submitted to the transport.

    ``did_complete`` is called exactly once, with ``None`` on a clean finish,
    ``TaskCancelled`` after ``cancel()``, or the ``TransportError`` that ended
    the exchange.
    """

    def __init__(
        self,
        adapter: HTTPAdapter,
        request: BuiltRequest,
        stream: bool = False,
        timeout: Tuple[float, float] = (5.0, 30.0),
    ):
        self.identifier = next(_identifiers)
        self.adapter = adapter
        self.request = request
        self.stream = stream
        self.timeout = timeout
        self.status_code: Optional[int] = None
        self.started_at: Optional[float] = None
        self.finished_at: Optional[float] = None

        self._lock = threading.Lock()
        self._cancelled = False
        self._response: Optional[TransportResponse] = None

    @property
    def kind(self) -> str:
        return "stream" if self.stream else "data"

    @property
    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    @property
    def latency(self) -> float:
        if self.started_at is None or self.finished_at is None:
            return 0.0
        return self.finished_at - self.started_at

    def resume(self, executor: Executor, delegate: OperationDelegate) -> None:
        executor.submit(self._run, delegate)

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            response = self._response

        if response is not None:
            # Unblocks a streaming read on the pool thread
            response.close()

    def _run(self, delegate: OperationDelegate) -> None:
        self.started_at = time.monotonic()
        error: Optional[TwitterAPIKitError] = None

        try:
            self._exchange(delegate)
        except TwitterAPIKitError as e:
            error = e
        except Exception as e:
            # Reads on a response closed by cancel() fail in adapter-specific ways
            if not self.is_cancelled:
                logger.exception("Operation %d failed", self.identifier)
            error = TransportError(f"Transport failed: {e}")
            error.__cause__ = e

        if self.is_cancelled:
            error = TaskCancelled(f"Operation {self.identifier} cancelled")

        self.finished_at = time.monotonic()
        delegate.did_complete(self, error)

    def _exchange(self, delegate: OperationDelegate) -> None:
        if self.is_cancelled:
            return

        logger.debug("Sending %s %s", self.request.method, self.request.url)
        response = self.adapter.send(self.request, stream=self.stream, timeout=self.timeout)

        with self._lock:
            self._response = response
            cancelled = self._cancelled

        try:
            if cancelled:
                return
            self.status_code = response.status_code
            delegate.did_receive_response(
                self,
                HTTPURLResponse(
                    url=response.url,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                ),
            )

            if self.stream:
                for chunk in response.iter_chunks():
                    if self.is_cancelled:
                        return
                    delegate.did_receive_data(self, chunk)
            else:
                delegate.did_receive_data(self, response.read())
        finally:
            response.close()

    def __repr__(self) -> str:
        return (
            f"TransportOperation(id={self.identifier}, kind={self.kind}, "
            f"method={self.request.method}, url={self.request.url!r})"
        )
