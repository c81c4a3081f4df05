"""
Session tasks.

Every call to ``TwitterAPISession.send`` returns a task handle:

- ``SessionDataTask``: one buffered response.
- ``SessionStreamTask``: a sequence of ``\\r\\n``-delimited chunks from one
  long-lived connection, each classified on its own.
- ``FailedTask``: request construction failed; nothing was sent.
- ``SpecializedTask``: applies a transform to another task's success value.

Callbacks always run on a ``CallbackQueue`` (default ``main_queue()``).

Examples:
    >>> session.send(request).on_json(lambda response: print(response.value))
"""

import functools
import json
import logging
import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from .dispatch import CallbackQueue, main_queue
from .exceptions import (
    HTTPError,
    StreamClosed,
    TaskCancelled,
    TransportError,
    TwitterAPIKitError,
)
from .http.operation import TransportOperation
from .response import HTTPURLResponse, TwitterAPIResponse

logger = logging.getLogger("twitter_api_kit.tasks")

T = TypeVar("T")
U = TypeVar("U")

ResponseCallback = Callable[[TwitterAPIResponse[Any]], None]

STREAM_DELIMITER = b"\r\n"


class TaskState(str, Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def decode_json(data: bytes) -> Any:
    return json.loads(data)


class SessionTask(ABC):
    """Capabilities shared by every task."""

    @property
    @abstractmethod
    def task_identifier(self) -> Optional[int]:
        raise NotImplementedError

    @property
    @abstractmethod
    def state(self) -> TaskState:
        raise NotImplementedError

    @abstractmethod
    def cancel(self) -> None:
        """Stop the operation. No callback is scheduled afterwards."""
        raise NotImplementedError

    @abstractmethod
    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the task leaves ``RUNNING``; False on timeout."""
        raise NotImplementedError


class ResponseTask(SessionTask, Generic[T]):
    """A task that produces one response."""

    @abstractmethod
    def on_response(
        self,
        callback: Callable[[TwitterAPIResponse[T]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "ResponseTask[T]":
        """Register ``callback``; it fires once, on ``queue``."""
        raise NotImplementedError

    def specialized(self, transform: Callable[[T], U]) -> "SpecializedTask[U]":
        return SpecializedTask(self, transform)


class DataTask(ResponseTask[bytes]):
    """A task producing raw response bytes."""

    def on_json(
        self,
        callback: Callable[[TwitterAPIResponse[Any]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "DataTask":
        """Register ``callback`` for the decoded JSON body."""
        self.specialized(decode_json).on_response(callback, queue)
        return self


class StreamTask(SessionTask):
    """A task producing a sequence of chunks."""

    @abstractmethod
    def on_chunk(
        self,
        callback: Callable[[TwitterAPIResponse[bytes]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "StreamTask":
        """
        Register ``callback`` for every chunk.

        The last call carries a failure: ``StreamClosed`` when the server
        ended the stream, the ``TransportError`` otherwise.
        """
        raise NotImplementedError


# ============================================================================
# Transport-backed tasks
# ============================================================================


class _OperationTask:
    """State shared by tasks driven by a ``TransportOperation``."""

    def __init__(self, operation: TransportOperation):
        self.operation = operation
        self._lock = threading.Lock()
        self._state = TaskState.RUNNING
        self._done = threading.Event()
        self._http_response: Optional[HTTPURLResponse] = None

    @property
    def task_identifier(self) -> Optional[int]:
        return self.operation.identifier

    @property
    def state(self) -> TaskState:
        with self._lock:
            return self._state

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    def cancel(self) -> None:
        with self._lock:
            if self._state is not TaskState.RUNNING:
                return
            self._state = TaskState.CANCELLED
            self._clear_callbacks()

        logger.debug("Cancelling task %d", self.operation.identifier)
        self.operation.cancel()
        self._done.set()

    def _clear_callbacks(self) -> None:
        raise NotImplementedError

    def did_receive_response(self, response: HTTPURLResponse) -> None:
        with self._lock:
            self._http_response = response


class SessionDataTask(_OperationTask, DataTask):
    """Buffers the body and delivers one classified response."""

    def __init__(self, operation: TransportOperation):
        super().__init__(operation)
        self._buffer = bytearray()
        self._result: Optional[TwitterAPIResponse[bytes]] = None
        self._callbacks: List[Tuple[CallbackQueue, ResponseCallback]] = []

    def on_response(
        self,
        callback: Callable[[TwitterAPIResponse[bytes]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "SessionDataTask":
        queue = queue or main_queue()
        with self._lock:
            if self._state is TaskState.CANCELLED:
                return self
            if self._result is None:
                self._callbacks.append((queue, callback))
                return self
            result = self._result

        queue.submit(functools.partial(callback, result))
        return self

    def _clear_callbacks(self) -> None:
        self._callbacks = []

    def did_receive_data(self, data: bytes) -> None:
        with self._lock:
            self._buffer += data

    def did_complete(self, error: Optional[TwitterAPIKitError]) -> None:
        with self._lock:
            if self._state is not TaskState.RUNNING:
                return
            if isinstance(error, TaskCancelled):
                self._state = TaskState.CANCELLED
                self._callbacks = []
                callbacks: List[Tuple[CallbackQueue, ResponseCallback]] = []
            else:
                self._result = self._classify(error)
                self._state = TaskState.COMPLETED
                callbacks, self._callbacks = self._callbacks, []
            result = self._result

        for queue, callback in callbacks:
            queue.submit(functools.partial(callback, result))
        self._done.set()

    def _classify(self, error: Optional[TwitterAPIKitError]) -> TwitterAPIResponse[bytes]:
        data = bytes(self._buffer)
        if error is not None:
            return TwitterAPIResponse.failure(error, self._http_response, data or None)
        if self._http_response is None:
            return TwitterAPIResponse.failure(TransportError("No response received"))
        return TwitterAPIResponse.classify(self._http_response, data)

    def __repr__(self) -> str:
        return f"SessionDataTask(id={self.task_identifier}, state={self.state.value})"


class SessionStreamTask(_OperationTask, StreamTask):
    """
    Splits the body on ``\\r\\n`` and delivers each chunk.

    Chunks that arrive before the first callback is registered are held and
    replayed to it, so nothing is lost between ``send_stream`` and
    ``on_chunk``. A callback registered after the stream ended receives the
    terminal failure only.

    A non-2xx stream always reports at least one ``HTTPError``, even when
    the server sent no body.
    """

    def __init__(self, operation: TransportOperation):
        super().__init__(operation)
        self._buffer = bytearray()
        self._backlog: List[TwitterAPIResponse[bytes]] = []
        self._callbacks: List[Tuple[CallbackQueue, ResponseCallback]] = []
        self._terminal: Optional[TwitterAPIResponse[bytes]] = None
        self._http_error_sent = False

    def on_chunk(
        self,
        callback: Callable[[TwitterAPIResponse[bytes]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "SessionStreamTask":
        queue = queue or main_queue()
        with self._lock:
            if self._state is TaskState.CANCELLED:
                return self
            backlog, self._backlog = self._backlog, []
            if not backlog and self._terminal is not None:
                backlog = [self._terminal]
            for response in backlog:
                queue.submit(functools.partial(callback, response))
            if self._state is TaskState.RUNNING:
                self._callbacks.append((queue, callback))
        return self

    def _clear_callbacks(self) -> None:
        self._callbacks = []
        self._backlog = []

    def _emit(self, response: TwitterAPIResponse[bytes]) -> None:
        # Called with the lock held; submitting in order keeps receipt order
        if not self._callbacks:
            self._backlog.append(response)
            return
        for queue, callback in self._callbacks:
            queue.submit(functools.partial(callback, response))

    def _error_status(self) -> bool:
        return self._http_response is not None and not self._http_response.is_success

    def _emit_chunk(self, chunk: bytes) -> None:
        if self._http_response is None:
            return
        if not chunk.strip() and not self._error_status():
            # keep-alive
            return
        response = TwitterAPIResponse.classify(self._http_response, chunk)
        if isinstance(response.error, HTTPError):
            self._http_error_sent = True
        self._emit(response)

    def did_receive_data(self, data: bytes) -> None:
        with self._lock:
            if self._state is not TaskState.RUNNING:
                return
            self._buffer += data
            *chunks, rest = bytes(self._buffer).split(STREAM_DELIMITER)
            self._buffer = bytearray(rest)
            for chunk in chunks:
                self._emit_chunk(chunk)

    def did_complete(self, error: Optional[TwitterAPIKitError]) -> None:
        with self._lock:
            if self._state is not TaskState.RUNNING:
                return
            if isinstance(error, TaskCancelled):
                self._state = TaskState.CANCELLED
                self._clear_callbacks()
            else:
                rest = bytes(self._buffer)
                self._buffer = bytearray()
                if rest or (self._error_status() and not self._http_error_sent):
                    self._emit_chunk(rest)
                if error is None:
                    error = StreamClosed("Stream closed by server")
                self._terminal = TwitterAPIResponse.failure(error, self._http_response)
                self._emit(self._terminal)
                self._state = TaskState.COMPLETED
                self._callbacks = []
        self._done.set()

    def __repr__(self) -> str:
        return f"SessionStreamTask(id={self.task_identifier}, state={self.state.value})"


# ============================================================================
# Failed / specialized tasks
# ============================================================================


class FailedTask(DataTask, StreamTask):
    """
    Terminal task for a request that could not be constructed.

    Every callback registered fires once, right away, through its queue.
    """

    def __init__(self, error: TwitterAPIKitError):
        self.error = error
        self._response: TwitterAPIResponse[Any] = TwitterAPIResponse.failure(error)

    @property
    def task_identifier(self) -> Optional[int]:
        return None

    @property
    def state(self) -> TaskState:
        return TaskState.COMPLETED

    def cancel(self) -> None:
        pass

    def wait(self, timeout: Optional[float] = None) -> bool:
        return True

    def on_response(
        self,
        callback: Callable[[TwitterAPIResponse[bytes]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "FailedTask":
        (queue or main_queue()).submit(functools.partial(callback, self._response))
        return self

    def on_chunk(
        self,
        callback: Callable[[TwitterAPIResponse[bytes]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "FailedTask":
        return self.on_response(callback, queue)

    def __repr__(self) -> str:
        return f"FailedTask(error={self.error!r})"


class SpecializedTask(ResponseTask[T]):
    """
    Applies ``transform`` to the wrapped task's success value.

    The transform runs on the callback queue, once per registered callback.
    A raising transform yields a ``ResponseTransformError`` failure.
    Cancellation and waiting go straight to the wrapped task.
    """

    def __init__(self, task: ResponseTask[Any], transform: Callable[[Any], T]):
        self.task = task
        self.transform = transform

    @property
    def task_identifier(self) -> Optional[int]:
        return self.task.task_identifier

    @property
    def state(self) -> TaskState:
        return self.task.state

    def cancel(self) -> None:
        self.task.cancel()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.task.wait(timeout)

    def on_response(
        self,
        callback: Callable[[TwitterAPIResponse[T]], None],
        queue: Optional[CallbackQueue] = None,
    ) -> "SpecializedTask[T]":
        transform = self.transform
        self.task.on_response(lambda response: callback(response.map(transform)), queue)
        return self

    def __repr__(self) -> str:
        return f"SpecializedTask(task={self.task!r})"
