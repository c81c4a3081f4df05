"""
Operation registry.

Maps live transport operations to the tasks that wrap them. Operations
report from pool threads, so every access to the registry holds one lock.
"""

import logging
import threading
from concurrent.futures import Executor
from typing import Dict, List, Optional, Union

from .exceptions import TwitterAPIKitError
from .http.operation import TransportOperation
from .metrics import metrics_request
from .response import HTTPURLResponse
from .tasks import SessionDataTask, SessionStreamTask

logger = logging.getLogger("twitter_api_kit.session")

OperationTask = Union[SessionDataTask, SessionStreamTask]


class SessionDelegate:
    """Routes operation events to tasks and drops entries on completion."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: Dict[int, OperationTask] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def append_and_resume(
        self, operation: TransportOperation, executor: Executor
    ) -> SessionDataTask:
        task = SessionDataTask(operation)
        self._append(operation, task)
        operation.resume(executor, self)
        return task

    def append_and_resume_stream(
        self, operation: TransportOperation, executor: Executor
    ) -> SessionStreamTask:
        task = SessionStreamTask(operation)
        self._append(operation, task)
        operation.resume(executor, self)
        return task

    def _append(self, operation: TransportOperation, task: OperationTask) -> None:
        with self._lock:
            self._tasks[operation.identifier] = task

    def _task_for(self, operation: TransportOperation) -> Optional[OperationTask]:
        with self._lock:
            return self._tasks.get(operation.identifier)

    # ------------------------------------------------------------------
    # OperationDelegate
    # ------------------------------------------------------------------

    def did_receive_response(
        self, operation: TransportOperation, response: HTTPURLResponse
    ) -> None:
        task = self._task_for(operation)
        if task is not None:
            task.did_receive_response(response)

    def did_receive_data(self, operation: TransportOperation, data: bytes) -> None:
        task = self._task_for(operation)
        if task is not None:
            task.did_receive_data(data)

    def did_complete(
        self, operation: TransportOperation, error: Optional[TwitterAPIKitError]
    ) -> None:
        with self._lock:
            task = self._tasks.pop(operation.identifier, None)

        code = str(operation.status_code) if operation.status_code is not None else "error"
        metrics_request(operation.kind, code, operation.latency)
        logger.debug(
            "Operation %d completed status=%s error=%r",
            operation.identifier,
            code,
            error,
            extra={"task_id": operation.identifier},
        )

        if task is not None:
            task.did_complete(error)

    def invalidate_and_cancel(self) -> None:
        """Cancel every registered task and empty the registry."""
        with self._lock:
            tasks: List[OperationTask] = list(self._tasks.values())
            self._tasks.clear()

        for task in tasks:
            task.cancel()
