"""
Callback queues.

Task callbacks never run on a transport thread. They are submitted to a
``CallbackQueue``; the default is the process-wide ``main_queue()``.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

logger = logging.getLogger("twitter_api_kit.dispatch")


class CallbackQueue:
    """Executes submitted callables in submission order on one thread."""

    def __init__(self, name: str = "twitter_api_kit.callbacks"):
        self.name = name
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name)

    def submit(self, fn: Callable[[], None]) -> None:
        self._executor.submit(self._run, fn)

    def _run(self, fn: Callable[[], None]) -> None:
        try:
            fn()
        except Exception:
            # A raising callback must not stop later callbacks on this queue
            logger.exception("Callback raised on queue %s", self.name)

    def sync(self, timeout: Optional[float] = None) -> None:
        """Block until every callback submitted so far has run."""
        self._executor.submit(lambda: None).result(timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __repr__(self) -> str:
        return f"CallbackQueue(name={self.name!r})"


_main_queue: Optional[CallbackQueue] = None
_main_queue_lock = threading.Lock()


def main_queue() -> CallbackQueue:
    """The designated default callback queue."""
    global _main_queue
    with _main_queue_lock:
        if _main_queue is None:
            _main_queue = CallbackQueue("twitter_api_kit.main")
        return _main_queue
