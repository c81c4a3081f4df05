"""
Classified responses delivered to task callbacks.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Optional, TypeVar

from .exceptions import HTTPError, ResponseTransformError, TwitterAPIKitError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class HTTPURLResponse:
    """Status line and headers of an HTTP response."""

    url: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class TwitterAPIResponse(Generic[T]):
    """
    Outcome of a task: either ``value`` (success) or ``error`` (failure).

    ``response`` is present whenever the server answered; ``data`` holds the
    raw body bytes the outcome was derived from.
    """

    value: Optional[T] = None
    error: Optional[TwitterAPIKitError] = None
    response: Optional[HTTPURLResponse] = None
    data: Optional[bytes] = None

    @classmethod
    def success(
        cls,
        value: T,
        response: Optional[HTTPURLResponse] = None,
        data: Optional[bytes] = None,
    ) -> "TwitterAPIResponse[T]":
        return cls(value=value, response=response, data=data)

    @classmethod
    def failure(
        cls,
        error: TwitterAPIKitError,
        response: Optional[HTTPURLResponse] = None,
        data: Optional[bytes] = None,
    ) -> "TwitterAPIResponse[T]":
        return cls(error=error, response=response, data=data)

    @classmethod
    def classify(cls, response: HTTPURLResponse, data: bytes) -> "TwitterAPIResponse[bytes]":
        """Success for a 2xx status, ``HTTPError`` for anything else."""
        if response.is_success:
            return cls(value=data, response=response, data=data)
        error = HTTPError(response.status_code, body=data, headers=response.headers)
        return cls(error=error, response=response, data=data)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response else None

    def map(self, transform: Callable[[T], U]) -> "TwitterAPIResponse[U]":
        """
        Apply ``transform`` to a success value.

        A failure passes through unchanged; an exception raised by
        ``transform`` becomes a ``ResponseTransformError`` failure.
        """
        if self.error is not None:
            return TwitterAPIResponse(error=self.error, response=self.response, data=self.data)
        try:
            value = transform(self.value)
        except Exception as e:
            error = ResponseTransformError(f"Response transform failed: {e}")
            error.__cause__ = e
            return TwitterAPIResponse(error=error, response=self.response, data=self.data)
        return TwitterAPIResponse(value=value, response=self.response, data=self.data)

    def unwrap(self) -> T:
        """Return the success value or raise the failure's error."""
        if self.error is not None:
            raise self.error
        return self.value
