"""
Base HTTP adapter interface.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, Tuple

from ..builder import BuiltRequest


class TransportResponse(ABC):
    """
    Response handed back by an adapter.

    The status line and headers are available immediately; the body is read
    with ``read()`` (buffered) or ``iter_chunks()`` (as it arrives).
    """

    url: str
    status_code: int
    headers: Dict[str, str]

    @abstractmethod
    def read(self) -> bytes:
        """
        Read the whole body.

        Raises:
            TransportError: On connection failure while reading
        """
        raise NotImplementedError

    @abstractmethod
    def iter_chunks(self) -> Iterator[bytes]:
        """
        Yield body bytes in network receipt order.

        Raises:
            TransportError: On connection failure while reading
        """
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        raise NotImplementedError


class HTTPAdapter(ABC):
    """
    Abstract base class for HTTP adapters.

    Allows pluggable HTTP clients for different use cases.
    """

    @abstractmethod
    def send(
        self,
        request: BuiltRequest,
        stream: bool = False,
        timeout: Tuple[float, float] = (5.0, 30.0),
    ) -> TransportResponse:
        """
        Send HTTP request.

        Args:
            request: Built request
            stream: Do not buffer the body
            timeout: (connect, read) timeouts in seconds

        Returns:
            TransportResponse

        Raises:
            TransportError: On network connectivity issues
            TimeoutError: On request timeout
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release pooled connections."""
