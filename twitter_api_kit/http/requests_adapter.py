"""
Requests-based HTTP adapter.
"""

from typing import Dict, Iterator, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter as RequestsHTTPAdapter

from ..builder import BuiltRequest
from ..exceptions import TimeoutError as TwitterTimeoutError
from ..exceptions import TransportError
from .adapter import HTTPAdapter, TransportResponse


def _translate(e: requests.exceptions.RequestException) -> TransportError:
    if isinstance(e, requests.exceptions.Timeout):
        error: TransportError = TwitterTimeoutError(f"Request timed out: {e}")
    else:
        error = TransportError(f"Network request failed: {e}")
    return error


class RequestsResponse(TransportResponse):
    """TransportResponse backed by ``requests.Response``."""

    def __init__(self, response: requests.Response):
        self._response = response
        self.url = response.url
        self.status_code = response.status_code
        self.headers: Dict[str, str] = dict(response.headers)

    def read(self) -> bytes:
        try:
            return self._response.content
        except requests.exceptions.RequestException as e:
            raise _translate(e) from e

    def iter_chunks(self) -> Iterator[bytes]:
        try:
            # chunk_size=None yields data as it arrives on a streamed response
            for chunk in self._response.iter_content(chunk_size=None):
                if chunk:
                    yield chunk
        except requests.exceptions.RequestException as e:
            raise _translate(e) from e

    def close(self) -> None:
        self._response.close()


class RequestsAdapter(HTTPAdapter):
    """
    HTTP adapter using requests library.

    Features:
    - Connection pooling via session
    - Configurable timeouts
    - No automatic retries; callers decide what to resend
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        pool_maxsize: int = 10,
        verify_ssl: bool = True,
    ):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance
            pool_maxsize: Connections kept per host
            verify_ssl: Verify SSL certificates
        """
        self.session = session or requests.Session()
        self.session.verify = verify_ssl

        adapter = RequestsHTTPAdapter(
            pool_connections=pool_maxsize,
            pool_maxsize=pool_maxsize,
            max_retries=0,
        )
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def send(
        self,
        request: BuiltRequest,
        stream: bool = False,
        timeout: Tuple[float, float] = (5.0, 30.0),
    ) -> TransportResponse:
        try:
            response = self.session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body,
                stream=stream,
                timeout=timeout,
            )
        except requests.exceptions.RequestException as e:
            raise _translate(e) from e

        return RequestsResponse(response)

    def close(self) -> None:
        self.session.close()
