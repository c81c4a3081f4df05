"""
Exception classes for TwitterAPIKit.

Errors are never raised across a callback boundary. Request construction
errors become a failed task, everything else is wrapped in a failure
response and delivered to the caller's callback.
"""

from typing import Any, Dict, Optional


class TwitterAPIKitError(Exception):
    """Base exception for all TwitterAPIKit errors."""

    pass


# ============================================================================
# Request construction
# ============================================================================


class RequestFailed(TwitterAPIKitError):
    """
    Request construction error.

    Raised while building the outbound request. A request that fails here
    never reaches the transport.
    """

    pass


class InvalidURL(RequestFailed):
    """The base URL and path do not form a usable URL."""

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class CannotEncodeStringToData(RequestFailed):
    """A string could not be encoded as UTF-8."""

    def __init__(self, string: str):
        super().__init__("Cannot encode string to UTF-8 data")
        self.string = string


class InvalidParameter(RequestFailed):
    """A parameter value is not valid for the request's body content type."""

    def __init__(self, parameter: Dict[str, Any], cause: str):
        super().__init__(f"Invalid parameter: {cause}")
        self.parameter = parameter
        self.cause = cause


class JSONSerializationFailed(RequestFailed):
    """The parameter map could not be serialized as a JSON object."""

    def __init__(self, error: Exception):
        super().__init__(f"JSON serialization failed: {error}")
        self.error = error


# ============================================================================
# Response / transport
# ============================================================================


class HTTPError(TwitterAPIKitError):
    """
    Non-2xx HTTP response.

    Carries the status code and the raw response body for inspection.
    """

    def __init__(
        self,
        status_code: int,
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    def __repr__(self) -> str:
        return f"HTTPError(status_code={self.status_code}, body={self.body[:200]!r})"


class TransportError(TwitterAPIKitError):
    """
    Network connectivity error.

    Raised when the connection fails (DNS, TLS, reset). The underlying
    exception is chained as ``__cause__``.
    """

    pass


class TimeoutError(TransportError):
    """Request timeout error."""

    pass


class StreamClosed(TransportError):
    """The server closed a streaming connection."""

    pass


class ResponseTransformError(TwitterAPIKitError):
    """
    A response transform raised on an otherwise successful response.

    The transform's exception is chained as ``__cause__``.
    """

    pass


class TaskCancelled(TwitterAPIKitError):
    """The task was cancelled before the operation completed."""

    pass
