"""
TwitterAPIKit for Python

HTTP client core for the Twitter REST and streaming APIs: request signing,
body encoding, and cancellable callback-style tasks.
"""

from .__version__ import __version__
from .auth import AuthenticationMethod, Basic, Bearer, OAuth1
from .builder import BuiltRequest, build_request
from .config import Environment, SessionConfig
from .dispatch import CallbackQueue, main_queue
from .exceptions import (
    CannotEncodeStringToData,
    HTTPError,
    InvalidParameter,
    InvalidURL,
    JSONSerializationFailed,
    RequestFailed,
    ResponseTransformError,
    StreamClosed,
    TaskCancelled,
    TimeoutError,
    TransportError,
    TwitterAPIKitError,
)
from .request import (
    BaseURLType,
    BodyContentType,
    Data,
    HTTPMethod,
    MultipartFormDataPart,
    TwitterAPIRequest,
    Value,
)
from .response import HTTPURLResponse, TwitterAPIResponse
from .session import TwitterAPISession
from .tasks import (
    DataTask,
    FailedTask,
    SessionTask,
    SpecializedTask,
    StreamTask,
    TaskState,
)

__all__ = [
    "__version__",
    "AuthenticationMethod",
    "OAuth1",
    "Basic",
    "Bearer",
    "BuiltRequest",
    "build_request",
    "Environment",
    "SessionConfig",
    "CallbackQueue",
    "main_queue",
    "TwitterAPIKitError",
    "RequestFailed",
    "InvalidURL",
    "CannotEncodeStringToData",
    "InvalidParameter",
    "JSONSerializationFailed",
    "HTTPError",
    "TransportError",
    "TimeoutError",
    "StreamClosed",
    "TaskCancelled",
    "ResponseTransformError",
    "HTTPMethod",
    "BaseURLType",
    "BodyContentType",
    "MultipartFormDataPart",
    "Value",
    "Data",
    "TwitterAPIRequest",
    "HTTPURLResponse",
    "TwitterAPIResponse",
    "TwitterAPISession",
    "SessionTask",
    "DataTask",
    "StreamTask",
    "FailedTask",
    "SpecializedTask",
    "TaskState",
]
