"""
Request descriptions.

An endpoint is described by subclassing ``TwitterAPIRequest`` and overriding
``method`` and ``path`` (and, where needed, ``parameters``, ``base_url_type``
and ``body_content_type``). The session turns the description into a signed
HTTP request.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Union

from .config import Environment


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def prefers_query_parameters(self) -> bool:
        return self in (HTTPMethod.GET, HTTPMethod.DELETE)


class BaseURLType(str, Enum):
    API = "api"
    UPLOAD = "upload"


class BodyContentType(str, Enum):
    WWW_FORM_URL_ENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"
    JSON = "application/json"


@dataclass(frozen=True)
class Value:
    """Plain form field."""

    name: str
    value: Any


@dataclass(frozen=True)
class Data:
    """Binary attachment. ``mime_type`` may be empty."""

    name: str
    value: bytes
    filename: str
    mime_type: str = ""


MultipartFormDataPart = Union[Value, Data]


class TwitterAPIRequest(ABC):
    """
    Description of a single API call.

    Instances are treated as immutable once constructed. ``parameters`` is an
    ordered ``dict``; its insertion order is kept in the query string, in
    url-encoded and multipart bodies.

    Examples:
        >>> class GetTestRequest(TwitterAPIRequest):
        ...     method = HTTPMethod.GET
        ...     path = "/1.1/test.json"
        ...     @property
        ...     def parameters(self):
        ...         return {"q": "python"}
    """

    @property
    @abstractmethod
    def method(self) -> HTTPMethod:
        raise NotImplementedError

    @property
    @abstractmethod
    def path(self) -> str:
        raise NotImplementedError

    @property
    def base_url_type(self) -> BaseURLType:
        return BaseURLType.API

    @property
    def parameters(self) -> Dict[str, Any]:
        return {}

    @property
    def body_content_type(self) -> BodyContentType:
        return BodyContentType.WWW_FORM_URL_ENCODED

    def request_url(self, environment: Environment) -> str:
        """Base URL for ``base_url_type`` joined with ``path``, no query."""
        if self.base_url_type is BaseURLType.UPLOAD:
            base = environment.upload_url
        else:
            base = environment.api_url
        return base.rstrip("/") + "/" + self.path.lstrip("/")

    @property
    def parameters_for_oauth(self) -> Dict[str, Any]:
        """
        Parameters covered by the OAuth signature.

        Only url-encoded parameters are signed; json and multipart bodies are
        not part of the signature base string.
        """
        if self.body_content_type is BodyContentType.WWW_FORM_URL_ENCODED:
            return self.parameters
        return {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(method={self.method.value}, "
            f"path={self.path!r})"
        )
