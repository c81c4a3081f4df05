"""
Request builder.

Composes the parameter/body encoders and the authentication method into a
complete outbound request.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional
from urllib.parse import urlsplit

from .auth import AuthenticationMethod
from .config import Environment
from .encoding import (
    json_body,
    multipart_form_data,
    new_boundary,
    url_encoded_body,
    url_encoded_query_string,
)
from .exceptions import InvalidParameter, InvalidURL
from .logging_setup import sanitize_headers
from .request import BodyContentType, Data, MultipartFormDataPart, TwitterAPIRequest, Value

logger = logging.getLogger("twitter_api_kit.builder")


@dataclass
class BuiltRequest:
    """Fully-formed HTTP request, consumed once by the transport."""

    url: str
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None


def _validate_url(url: str) -> None:
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURL(url) from e
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURL(url)


def _multipart_parts(request: TwitterAPIRequest) -> List[MultipartFormDataPart]:
    parameters = request.parameters
    parts = list(parameters.values())
    if not all(isinstance(part, (Value, Data)) for part in parts):
        raise InvalidParameter(
            parameters,
            "Parameter must be specified in `MultipartFormDataPart` for "
            "`BodyContentType.MULTIPART_FORM_DATA`.",
        )
    return parts


def build_request(
    request: TwitterAPIRequest,
    environment: Environment,
    auth: AuthenticationMethod,
    user_agent: Optional[str] = None,
    boundary_factory: Callable[[], str] = new_boundary,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> BuiltRequest:
    """
    Build a signed HTTP request from a request description.

    Args:
        request: Request description
        environment: Base URLs
        auth: Authentication method producing the Authorization header
        user_agent: Optional User-Agent header
        boundary_factory: Multipart boundary source
        nonce: Fixed OAuth nonce (default: random)
        timestamp: Fixed OAuth timestamp (default: now)

    Returns:
        BuiltRequest

    Raises:
        RequestFailed: If the request cannot be constructed
    """
    method = request.method
    base_url = request.request_url(environment)
    _validate_url(base_url)

    parameters = request.parameters
    url = base_url
    headers: Dict[str, str] = {}
    body: Optional[bytes] = None

    if method.prefers_query_parameters:
        if parameters:
            url = f"{base_url}?{url_encoded_query_string(parameters)}"
    else:
        content_type = request.body_content_type

        if content_type is BodyContentType.WWW_FORM_URL_ENCODED:
            headers["Content-Type"] = content_type.value
            body = url_encoded_body(parameters)

        elif content_type is BodyContentType.MULTIPART_FORM_DATA:
            parts = _multipart_parts(request)
            boundary = boundary_factory()
            headers["Content-Type"] = f"{content_type.value}; boundary={boundary}"
            body = multipart_form_data(boundary, parts)
            headers["Content-Length"] = str(len(body))

        elif content_type is BodyContentType.JSON:
            headers["Content-Type"] = content_type.value
            body = json_body(parameters)

    headers["Authorization"] = auth.authorization_header(
        method.value,
        base_url,
        request.parameters_for_oauth,
        nonce=nonce,
        timestamp=timestamp,
    )
    if user_agent:
        headers["User-Agent"] = user_agent

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built %s %s headers=%s", method.value, url, sanitize_headers(headers))

    return BuiltRequest(url=url, method=method.value, headers=headers, body=body)
