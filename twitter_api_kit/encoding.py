"""
Parameter and body encoding.

Pure functions; every output preserves the insertion order of the parameter
map. Percent-encoding follows RFC 3986 (unreserved characters are
``A-Z a-z 0-9 - . _ ~``), so a space is written as ``%20``, never ``+``.
"""

import json
import uuid
from typing import Any, Dict, Iterable, Mapping
from urllib.parse import quote

from .exceptions import CannotEncodeStringToData, InvalidParameter, JSONSerializationFailed
from .request import Data, MultipartFormDataPart, Value

UNRESERVED = "-._~"
LINE_BREAK = "\r\n"


def stringify(value: Any) -> str:
    """
    Natural string form of a parameter value.

    Booleans render lowercase to match the API's expectations.

    Examples:
        >>> stringify(True)
        'true'
        >>> stringify(10)
        '10'
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_utf8(string: str) -> bytes:
    """Encode ``string`` as UTF-8, raising ``CannotEncodeStringToData`` on failure."""
    try:
        return string.encode("utf-8")
    except UnicodeEncodeError as e:
        raise CannotEncodeStringToData(string) from e


def percent_encode(string: str) -> str:
    """
    Percent-encode per RFC 3986.

    Examples:
        >>> percent_encode("hello world!")
        'hello%20world%21'
    """
    try:
        return quote(string, safe=UNRESERVED)
    except UnicodeEncodeError as e:
        raise CannotEncodeStringToData(string) from e


def url_encoded_query_string(parameters: Mapping[str, Any]) -> str:
    """
    ``key=value`` pairs joined by ``&`` in insertion order.

    Examples:
        >>> url_encoded_query_string({"status": "hello world", "count": 10})
        'status=hello%20world&count=10'
    """
    return "&".join(
        f"{percent_encode(str(key))}={percent_encode(stringify(value))}"
        for key, value in parameters.items()
    )


def url_encoded_body(parameters: Mapping[str, Any]) -> bytes:
    return encode_utf8(url_encoded_query_string(parameters))


def json_body(parameters: Dict[str, Any]) -> bytes:
    """
    Serialize the parameter map as a JSON object.

    Raises:
        JSONSerializationFailed: If a value is not JSON-representable
    """
    try:
        text = json.dumps(parameters, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise JSONSerializationFailed(e) from e
    return encode_utf8(text)


def new_boundary() -> str:
    """Fresh multipart boundary token."""
    return f"TwitterAPIKit-{uuid.uuid4()}"


def multipart_form_data(boundary: str, parts: Iterable[MultipartFormDataPart]) -> bytes:
    """
    Build a ``multipart/form-data`` body (RFC 7578).

    Args:
        boundary: Boundary token, must not occur in any payload
        parts: Parts in output order

    Returns:
        Encoded body bytes

    Raises:
        InvalidParameter: If a part is not a `Value`/`Data` or holds the wrong value type
    """
    delimiter = f"--{boundary}"
    body = bytearray()

    for part in parts:
        body += encode_utf8(delimiter + LINE_BREAK)

        if isinstance(part, Value):
            if isinstance(part.value, (bytes, bytearray)):
                raise InvalidParameter(
                    {part.name: part.value}, "Binary values must be sent as `Data` parts."
                )
            body += encode_utf8(
                f'Content-Disposition: form-data; name="{part.name}"' + LINE_BREAK
            )
            body += encode_utf8(LINE_BREAK)
            body += encode_utf8(stringify(part.value))
            body += encode_utf8(LINE_BREAK)

        elif isinstance(part, Data):
            if not isinstance(part.value, (bytes, bytearray)):
                raise InvalidParameter(
                    {part.name: part.value}, "`Data` part value must be bytes."
                )
            body += encode_utf8(
                f'Content-Disposition: form-data; name="{part.name}"; '
                f'filename="{part.filename}"' + LINE_BREAK
            )
            if part.mime_type:
                body += encode_utf8(f"Content-Type: {part.mime_type}" + LINE_BREAK)
            body += encode_utf8(LINE_BREAK)
            body += part.value
            body += encode_utf8(LINE_BREAK)

        else:
            raise InvalidParameter({"part": part}, f"Not a multipart part: {part!r}")

    body += encode_utf8(delimiter + "--" + LINE_BREAK)
    return bytes(body)
