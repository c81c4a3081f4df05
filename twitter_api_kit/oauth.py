"""
OAuth 1.0a request signing (HMAC-SHA1).

Implements the signature base string and ``Authorization`` header of
RFC 5849. Nonce and timestamp can be injected so signatures are reproducible.
"""

import base64
import hashlib
import hmac
import time
import uuid
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .encoding import encode_utf8, percent_encode, stringify

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"


def make_nonce() -> str:
    """Random nonce, unique per request."""
    return uuid.uuid4().hex


def oauth_parameters(
    consumer_key: str,
    oauth_token: str,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> Dict[str, str]:
    """
    Protocol parameters for one request, without the signature.

    ``oauth_token`` is left out when empty (request-token flow).
    """
    params = {
        "oauth_consumer_key": consumer_key,
        "oauth_nonce": nonce if nonce is not None else make_nonce(),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": str(timestamp if timestamp is not None else int(time.time())),
        "oauth_version": OAUTH_VERSION,
    }
    if oauth_token:
        params["oauth_token"] = oauth_token
    return params


def normalized_parameters(parameters: Mapping[str, Any]) -> str:
    """Encode, sort by encoded key then value, and join as ``k=v&k=v``."""
    pairs: List[Tuple[str, str]] = [
        (percent_encode(str(key)), percent_encode(stringify(value)))
        for key, value in parameters.items()
    ]
    pairs.sort()
    return "&".join(f"{key}={value}" for key, value in pairs)


def signature_base_string(method: str, url: str, parameters: Mapping[str, Any]) -> str:
    """
    ``METHOD&encoded-url&encoded-parameters``.

    Examples:
        >>> signature_base_string("GET", "https://api.example.com/a", {"b": "c d"})
        'GET&https%3A%2F%2Fapi.example.com%2Fa&b%3Dc%2520d'
    """
    return "&".join(
        [
            method.upper(),
            percent_encode(url),
            percent_encode(normalized_parameters(parameters)),
        ]
    )


def sign(base_string: str, consumer_secret: str, oauth_token_secret: str) -> str:
    """Base64 HMAC-SHA1 of ``base_string`` keyed by the encoded secrets."""
    key = f"{percent_encode(consumer_secret)}&{percent_encode(oauth_token_secret)}"
    digest = hmac.new(
        encode_utf8(key),
        encode_utf8(base_string),
        hashlib.sha1,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def authorization_header(
    method: str,
    url: str,
    parameters: Mapping[str, Any],
    consumer_key: str,
    consumer_secret: str,
    oauth_token: str,
    oauth_token_secret: str,
    nonce: Optional[str] = None,
    timestamp: Optional[int] = None,
) -> str:
    """
    Compute the OAuth 1.0a ``Authorization`` header value.

    Args:
        method: HTTP method
        url: Request URL without query string
        parameters: Request parameters covered by the signature
        consumer_key: Consumer (API) key
        consumer_secret: Consumer (API) secret
        oauth_token: Access token, may be empty
        oauth_token_secret: Access token secret, may be empty
        nonce: Fixed nonce (default: random)
        timestamp: Fixed epoch seconds (default: now)

    Returns:
        Header value starting with ``OAuth``

    Examples:
        >>> authorization_header(
        ...     "GET", "https://api.example.com/1.1/test.json", {},
        ...     "ck", "cs", "tk", "ts", nonce="nonce1", timestamp=1000000000,
        ... )  # doctest: +ELLIPSIS
        'OAuth oauth_consumer_key="ck", oauth_nonce="nonce1", oauth_signature="QU5naR506oaGSJ4VmpVvQqdeb14%3D", ...'
    """
    oauth_params = oauth_parameters(consumer_key, oauth_token, nonce, timestamp)

    signed: Dict[str, Any] = dict(parameters)
    signed.update(oauth_params)
    base_string = signature_base_string(method, url, signed)
    oauth_params["oauth_signature"] = sign(base_string, consumer_secret, oauth_token_secret)

    fields = ", ".join(
        f'{percent_encode(key)}="{percent_encode(value)}"'
        for key, value in sorted(oauth_params.items())
    )
    return f"OAuth {fields}"
