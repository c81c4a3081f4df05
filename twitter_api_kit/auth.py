"""
Authentication methods.

Each variant computes the ``Authorization`` header value for a request.
"""

import base64
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from . import oauth
from .encoding import encode_utf8

REDACTED = "***REDACTED***"


class OAuth1(BaseModel):
    """OAuth 1.0a user context (HMAC-SHA1)."""

    model_config = ConfigDict(frozen=True)

    consumer_key: str
    consumer_secret: str
    oauth_token: str = ""
    oauth_token_secret: str = ""

    def authorization_header(
        self,
        method: str,
        url: str,
        parameters: Mapping[str, Any],
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> str:
        return oauth.authorization_header(
            method,
            url,
            parameters,
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            oauth_token=self.oauth_token,
            oauth_token_secret=self.oauth_token_secret,
            nonce=nonce,
            timestamp=timestamp,
        )

    def __repr__(self) -> str:
        return f"OAuth1(consumer_key={self.consumer_key!r}, consumer_secret={REDACTED})"


class Basic(BaseModel):
    """HTTP Basic with API key and API secret key (app-only token endpoints)."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    api_secret_key: str

    def authorization_header(
        self,
        method: str,
        url: str,
        parameters: Mapping[str, Any],
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> str:
        credential = encode_utf8(f"{self.api_key}:{self.api_secret_key}")
        return "Basic " + base64.b64encode(credential).decode("ascii")

    def __repr__(self) -> str:
        return f"Basic(api_key={self.api_key!r}, api_secret_key={REDACTED})"


class Bearer(BaseModel):
    """OAuth 2.0 bearer token."""

    model_config = ConfigDict(frozen=True)

    token: str

    def authorization_header(
        self,
        method: str,
        url: str,
        parameters: Mapping[str, Any],
        nonce: Optional[str] = None,
        timestamp: Optional[int] = None,
    ) -> str:
        return f"Bearer {self.token}"

    def __repr__(self) -> str:
        return f"Bearer(token={REDACTED})"


AuthenticationMethod = Union[OAuth1, Basic, Bearer]
