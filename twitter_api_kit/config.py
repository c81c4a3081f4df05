"""
Configuration module for TwitterAPIKit.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .__version__ import __version__

DEFAULT_API_URL = "https://api.twitter.com"
DEFAULT_UPLOAD_URL = "https://upload.twitter.com"


class Environment(BaseModel):
    """
    Base URLs requests are resolved against.

    Supports environment variables for easy configuration:
    - TWITTER_API_URL: API base URL (default: https://api.twitter.com)
    - TWITTER_UPLOAD_URL: Upload base URL (default: https://upload.twitter.com)
    """

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(DEFAULT_API_URL, description="API base URL")
    upload_url: str = Field(DEFAULT_UPLOAD_URL, description="Media upload base URL")

    @field_validator("api_url", "upload_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_env(cls) -> "Environment":
        """Build an environment from ``TWITTER_API_URL`` / ``TWITTER_UPLOAD_URL``."""
        return cls(
            api_url=os.getenv("TWITTER_API_URL", DEFAULT_API_URL),
            upload_url=os.getenv("TWITTER_UPLOAD_URL", DEFAULT_UPLOAD_URL),
        )


class SessionConfig(BaseModel):
    """Transport configuration for a session"""

    model_config = ConfigDict(frozen=True)

    timeout_connect: float = Field(5.0, description="Connection timeout in seconds")
    timeout_read: float = Field(30.0, description="Read timeout in seconds")
    stream_timeout_read: float = Field(
        90.0, description="Read timeout between chunks of a streaming response"
    )
    verify_ssl: bool = Field(True, description="Verify SSL certificates")
    max_workers: int = Field(8, description="Transport thread pool size")
    pool_maxsize: int = Field(10, description="Connection pool size per host")
    user_agent: str = Field(
        f"twitter-api-kit-python/{__version__}", description="User-Agent header"
    )
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("timeout_connect", "timeout_read", "stream_timeout_read")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @field_validator("max_workers", "pool_maxsize")
    @classmethod
    def validate_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Pool sizes must be at least 1")
        return v
