"""
HTTP transport for TwitterAPIKit.
"""

from .adapter import HTTPAdapter, TransportResponse
from .operation import TransportOperation
from .requests_adapter import RequestsAdapter

__all__ = ["HTTPAdapter", "TransportResponse", "TransportOperation", "RequestsAdapter"]
