"""
Endpoint descriptions for API v1.1.
"""

from .client import TwitterAPIClient
from .collections import (
    CurateChange,
    GetCollectionsEntriesRequestV1,
    GetCollectionsListRequestV1,
    GetCollectionsShowRequestV1,
    PostCollectionsCreateRequestV1,
    PostCollectionsDestroyRequestV1,
    PostCollectionsEntriesAddRequestV1,
    PostCollectionsEntriesCurateRequestV1,
    PostCollectionsEntriesMoveRequestV1,
    PostCollectionsEntriesRemoveRequestV1,
    PostCollectionsUpdateRequestV1,
    TimelineOrder,
)
from .favorites import GetFavoritesRequestV1
from .user import TwitterUserIdentifier

__all__ = [
    "TwitterAPIClient",
    "TwitterUserIdentifier",
    "GetFavoritesRequestV1",
    "CurateChange",
    "TimelineOrder",
    "GetCollectionsEntriesRequestV1",
    "GetCollectionsListRequestV1",
    "GetCollectionsShowRequestV1",
    "PostCollectionsCreateRequestV1",
    "PostCollectionsDestroyRequestV1",
    "PostCollectionsEntriesAddRequestV1",
    "PostCollectionsEntriesCurateRequestV1",
    "PostCollectionsEntriesMoveRequestV1",
    "PostCollectionsEntriesRemoveRequestV1",
    "PostCollectionsUpdateRequestV1",
]
