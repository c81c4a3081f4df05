"""
Favorites (likes) endpoints, API v1.1.
"""

from typing import Any, Dict, Optional

from ..request import HTTPMethod, TwitterAPIRequest
from .user import TwitterUserIdentifier


class GetFavoritesRequestV1(TwitterAPIRequest):
    """https://developer.twitter.com/en/docs/twitter-api/v1/tweets/post-and-engage/api-reference/get-favorites-list"""

    method = HTTPMethod.GET
    path = "/1.1/favorites/list.json"

    def __init__(
        self,
        target: TwitterUserIdentifier,
        count: Optional[int] = None,
        since_id: Optional[str] = None,
        max_id: Optional[str] = None,
        include_entities: Optional[bool] = None,
    ):
        self.target = target
        self.count = count
        self.since_id = since_id
        self.max_id = max_id
        self.include_entities = include_entities

    @property
    def parameters(self) -> Dict[str, Any]:
        p: Dict[str, Any] = {}
        self.target.bind(p)
        if self.count is not None:
            p["count"] = self.count
        if self.since_id is not None:
            p["since_id"] = self.since_id
        if self.max_id is not None:
            p["max_id"] = self.max_id
        if self.include_entities is not None:
            p["include_entities"] = self.include_entities
        return p
