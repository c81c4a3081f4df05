"""
Collections endpoints, API v1.1.

https://developer.twitter.com/en/docs/twitter-api/v1/tweets/curate-a-collection/overview
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..request import BodyContentType, HTTPMethod, TwitterAPIRequest
from .user import TwitterUserIdentifier


def _compact(**params: Any) -> Dict[str, Any]:
    """Keyword arguments in order, without the ``None`` ones."""
    return {key: value for key, value in params.items() if value is not None}


class TimelineOrder(str, Enum):
    CURATION_REVERSE_CHRON = "curation_reverse_chron"
    TWEET_CHRON = "tweet_chron"
    TWEET_REVERSE_CHRON = "tweet_reverse_chron"


class GetCollectionsEntriesRequestV1(TwitterAPIRequest):
    """GET collections/entries"""

    method = HTTPMethod.GET
    path = "/1.1/collections/entries.json"

    def __init__(
        self,
        id: str,
        count: Optional[int] = None,
        max_position: Optional[int] = None,
        min_position: Optional[int] = None,
    ):
        self.id = id
        self.count = count
        self.max_position = max_position
        self.min_position = min_position

    @property
    def parameters(self) -> Dict[str, Any]:
        return _compact(
            id=self.id,
            count=self.count,
            max_position=self.max_position,
            min_position=self.min_position,
        )


class GetCollectionsListRequestV1(TwitterAPIRequest):
    """GET collections/list"""

    method = HTTPMethod.GET
    path = "/1.1/collections/list.json"

    def __init__(
        self,
        user: TwitterUserIdentifier,
        tweet_id: Optional[str] = None,
        count: Optional[int] = None,
        cursor: Optional[str] = None,
    ):
        self.user = user
        self.tweet_id = tweet_id
        self.count = count
        self.cursor = cursor

    @property
    def parameters(self) -> Dict[str, Any]:
        p: Dict[str, Any] = {}
        self.user.bind(p)
        p.update(_compact(tweet_id=self.tweet_id, count=self.count, cursor=self.cursor))
        return p


class GetCollectionsShowRequestV1(TwitterAPIRequest):
    """GET collections/show"""

    method = HTTPMethod.GET
    path = "/1.1/collections/show.json"

    def __init__(self, id: str):
        self.id = id

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"id": self.id}


class PostCollectionsCreateRequestV1(TwitterAPIRequest):
    """POST collections/create"""

    method = HTTPMethod.POST
    path = "/1.1/collections/create.json"

    def __init__(
        self,
        name: str,
        description: Optional[str] = None,
        url: Optional[str] = None,
        timeline_order: Optional[TimelineOrder] = None,
    ):
        self.name = name
        self.description = description
        self.url = url
        self.timeline_order = timeline_order

    @property
    def parameters(self) -> Dict[str, Any]:
        return _compact(
            name=self.name,
            description=self.description,
            url=self.url,
            timeline_order=self.timeline_order.value if self.timeline_order else None,
        )


class PostCollectionsDestroyRequestV1(TwitterAPIRequest):
    """POST collections/destroy"""

    method = HTTPMethod.POST
    path = "/1.1/collections/destroy.json"

    def __init__(self, id: str):
        self.id = id

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"id": self.id}


class PostCollectionsEntriesAddRequestV1(TwitterAPIRequest):
    """POST collections/entries/add"""

    method = HTTPMethod.POST
    path = "/1.1/collections/entries/add.json"

    def __init__(
        self,
        id: str,
        tweet_id: str,
        relative_to: Optional[str] = None,
        above: Optional[bool] = None,
    ):
        self.id = id
        self.tweet_id = tweet_id
        self.relative_to = relative_to
        self.above = above

    @property
    def parameters(self) -> Dict[str, Any]:
        return _compact(
            id=self.id,
            tweet_id=self.tweet_id,
            relative_to=self.relative_to,
            above=self.above,
        )


@dataclass(frozen=True)
class CurateChange:
    """One add/remove operation of a curate request."""

    op: str
    tweet_id: str

    @classmethod
    def add(cls, tweet_id: str) -> "CurateChange":
        return cls("add", tweet_id)

    @classmethod
    def remove(cls, tweet_id: str) -> "CurateChange":
        return cls("remove", tweet_id)


class PostCollectionsEntriesCurateRequestV1(TwitterAPIRequest):
    """POST collections/entries/curate (JSON body)"""

    method = HTTPMethod.POST
    path = "/1.1/collections/entries/curate.json"
    body_content_type = BodyContentType.JSON

    def __init__(self, id: str, changes: List[CurateChange]):
        self.id = id
        self.changes = changes

    @property
    def parameters(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "changes": [{"op": c.op, "tweet_id": c.tweet_id} for c in self.changes],
        }


class PostCollectionsEntriesMoveRequestV1(TwitterAPIRequest):
    """POST collections/entries/move"""

    method = HTTPMethod.POST
    path = "/1.1/collections/entries/move.json"

    def __init__(self, id: str, tweet_id: str, relative_to: str, above: Optional[bool] = None):
        self.id = id
        self.tweet_id = tweet_id
        self.relative_to = relative_to
        self.above = above

    @property
    def parameters(self) -> Dict[str, Any]:
        return _compact(
            id=self.id,
            tweet_id=self.tweet_id,
            relative_to=self.relative_to,
            above=self.above,
        )


class PostCollectionsEntriesRemoveRequestV1(TwitterAPIRequest):
    """POST collections/entries/remove"""

    method = HTTPMethod.POST
    path = "/1.1/collections/entries/remove.json"

    def __init__(self, id: str, tweet_id: str):
        self.id = id
        self.tweet_id = tweet_id

    @property
    def parameters(self) -> Dict[str, Any]:
        return {"id": self.id, "tweet_id": self.tweet_id}


class PostCollectionsUpdateRequestV1(TwitterAPIRequest):
    """POST collections/update"""

    method = HTTPMethod.POST
    path = "/1.1/collections/update.json"

    def __init__(
        self,
        id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.id = id
        self.name = name
        self.description = description
        self.url = url

    @property
    def parameters(self) -> Dict[str, Any]:
        return _compact(id=self.id, name=self.name, description=self.description, url=self.url)
