"""
API v1.1 client.
"""

from typing import Any, Optional

from ..auth import AuthenticationMethod
from ..config import Environment, SessionConfig
from ..http.adapter import HTTPAdapter
from ..session import TwitterAPISession
from ..tasks import DataTask
from .collections import (
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
)
from .favorites import GetFavoritesRequestV1


class TwitterAPIClient:
    """
    Endpoint-level entry point.

    Every method sends its request through the owned session and returns the
    running data task.

    Examples:
        >>> client = TwitterAPIClient(OAuth1(consumer_key="...", consumer_secret="..."))
        >>> client.get_favorites(
        ...     GetFavoritesRequestV1(TwitterUserIdentifier.screen_name("jack"), count=5)
        ... ).on_json(print)
    """

    def __init__(
        self,
        auth: AuthenticationMethod,
        environment: Optional[Environment] = None,
        config: Optional[SessionConfig] = None,
        http_adapter: Optional[HTTPAdapter] = None,
        session: Optional[TwitterAPISession] = None,
    ):
        """
        Initialize client.

        Args:
            auth: Authentication method
            environment: Base URLs
            config: Session configuration
            http_adapter: Optional custom HTTP adapter
            session: Use an existing session instead of creating one
        """
        self.session = session or TwitterAPISession(
            auth, environment=environment, config=config, adapter=http_adapter
        )

    def __enter__(self) -> "TwitterAPIClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # ========================================================================
    # Favorites
    # ========================================================================

    def get_favorites(self, request: GetFavoritesRequestV1) -> DataTask:
        return self.session.send(request)

    # ========================================================================
    # Collections
    # ========================================================================

    def get_collection_entries(self, request: GetCollectionsEntriesRequestV1) -> DataTask:
        return self.session.send(request)

    def get_collections(self, request: GetCollectionsListRequestV1) -> DataTask:
        return self.session.send(request)

    def get_collection(self, request: GetCollectionsShowRequestV1) -> DataTask:
        return self.session.send(request)

    def post_create_collection(self, request: PostCollectionsCreateRequestV1) -> DataTask:
        return self.session.send(request)

    def post_destroy_collection(self, request: PostCollectionsDestroyRequestV1) -> DataTask:
        return self.session.send(request)

    def post_collection_add_entry(self, request: PostCollectionsEntriesAddRequestV1) -> DataTask:
        return self.session.send(request)

    def post_collection_curate(self, request: PostCollectionsEntriesCurateRequestV1) -> DataTask:
        return self.session.send(request)

    def post_collection_move_entry(self, request: PostCollectionsEntriesMoveRequestV1) -> DataTask:
        return self.session.send(request)

    def post_collection_remove_entry(
        self, request: PostCollectionsEntriesRemoveRequestV1
    ) -> DataTask:
        return self.session.send(request)

    def post_collection_update(self, request: PostCollectionsUpdateRequestV1) -> DataTask:
        return self.session.send(request)
