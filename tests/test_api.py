"""
Tests for v1.1 endpoint descriptions and the client.
"""

import json

import pytest

from conftest import TEST_ENVIRONMENT, DummyResponse
from twitter_api_kit import BodyContentType, Bearer, HTTPMethod, SessionConfig
from twitter_api_kit.api import (
    CurateChange,
    GetCollectionsEntriesRequestV1,
    GetCollectionsListRequestV1,
    GetCollectionsShowRequestV1,
    GetFavoritesRequestV1,
    PostCollectionsCreateRequestV1,
    PostCollectionsDestroyRequestV1,
    PostCollectionsEntriesAddRequestV1,
    PostCollectionsEntriesCurateRequestV1,
    PostCollectionsEntriesMoveRequestV1,
    PostCollectionsEntriesRemoveRequestV1,
    PostCollectionsUpdateRequestV1,
    TimelineOrder,
    TwitterAPIClient,
    TwitterUserIdentifier,
)


@pytest.fixture
def client(adapter):
    c = TwitterAPIClient(
        Bearer(token="test-token"),
        environment=TEST_ENVIRONMENT,
        config=SessionConfig(max_workers=2),
        http_adapter=adapter,
    )
    yield c
    c.close()


class TestUserIdentifier:
    def test_user_id(self):
        params = {}
        TwitterUserIdentifier.user_id("12").bind(params)
        assert params == {"user_id": "12"}

    def test_screen_name(self):
        params = {}
        TwitterUserIdentifier.screen_name("jack").bind(params)
        assert params == {"screen_name": "jack"}

    def test_exactly_one_required(self):
        with pytest.raises(ValueError):
            TwitterUserIdentifier()
        with pytest.raises(ValueError):
            TwitterUserIdentifier(user_id_value="1", screen_name_value="jack")


class TestFavorites:
    def test_parameters(self):
        request = GetFavoritesRequestV1(
            TwitterUserIdentifier.screen_name("jack"),
            count=5,
            include_entities=False,
        )

        assert request.method is HTTPMethod.GET
        assert request.path == "/1.1/favorites/list.json"
        assert request.parameters == {
            "screen_name": "jack",
            "count": 5,
            "include_entities": False,
        }

    def test_optional_parameters_omitted(self):
        request = GetFavoritesRequestV1(TwitterUserIdentifier.user_id("1"))
        assert request.parameters == {"user_id": "1"}

    def test_client_sends(self, client, adapter):
        task = client.get_favorites(
            GetFavoritesRequestV1(
                TwitterUserIdentifier.user_id("1"), since_id="10", include_entities=True
            )
        )
        assert task.wait(5)

        assert adapter.last_request.url == (
            "https://api.example.com/1.1/favorites/list.json"
            "?user_id=1&since_id=10&include_entities=true"
        )


class TestCollections:
    """Test collection endpoint descriptions."""

    @pytest.mark.parametrize(
        "request_obj, method, path, parameters",
        [
            (
                GetCollectionsEntriesRequestV1("custom-1", count=10),
                HTTPMethod.GET,
                "/1.1/collections/entries.json",
                {"id": "custom-1", "count": 10},
            ),
            (
                GetCollectionsListRequestV1(TwitterUserIdentifier.user_id("1"), cursor="-1"),
                HTTPMethod.GET,
                "/1.1/collections/list.json",
                {"user_id": "1", "cursor": "-1"},
            ),
            (
                GetCollectionsShowRequestV1("custom-1"),
                HTTPMethod.GET,
                "/1.1/collections/show.json",
                {"id": "custom-1"},
            ),
            (
                PostCollectionsCreateRequestV1(
                    "Pets", description="cats", timeline_order=TimelineOrder.TWEET_CHRON
                ),
                HTTPMethod.POST,
                "/1.1/collections/create.json",
                {"name": "Pets", "description": "cats", "timeline_order": "tweet_chron"},
            ),
            (
                PostCollectionsDestroyRequestV1("custom-1"),
                HTTPMethod.POST,
                "/1.1/collections/destroy.json",
                {"id": "custom-1"},
            ),
            (
                PostCollectionsEntriesAddRequestV1("custom-1", "99", above=True),
                HTTPMethod.POST,
                "/1.1/collections/entries/add.json",
                {"id": "custom-1", "tweet_id": "99", "above": True},
            ),
            (
                PostCollectionsEntriesMoveRequestV1("custom-1", "99", relative_to="98"),
                HTTPMethod.POST,
                "/1.1/collections/entries/move.json",
                {"id": "custom-1", "tweet_id": "99", "relative_to": "98"},
            ),
            (
                PostCollectionsEntriesRemoveRequestV1("custom-1", "99"),
                HTTPMethod.POST,
                "/1.1/collections/entries/remove.json",
                {"id": "custom-1", "tweet_id": "99"},
            ),
            (
                PostCollectionsUpdateRequestV1("custom-1", name="Dogs"),
                HTTPMethod.POST,
                "/1.1/collections/update.json",
                {"id": "custom-1", "name": "Dogs"},
            ),
        ],
    )
    def test_descriptions(self, request_obj, method, path, parameters):
        assert request_obj.method is method
        assert request_obj.path == path
        assert request_obj.parameters == parameters
        assert request_obj.body_content_type is BodyContentType.WWW_FORM_URL_ENCODED

    def test_curate_is_json(self):
        request = PostCollectionsEntriesCurateRequestV1(
            "custom-1", [CurateChange.add("1"), CurateChange.remove("2")]
        )

        assert request.body_content_type is BodyContentType.JSON
        assert request.parameters_for_oauth == {}
        assert request.parameters == {
            "id": "custom-1",
            "changes": [{"op": "add", "tweet_id": "1"}, {"op": "remove", "tweet_id": "2"}],
        }

    def test_client_curate(self, client, adapter, queue):
        adapter.responses.append(DummyResponse(body=b'{"objects": {}}'))
        task = client.post_collection_curate(
            PostCollectionsEntriesCurateRequestV1("custom-1", [CurateChange.add("1")])
        )
        received = []
        task.on_json(received.append, queue)
        assert task.wait(5)
        queue.sync(5)

        built = adapter.last_request
        assert built.method == "POST"
        assert built.url == "https://api.example.com/1.1/collections/entries/curate.json"
        assert json.loads(built.body)["changes"] == [{"op": "add", "tweet_id": "1"}]
        assert received[0].value == {"objects": {}}

    @pytest.mark.parametrize(
        "method_name, request_obj",
        [
            ("get_collection_entries", GetCollectionsEntriesRequestV1("c")),
            ("get_collections", GetCollectionsListRequestV1(TwitterUserIdentifier.user_id("1"))),
            ("get_collection", GetCollectionsShowRequestV1("c")),
            ("post_create_collection", PostCollectionsCreateRequestV1("n")),
            ("post_destroy_collection", PostCollectionsDestroyRequestV1("c")),
            ("post_collection_add_entry", PostCollectionsEntriesAddRequestV1("c", "1")),
            ("post_collection_move_entry", PostCollectionsEntriesMoveRequestV1("c", "1", "2")),
            ("post_collection_remove_entry", PostCollectionsEntriesRemoveRequestV1("c", "1")),
            ("post_collection_update", PostCollectionsUpdateRequestV1("c")),
        ],
    )
    def test_client_methods(self, client, adapter, method_name, request_obj):
        task = getattr(client, method_name)(request_obj)
        assert task.wait(5)

        built = adapter.last_request
        assert built.method == request_obj.method.value
        assert request_obj.path in built.url
