"""
Tests for parameter and body encoding.
"""

import email
import email.policy
import json

import pytest

from twitter_api_kit.encoding import (
    encode_utf8,
    json_body,
    multipart_form_data,
    new_boundary,
    percent_encode,
    stringify,
    url_encoded_query_string,
)
from twitter_api_kit.exceptions import (
    CannotEncodeStringToData,
    InvalidParameter,
    JSONSerializationFailed,
)
from twitter_api_kit.request import Data, Value


class TestPercentEncoding:
    """Test RFC 3986 percent-encoding."""

    def test_unreserved_characters_untouched(self):
        assert percent_encode("AZaz09-._~") == "AZaz09-._~"

    def test_reserved_characters_encoded(self):
        assert percent_encode("a b&c=d+e/f*") == "a%20b%26c%3Dd%2Be%2Ff%2A"

    def test_unicode_encoded_as_utf8(self):
        assert percent_encode("é") == "%C3%A9"
        assert percent_encode("☃") == "%E2%98%83"

    def test_lone_surrogate_fails(self):
        with pytest.raises(CannotEncodeStringToData) as exc_info:
            percent_encode("\ud800")
        assert exc_info.value.string == "\ud800"

    def test_encode_utf8_lone_surrogate_fails(self):
        with pytest.raises(CannotEncodeStringToData):
            encode_utf8("bad \udfff")


class TestStringify:
    def test_booleans_lowercase(self):
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_numbers_and_strings(self):
        assert stringify(10) == "10"
        assert stringify(1.5) == "1.5"
        assert stringify("swift") == "swift"


class TestURLEncodedQueryString:
    def test_preserves_order(self):
        params = {"z": "1", "a": "2", "m": "3"}
        assert url_encoded_query_string(params) == "z=1&a=2&m=3"

    def test_contains_every_key(self):
        params = {f"key {i}": f"value {i}" for i in range(20)}
        encoded = url_encoded_query_string(params)
        pairs = encoded.split("&")

        assert len(pairs) == 20
        for i, pair in enumerate(pairs):
            assert pair == f"key%20{i}=value%20{i}"

    def test_space_is_percent_20(self):
        assert url_encoded_query_string({"status": "hello world"}) == "status=hello%20world"

    def test_empty(self):
        assert url_encoded_query_string({}) == ""


class TestJSONBody:
    def test_serializes_object(self):
        body = json_body({"text": "hi", "count": 2, "flag": True})
        assert json.loads(body) == {"text": "hi", "count": 2, "flag": True}

    def test_unserializable_value_fails(self):
        with pytest.raises(JSONSerializationFailed) as exc_info:
            json_body({"when": object()})
        assert isinstance(exc_info.value.error, TypeError)

    def test_nan_fails(self):
        with pytest.raises(JSONSerializationFailed):
            json_body({"value": float("nan")})


class TestMultipart:
    """Test multipart/form-data framing."""

    def test_exact_bytes(self):
        parts = [
            Value(name="status", value="hello"),
            Data(name="media", value=b"\x01\x02", filename="a.png", mime_type="image/png"),
        ]
        body = multipart_form_data("BOUNDARY", parts)

        assert body == (
            b"--BOUNDARY\r\n"
            b'Content-Disposition: form-data; name="status"\r\n'
            b"\r\n"
            b"hello\r\n"
            b"--BOUNDARY\r\n"
            b'Content-Disposition: form-data; name="media"; filename="a.png"\r\n'
            b"Content-Type: image/png\r\n"
            b"\r\n"
            b"\x01\x02\r\n"
            b"--BOUNDARY--\r\n"
        )

    def test_empty_mime_type_omits_content_type(self):
        parts = [Data(name="file", value=b"abc", filename="f.bin", mime_type="")]
        body = multipart_form_data("B", parts)

        assert b"Content-Type" not in body
        assert body == (
            b"--B\r\n"
            b'Content-Disposition: form-data; name="file"; filename="f.bin"\r\n'
            b"\r\n"
            b"abc\r\n"
            b"--B--\r\n"
        )

    def test_no_parts(self):
        assert multipart_form_data("B", []) == b"--B--\r\n"

    def test_value_part_is_stringified(self):
        body = multipart_form_data("B", [Value(name="flag", value=True)])
        assert b"\r\n\r\ntrue\r\n" in body

    def test_data_part_requires_bytes(self):
        with pytest.raises(InvalidParameter) as exc_info:
            multipart_form_data("B", [Data(name="media", value="text", filename="m.bin")])

        assert exc_info.value.parameter == {"media": "text"}

    def test_value_part_rejects_bytes(self):
        with pytest.raises(InvalidParameter):
            multipart_form_data("B", [Value(name="media", value=b"\x00\x01")])

    def test_non_part_rejected(self):
        with pytest.raises(InvalidParameter):
            multipart_form_data("B", ["plain"])

    def test_parser_recovers_parts_in_order(self):
        parts = [
            Value(name="command", value="APPEND"),
            Value(name="segment_index", value=3),
            Data(name="media", value=b"GIF89a binary", filename="cat.gif", mime_type="image/gif"),
            Data(name="attachment", value=b"plain", filename="notes.txt", mime_type="text/plain"),
        ]
        boundary = new_boundary()
        body = multipart_form_data(boundary, parts)

        raw = (
            f"Content-Type: multipart/form-data; boundary={boundary}\r\n\r\n".encode("ascii")
            + body
        )
        message = email.message_from_bytes(raw, policy=email.policy.HTTP)
        decoded = message.get_payload()

        assert message.is_multipart()
        assert len(decoded) == 4
        assert [p.get_param("name", header="content-disposition") for p in decoded] == [
            "command",
            "segment_index",
            "media",
            "attachment",
        ]
        assert decoded[0].get_payload(decode=True) == b"APPEND"
        assert decoded[1].get_payload(decode=True) == b"3"
        assert decoded[2].get_filename() == "cat.gif"
        assert decoded[2].get_content_type() == "image/gif"
        assert decoded[2].get_payload(decode=True) == b"GIF89a binary"
        assert decoded[3].get_filename() == "notes.txt"
        assert decoded[3].get_payload(decode=True) == b"plain"

    def test_boundary_is_unique(self):
        first, second = new_boundary(), new_boundary()

        assert first != second
        assert first.startswith("TwitterAPIKit-")
