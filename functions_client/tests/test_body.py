import pytest

from functions_client.core.body import (
    BINARY_CONTENT_TYPE,
    FORM_CONTENT_TYPE,
    TEXT_CONTENT_TYPE,
    encode_body,
)
from functions_client.models.result import Blob


def test_absent_body():
    assert encode_body(None) == (None, None)


def test_text_body_is_utf8():
    assert encode_body("héllo") == ("héllo".encode("utf-8"), TEXT_CONTENT_TYPE)


def test_empty_text_body_still_infers_content_type():
    assert encode_body("") == (b"", TEXT_CONTENT_TYPE)


def test_binary_bodies():
    assert encode_body(b"\x00") == (b"\x00", BINARY_CONTENT_TYPE)
    assert encode_body(memoryview(b"mv")) == (b"mv", BINARY_CONTENT_TYPE)
    assert encode_body(Blob(b"x", "text/csv")) == (b"x", BINARY_CONTENT_TYPE)


def test_form_pairs_keep_order_and_duplicates():
    content, content_type = encode_body([("b", "2"), ("a", "1"), ("b", "3")])
    assert content == b"b=2&a=1&b=3"
    assert content_type == FORM_CONTENT_TYPE


def test_mapping_is_form_encoded():
    content, content_type = encode_body({"q": "a&b", "n": "1"})
    assert content == b"q=a%26b&n=1"
    assert content_type == FORM_CONTENT_TYPE


@pytest.mark.parametrize(
    "body",
    [
        {"a": 1},
        {1: "a"},
        {"nested": {"a": "b"}},
        [("a",)],
        ["ab"],
        3.14,
        object(),
    ],
)
def test_unsupported_bodies(body):
    with pytest.raises(TypeError, match="Unsupported body type"):
        encode_body(body)
