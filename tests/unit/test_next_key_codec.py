from __future__ import annotations

import base64
import json

import pytest

from commerce_service.application.exceptions import NextKeyDecodeError
from commerce_service.application.pagination import decode_next_key, encode_next_key


def test_round_trip_preserves_record():
    options = {"limit": 3, "orderBy": "LIKE_DESC", "authorId": "u1", "cursor": "a"}
    assert decode_next_key(encode_next_key(options)) == options


def test_token_is_url_safe_and_unpadded():
    token = encode_next_key({"limit": 1, "name": "??>>~~"})
    assert "=" not in token
    assert "+" not in token and "/" not in token


def test_key_order_does_not_change_decoded_content():
    a = encode_next_key({"limit": 3, "region": "TW", "offset": 30})
    b = encode_next_key({"offset": 30, "region": "TW", "limit": 3})
    assert decode_next_key(a) == decode_next_key(b)


def test_accepts_standard_padded_base64():
    raw = json.dumps({"limit": 2}).encode()
    assert decode_next_key(base64.b64encode(raw).decode()) == {"limit": 2}


@pytest.mark.parametrize(
    "token",
    [
        "not-base64!!",
        "",
        base64.urlsafe_b64encode(b"{not json").decode(),
        base64.urlsafe_b64encode(b"\xff\xfe").decode(),
    ],
)
def test_malformed_tokens_raise_decode_error(token):
    with pytest.raises(NextKeyDecodeError):
        decode_next_key(token)


def test_non_object_json_is_rejected():
    token = base64.urlsafe_b64encode(b"[1,2,3]").decode()
    with pytest.raises(NextKeyDecodeError):
        decode_next_key(token)
