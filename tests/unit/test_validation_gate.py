from __future__ import annotations

import uuid

import pytest

from commerce_service.application.dto.native_product import ListNativeProductsOptions
from commerce_service.application.dto.order import ListOrdersOptions
from commerce_service.application.dto.post import ListPostsOptions
from commerce_service.application.dto.product import ListProductsOptions
from commerce_service.application.exceptions import ErrorCode, ValidationError
from commerce_service.application.pagination import (
    MAX_INT4,
    Parsed,
    Rejected,
    encode_next_key,
    resolve_options,
    validate_options,
)
from commerce_service.domain.value_objects.enums import PostOrderBy, Region


def test_validate_accepts_camel_case_strings():
    result = validate_options(ListPostsOptions, {"limit": "3", "orderBy": "LIKE_DESC"})
    assert isinstance(result, Parsed)
    assert result.options.limit == 3
    assert result.options.order_by is PostOrderBy.LIKE_COUNT_DESC


def test_validate_applies_resource_default_limit():
    result = validate_options(ListPostsOptions, {"orderBy": "CREATED_AT_DESC"})
    assert isinstance(result, Parsed)
    assert result.options.limit == 15


@pytest.mark.parametrize(
    "raw",
    [
        {"orderBy": "LIKE_DESC", "limit": 0},
        {"orderBy": "LIKE_DESC", "limit": 41},
        {"orderBy": "SIDEWAYS"},
        {"limit": 3},
        {"orderBy": "LIKE_DESC", "unknown": 1},
    ],
)
def test_validate_rejects_without_raising(raw):
    result = validate_options(ListPostsOptions, raw)
    assert isinstance(result, Rejected)
    assert result.errors


def test_resolve_from_raw_params():
    options = resolve_options(
        ListPostsOptions, next_key=None, raw={"orderBy": "LIKE_DESC", "authorId": "u1"}
    )
    assert options.author_id == "u1"
    assert options.cursor is None


def test_invalid_raw_params_are_invalid_argument():
    with pytest.raises(ValidationError) as exc_info:
        resolve_options(ListPostsOptions, next_key=None, raw={"orderBy": "LIKE_DESC", "limit": "x"})
    assert exc_info.value.code is ErrorCode.INVALID_ARGUMENT


def test_token_wins_over_raw_params():
    cursor = uuid.uuid4()
    token = encode_next_key({"limit": 3, "orderBy": "CREATED_AT_DESC", "cursor": str(cursor)})
    options = resolve_options(
        ListPostsOptions,
        next_key=token,
        raw={"orderBy": "LIKE_DESC", "limit": "999", "authorId": "someone"},
    )
    assert options.order_by is PostOrderBy.CREATED_AT_DESC
    assert options.limit == 3
    assert options.author_id is None
    assert options.cursor == cursor


@pytest.mark.parametrize(
    "token",
    [
        "not-base64!!",
        encode_next_key({"limit": 999, "orderBy": "LIKE_DESC"}),
        encode_next_key({"limit": 3}),
        encode_next_key({"limit": 3, "orderBy": "LIKE_DESC", "cursor": "not-a-uuid"}),
    ],
)
def test_bad_tokens_are_invalid_next_key(token):
    with pytest.raises(ValidationError) as exc_info:
        resolve_options(ListPostsOptions, next_key=token, raw={})
    assert exc_info.value.code is ErrorCode.INVALID_NEXT_KEY


def test_linked_and_unlinked_filters_are_exclusive():
    result = validate_options(
        ListNativeProductsOptions,
        {"region": "TW", "productId": "1", "noProductId": "true"},
    )
    assert isinstance(result, Rejected)

    result = validate_options(ListNativeProductsOptions, {"region": "TW", "noProductId": "true"})
    assert isinstance(result, Parsed)
    assert result.options.region is Region.TW


@pytest.mark.parametrize(
    ("schema", "state"),
    [
        (ListProductsOptions, {"limit": 3, "region": "TW", "cursor": 2**63}),
        (ListProductsOptions, {"limit": 3, "region": "TW", "cursor": 0}),
        (ListOrdersOptions, {"limit": 3, "region": "TW", "offset": 10**30}),
        (ListNativeProductsOptions, {"limit": 3, "region": "TW", "productId": MAX_INT4 + 1}),
    ],
)
def test_numbers_outside_the_store_range_are_invalid_next_key(schema, state):
    with pytest.raises(ValidationError) as exc_info:
        resolve_options(schema, next_key=encode_next_key(state), raw={})
    assert exc_info.value.code is ErrorCode.INVALID_NEXT_KEY


def test_largest_store_id_is_accepted():
    token = encode_next_key({"limit": 3, "region": "TW", "cursor": MAX_INT4})
    options = resolve_options(ListProductsOptions, next_key=token, raw={})
    assert options.cursor == MAX_INT4


def test_out_of_range_raw_offset_is_invalid_argument():
    with pytest.raises(ValidationError) as exc_info:
        resolve_options(
            ListOrdersOptions, next_key=None, raw={"region": "TW", "offset": str(2**40)}
        )
    assert exc_info.value.code is ErrorCode.INVALID_ARGUMENT


@pytest.mark.parametrize(
    "state",
    [
        {"limit": True, "orderBy": "LIKE_DESC"},
        {"limit": "3", "orderBy": "LIKE_DESC"},
        {"limit": 3.0, "orderBy": "LIKE_DESC"},
    ],
)
def test_tokens_are_not_coerced(state):
    with pytest.raises(ValidationError) as exc_info:
        resolve_options(ListPostsOptions, next_key=encode_next_key(state), raw={})
    assert exc_info.value.code is ErrorCode.INVALID_NEXT_KEY


def test_tokens_still_accept_enum_and_uuid_strings():
    cursor = uuid.uuid4()
    token = encode_next_key({"limit": 3, "orderBy": "LIKE_DESC", "cursor": str(cursor)})
    options = resolve_options(ListPostsOptions, next_key=token, raw={})
    assert options.order_by is PostOrderBy.LIKE_COUNT_DESC
    assert options.cursor == cursor
