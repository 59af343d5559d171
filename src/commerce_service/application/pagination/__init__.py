"""Opaque next-key pagination shared by every list endpoint."""
from commerce_service.application.pagination.assembler import Page, assemble, paginate
from commerce_service.application.pagination.codec import decode_next_key, encode_next_key
from commerce_service.application.pagination.gate import (
    Parsed,
    Rejected,
    resolve_options,
    validate_options,
)
from commerce_service.application.pagination.options import MAX_INT4, MAX_LIMIT, ListOptions
from commerce_service.application.pagination.policy import (
    CursorKind,
    PaginationPolicy,
    SortKey,
)
from commerce_service.application.pagination.translator import StoreQuery, to_store_query

__all__ = [
    "MAX_INT4",
    "MAX_LIMIT",
    "CursorKind",
    "ListOptions",
    "Page",
    "PaginationPolicy",
    "Parsed",
    "Rejected",
    "SortKey",
    "StoreQuery",
    "assemble",
    "decode_next_key",
    "encode_next_key",
    "paginate",
    "resolve_options",
    "to_store_query",
    "validate_options",
]
