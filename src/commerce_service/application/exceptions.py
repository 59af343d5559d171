from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from enum import StrEnum


class ErrorCode(StrEnum):
    """Closed set of error codes exposed to API clients."""

    # General
    INTERNAL_SERVER_ERROR = "InternalServerError"
    ROUTE_NOT_FOUND = "RouteNotFound"
    INVALID_ARGUMENT = "InvalidArgument"
    NO_PERMISSION = "NoPermission"
    NOT_IMPLEMENTED = "NotImplemented"
    UNAUTHORIZED = "Unauthorized"
    INVALID_NEXT_KEY = "InvalidNextKey"

    # Post
    POST_NOT_FOUND = "PostNotFound"
    POST_ALREADY_LIKED = "PostAlreadyLiked"
    POST_NOT_LIKED = "PostNotLiked"

    # Comment
    COMMENT_NOT_FOUND = "CommentNotFound"
    COMMENT_ON_SUBCOMMENT = "CommentOnSubcomment"
    PARENT_COMMENT_NOT_MATCH_WITH_POST = "ParentCommentNotMatchWithPost"

    # Catalog
    PRODUCT_NOT_FOUND = "ProductNotFound"
    PACKAGE_NOT_FOUND = "PackageNotFound"
    NATIVE_PRODUCT_NOT_FOUND = "NativeProductNotFound"
    NATIVE_PACKAGE_NOT_FOUND = "NativePackageNotFound"
    ORDER_NOT_FOUND = "OrderNotFound"


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: ErrorCode, detail: str = "") -> None:
        self.code = code
        self.detail = detail or code.value
        super().__init__(self.detail)


class ValidationError(AppError):
    pass


class UnauthorizedError(AppError):
    pass


class ForbiddenError(AppError):
    pass


class NotFoundError(AppError):
    pass


class ConflictError(AppError):
    pass


class NotImplementedAppError(AppError):
    pass


_CATALOG: dict[ErrorCode, tuple[type[AppError], str]] = {
    ErrorCode.INTERNAL_SERVER_ERROR: (AppError, "Internal server error"),
    ErrorCode.ROUTE_NOT_FOUND: (NotFoundError, "Route not found"),
    ErrorCode.INVALID_ARGUMENT: (ValidationError, "Invalid argument"),
    ErrorCode.NO_PERMISSION: (ForbiddenError, "No permission"),
    ErrorCode.NOT_IMPLEMENTED: (NotImplementedAppError, "Not implemented"),
    ErrorCode.UNAUTHORIZED: (UnauthorizedError, "Unauthorized"),
    ErrorCode.INVALID_NEXT_KEY: (ValidationError, "Invalid next key"),
    ErrorCode.POST_NOT_FOUND: (NotFoundError, "Post not found"),
    ErrorCode.POST_ALREADY_LIKED: (ConflictError, "Post already liked"),
    ErrorCode.POST_NOT_LIKED: (ConflictError, "Post not liked"),
    ErrorCode.COMMENT_NOT_FOUND: (NotFoundError, "Comment not found"),
    ErrorCode.COMMENT_ON_SUBCOMMENT: (ConflictError, "Comment on subcomment"),
    ErrorCode.PARENT_COMMENT_NOT_MATCH_WITH_POST: (
        ConflictError,
        "Parent comment does not belong to the post",
    ),
    ErrorCode.PRODUCT_NOT_FOUND: (NotFoundError, "Product not found"),
    ErrorCode.PACKAGE_NOT_FOUND: (NotFoundError, "Package not found"),
    ErrorCode.NATIVE_PRODUCT_NOT_FOUND: (NotFoundError, "Native product not found"),
    ErrorCode.NATIVE_PACKAGE_NOT_FOUND: (NotFoundError, "Native package not found"),
    ErrorCode.ORDER_NOT_FOUND: (NotFoundError, "Order not found"),
}


def service_error(code: ErrorCode) -> AppError:
    """Build the error for ``code`` with its canonical message."""
    cls, message = _CATALOG[code]
    return cls(code, message)


class StoreErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    DUPLICATED = "duplicated"
    NOT_LIKED = "not_liked"
    POST_NOT_FOUND = "post_not_found"
    PRODUCT_NOT_FOUND = "product_not_found"
    NATIVE_PRODUCT_NOT_FOUND = "native_product_not_found"
    NATIVE_PACKAGE_NOT_FOUND = "native_package_not_found"


class StoreError(Exception):
    """Raised by repositories; translated to an AppError by the services."""

    def __init__(self, kind: StoreErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail or kind.value
        super().__init__(self.detail)


@contextmanager
def translate_store_errors(table: Mapping[StoreErrorKind, ErrorCode]) -> Iterator[None]:
    """Re-raise store errors as service errors; unmapped kinds propagate unchanged."""
    try:
        yield
    except StoreError as exc:
        code = table.get(exc.kind)
        if code is None:
            raise
        raise service_error(code) from exc


class NextKeyDecodeError(ValueError):
    """The next key is not base64-encoded JSON object text."""
