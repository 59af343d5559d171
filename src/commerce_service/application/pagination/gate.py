from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from commerce_service.application.exceptions import (
    ErrorCode,
    NextKeyDecodeError,
    service_error,
)
from commerce_service.application.pagination.codec import decode_next_key
from commerce_service.application.pagination.options import ListOptions

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=ListOptions)


@dataclass(frozen=True, slots=True)
class Parsed(Generic[OptionsT]):
    options: OptionsT


@dataclass(frozen=True, slots=True)
class Rejected:
    errors: list[dict[str, Any]]


def validate_options(
    schema: type[OptionsT],
    raw: Mapping[str, Any],
    *,
    strict: bool = False,
) -> Parsed[OptionsT] | Rejected:
    """Check ``raw`` against ``schema``.

    Strict mode validates the record as JSON data: enum and UUID strings are
    accepted, coercions such as ``true`` to ``1`` or ``"3"`` to ``3`` are not.
    """
    try:
        if strict:
            return Parsed(schema.model_validate_json(json.dumps(dict(raw)), strict=True))
        return Parsed(schema.model_validate(dict(raw)))
    except PydanticValidationError as exc:
        return Rejected(exc.errors(include_url=False, include_context=False))


def resolve_options(
    schema: type[OptionsT],
    *,
    next_key: str | None,
    raw: Mapping[str, Any],
) -> OptionsT:
    """Normalize a list request to canonical options.

    A next key carries the whole listing state, so raw params are ignored
    whenever one is given.
    """
    if next_key is not None:
        try:
            decoded = decode_next_key(next_key)
        except NextKeyDecodeError as exc:
            logger.warning("Rejected next key: %s", exc)
            raise service_error(ErrorCode.INVALID_NEXT_KEY) from exc
        result = validate_options(schema, decoded, strict=True)
        if isinstance(result, Rejected):
            logger.warning("Next key does not match %s: %s", schema.__name__, result.errors)
            raise service_error(ErrorCode.INVALID_NEXT_KEY)
        return result.options

    result = validate_options(schema, raw)
    if isinstance(result, Rejected):
        logger.warning("Invalid %s: %s", schema.__name__, result.errors)
        raise service_error(ErrorCode.INVALID_ARGUMENT)
    return result.options
