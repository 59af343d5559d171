from __future__ import annotations

from pydantic import Field

from commerce_service.application.pagination import MAX_INT4, MAX_LIMIT, ListOptions
from commerce_service.domain.value_objects.enums import Region

DEFAULT_LIMIT = 30


class ListOrdersOptions(ListOptions):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    region: Region
    offset: int | None = Field(None, ge=0, le=MAX_INT4)
