from __future__ import annotations

from typing import Self

from pydantic import Field, model_validator

from commerce_service.application.pagination import MAX_INT4, MAX_LIMIT, ListOptions
from commerce_service.domain.value_objects.enums import Region, Source

DEFAULT_LIMIT = 30


class ListNativeProductsOptions(ListOptions):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    region: Region
    name: str | None = None
    product_id: int | None = Field(None, ge=1, le=MAX_INT4)
    no_product_id: bool | None = None
    source: Source | None = None
    offset: int | None = Field(None, ge=0, le=MAX_INT4)

    @model_validator(mode="after")
    def _linked_or_unlinked(self) -> Self:
        if self.product_id is not None and self.no_product_id:
            raise ValueError("productId and noProductId are mutually exclusive")
        return self
