from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from commerce_service.application.pagination import MAX_INT4, MAX_LIMIT, ListOptions
from commerce_service.domain.value_objects.enums import Region, Source

DEFAULT_LIMIT = 30


class ListProductsOptions(ListOptions):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    region: Region
    with_packages: bool | None = None
    cursor: int | None = Field(None, ge=1, le=MAX_INT4)


@dataclass(frozen=True, slots=True)
class CreateProductDTO:
    name: str
    region: Region


@dataclass(frozen=True, slots=True)
class UpdateProductDTO:
    name: str | None = None
    region: Region | None = None


@dataclass(frozen=True, slots=True)
class LinkProductDTO:
    product_id: int
    native_product_id: str
    source: Source
