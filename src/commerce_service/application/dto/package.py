from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from commerce_service.application.pagination import MAX_INT4, MAX_LIMIT, ListOptions
from commerce_service.domain.value_objects.enums import Region, Source

DEFAULT_LIMIT = 30


class ListPackagesOptions(ListOptions):
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    region: Region
    product_id: int | None = Field(None, ge=1, le=MAX_INT4)
    cursor: int | None = Field(None, ge=1, le=MAX_INT4)


@dataclass(frozen=True, slots=True)
class CreatePackageDTO:
    name: str
    region: Region
    product_id: int


@dataclass(frozen=True, slots=True)
class PairPackageDTO:
    package_id: int
    native_package_id: str
    source: Source
