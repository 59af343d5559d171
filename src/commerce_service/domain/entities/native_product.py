from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class NativePackage:
    """A package as listed by an external source, optionally paired with our own package."""

    id: str
    name: str
    source: str
    region: str
    package_id: int | None
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class NativeProduct:
    """A product as listed by an external source, optionally linked to our own product."""

    id: str
    name: str
    source: str
    region: str
    product_id: int | None
    created_at: datetime
    updated_at: datetime
    packages: tuple[NativePackage, ...] = field(default_factory=tuple)
