from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Package:
    id: int
    name: str
    region: str
    product_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    region: str
    created_at: datetime
    updated_at: datetime
    packages: tuple[Package, ...] | None = None
