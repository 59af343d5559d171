from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import ForeignKeyConstraint, Index, Integer, String, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from commerce_service.infrastructure.db.base import Base


class OrderModel(Base):
    """Order booked through an external source against its native listings."""

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    status: Mapped[str] = mapped_column(String(30), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    customer: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)  # {name, email}
    booked_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    departure_at: Mapped[datetime] = mapped_column(TIMESTAMP(timezone=True), nullable=False)
    native_id: Mapped[str] = mapped_column(String(64), nullable=False)
    source: Mapped[str] = mapped_column(String(20), nullable=False)
    region: Mapped[str] = mapped_column(String(8), nullable=False)
    native_product_id: Mapped[str] = mapped_column(String(64), nullable=False)
    native_package_id: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("now()"),
        onupdate=text("now()"),
    )

    # Both listings share the order's source column, so neither relationship writes.
    native_product = relationship("NativeProductModel", lazy="noload", viewonly=True)
    native_package = relationship("NativePackageModel", lazy="noload", viewonly=True)

    __table_args__ = (
        ForeignKeyConstraint(
            ["native_product_id", "source"],
            ["native_products.id", "native_products.source"],
        ),
        ForeignKeyConstraint(
            ["native_package_id", "source"],
            ["native_packages.id", "native_packages.source"],
        ),
        Index("ix_orders_region", "region", "id"),
    )
