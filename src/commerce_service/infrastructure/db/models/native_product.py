from __future__ import annotations

from datetime import datetime

from sqlalchemy import ForeignKey, ForeignKeyConstraint, Index, Integer, String, text
from sqlalchemy.dialects.postgresql import TIMESTAMP
from sqlalchemy.orm import Mapped, mapped_column, relationship

from commerce_service.infrastructure.db.base import Base


class NativeProductModel(Base):
    """Product listed by an external source; (id, source) is the source's own key."""

    __tablename__ = "native_products"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    source: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(String(300), nullable=False)
    region: Mapped[str] = mapped_column(String(8), nullable=False)
    product_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="SET NULL"),
        nullable=True,
    )
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

    product = relationship("ProductModel", lazy="noload")
    packages = relationship(
        "NativePackageModel",
        back_populates="native_product",
        lazy="noload",
        order_by="NativePackageModel.created_at",
    )

    __table_args__ = (
        Index("ix_native_products_listing", "region", "product_id", "created_at"),
    )


class NativePackageModel(Base):
    __tablename__ = "native_packages"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    source: Mapped[str] = mapped_column(String(20), primary_key=True)
    native_product_id: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(300), nullable=False)
    region: Mapped[str] = mapped_column(String(8), nullable=False)
    package_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("packages.id", ondelete="SET NULL"),
        nullable=True,
    )
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

    native_product = relationship("NativeProductModel", back_populates="packages", lazy="noload")
    package = relationship("PackageModel", lazy="noload")

    __table_args__ = (
        ForeignKeyConstraint(
            ["native_product_id", "source"],
            ["native_products.id", "native_products.source"],
            ondelete="CASCADE",
        ),
    )
