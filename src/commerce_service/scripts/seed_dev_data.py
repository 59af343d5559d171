"""Create the schema and seed native listings and orders for local development.

Native products and orders arrive from external sources and have no write
API, so this is the way to get listable rows into a fresh database.
"""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from commerce_service.config import get_settings
from commerce_service.domain.value_objects.enums import Region, Source
from commerce_service.infrastructure.db.base import Base
from commerce_service.infrastructure.db.models import (
    NativePackageModel,
    NativeProductModel,
    OrderModel,
)
from commerce_service.infrastructure.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


async def seed() -> None:
    engine = build_engine(get_settings())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = build_session_factory(engine)
    async with session_factory() as session:
        now = datetime.now(timezone.utc)
        orders = 0
        for i, source in enumerate((Source.KKDAY, Source.KLOOK, Source.KKDAY)):
            native_product_id = f"np-{i}"
            native_package_id = f"npk-{i}"
            session.add(
                NativeProductModel(
                    id=native_product_id,
                    source=source,
                    name=f"Day tour #{i}",
                    region=Region.TW,
                )
            )
            await session.flush()
            session.add(
                NativePackageModel(
                    id=native_package_id,
                    source=source,
                    native_product_id=native_product_id,
                    name=f"Adult ticket #{i}",
                    region=Region.TW,
                )
            )
            await session.flush()
            session.add(
                OrderModel(
                    status="CONFIRMED",
                    quantity=i + 1,
                    customer={"name": f"Customer {i}", "email": f"customer{i}@example.com"},
                    booked_at=now,
                    departure_at=now + timedelta(days=7 + i),
                    native_id=f"ord-{i}",
                    source=source,
                    region=Region.TW,
                    native_product_id=native_product_id,
                    native_package_id=native_package_id,
                )
            )
            orders += 1

        await session.commit()
        logger.info("Seeded %d native products and %d orders", orders, orders)

    await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
