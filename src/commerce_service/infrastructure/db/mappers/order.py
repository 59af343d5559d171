from __future__ import annotations

from commerce_service.domain.entities.order import Order, OrderCustomer, OrderItemRef
from commerce_service.infrastructure.db.models.order import OrderModel


def model_to_entity(model: OrderModel) -> Order:
    """Expects ``native_product.product`` and ``native_package.package`` loaded.

    Names come from our own product/package once the native listing is mapped.
    """
    native_product = model.native_product
    native_package = model.native_package
    product = native_product.product
    package = native_package.package

    return Order(
        id=model.id,
        status=model.status,
        quantity=model.quantity,
        customer=OrderCustomer(
            name=model.customer.get("name", ""),
            email=model.customer.get("email", ""),
        ),
        booked_at=model.booked_at,
        departure_at=model.departure_at,
        native_id=model.native_id,
        source=model.source,
        region=model.region,
        product=OrderItemRef(
            id=product.id if product else None,
            name=product.name if product else native_product.name,
        ),
        package=OrderItemRef(
            id=package.id if package else None,
            name=package.name if package else native_package.name,
        ),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
