"""Application service: Create Order use case.

Prices the requested items from the live catalog and writes the order
plus its lines as one unit of work.  Either all of it becomes visible or
none of it does.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.order import Order, OrderLine
from marketplace.domain.model.principal import Principal
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.identifier_generator import IdentifierGenerator
from marketplace.domain.service.pricing_service import PricingService

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork, id_generator: IdentifierGenerator) -> None:
        self._uow = uow
        self._id_generator = id_generator

    def handle(
        self,
        principal: Principal,
        item_specs: list[OrderItemSpec],
        shipping_fee: str,
        shipping_method: str,
        payment_id: str,
    ) -> OrderDTO:
        """Create a new order owned by ``principal``.

        Steps:
        1. Check the arguments that need no catalog access.
        2. Inside one unit of work, price every item from current catalog
           data (fail if any product is missing).
        3. Let the Order aggregate validate the rest and add it with its lines.
        4. Commit and return a DTO.
        """
        if not item_specs:
            raise ValidationError("Order must contain at least one item")
        fee = Money.of(shipping_fee)
        product_ids = [spec.product_id for spec in item_specs]
        order_id = self._id_generator.next_id()

        lines = [
            OrderLine(id=self._id_generator.next_id(), order_id=order_id, product_id=pid)
            for pid in product_ids
        ]

        with self._uow as uow:
            priced = PricingService(uow.products).price(product_ids)
            order = Order.create(
                id=order_id,
                user_id=principal.id,
                lines=lines,
                order_sub_total=priced.subtotal,
                shipping_fee=fee,
                shipping_method=shipping_method,
                payment_id=payment_id,
            )
            uow.orders.add(order)
            uow.commit()

        logger.info(
            "Order created",
            order_id=str(order.id),
            user_id=str(order.user_id),
            lines=len(order.lines),
            sellers=sorted({str(p.owner_user_id) for p in priced.products}),
            order_sub_total=str(order.order_sub_total.amount),
        )
        return order_to_dto(order)
