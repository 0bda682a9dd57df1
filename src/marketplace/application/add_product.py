"""Application service: Add Product use case.

The product and its file record are inserted in one unit of work; if the
file record cannot be written the product is not kept either.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import ProductDTO, ProductSpec, product_to_dto
from marketplace.domain.model.principal import Principal
from marketplace.domain.model.product import Product, ProductFile
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.domain.service.identifier_generator import IdentifierGenerator

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork, id_generator: IdentifierGenerator) -> None:
        self._uow = uow
        self._id_generator = id_generator

    def handle(self, principal: Principal, spec: ProductSpec) -> ProductDTO:
        """List a new product owned by ``principal``."""
        product = Product.create(
            id=self._id_generator.next_id(),
            owner_user_id=principal.id,
            category_id=spec.category_id,
            name=spec.name,
            unit_price=Money.of(spec.unit_price),
            amount=spec.amount,
            is_purchased=spec.is_purchased,
        )
        file = ProductFile.for_product(
            id=self._id_generator.next_id(),
            product=product,
            file_type=spec.file_type,
            size=spec.file_size,
        )

        with self._uow as uow:
            uow.products.add(product)
            uow.files.add(file)
            uow.commit()

        logger.info(
            "Product created",
            product_id=str(product.id),
            user_id=str(principal.id),
            sub_total=str(product.sub_total.amount),
        )
        return product_to_dto(product)
