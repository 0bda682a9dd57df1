"""SQLAlchemy implementations of ProductRepository and ProductFileRepository."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy.orm import Session

from marketplace.domain.model.product import Product, ProductFile
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.product_repository import (
    ProductFileRepository,
    ProductRepository,
)
from marketplace.infrastructure.persistence.models import ProductFileRow, ProductRow


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        self._session.add(self._to_row(product))
        self._session.flush()

    def get_by_id(self, product_id: UUID) -> Product | None:
        row = self._session.get(ProductRow, product_id)
        return self._to_domain(row) if row is not None else None

    def get_many(self, product_ids: Iterable[UUID]) -> dict[UUID, Product]:
        wanted = set(product_ids)
        if not wanted:
            return {}
        stmt = sa.select(ProductRow).where(ProductRow.id.in_(wanted))
        return {row.id: self._to_domain(row) for row in self._session.scalars(stmt)}

    def list(
        self,
        owner_id: UUID | None = None,
        category_id: UUID | None = None,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        stmt = self._filtered(sa.select(ProductRow), owner_id, category_id).order_by(
            ProductRow.created_at.desc(), ProductRow.id
        )
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return [self._to_domain(row) for row in self._session.scalars(stmt)]

    def count(
        self,
        owner_id: UUID | None = None,
        category_id: UUID | None = None,
    ) -> int:
        stmt = self._filtered(
            sa.select(sa.func.count(ProductRow.id)), owner_id, category_id
        )
        return int(self._session.scalar(stmt) or 0)

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            raise LookupError(f"product {product.id} does not exist")
        # owner_user_id is fixed at creation
        row.category_id = product.category_id
        row.name = product.name
        row.unit_price = product.unit_price.amount
        row.currency = product.unit_price.currency
        row.amount = product.amount
        row.sub_total = product.sub_total.amount
        row.is_purchased = product.is_purchased
        row.updated_at = product.updated_at
        self._session.flush()

    def delete(self, product_id: UUID) -> None:
        row = self._session.get(ProductRow, product_id)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _filtered(stmt, owner_id: UUID | None, category_id: UUID | None):
        if owner_id is not None:
            stmt = stmt.where(ProductRow.owner_user_id == owner_id)
        if category_id is not None:
            stmt = stmt.where(ProductRow.category_id == category_id)
        return stmt

    @staticmethod
    def _to_row(product: Product) -> ProductRow:
        return ProductRow(
            id=product.id,
            owner_user_id=product.owner_user_id,
            category_id=product.category_id,
            name=product.name,
            unit_price=product.unit_price.amount,
            currency=product.unit_price.currency,
            amount=product.amount,
            sub_total=product.sub_total.amount,
            is_purchased=product.is_purchased,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            owner_user_id=row.owner_user_id,
            category_id=row.category_id,
            name=row.name,
            unit_price=Money(Decimal(row.unit_price), row.currency),
            amount=row.amount,
            sub_total=Money(Decimal(row.sub_total), row.currency),
            is_purchased=row.is_purchased,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )


class SqlAlchemyProductFileRepository(ProductFileRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, file: ProductFile) -> None:
        self._session.add(
            ProductFileRow(
                id=file.id,
                product_id=file.product_id,
                category_id=file.category_id,
                owner_user_id=file.owner_user_id,
                file_type=file.file_type,
                size=file.size,
                key=file.key,
                is_purchased=file.is_purchased,
            )
        )
        self._session.flush()

    def list_for_product(self, product_id: UUID) -> list[ProductFile]:
        stmt = sa.select(ProductFileRow).where(ProductFileRow.product_id == product_id)
        return [
            ProductFile(
                id=row.id,
                product_id=row.product_id,
                category_id=row.category_id,
                owner_user_id=row.owner_user_id,
                file_type=row.file_type,
                size=row.size,
                key=row.key,
                is_purchased=row.is_purchased,
            )
            for row in self._session.scalars(stmt)
        ]

    def delete_for_product(self, product_id: UUID) -> None:
        self._session.execute(
            sa.delete(ProductFileRow).where(ProductFileRow.product_id == product_id)
        )
