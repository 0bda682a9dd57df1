"""Product aggregate.

Products live independently of orders. They are listed by a seller (their
owner), and their price and amount may change over time; orders priced
from them earlier are unaffected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID

from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.value_objects import Money


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A catalog item owned by the user who listed it.

    ``sub_total`` is always ``unit_price * amount``; it is recomputed by
    every mutation that touches either factor.
    """

    id: UUID
    owner_user_id: UUID
    category_id: UUID
    name: str
    unit_price: Money
    amount: int
    sub_total: Money
    is_purchased: bool = False
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        id: UUID,
        owner_user_id: UUID,
        category_id: UUID,
        name: str,
        unit_price: Money,
        amount: int,
        is_purchased: bool = False,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        _check_amount(amount)
        return Product(
            id=id,
            owner_user_id=owner_user_id,
            category_id=category_id,
            name=name.strip(),
            unit_price=unit_price,
            amount=amount,
            sub_total=unit_price * amount,
            is_purchased=is_purchased,
        )

    # --- Mutations ------------------------------------------------------------

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()
        self._touch()

    def move_to_category(self, category_id: UUID) -> None:
        self.category_id = category_id
        self._touch()

    def reprice(self, unit_price: Money | None = None, amount: int | None = None) -> None:
        """Change unit price and/or amount, keeping ``sub_total`` consistent."""
        if amount is not None:
            _check_amount(amount)
            self.amount = amount
        if unit_price is not None:
            self.unit_price = unit_price
        self.sub_total = self.unit_price * self.amount
        self._touch()

    def mark_purchased(self, is_purchased: bool) -> None:
        self.is_purchased = is_purchased
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _now()


@dataclass(frozen=True)
class ProductFile:
    """Descriptive metadata (an uploaded-file reference) for a product."""

    id: UUID
    product_id: UUID
    category_id: UUID
    owner_user_id: UUID
    file_type: str
    size: int
    key: str
    is_purchased: bool = False

    @staticmethod
    def for_product(id: UUID, product: Product, file_type: str, size: int) -> ProductFile:
        if not file_type or not file_type.strip():
            raise ValidationError("File type is required")
        if not isinstance(size, int) or size < 0:
            raise ValidationError(f"File size must be a non-negative integer, got {size!r}")
        return ProductFile(
            id=id,
            product_id=product.id,
            category_id=product.category_id,
            owner_user_id=product.owner_user_id,
            file_type=file_type.strip(),
            size=size,
            key=str(product.id),
        )


def _check_amount(amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise ValidationError(f"Amount must be an integer, got {type(amount).__name__}")
    if amount < 0:
        raise ValidationError(f"Amount cannot be negative, got {amount}")
