"""SQLAlchemy Unit of Work.

Wraps one session per ``with`` block: begun on enter, committed only by
an explicit ``commit()``, rolled back and closed on exit.  SQLAlchemy
errors never leave this module; they are logged here and re-raised as
ConflictError (integrity violations) or InternalError (everything else).
"""

from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from marketplace.domain.exceptions import ConflictError, DomainException, InternalError
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.repository.product_repository import (
    ProductFileRepository,
    ProductRepository,
)
from marketplace.domain.repository.unit_of_work import UnitOfWork
from marketplace.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from marketplace.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductFileRepository,
    SqlAlchemyProductRepository,
)

logger = structlog.get_logger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory
        self.session: Session | None = None
        self._orders: OrderRepository | None = None
        self._products: ProductRepository | None = None
        self._files: ProductFileRepository | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self.session = self._session_factory()
        self.session.begin()
        self._orders = SqlAlchemyOrderRepository(self.session)
        self._products = SqlAlchemyProductRepository(self.session)
        self._files = SqlAlchemyProductFileRepository(self.session)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            self.rollback()
        finally:
            if self.session is not None:
                self.session.close()
            self.session = None
            self._orders = self._products = self._files = None

        if isinstance(exc_value, SQLAlchemyError):
            raise _translate(exc_value) from exc_value

    @property
    def orders(self) -> OrderRepository:
        assert self._orders is not None, "UnitOfWork is not entered."
        return self._orders

    @property
    def products(self) -> ProductRepository:
        assert self._products is not None, "UnitOfWork is not entered."
        return self._products

    @property
    def files(self) -> ProductFileRepository:
        assert self._files is not None, "UnitOfWork is not entered."
        return self._files

    def commit(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc

    def rollback(self) -> None:
        assert self.session is not None, "UnitOfWork is not entered."
        self.session.rollback()


def _translate(exc: SQLAlchemyError) -> DomainException:
    if isinstance(exc, IntegrityError):
        logger.error("Transaction conflict", error=str(exc), exc_info=exc)
        return ConflictError("The change conflicts with concurrent data and was not saved")
    logger.error("Persistence failure", error=str(exc), exc_info=exc)
    return InternalError("The operation failed; nothing was saved")
