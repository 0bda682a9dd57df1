"""Abstract Unit of Work: the transaction primitive.

Everything done through the repositories of one entered unit of work is
committed together by ``commit()`` or discarded together.  Leaving the
``with`` block without committing, or because of an exception, rolls
back.  Adapters translate backend failures into ConflictError or
InternalError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.repository.product_repository import (
    ProductFileRepository,
    ProductRepository,
)


class UnitOfWork(ABC):

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...

    @abstractmethod
    def __exit__(self, exc_type, exc_value, traceback) -> None: ...

    @property
    @abstractmethod
    def orders(self) -> OrderRepository: ...

    @property
    @abstractmethod
    def products(self) -> ProductRepository: ...

    @property
    @abstractmethod
    def files(self) -> ProductFileRepository: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
