"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine

from marketplace.domain.service.access_policy import AccessPolicy
from marketplace.infrastructure.config import settings
from marketplace.infrastructure.identifiers import UuidIdentifierGenerator
from marketplace.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from marketplace.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@lru_cache(maxsize=None)
def engine() -> Engine:
    return create_db_engine(settings.DB_URL, echo=settings.DB_ECHO)


def unit_of_work() -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(create_session_factory(engine()))


def id_generator() -> UuidIdentifierGenerator:
    return UuidIdentifierGenerator()


def access_policy() -> AccessPolicy:
    return AccessPolicy()
