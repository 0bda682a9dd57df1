"""Fixtures backed by a real, in-memory SQLite database."""

import pytest

from marketplace.infrastructure.persistence.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from marketplace.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def uow(engine):
    return SqlAlchemyUnitOfWork(create_session_factory(engine))
