# tests/conftest.py
from __future__ import annotations
import os

# must be set before hexgallery settings are first read
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")

import pytest
from sqlalchemy.engine import Engine

from hexgallery.common.settings import get_settings
from hexgallery.database.core.main import build_engine
from hexgallery.database.models import Base  # <-- imports your models/metadata


@pytest.fixture(scope="session")
def _database_url():
    """
    SQLite in memory by default. With USE_TESTCONTAINERS=true a throwaway
    PostgreSQL container is started instead.
    """
    cfg = get_settings()
    if not cfg.use_testcontainers:
        yield cfg.database_url
        return

    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(cfg.test_db_image) as pg:
        # Force psycopg driver in the URL returned by testcontainers (it defaults to psycopg2)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    engine = build_engine(_database_url)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
