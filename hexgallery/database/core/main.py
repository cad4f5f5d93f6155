# hexgallery/database/core/main.py
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from sqlalchemy import MetaData, create_engine, event, Column, Table
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hexgallery.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

_serviceobject_first = ("id", "date_created", "last_updated", "data_origin", "meta_data")


class Base(DeclarativeBase):
    # Default schema only on PostgreSQL (settings.db_schema is None elsewhere)
    metadata = MetaData(
        schema=_settings.db_schema,
        naming_convention=NAMING_CONVENTION,
    )

    @classmethod
    def __table_cls__(cls, *args, **kw):
        """Reorder columns so ServiceObject fields come first."""
        if not args:
            return super().__table_cls__(*args, **kw)

        # Positional args are (name, metadata, *columns_and_constraints)
        name, metadata, *rest = args

        cols: List[Column] = [x for x in rest if isinstance(x, Column)]
        others = [x for x in rest if not isinstance(x, Column)]

        # Stable ordering: ServiceObject fields first, then everything else in their original order
        priority = {n: i for i, n in enumerate(_serviceobject_first)}
        original_index = {c: i for i, c in enumerate(cols)}

        cols.sort(key=lambda c: (priority.get(c.name, 10_000), original_index[c]))

        return Table(name, metadata, *(cols + others), **kw)


def engine_kwargs(url: str) -> Dict[str, Any]:
    """Pool options per backend; SQLite (dev/tests) gets a single shared connection."""
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_size": _settings.db.pool_size,
        "max_overflow": _settings.db.max_overflow,
        "pool_pre_ping": _settings.db.pool_pre_ping,
        "pool_recycle": _settings.db.pool_recycle,
    }


def build_engine(url: str) -> Engine:
    engine = create_engine(url, echo=_settings.db.echo, future=True, **engine_kwargs(url))

    if engine.dialect.name == "sqlite":
        # FK cascades (media -> gallery_has_media) are off by default in SQLite
        @event.listens_for(engine, "connect")
        def _enable_fks(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

    schema = _settings.db_schema
    if schema and engine.dialect.name == "postgresql":
        # Ensure the app schema is first, then public (so extensions remain visible)
        @event.listens_for(engine, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    return engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Built on first use so importing models never opens a DB driver."""
    return build_engine(_settings.database_url)


@lru_cache(maxsize=1)
def get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), expire_on_commit=False, future=True, autoflush=False)


def SessionLocal() -> Session:
    return get_sessionmaker()()
