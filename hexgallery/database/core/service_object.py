# hexgallery/database/core/service_object.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional
from uuid import UUID as PyUUID

from sqlalchemy import JSON, DateTime, Text, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, declared_attr

# JSONB on Postgres, plain JSON elsewhere (SQLite in dev/tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


class ServiceObject:
    """
    Mixin providing common columns for persisted models.
    Use with multiple inheritance: `class MyModel(ServiceObject, Base): ...`
    """
    __abstract__ = True

    @declared_attr
    def id(cls) -> Mapped[PyUUID]:
        # generated client-side so domain objects know their id before flush
        return mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    @declared_attr
    def date_created(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
        )

    @declared_attr
    def last_updated(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
        )

    @declared_attr
    def data_origin(cls) -> Mapped[Optional[str]]:
        return mapped_column(Text, nullable=True)

    @declared_attr
    def meta_data(cls) -> Mapped[Optional[dict]]:
        return mapped_column(JSONType, nullable=True)
