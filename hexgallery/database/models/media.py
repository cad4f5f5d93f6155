from __future__ import annotations

from typing import Optional

from sqlalchemy import BigInteger, Boolean, Float, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from hexgallery.database.core.main import Base
from hexgallery.database.core.service_object import JSONType, ServiceObject


class Media(ServiceObject, Base):
    """
    Media assets are owned elsewhere; this table is what galleries point at.
    Deleting a media row cascades to its gallery associations (FK ondelete).
    """
    __tablename__ = "media"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"), default=False)
    context: Mapped[Optional[str]] = mapped_column(String(64))
    copyright: Mapped[Optional[str]] = mapped_column(String(255))
    author_name: Mapped[Optional[str]] = mapped_column(String(255))

    provider_name: Mapped[Optional[str]] = mapped_column(String(255))
    provider_reference: Mapped[Optional[str]] = mapped_column(String(255))
    provider_metadata: Mapped[Optional[dict]] = mapped_column(JSONType)
    content_type: Mapped[Optional[str]] = mapped_column(String(255))
    size: Mapped[Optional[int]] = mapped_column(BigInteger)
    width: Mapped[Optional[int]] = mapped_column(Integer)
    height: Mapped[Optional[int]] = mapped_column(Integer)
    length: Mapped[Optional[float]] = mapped_column(Float)

    def __repr__(self) -> str:
        return f"<Media id={self.id} name={self.name!r}>"
