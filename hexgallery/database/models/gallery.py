from __future__ import annotations

from typing import List
from uuid import UUID as UUID_t

from sqlalchemy import (
    Boolean, ForeignKey, Integer, String, UniqueConstraint, CheckConstraint, Index, Uuid, text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hexgallery.database.core.main import Base
from hexgallery.database.core.service_object import ServiceObject
from hexgallery.database.models.media import Media


# =======================
# Galleries
# =======================
class Gallery(ServiceObject, Base):
    __tablename__ = "gallery"
    __table_args__ = (
        Index("ix_gallery_enabled", "enabled"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    context: Mapped[str] = mapped_column(String(64), nullable=False, server_default=text("'default'"), default="default")
    default_format: Mapped[str] = mapped_column(String(255), nullable=False, server_default=text("'reference'"), default="reference")
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"), default=False)

    # optimistic lock; bumped by SQLAlchemy on every UPDATE of the row
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    # Composition: associations live and die with their gallery
    associations: Mapped[List["GalleryHasMedia"]] = relationship(
        back_populates="gallery",
        cascade="all, delete-orphan",
        order_by=lambda: [GalleryHasMedia.sequence, GalleryHasMedia.id],
        lazy="selectin",
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<Gallery id={self.id} name={self.name!r} v={self.version}>"


# =======================
# Gallery <-> Media
# =======================
class GalleryHasMedia(ServiceObject, Base):
    __tablename__ = "gallery_has_media"
    __table_args__ = (
        UniqueConstraint("gallery_id", "media_id", name="uq_gallery_has_media_gallery_media"),
        CheckConstraint("position >= 0", name="position_non_negative"),
        UniqueConstraint("gallery_id", "sequence", name="uq_gallery_has_media_gallery_sequence"),
        Index("ix_gallery_has_media_media_id", "media_id"),
    )

    gallery_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("gallery.id", ondelete="CASCADE"),
        nullable=False,
    )
    media_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("media.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"), default=0)
    # insertion order within the gallery; positions may repeat, this never does
    sequence: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"), default=0)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"), default=False)

    gallery: Mapped[Gallery] = relationship(back_populates="associations")
    # non-owning: no cascade from the association to the media
    media: Mapped[Media] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<GalleryHasMedia gallery={self.gallery_id} media={self.media_id} pos={self.position}>"
