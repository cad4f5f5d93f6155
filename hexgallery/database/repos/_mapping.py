# hexgallery/database/repos/_mapping.py
from __future__ import annotations
from hexgallery.database.models.gallery import Gallery as DBGallery, GalleryHasMedia as DBGalleryHasMedia
from hexgallery.database.models.media import Media as DBMedia
from hexgallery.domain.entities.association_set import AssociationSet
from hexgallery.domain.entities.gallery import Gallery as DomainGallery
from hexgallery.domain.entities.links.gallery_has_media import GalleryHasMedia as DomainGalleryHasMedia
from hexgallery.domain.entities.media import Media as DomainMedia


def to_domain_media(row: DBMedia) -> DomainMedia:
    return DomainMedia(
        id=row.id,
        name=row.name,
        description=row.description,
        enabled=bool(row.enabled),
        context=row.context,
        copyright=row.copyright,
        author_name=row.author_name,
        provider_name=row.provider_name,
        provider_reference=row.provider_reference,
        provider_metadata=dict(row.provider_metadata or {}),
        content_type=row.content_type,
        size=row.size,
        width=row.width,
        height=row.height,
        length=row.length,
        date_created=getattr(row, "date_created", None),
        last_updated=getattr(row, "last_updated", None),
        data_origin=getattr(row, "data_origin", None),
    )


def to_domain_association(row: DBGalleryHasMedia) -> DomainGalleryHasMedia:
    return DomainGalleryHasMedia(
        id=row.id,
        gallery_id=row.gallery_id,
        media=to_domain_media(row.media),
        position=row.position,
        enabled=bool(row.enabled),
        date_created=getattr(row, "date_created", None),
        last_updated=getattr(row, "last_updated", None),
    )


def to_domain_gallery(row: DBGallery) -> DomainGallery:
    # row.associations is already in insertion order (relationship order_by on sequence)
    return DomainGallery(
        id=row.id,
        name=row.name,
        context=row.context,
        default_format=row.default_format,
        enabled=bool(row.enabled),
        version=row.version,
        associations=AssociationSet(to_domain_association(link) for link in row.associations),
        date_created=getattr(row, "date_created", None),
        last_updated=getattr(row, "last_updated", None),
        data_origin=getattr(row, "data_origin", None),
    )
