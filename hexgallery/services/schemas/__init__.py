from hexgallery.services.schemas.common import (
    DeletedRead,
    ErrorRead,
)
from hexgallery.services.schemas.gallery import (
    GalleryWrite,
    GalleryRead,
    GalleryPageRead,
)
from hexgallery.services.schemas.gallery_has_media import (
    GalleryHasMediaWrite,
    GalleryHasMediaRead,
)
from hexgallery.services.schemas.media import (
    MediaRead,
)

__all__ = [
    "DeletedRead",
    "ErrorRead",
    "GalleryWrite",
    "GalleryRead",
    "GalleryPageRead",
    "GalleryHasMediaWrite",
    "GalleryHasMediaRead",
    "MediaRead",
]
