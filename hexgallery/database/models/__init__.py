
from hexgallery.database.core.main import Base
from hexgallery.database.models.media import Media
from hexgallery.database.models.gallery import (
    Gallery,
    GalleryHasMedia,
)

__all__ = [
    "Base",
    "Media",
    "Gallery",
    "GalleryHasMedia",
]
