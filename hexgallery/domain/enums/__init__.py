from hexgallery.domain.enums.sort_direction import SortDirection
from hexgallery.domain.enums.visibility import Visibility

__all__ = [
    "SortDirection",
    "Visibility",
]
