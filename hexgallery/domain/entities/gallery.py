# hexgallery/domain/entities/gallery.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from hexgallery.domain.dataclasses.view import groups
from hexgallery.domain.entities.association_set import AssociationSet
from hexgallery.domain.entities.media import Media
from hexgallery.domain.enums.visibility import Visibility

_READ = groups(Visibility.api_read)

# Fields a gallery listing may be ordered by
SORTABLE_FIELDS = frozenset({
    "id",
    "name",
    "context",
    "default_format",
    "enabled",
    "date_created",
    "last_updated",
})


@dataclass
class Gallery:
    """
    Core domain entity: an ordered, named collection of media.

    The gallery exclusively owns its associations (composition). Persistence
    fields are optional so a gallery can be built in memory before save;
    `version` is the optimistic-lock counter of the loaded snapshot and is
    never rendered.
    """

    # Persistence (optional)
    id: Optional[UUID] = field(default=None, metadata=_READ)
    date_created: Optional[datetime] = field(default=None, metadata=_READ)
    last_updated: Optional[datetime] = field(default=None, metadata=_READ)
    data_origin: Optional[str] = None
    version: Optional[int] = None

    # Descriptive
    name: str = field(default="", metadata=_READ)
    context: str = field(default="default", metadata=_READ)
    default_format: str = field(default="reference", metadata=_READ)
    enabled: bool = field(default=False, metadata=_READ)

    associations: AssociationSet = field(default_factory=AssociationSet, metadata=_READ)

    def __post_init__(self):
        if not isinstance(self.associations, AssociationSet):
            self.associations = AssociationSet(self.associations)

    def media(self) -> List[Media]:
        """Media of this gallery, in association order."""
        return [a.media for a in self.associations if a.media is not None]
