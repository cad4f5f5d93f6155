# hexgallery/domain/dataclasses/view.py
from __future__ import annotations

from dataclasses import dataclass, Field
from typing import Any, Dict, FrozenSet, Optional

from hexgallery.domain.enums.visibility import Visibility

GROUPS_KEY = "groups"


def groups(*names: str) -> Dict[str, FrozenSet[str]]:
    """
    Field metadata declaring the visibility groups a dataclass field belongs to:

        name: str = field(default="", metadata=groups(Visibility.api_read))

    Fields without groups are internal and never rendered.
    """
    return {GROUPS_KEY: frozenset(str(n) for n in names)}


def field_groups(f: Field[Any]) -> FrozenSet[str]:
    return f.metadata.get(GROUPS_KEY, frozenset())


@dataclass(frozen=True)
class ViewContext:
    """
    Explicit rendering configuration: which group to show, and how many
    relationship hops to follow (None = no depth checks).
    """
    group: str = Visibility.api_read.value
    max_depth: Optional[int] = None

    def __post_init__(self):
        if not self.group:
            raise ValueError("group must be non-empty")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0 or None")

    def allows(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth
