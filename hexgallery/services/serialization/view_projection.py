# hexgallery/services/serialization/view_projection.py
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Optional, Set

from hexgallery.domain.dataclasses.view import ViewContext, field_groups
from hexgallery.domain.errors import SerializationError

_SCALARS = (str, bytes, int, float, bool, type(None))


def _is_entity(value: Any) -> bool:
    return is_dataclass(value) and not isinstance(value, type)


def _holds_entities(value: Any) -> bool:
    if _is_entity(value):
        return True
    if isinstance(value, Mapping):
        return any(_is_entity(v) for v in value.values())
    if isinstance(value, Iterable) and not isinstance(value, _SCALARS):
        return any(_is_entity(v) for v in value)
    return False


class ViewProjection:
    """
    Renders domain dataclasses into plain dict/list trees.

    Only fields whose metadata lists `context.group` are included. Entering a
    nested entity (directly or as a collection element) costs one hop; a field
    whose hop would exceed `context.max_depth` is left out. With
    max_depth=None there are no depth checks and the walk is bounded by the
    graph itself. A cycle in the graph is a bug and raises SerializationError.

    Values stay Python objects (UUID, datetime, enums as their value); JSON
    encoding is the transport's job.
    """

    def __init__(self, context: Optional[ViewContext] = None) -> None:
        self.context = context or ViewContext()

    def render(self, entity: Any) -> Any:
        return self._value(entity, depth=0, path=set())

    # ---- internals ----

    def _value(self, value: Any, depth: int, path: Set[int]) -> Any:
        if _is_entity(value):
            return self._entity(value, depth, path)
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, _SCALARS):
            return value
        if isinstance(value, Mapping):
            return {str(k): self._value(v, depth, path) for k, v in value.items()}
        if isinstance(value, Iterable):
            return [self._value(v, depth, path) for v in value]
        return value

    def _entity(self, entity: Any, depth: int, path: Set[int]) -> Dict[str, Any]:
        marker = id(entity)
        if marker in path:
            raise SerializationError(f"reference cycle while rendering {type(entity).__name__}")
        path.add(marker)
        try:
            out: Dict[str, Any] = {}
            for f in fields(entity):
                if self.context.group not in field_groups(f):
                    continue
                value = getattr(entity, f.name)
                if _holds_entities(value):
                    if not self.context.allows(depth + 1):
                        continue
                    out[f.name] = self._value(value, depth + 1, path)
                else:
                    out[f.name] = self._value(value, depth, path)
            return out
        finally:
            path.discard(marker)


def render(entity: Any, group: str, max_depth: Optional[int] = None) -> Any:
    """One-shot helper: render(entity, "api_read") with depth checks disabled."""
    return ViewProjection(ViewContext(group=group, max_depth=max_depth)).render(entity)
