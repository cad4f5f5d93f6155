from __future__ import annotations
from typing import Any, Protocol


class SerializerPort(Protocol):
    def render(self, entity: Any) -> Any: ...
