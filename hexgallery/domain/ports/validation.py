from __future__ import annotations
from typing import Any, Mapping, Optional, Protocol


class ValidatorPort(Protocol):
    # target None -> build a new entity; otherwise merge into target in place.
    # Raises ValidationError without touching target when data is invalid.
    def validate(self, schema_name: str, target: Optional[Any], submitted: Optional[Mapping[str, Any]]) -> Any: ...
