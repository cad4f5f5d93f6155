from __future__ import annotations
from enum import StrEnum


class Visibility(StrEnum):
    """Named field-visibility groups used when rendering entities."""
    api_read = "api_read"
