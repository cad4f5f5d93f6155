from __future__ import annotations
from enum import StrEnum


class SortDirection(StrEnum):
    asc = "asc"
    desc = "desc"
