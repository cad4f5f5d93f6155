# hexgallery/services/schemas/common.py
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel


class DeletedRead(BaseModel):
    deleted: bool = True


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Dict[str, Any] = {}


class ErrorRead(BaseModel):
    error: ErrorBody
