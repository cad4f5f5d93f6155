# hexgallery/domain/errors.py
"""
Business errors raised by the gallery core.

    GalleryError (base)
       ├── NotFoundError       referenced gallery/media/association is missing
       ├── ConflictError       duplicate association or concurrent write
       ├── ValidationError     submitted data failed schema rules
       └── PersistenceError    storage collaborator failed

SerializationError is deliberately *not* a GalleryError: it signals a bug
(e.g. a reference cycle) and must not be mapped to a client response.

The HTTP layer maps the codes to status codes; the domain never knows
about HTTP.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional


class GalleryError(Exception):
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class NotFoundError(GalleryError):
    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Any = None, message: Optional[str] = None) -> None:
        if message is None:
            message = f"{resource} ({resource_id}) not found" if resource_id is not None else f"{resource} not found"
        super().__init__(message, details={"resource": resource, "id": None if resource_id is None else str(resource_id)})
        self.resource = resource
        self.resource_id = resource_id


class ConflictError(GalleryError):
    code = "CONFLICT"


class ValidationError(GalleryError):
    """
    Carries field-level errors and the data that was submitted, so the caller
    can correct and resend it. Nothing is mutated when this is raised.
    """
    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[List[Dict[str, Any]]] = None,
        submitted: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.errors = list(errors or [])
        self.submitted = dict(submitted) if isinstance(submitted, Mapping) else submitted
        super().__init__(message, details={"errors": self.errors, "submitted": self.submitted})


class PersistenceError(GalleryError):
    code = "PERSISTENCE_ERROR"


class SerializationError(RuntimeError):
    pass
