# hexgallery/services/validation/pydantic_validator.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError as PydanticValidationError

from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.entities.links.gallery_has_media import GalleryHasMedia
from hexgallery.domain.errors import ValidationError
from hexgallery.services.schemas.gallery import GalleryWrite
from hexgallery.services.schemas.gallery_has_media import GalleryHasMediaWrite

GALLERY_SCHEMA = "gallery"
GALLERY_HAS_MEDIA_SCHEMA = "gallery_has_media"


@dataclass(frozen=True)
class SchemaBinding:
    """A pydantic write schema plus the domain factory used when there is no target."""
    model: Type[BaseModel]
    factory: Callable[..., Any]


DEFAULT_BINDINGS: Dict[str, SchemaBinding] = {
    GALLERY_SCHEMA: SchemaBinding(GalleryWrite, Gallery),
    GALLERY_HAS_MEDIA_SCHEMA: SchemaBinding(GalleryHasMediaWrite, GalleryHasMedia),
}


def _field_errors(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "__root__"
        out.append({"field": loc, "message": err.get("msg", ""), "type": err.get("type", "")})
    return out


class PydanticValidator:
    """
    ValidatorPort backed by pydantic write schemas.

    - target is None  -> the submitted data is validated as-is and a new
      domain entity is built with the binding's factory.
    - target is given -> submitted fields are merged over the target's current
      values, the merged whole is validated, then copied onto the target.
      Omitted fields keep their value (partial update); unknown fields fail.

    Nothing is written to the target unless validation succeeds.
    """

    def __init__(self, bindings: Optional[Mapping[str, SchemaBinding]] = None) -> None:
        self._bindings: Dict[str, SchemaBinding] = dict(bindings or DEFAULT_BINDINGS)

    def validate(self, schema_name: str, target: Optional[Any], submitted: Optional[Mapping[str, Any]]) -> Any:
        binding = self._bindings.get(schema_name)
        if binding is None:
            raise KeyError(f"Unknown validation schema: {schema_name}")

        if submitted is None:
            submitted = {}
        if not isinstance(submitted, Mapping):
            raise ValidationError(
                "Submitted data must be an object",
                errors=[{"field": "__root__", "message": "Expected a JSON object", "type": "dict_type"}],
                submitted=None,
            )

        base: Dict[str, Any] = {}
        if target is not None:
            base = {name: getattr(target, name) for name in binding.model.model_fields if hasattr(target, name)}

        try:
            model = binding.model.model_validate({**base, **submitted})
        except PydanticValidationError as e:
            raise ValidationError(errors=_field_errors(e), submitted=submitted) from e

        values = model.model_dump()
        if target is None:
            try:
                return binding.factory(**values)
            except ValueError as e:
                raise ValidationError(
                    str(e),
                    errors=[{"field": "__root__", "message": str(e), "type": "value_error"}],
                    submitted=submitted,
                ) from e

        for name, value in values.items():
            setattr(target, name, value)
        return target
