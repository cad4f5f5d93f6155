# hexgallery/services/galleries/query.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from hexgallery.domain.entities.gallery import SORTABLE_FIELDS
from hexgallery.domain.enums.sort_direction import SortDirection
from hexgallery.domain.errors import ValidationError

# Filters understood by the gallery listing; anything else is dropped.
SUPPORTED_CRITERIA = frozenset({"enabled"})

SortInput = Union[None, str, Mapping[str, Optional[str]]]


def normalize_criteria(filters: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Keep only supported filter keys, and drop keys whose value is None:
    an absent filter never means "filter on NULL".
    """
    if not filters:
        return {}
    return {k: v for k, v in filters.items() if k in SUPPORTED_CRITERIA and v is not None}


def normalize_sort(sort: SortInput) -> Dict[str, SortDirection]:
    """
    None / "" / {}        -> {} (repository default order)
    "name"                -> {"name": asc}
    {"name": "DESC"}      -> {"name": desc}   (direction is case-insensitive,
                                                a missing one means asc)
    Unknown fields or directions raise ValidationError on `order_by`.
    """
    if not sort:
        return {}
    if isinstance(sort, str):
        sort = {sort.strip(): None}
    if not isinstance(sort, Mapping):
        raise ValidationError(
            "order_by must be a field name or a field -> direction mapping",
            errors=[{"field": "order_by", "message": "Unsupported order_by value", "type": "value_error"}],
            submitted={"order_by": sort},
        )

    out: Dict[str, SortDirection] = {}
    for raw_field, raw_dir in sort.items():
        field = str(raw_field).strip()
        if field not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Cannot order galleries by '{field}'",
                errors=[{
                    "field": "order_by",
                    "message": f"Unknown sort field '{field}'; expected one of {sorted(SORTABLE_FIELDS)}",
                    "type": "value_error",
                }],
                submitted={"order_by": dict(sort)},
            )
        direction = str(raw_dir or SortDirection.asc.value).strip().lower()
        try:
            out[field] = SortDirection(direction)
        except ValueError as e:
            raise ValidationError(
                f"Invalid sort direction '{raw_dir}' for '{field}'",
                errors=[{"field": "order_by", "message": "Direction must be ASC or DESC", "type": "value_error"}],
                submitted={"order_by": dict(sort)},
            ) from e
    return out
