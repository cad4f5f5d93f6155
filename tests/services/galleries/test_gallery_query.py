# tests/services/galleries/test_gallery_query.py
from __future__ import annotations

import pytest

from hexgallery.domain.enums.sort_direction import SortDirection
from hexgallery.domain.errors import ValidationError
from hexgallery.services.galleries.query import normalize_criteria, normalize_sort


def test_criteria_keeps_supported_non_null_keys():
    assert normalize_criteria({"enabled": False, "name": "x"}) == {"enabled": False}
    assert normalize_criteria({"enabled": None}) == {}
    assert normalize_criteria(None) == {}


@pytest.mark.parametrize("empty", [None, "", {}])
def test_empty_sort_means_default_order(empty):
    assert normalize_sort(empty) == {}


def test_bare_field_sorts_ascending():
    assert normalize_sort("name") == {"name": SortDirection.asc}


@pytest.mark.parametrize("raw,expected", [
    ("ASC", SortDirection.asc),
    ("desc", SortDirection.desc),
    (" Desc ", SortDirection.desc),
    (None, SortDirection.asc),
    ("", SortDirection.asc),
])
def test_direction_is_case_insensitive(raw, expected):
    assert normalize_sort({"date_created": raw}) == {"date_created": expected}


def test_multiple_fields_keep_their_order():
    out = normalize_sort({"enabled": "desc", "name": "asc"})
    assert list(out.items()) == [("enabled", SortDirection.desc), ("name", SortDirection.asc)]


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError) as ei:
        normalize_sort({"version": "asc"})
    assert ei.value.errors[0]["field"] == "order_by"


def test_unknown_direction_is_rejected():
    with pytest.raises(ValidationError):
        normalize_sort({"name": "sideways"})


def test_non_mapping_sort_is_rejected():
    with pytest.raises(ValidationError):
        normalize_sort(["name"])
