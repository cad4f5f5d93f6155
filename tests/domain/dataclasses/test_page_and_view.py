import pytest
from dataclasses import fields

from hexgallery.domain.dataclasses.page import Page
from hexgallery.domain.dataclasses.view import ViewContext, field_groups, groups
from hexgallery.domain.entities.gallery import Gallery
from hexgallery.domain.enums.visibility import Visibility


@pytest.mark.parametrize("total,size,pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 5, 5)])
def test_page_counts_pages(total, size, pages):
    p = Page(items=[], page=1, page_size=size, total=total)
    assert p.pages == pages


def test_page_offset_and_len():
    p = Page(items=["a", "b"], page=3, page_size=2, total=6)
    assert p.offset == 4
    assert len(p) == 2


@pytest.mark.parametrize("kw", [{"page": 0}, {"page_size": 0}, {"total": -1}])
def test_page_rejects_bad_numbers(kw):
    with pytest.raises(ValueError):
        Page(items=[], **kw)


def test_groups_metadata_round_trip():
    meta = groups(Visibility.api_read, "admin")
    assert meta["groups"] == frozenset({"api_read", "admin"})


def test_gallery_internal_fields_have_no_group():
    by_name = {f.name: field_groups(f) for f in fields(Gallery)}
    assert "api_read" in by_name["name"]
    assert "api_read" in by_name["associations"]
    assert by_name["version"] == frozenset()
    assert by_name["data_origin"] == frozenset()


def test_view_context_defaults_and_depth():
    ctx = ViewContext()
    assert ctx.group == "api_read"
    assert ctx.max_depth is None
    assert ctx.allows(1000)

    limited = ViewContext(max_depth=1)
    assert limited.allows(1)
    assert not limited.allows(2)


@pytest.mark.parametrize("kw", [{"group": ""}, {"max_depth": -1}])
def test_view_context_rejects_bad_values(kw):
    with pytest.raises(ValueError):
        ViewContext(**kw)
