import pytest
from pydantic import ValidationError

from core.domain.query import PAGE_SIZES, Mode, QueryState, SortDirection, SortField, SortSpec


def test_defaults_match_catalog_page():
    state = QueryState()
    assert state.page == 0
    assert state.size == 10
    assert state.sort.as_param() == "title,asc"
    assert state.search_text == ""
    assert state.mode is Mode.BROWSE


def test_sort_is_parsed_from_api_string():
    spec = SortSpec.parse("totalVisits,desc")
    assert spec.field is SortField.TOTAL_VISITS
    assert spec.direction is SortDirection.DESC
    assert spec.label() == "Most Popular"
    assert str(spec) == "totalVisits,desc"


def test_sort_direction_defaults_to_asc():
    assert SortSpec.parse("rating").as_param() == "rating,asc"


@pytest.mark.parametrize("raw", ["price,asc", "title,up", ""])
def test_unknown_sort_is_rejected(raw):
    with pytest.raises(ValueError):
        SortSpec.parse(raw)


def test_every_field_has_both_directions():
    params = {spec.as_param() for spec in SortSpec.choices()}
    assert len(params) == 8
    assert {"title,asc", "createdAt,desc", "rating,desc", "totalVisits,desc"} <= params


def test_page_size_is_a_bounded_enumeration():
    assert PAGE_SIZES == (6, 10, 12, 24)
    with pytest.raises(ValidationError):
        QueryState(size=11)


def test_negative_page_is_rejected():
    with pytest.raises(ValidationError):
        QueryState(page=-1)


def test_evolve_validates_and_keeps_other_fields():
    state = QueryState(page=3, size=24, sort="rating,desc")
    moved = state.evolve(search_text="graphs", mode=Mode.SEARCH)
    assert moved.browse_key() == (3, 24, "rating,desc")
    assert moved.mode is Mode.SEARCH
    with pytest.raises(ValidationError):
        state.evolve(size=7)


def test_browse_params_use_api_names():
    state = QueryState(page=1, size=6, sort="createdAt,desc")
    assert state.browse_params() == {"page": 1, "size": 6, "sort": "createdAt,desc"}
