import pytest
from pydantic import ValidationError

from core.domain.models import (
    Course,
    CourseDraft,
    CourseListResponse,
    Registration,
    SearchResponse,
)
from tests.helpers import course_payload


def test_course_reads_camel_case_payload():
    course = Course.model_validate(course_payload(7, "Algorithms", tags=["cs", "math"]))
    assert course.total_visits == 300
    assert course.total_ratings == 12
    assert course.created_at is not None and course.created_at.year == 2024
    assert course.tags == ("cs", "math")


def test_course_missing_optionals_fall_back():
    course = Course.model_validate(
        {"id": "c-1", "title": "Intro", "rating": None, "totalVisits": None, "tags": None}
    )
    assert course.description is None
    assert course.instructor is None
    assert course.rating == 0
    assert course.total_visits == 0
    assert course.tags == ()


def test_course_is_immutable():
    course = Course.model_validate(course_payload(1, "A"))
    with pytest.raises(ValidationError):
        course.title = "B"


def test_rating_outside_range_is_invalid():
    with pytest.raises(ValidationError):
        Course.model_validate(course_payload(1, "A", rating=5.5))


def test_list_total_accepts_common_aliases():
    assert CourseListResponse.model_validate({"success": True, "courses": [], "totalElements": 42}).total == 42
    assert CourseListResponse.model_validate({"success": True, "courses": None}).total is None


def test_search_response_null_results():
    assert SearchResponse.model_validate({"success": True, "results": None}).results == []


def test_draft_requires_title_and_dedupes_tags():
    draft = CourseDraft(title="  Graphs ", tags=["cs", " cs", "", "math"])
    assert draft.title == "Graphs"
    assert draft.tags == ["cs", "math"]
    with pytest.raises(ValidationError):
        CourseDraft(title="   ")


@pytest.mark.parametrize(
    "values",
    [
        {"username": "ab", "email": "a@b.io", "password": "secret1"},
        {"username": "abc", "email": "not-an-email", "password": "secret1"},
        {"username": "abc", "email": "a@b.io", "password": "12345"},
    ],
)
def test_registration_rules(values):
    with pytest.raises(ValidationError):
        Registration(**values)


def test_registration_accepts_valid_form():
    reg = Registration(username="abc", email="Ada@Example.COM", password="123456")
    assert reg.email == "Ada@Example.COM"
