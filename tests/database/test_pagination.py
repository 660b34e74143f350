from __future__ import annotations

import pytest

from src.incidence_system.incidence_system.core.exceptions import ValidationError
from src.incidence_system.incidence_system.database.pagination import Page, PageRequest


def test_defaults():
    request = PageRequest.from_args({})

    assert (request.page, request.page_size, request.search) == (1, 10, "")
    assert request.offset == 0


def test_page_size_is_capped():
    assert PageRequest.from_args({"pageSize": "500"}).page_size == 100


def test_offset_follows_page():
    assert PageRequest.from_args({"page": "3", "pageSize": "20"}).offset == 40


def test_search_is_trimmed():
    assert PageRequest.from_args({"search": "  ana "}).search == "ana"


@pytest.mark.parametrize("args", [{"page": "abc"}, {"pageSize": "x"}, {"page": "0"}, {"pageSize": "-1"}])
def test_invalid_values_are_rejected(args):
    with pytest.raises(ValidationError):
        PageRequest.from_args(args)


def test_page_envelope():
    page = Page(items=[1, 2], total=21, page=2, page_size=10)

    assert page.to_dict("numbers", lambda n: {"n": n}) == {
        "numbers": [{"n": 1}, {"n": 2}],
        "total": 21,
        "page": 2,
        "pageSize": 10,
        "totalPages": 3,
    }


def test_empty_page_has_zero_total_pages():
    assert Page(items=[], total=0, page=1, page_size=10).total_pages == 0
