import pytest

from catalog.domain import PageRequest, PageResult, PaginationMeta
from catalog.errors import ValidationError


def test_first_page_of_three():
    meta = PaginationMeta.from_total(PageRequest(page=1, limit=10), total=25)

    assert meta.total_pages == 3
    assert meta.has_next is True
    assert meta.has_prev is False


def test_last_page():
    meta = PaginationMeta.from_total(PageRequest(page=3, limit=10), total=25)

    assert meta.has_next is False
    assert meta.has_prev is True


def test_empty_result():
    meta = PaginationMeta.from_total(PageRequest(), total=0)

    assert meta.page == 1
    assert meta.limit == 10
    assert meta.total_pages == 0
    assert meta.has_next is False
    assert meta.has_prev is False


def test_page_past_the_end_is_not_clamped():
    meta = PaginationMeta.from_total(PageRequest(page=7, limit=10), total=25)

    assert meta.page == 7
    assert meta.has_next is False
    assert meta.has_prev is True


def test_skip():
    assert PageRequest(page=3, limit=20).skip == 40
    assert PageRequest().skip == 0


@pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, 101)])
def test_invalid_page_request(page, limit):
    with pytest.raises(ValidationError):
        PageRequest(page=page, limit=limit)


def test_page_result_map_keeps_pagination():
    meta = PaginationMeta.from_total(PageRequest(), total=2)
    result = PageResult(data=[1, 2], pagination=meta).map(str)

    assert result.data == ["1", "2"]
    assert result.pagination is meta
