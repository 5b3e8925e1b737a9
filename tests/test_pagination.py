from fastapi_collections.pagination.standard import DEFAULT_LIMIT, StandardPagination


def test_paginate_slices_items():
    assert StandardPagination(offset=1, limit=2).paginate([1, 2, 3, 4]) == [2, 3]


def test_from_params_ignores_malformed_values():
    pagination = StandardPagination.from_params({"page[offset]": "x", "page[limit]": "0"})
    assert pagination.offset == 0
    assert pagination.limit == DEFAULT_LIMIT


def test_links_keep_other_query_params():
    pagination = StandardPagination(offset=0, limit=2, base_url="http://test/books?sort=-year")
    links = pagination.get_links(total=5)
    assert "prev" not in links
    assert links["next"] == "http://test/books?sort=-year&page%5Boffset%5D=2&page%5Blimit%5D=2"
    assert "page%5Boffset%5D=4" in links["last"]


def test_no_links_without_base_url():
    assert StandardPagination().get_links(total=10) == {}


def test_meta_for_empty_collection():
    assert StandardPagination(limit=10).get_meta(total=0) == {
        "totalCount": 0,
        "pageCount": 0,
        "currentPage": 1,
        "perPage": 10,
    }
