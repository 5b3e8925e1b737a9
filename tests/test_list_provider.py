from fastapi_collections.data.array import ListCollectionProvider
from fastapi_collections.data.sort import Sort


def test_models_keys_and_total(books):
    provider = ListCollectionProvider(books, key="id")
    assert provider.get_models() == books
    assert provider.get_keys() == [1, 2, 3]
    assert provider.get_total_count() == 3


def test_positional_keys_by_default(books):
    provider = ListCollectionProvider(books, offset=1, limit=2, sort=False)
    assert provider.get_keys() == [1, 2]


def test_callable_key(books):
    provider = ListCollectionProvider(books, key=lambda book: book.title.lower())
    assert provider.get_keys() == ["dune", "neuromancer", "hyperion"]


def test_page_slice(books):
    provider = ListCollectionProvider(books, key="id", offset=1, limit=1)
    assert provider.get_keys() == [2]
    assert provider.get_count() == 1
    assert provider.get_total_count() == 3


def test_sorted_page(books):
    sort = Sort(params={"sort": "-year"})
    provider = ListCollectionProvider(books, key="id", sort=sort)
    assert provider.get_keys() == [3, 2, 1]


def test_multi_sort_on_mappings():
    rows = [
        {"id": 1, "group": "b", "rank": 2},
        {"id": 2, "group": "a", "rank": 1},
        {"id": 3, "group": "b", "rank": 1},
    ]
    sort = Sort(params={"sort": "group,-rank"}, enable_multi_sort=True)
    provider = ListCollectionProvider(rows, key="id", sort=sort)
    assert provider.get_keys() == [2, 1, 3]


def test_id_namespaces_sort_param(books):
    provider = ListCollectionProvider(books, id="books", key="id")
    assert provider.get_sort().sort_param == "books-sort"


def test_unknown_sort_attribute_keeps_order(books):
    provider = ListCollectionProvider(books, key="id", sort=Sort(params={"sort": "missing"}))
    assert provider.get_keys() == [1, 2, 3]


def test_models_without_sort_value_go_last():
    rows = [{"id": 1, "rank": 2}, {"id": 2}, {"id": 3, "rank": 1}]
    ascending = ListCollectionProvider(rows, key="id", sort=Sort(params={"sort": "rank"}))
    descending = ListCollectionProvider(rows, key="id", sort=Sort(params={"sort": "-rank"}))
    assert ascending.get_keys() == [3, 1, 2]
    assert descending.get_keys() == [1, 3, 2]


def test_positional_keys_unique_for_repeated_models(books):
    dune = books[0]
    provider = ListCollectionProvider([dune, dune, books[1]], sort=False)
    assert provider.get_keys() == [0, 1, 2]


def test_positional_keys_follow_sorting(books):
    provider = ListCollectionProvider(books, sort=Sort(params={"sort": "-year"}), limit=2)
    assert provider.get_keys() == [2, 1]


def test_positional_keys_for_injected_models(books):
    provider = ListCollectionProvider(books, offset=5, sort=False)
    provider.set_models(books[:2])
    assert provider.get_keys() == [5, 6]
