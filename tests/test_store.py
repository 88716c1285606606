from datetime import date

from app.models.books import Book


def test_find_all_empty(store):
    assert store.find_all() == []


def test_find_all_returns_every_book_in_id_order(store, insert_books):
    insert_books(
        [
            {"id": 3, "title": "Hyperion"},
            {"id": 1, "title": "Dune"},
            {"id": 2, "title": "Foundation"},
        ]
    )

    result = store.find_all()

    assert [b.id for b in result] == [1, 2, 3]
    assert len(result) == 3


def test_find_by_id_hit_and_miss(store, seeded):
    assert store.find_by_id(1) == Book(id=1, title="Dune")
    assert store.find_by_id(99) is None


def test_find_by_id_maps_every_column(store, full_record):
    book = store.find_by_id(7)

    assert book.title == "The Go Programming Language"
    assert book.author == "Alan A. A. Donovan"
    assert book.isbn == "9780134190440"
    assert book.publish_date == date(2015, 10, 26)
    assert book.description == "An introduction to Go."


def test_find_by_title_is_case_sensitive(store, seeded):
    assert [b.id for b in store.find_by_title("Dune")] == [1]
    assert store.find_by_title("dune") == []
    assert store.find_by_title("Dun") == []


def test_find_by_title_returns_all_duplicates(store, insert_books):
    insert_books(
        [
            {"id": 1, "title": "Dune"},
            {"id": 2, "title": "Dune"},
            {"id": 3, "title": "Dune Messiah"},
        ]
    )

    assert [b.id for b in store.find_by_title("Dune")] == [1, 2]


def test_find_by_title_containing_ignores_case(store, full_record, seeded):
    result = store.find_by_title_containing("go")

    assert [b.id for b in result] == [7]
    assert [b.id for b in store.find_by_title_containing("DUNE")] == [1]


def test_find_by_title_containing_no_match(store, seeded):
    assert store.find_by_title_containing("asimov") == []


def test_find_by_title_containing_treats_wildcards_literally(store, insert_books):
    insert_books(
        [
            {"id": 1, "title": "100% Dune"},
            {"id": 2, "title": "Foundation"},
            {"id": 3, "title": "snake_case"},
        ]
    )

    assert [b.id for b in store.find_by_title_containing("%")] == [1]
    assert [b.id for b in store.find_by_title_containing("_")] == [3]


def test_find_by_title_containing_empty_keyword_matches_all(store, seeded):
    assert len(store.find_by_title_containing("")) == 2
