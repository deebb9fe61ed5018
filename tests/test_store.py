import json
from datetime import datetime, timezone

import pytest

from reading_list_api.app.core.store import BookStore, SeedError
from reading_list_api.app.schemas.book import BookRead


def _book(book_id: int, title: str = "T") -> BookRead:
    return BookRead(
        id=book_id,
        title=title,
        author="A",
        finished=False,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_find_scans_by_id_value():
    store = BookStore(books=[_book(3), _book(1), _book(2)])
    assert store.find(1).id == 1
    assert store.find(4) is None
    assert [b.id for b in store.all()] == [3, 1, 2]


def test_replace_keeps_position():
    store = BookStore(books=[_book(1), _book(2), _book(3)])
    assert store.replace(2, _book(2, title="new"))
    assert [b.title for b in store.all()] == ["T", "new", "T"]
    assert not store.replace(9, _book(9))
    assert len(store) == 3


def test_remove_shifts_later_books():
    store = BookStore(books=[_book(1), _book(2), _book(3)])
    assert store.remove(2)
    assert [b.id for b in store.all()] == [1, 3]
    assert not store.remove(2)
    assert len(store) == 2


def test_all_returns_a_snapshot():
    store = BookStore(books=[_book(1)])
    snapshot = store.all()
    snapshot.clear()
    assert len(store) == 1


def test_length_strategy_can_reuse_an_id_after_delete():
    store = BookStore(books=[_book(1), _book(2)])
    store.remove(1)
    # One book left, so the next id is 2 again even though 2 is taken.
    assert store.next_id() == 2


def test_counter_strategy_never_reuses_ids():
    store = BookStore(id_strategy="counter", books=[_book(1), _book(2)])
    store.remove(2)
    assert store.next_id() == 3


def test_unknown_strategy_falls_back_to_length(caplog):
    store = BookStore(id_strategy="random")
    assert store.id_strategy == "length"
    assert "Unknown id strategy" in caplog.text


def test_load_seed_fills_defaults(tmp_path):
    seed = tmp_path / "books.json"
    seed.write_text(
        json.dumps(
            [
                {"title": "Dune", "author": "Frank Herbert"},
                {"id": 7, "title": "Emma", "author": "Jane Austen", "finished": True,
                 "createdAt": "2020-05-01T10:00:00Z"},
            ]
        ),
        encoding="utf-8",
    )
    store = BookStore()
    assert store.load_seed(str(seed)) == 2

    first, second = store.all()
    assert first.id == 1
    assert first.finished is False
    assert first.created_at.tzinfo is not None
    assert second.id == 7
    assert second.finished is True
    assert second.created_at == datetime(2020, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_load_seed_rejects_non_array(tmp_path):
    seed = tmp_path / "books.json"
    seed.write_text('{"title": "Dune"}', encoding="utf-8")
    with pytest.raises(SeedError):
        BookStore().load_seed(str(seed))


def test_load_seed_rejects_bad_json(tmp_path):
    seed = tmp_path / "books.json"
    seed.write_text("[{", encoding="utf-8")
    with pytest.raises(SeedError):
        BookStore().load_seed(str(seed))


def test_load_seed_missing_file(tmp_path):
    with pytest.raises(SeedError):
        BookStore().load_seed(str(tmp_path / "absent.json"))


def test_load_seed_rejects_non_object_entry(tmp_path):
    seed = tmp_path / "books.json"
    seed.write_text('["Dune"]', encoding="utf-8")
    with pytest.raises(SeedError):
        BookStore().load_seed(str(seed))
