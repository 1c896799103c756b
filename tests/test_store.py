"""Record store behaviour: lookups, tag filter, in-place updates, seed loading."""

import json

import pytest

from shark_server.api.store import Record, RecordStore, SeedError, load_seed


# --- get_by_id ---

def test_get_by_id_found(store):
    record = store.get_by_id(1)
    assert record.name == "Brian"
    assert record.tag == "Great White Shark"


def test_get_by_id_missing_is_none(store):
    assert store.get_by_id(999) is None


# --- list_by_tag ---

def test_list_without_tag_returns_all_in_order(store):
    records = store.list_by_tag(None)
    assert [r.id for r in records] == [1, 2, 3, 4, 5]


def test_list_with_empty_tag_returns_all(store):
    assert len(store.list_by_tag("")) == 5


def test_list_by_tag_exact_match(store):
    records = store.list_by_tag("Hammerhead Shark")
    assert [r.id for r in records] == [3, 5]


def test_list_by_tag_is_case_sensitive(store):
    assert store.list_by_tag("hammerhead shark") == []


def test_list_by_tag_no_match_is_empty(store):
    assert store.list_by_tag("Nonexistent") == []


def test_list_returns_a_copy(store):
    records = store.list_by_tag(None)
    records.clear()
    assert len(store) == 5


# --- update_by_id ---

def test_update_returns_updated_record(store):
    record = store.update_by_id(2, "Kimberly", "30")
    assert (record.id, record.name, record.age) == (2, "Kimberly", "30")
    assert record.tag == "Whale Shark"


def test_update_persists_in_store(store):
    store.update_by_id(2, "Kimberly", "30")
    record = store.get_by_id(2)
    assert record.name == "Kimberly"
    assert record.age == "30"


def test_update_without_age_clears_it(store):
    record = store.update_by_id(4, "Joe")
    assert record.name == "Joe"
    assert record.age is None


def test_update_missing_id_leaves_store_unchanged(store):
    before = [r.to_dict() for r in store]
    assert store.update_by_id(999, "X", "1") is None
    assert [r.to_dict() for r in store] == before


def test_update_with_duplicate_ids_touches_first_only():
    store = RecordStore([
        Record(id=7, name="A", age="1", tag="t"),
        Record(id=7, name="B", age="2", tag="t"),
    ])
    record = store.update_by_id(7, "C", "3")
    assert record is store.all()[0]
    assert store.all()[1].name == "B"


def test_update_is_logged(store, capsys):
    store.update_by_id(1, "Bryan", "22")
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    events = [line for line in lines if line["event"] == "person_updated"]
    assert events[0]["person_id"] == 1
    assert events[0]["previous"] == {"name": "Brian", "age": "21"}


# --- seed loading ---

def test_stores_do_not_share_records():
    first = RecordStore.default()
    second = RecordStore.default()
    first.update_by_id(1, "Changed", "99")
    assert second.get_by_id(1).name == "Brian"


def test_load_seed_coerces_fields(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"id": "8", "name": "Ann", "age": 40, "tag": "Mako Shark"}]))
    records = load_seed(str(path))
    assert records == [Record(id=8, name="Ann", age="40", tag="Mako Shark")]


def test_load_seed_missing_file(tmp_path):
    with pytest.raises(SeedError):
        load_seed(str(tmp_path / "nope.json"))


def test_load_seed_rejects_non_array(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"id": 1}))
    with pytest.raises(SeedError):
        load_seed(str(path))


def test_load_seed_rejects_missing_field(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"id": 1, "name": "Ann", "tag": "Mako Shark"}]))
    with pytest.raises(SeedError, match="age"):
        load_seed(str(path))


def test_load_seed_rejects_bad_id(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([{"id": "one", "name": "Ann", "age": "1", "tag": "x"}]))
    with pytest.raises(SeedError):
        load_seed(str(path))


def test_load_seed_rejects_bad_json(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text("[{")
    with pytest.raises(SeedError):
        load_seed(str(path))
