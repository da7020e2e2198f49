import pytest
from counter.codec import DumpFormat, Record
from counter.exceptions import RecordFormatError, StoreIOError
from counter.store import RecordChange, RecordStore


def test_add_then_increment():
    store = RecordStore()
    assert store.add("widget") is RecordChange.ADDED
    assert store.add("widget") is RecordChange.INCREMENTED
    assert store.get("widget") == 2


def test_remove_decrements_then_removes():
    store = RecordStore({"widget": 2})
    assert store.remove("widget") is RecordChange.DECREMENTED
    assert store.get("widget") == 1
    assert store.remove("widget") is RecordChange.REMOVED
    assert "widget" not in store
    assert len(store) == 0


def test_remove_absent_is_noop():
    store = RecordStore({"widget": 1})
    assert store.remove("gadget") is None
    assert store.as_dict() == {"widget": 1}


def test_add_remove_inverse():
    store = RecordStore({"a": 3, "b": 1})
    before = store.as_dict()
    for _ in range(4):
        store.add("a")
        store.add("c")
    for _ in range(4):
        store.remove("a")
        store.remove("c")
    assert store.as_dict() == before


def test_remove_all_reports_cleared_count():
    store = RecordStore({"a": 1, "b": 2})
    assert store.remove_all() == 2
    assert len(store) == 0
    assert store.render() == ""


def test_constructor_drops_non_positive_counts():
    store = RecordStore({"a": 0, "b": 2})
    assert store.as_dict() == {"b": 2}


def test_records_sorted_by_count_then_name():
    store = RecordStore({"a": 3, "b": 5, "c": 3})
    assert store.records() == [Record("b", 5), Record("a", 3), Record("c", 3)]
    assert store.render() == "b - 5\na - 3\nc - 3\n"


def test_render_csv_has_header():
    store = RecordStore({"two words": 2, "x": 1})
    assert store.render(DumpFormat.CSV) == 'name,count\n"two words",2\nx,1\n'


def test_render_csv_empty_store_is_header_only():
    assert RecordStore().render(DumpFormat.CSV) == "name,count\n"


def test_dump_to_file(tmp_path):
    store = RecordStore({"a": 1, "b": 2})
    path = tmp_path / "dump.txt"
    path.write_text("old content that must go\n" * 10, encoding="utf-8")
    assert store.dump_to_file(str(path)) == 2
    assert path.read_bytes() == b"b - 2\na - 1\n"


def test_dump_csv_to_file(tmp_path):
    store = RecordStore({'He said "hi", ok': 1})
    path = tmp_path / "dump.csv"
    assert store.dump_to_file(str(path), DumpFormat.CSV) == 1
    assert path.read_text(encoding="utf-8") == 'name,count\n"He said ""hi"", ok",1\n'


def test_dump_to_unwritable_path_raises(tmp_path):
    store = RecordStore({"a": 1})
    with pytest.raises(StoreIOError) as exc:
        store.dump_to_file(str(tmp_path / "missing-dir" / "dump.txt"))
    assert exc.value.operation == "dump"
    assert store.as_dict() == {"a": 1}


def test_dump_then_load_round_trip(tmp_path):
    store = RecordStore({"widget": 3, "two words": 1, "ünïcode": 7})
    path = tmp_path / "dump.txt"
    store.dump_to_file(str(path))

    other = RecordStore({"stale": 9})
    assert other.load_from_file(str(path)) == 3
    assert other.as_dict() == store.as_dict()


def test_load_skips_blank_lines_and_trims(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("\n  widget - 3  \n\n\t\ngadget - 1\n", encoding="utf-8")
    store = RecordStore()
    assert store.load_from_file(str(path)) == 2
    assert store.as_dict() == {"widget": 3, "gadget": 1}


def test_load_replaces_instead_of_merging(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("widget - 3\n", encoding="utf-8")
    store = RecordStore({"gadget": 4, "widget": 1})
    store.load_from_file(str(path))
    assert store.as_dict() == {"widget": 3}


def test_load_repeated_name_keeps_last(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("widget - 3\nwidget - 5\n", encoding="utf-8")
    store = RecordStore()
    assert store.load_from_file(str(path)) == 1
    assert store.get("widget") == 5


def test_load_malformed_line_leaves_store_untouched(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("widget - 3\nbogus\ngadget - 1\n", encoding="utf-8")
    store = RecordStore({"keep": 2})
    with pytest.raises(RecordFormatError) as exc:
        store.load_from_file(str(path))
    assert exc.value.path == str(path)
    assert exc.value.line == "bogus"
    assert "bogus" in str(exc.value)
    assert store.as_dict() == {"keep": 2}


def test_load_csv_dump_fails_on_header(tmp_path):
    path = tmp_path / "dump.csv"
    RecordStore({"a": 1}).dump_to_file(str(path), DumpFormat.CSV)
    store = RecordStore()
    with pytest.raises(RecordFormatError) as exc:
        store.load_from_file(str(path))
    assert exc.value.line == "name,count"


def test_load_missing_file_raises_io_error(tmp_path):
    store = RecordStore({"keep": 1})
    with pytest.raises(StoreIOError) as exc:
        store.load_from_file(str(tmp_path / "nope.txt"))
    assert not isinstance(exc.value, RecordFormatError)
    assert exc.value.operation == "load"
    assert store.as_dict() == {"keep": 1}


def test_load_undecodable_file_raises_io_error(tmp_path):
    path = tmp_path / "bin.txt"
    path.write_bytes(b"\xff\xfe\x00bad - 1\n")
    store = RecordStore({"keep": 1})
    with pytest.raises(StoreIOError):
        store.load_from_file(str(path))
    assert store.as_dict() == {"keep": 1}


def test_load_empty_file_clears_store(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    store = RecordStore({"a": 1})
    assert store.load_from_file(str(path)) == 0
    assert len(store) == 0
