import pytest

from dslab.records import RecordFile, StudentRecord


def _record(rollno, name="Asha", marks=25.5):
    return StudentRecord(rollno, name, 210, "DSAL", marks, 60.0)


@pytest.fixture
def store(tmp_path):
    return RecordFile(tmp_path / "records.dat")


def test_pack_round_trip():
    record = _record(7)
    assert StudentRecord.unpack(record.pack()) == record


def test_entry_size_is_fixed():
    assert len(_record(1).pack()) == 56
    assert len(_record(2, name="A").pack()) == len(_record(3, name="Bhaskar").pack())


def test_missing_file_has_no_records(store):
    assert list(store.records()) == []
    assert store.delete(1) is False
    assert store.edit(1, _record(1)) is False


def test_insert_and_list(store):
    records = [_record(1), _record(2, "Ravi"), _record(3, "Meera")]
    for record in records:
        store.insert(record)
    assert list(store.records()) == records
    assert store.path.stat().st_size == len(records) * len(records[0].pack())


def test_find(store):
    store.insert(_record(1))
    store.insert(_record(2, "Ravi"))
    assert store.find(2).name == "Ravi"
    with pytest.raises(KeyError):
        store.find(9)


def test_delete(store):
    for rollno in (1, 2, 3):
        store.insert(_record(rollno))
    assert store.delete(2) is True
    assert [r.rollno for r in store.records()] == [1, 3]
    assert store.delete(2) is False
    assert [r.rollno for r in store.records()] == [1, 3]


def test_edit_in_place(store):
    for rollno in (1, 2, 3):
        store.insert(_record(rollno))
    replacement = _record(2, "Changed", 30.0)
    assert store.edit(2, replacement) is True
    assert [r.rollno for r in store.records()] == [1, 2, 3]
    assert store.find(2) == replacement
    assert store.edit(8, replacement) is False


def test_name_too_long_rejected(store):
    with pytest.raises(ValueError):
        store.insert(_record(1, name="x" * 20))
    assert list(store.records()) == []


def test_format_contains_fields():
    text = _record(5).format()
    assert "Roll No: 5\tName: Asha" in text
    assert "Internal: 25.5\tUniversity: 60" in text