import io

import pytest

from dslab.hashing import (
    ChainingTable,
    LinearProbingTable,
    string_hash,
)


@pytest.mark.parametrize("name", ["alice", "bob", "Zed", "x", ""])
def test_hash_in_range(name):
    assert 0 <= string_hash(name, 10) < 10


def test_anagrams_share_bucket():
    assert string_hash("abc", 10) == string_hash("cba", 10)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        string_hash("abc", 0)


@pytest.mark.parametrize("table_type", [ChainingTable, LinearProbingTable])
def test_insert_then_search_round_trip(table_type):
    table = table_type()
    entries = {"alice": 1001, "bob": 2002, "carol": 3003}
    for name, phone in entries.items():
        table.insert(name, phone)
    for name, phone in entries.items():
        result = table.search(name)
        assert result.found
        assert result.phone == phone


@pytest.mark.parametrize("table_type", [ChainingTable, LinearProbingTable])
def test_missing_name_in_empty_table(table_type):
    result = table_type().search("nobody")
    assert not result.found
    assert result.comparisons == 0


def test_chaining_newest_entry_first():
    table = ChainingTable()
    table.insert("abc", 1001)
    table.insert("cba", 2002)
    older = table.search("abc")
    newer = table.search("cba")
    assert older.comparisons == newer.comparisons + 1


def test_linear_probing_collision_costs_more():
    table = LinearProbingTable()
    table.insert("abc", 1001)
    table.insert("cba", 2002)
    first = table.search("abc")
    second = table.search("cba")
    assert second.comparisons == first.comparisons + 1
    assert second.phone == 2002


def test_linear_probing_full_table_rejects():
    table = LinearProbingTable(size=2)
    assert table.insert("a", 1)
    assert table.insert("b", 2)
    assert not table.insert("c", 3)
    assert not table.search("c").found


def test_linear_probing_search_wraps_around():
    table = LinearProbingTable(size=3)
    for name, phone in (("a", 1), ("b", 2), ("c", 3)):
        table.insert(name, phone)
    for name, phone in (("a", 1), ("b", 2), ("c", 3)):
        assert table.search(name).phone == phone
    assert table.search("d").comparisons == table.size


def test_chaining_format_shape():
    table = ChainingTable()
    table.insert("alice", 1001)
    lines = table.format().splitlines()
    assert len(lines) == table.size
    assert all(line.endswith("NULL") for line in lines)
    assert "(alice, 1001) -> NULL" in lines[string_hash("alice")]


def test_linear_probing_format_shape():
    table = LinearProbingTable()
    table.insert("alice", 1001)
    lines = table.format().splitlines()
    assert len(lines) == table.size
    index = string_hash("alice")
    assert lines[index] == f"{index}: (alice, 1001)"
    assert sum(line.endswith("NULL") for line in lines) == table.size - 1


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 alice 1001\n2 alice\n4\n"))
    assert main_result() == 0
    out = capsys.readouterr().out
    assert out.count("Found: 1001") == 2
    assert "-- Linear Probing --" in out


def main_result():
    from dslab.hashing import main

    return main([])