import pytest

from dstructs.hashtable import (
    TABLE_SIZE,
    IntHashMap,
    Probing,
    WordTable,
    hash_word,
    load_dictionary,
)


def test_default_table_size():
    assert TABLE_SIZE == 59999
    assert WordTable().size == 59999


def test_hash_word_empty_is_zero():
    assert hash_word("") == 0


@pytest.mark.parametrize("word", ["a", "apple", "zebra", "hashing"])
def test_hash_word_in_range(word):
    assert 0 <= hash_word(word, 7) < 7
    assert hash_word(word) == hash_word(word)


@pytest.mark.parametrize("probing", list(Probing))
def test_insert_and_search(probing):
    table = WordTable(probing=probing)
    for word in ["cat", "dog", "bird"]:
        table.insert(word)
    assert "cat" in table
    assert "dog" in table
    assert "fish" not in table
    assert len(table) == 3


@pytest.mark.parametrize("probing", list(Probing))
def test_collisions_are_resolved(probing):
    assert hash_word("a", 7) == hash_word("h", 7)
    table = WordTable(size=7, probing=probing)
    table.insert("a")
    table.insert("h")
    assert "a" in table
    assert "h" in table
    assert sorted(table) == ["a", "h"]


def test_discard_removes_word():
    table = WordTable(size=11)
    table.insert("word")
    table.discard("word")
    assert "word" not in table
    assert len(table) == 0


def test_discard_missing_leaves_table():
    table = WordTable(size=11)
    table.insert("word")
    table.discard("other")
    assert "word" in table


def test_discard_breaks_probe_chain():
    table = WordTable(size=7)
    table.insert("a")
    table.insert("h")
    table.discard("a")
    assert "h" not in table
    assert len(table) == 1


def test_full_table_overflows():
    table = WordTable(size=3)
    for word in ["x", "y", "z"]:
        table.insert(word)
    with pytest.raises(OverflowError):
        table.insert("w")


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        WordTable().insert("")


def test_load_dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("3\napple\nbanana\ncherry\n")
    table = load_dictionary(path, Probing.QUADRATIC)
    assert table.probing is Probing.QUADRATIC
    assert sorted(table) == ["apple", "banana", "cherry"]


def test_load_dictionary_short(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("4\napple\nbanana\n")
    with pytest.raises(ValueError):
        load_dictionary(path)


def test_int_map_insert_get():
    table = IntHashMap()
    table.insert(3, 30)
    table.insert(13, 130)
    assert table.get(3) == 30
    assert table.get(13) == 130
    assert table.get(23) is None
    assert table.get(23, -1) == -1
    assert len(table) == 2


def test_int_map_update_keeps_size():
    table = IntHashMap()
    table.insert(5, 1)
    table.insert(5, 2)
    assert table.get(5) == 2
    assert len(table) == 1


def test_int_map_delete():
    table = IntHashMap()
    table.insert(1, 10)
    table.insert(11, 110)
    table.delete(1)
    assert 1 not in table
    assert table.get(11) == 110
    assert len(table) == 1


def test_int_map_delete_missing():
    with pytest.raises(KeyError):
        IntHashMap().delete(4)


def test_int_map_reuses_tombstone():
    table = IntHashMap(capacity=2)
    table.insert(0, 1)
    table.insert(1, 2)
    table.delete(0)
    table.insert(2, 3)
    assert table.get(2) == 3
    assert len(table) == 2


def test_int_map_full():
    table = IntHashMap(capacity=2)
    table.insert(0, 0)
    table.insert(1, 1)
    with pytest.raises(OverflowError):
        table.insert(2, 2)