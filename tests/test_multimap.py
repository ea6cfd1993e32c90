import pytest

from stlkit.multimap import Entry, MultiMap


@pytest.fixture
def sample():
    mm = MultiMap()
    mm.put("a", 1)
    mm.put("a", 2)
    mm.put("b", 3)
    return mm


def test_basic_operations():
    mm = MultiMap()
    mm.put("fruits", 1)
    mm.put("fruits", 2)
    mm.put("vegetables", 3)
    assert mm.get("fruits") == [1, 2]
    assert mm.get("vegetables") == [3]
    assert mm.get("grains") == []


def test_get_returns_copy(sample):
    values = sample.get("a")
    values.append(99)
    assert sample.get("a") == [1, 2]


def test_get_first_last():
    mm = MultiMap()
    for value in (1, 2, 3):
        mm.put("test", value)
    assert mm.get_first("test") == 1
    assert mm.get_last("test") == 3
    with pytest.raises(KeyError):
        mm.get_first("nonexistent")
    with pytest.raises(KeyError):
        mm.get_last("nonexistent")


def test_remove_operations():
    mm = MultiMap()
    for value in (1, 2, 3):
        mm.put("test", value)
    mm.put("other", 4)
    mm.remove("test", 2)
    assert mm.get("test") == [1, 3]
    mm.remove_all("test")
    assert not mm.contains_key("test")
    assert mm.contains_key("other")


def test_remove_last_value_drops_key():
    mm = MultiMap()
    mm.put("k", 1)
    mm.remove("k", 1)
    assert "k" not in mm
    assert mm.key_count() == 0


def test_remove_missing_raises(sample):
    with pytest.raises(KeyError):
        sample.remove("a", 42)
    with pytest.raises(KeyError):
        sample.remove("zzz", 1)
    with pytest.raises(KeyError):
        sample.remove_all("zzz")


def test_contains_operations():
    mm = MultiMap()
    mm.put("test", 1)
    mm.put("test", 2)
    assert mm.contains_key("test")
    assert not mm.contains_key("nonexistent")
    assert "test" in mm
    assert mm.contains_value(1)
    assert not mm.contains_value(3)
    assert mm.contains_entry("test", 1)
    assert not mm.contains_entry("test", 3)


def test_size_operations(sample):
    assert len(sample) == 3
    assert sample.key_count() == 2
    assert sample.value_count("a") == 2
    assert sample.value_count("missing") == 0


def test_collections(sample):
    assert sorted(sample.keys()) == ["a", "b"]
    assert sorted(sample.values()) == [1, 2, 3]
    assert sorted(sample.unique_values()) == [1, 2, 3]
    entries = sample.entries()
    assert len(entries) == 3
    assert set(entries) == {Entry("a", 1), Entry("a", 2), Entry("b", 3)}


def test_unique_values_removes_duplicates():
    mm = MultiMap()
    mm.put("x", 1)
    mm.put("y", 1)
    mm.put("y", 2)
    assert sorted(mm.unique_values()) == [1, 2]


def test_conversions(sample):
    single = sample.to_dict()
    assert single == {"a": 2, "b": 3}
    lists = sample.to_dict_of_lists()
    assert lists == {"a": [1, 2], "b": [3]}
    lists["a"].append(7)
    assert sample.get("a") == [1, 2]


def test_clear_and_empty():
    mm = MultiMap()
    assert len(mm) == 0
    mm.put("test", 1)
    assert len(mm) == 1
    mm.clear()
    assert len(mm) == 0
    assert mm.keys() == []


def test_filter():
    mm = MultiMap()
    mm.put("even", 2)
    mm.put("even", 4)
    mm.put("odd", 1)
    mm.put("odd", 3)
    even_only = mm.filter(lambda k, v: v % 2 == 0)
    assert len(even_only) == 2
    assert even_only.get("even") == [2, 4]
    even_key = mm.filter_keys(lambda k: k == "even")
    assert len(even_key) == 2
    assert even_key.keys() == ["even"]
    odd_values = mm.filter_values(lambda v: v % 2 != 0)
    assert len(odd_values) == 2
    assert odd_values.get("odd") == [1, 3]


def test_equality_ignores_value_order():
    first = MultiMap()
    first.put_all("a", [1, 2, 2])
    second = MultiMap()
    second.put_all("a", [2, 1, 2])
    assert first == second
    second.put("a", 3)
    assert first != second


def test_copy_is_independent(sample):
    clone = sample.copy()
    assert clone == sample
    clone.put("c", 9)
    assert "c" not in sample


def test_sorted_keys_and_values():
    mm = MultiMap()
    mm.put_all("b", [3, 1, 2])
    mm.put("a", 5)
    mm.put("c", 0)
    assert mm.sorted_keys() == ["a", "b", "c"]
    assert mm.sorted_keys(reverse=True) == ["c", "b", "a"]
    assert mm.sorted_values("b") == [1, 2, 3]
    assert mm.sorted_values("b", key=lambda v: -v) == [3, 2, 1]


def test_put_all_appends_in_order():
    mm = MultiMap()
    mm.put("k", 0)
    mm.put_all("k", [1, 2])
    assert mm.get("k") == [0, 1, 2]