import pytest

from stlkit.hashset import HashSet


def test_basic_operations():
    s = HashSet()
    s.add(1)
    s.add(2)
    s.add(3)
    assert 1 in s
    assert 2 in s
    assert 3 in s
    assert 4 not in s
    assert len(s) == 3

    s.remove(2)
    assert 2 not in s
    assert len(s) == 2
    assert len(s) > 0

    s.clear()
    assert len(s) == 0


def test_remove_missing_is_ignored():
    s = HashSet([1])
    s.remove(5)
    assert s.to_list() == [1]


def test_set_operations():
    set1 = HashSet([1, 2, 3])
    set2 = HashSet([2, 3, 4])

    union = set1.union(set2)
    assert union == HashSet([1, 2, 3, 4])

    intersection = set1.intersection(set2)
    assert 2 in intersection and 3 in intersection
    assert len(intersection) == 2

    difference = set1.difference(set2)
    assert 1 in difference
    assert 2 not in difference and 3 not in difference

    symmetric = set1.symmetric_difference(set2)
    assert symmetric == HashSet([1, 4])


def test_from_iterable_removes_duplicates():
    s = HashSet([1, 2, 2, 3, 3, 3])
    assert len(s) == 3
    assert sorted(s) == [1, 2, 3]


def test_functional_operations():
    s = HashSet([1, 2, 3, 4, 5])
    evens = s.filter(lambda x: x % 2 == 0)
    assert len(evens) == 2
    assert 2 in evens and 4 in evens

    assert s.any(lambda x: x % 2 == 0) is True
    assert s.any(lambda x: x < 0) is False
    assert s.all(lambda x: x > 0) is True
    assert s.all(lambda x: x % 2 == 0) is False


def test_copy_is_independent():
    original = HashSet([1, 2, 3])
    cloned = original.copy()
    assert original == cloned

    original.add(4)
    assert 4 not in cloned
    cloned.add(5)
    assert 5 not in original


def test_equality_ignores_order():
    set1 = HashSet([1, 2, 3])
    set2 = HashSet([3, 2, 1])
    assert set1 == set2
    set2.add(4)
    assert not set1 == set2


def test_subset_superset_disjoint():
    small = HashSet([1, 2])
    big = HashSet([1, 2, 3])
    other = HashSet([7, 8])
    assert small.is_subset(big) is True
    assert big.is_subset(small) is False
    assert big.is_superset(small) is True
    assert small.is_disjoint(other) is True
    assert small.is_disjoint(big) is False


def test_empty_set_predicates():
    empty = HashSet()
    assert empty.all(lambda x: False) is True
    assert empty.any(lambda x: True) is False


def test_to_list_and_repr_keep_insertion_order():
    s = HashSet(["b", "a", "c"])
    assert s.to_list() == ["b", "a", "c"]
    assert repr(s) == "HashSet(['b', 'a', 'c'])"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(HashSet([1]))