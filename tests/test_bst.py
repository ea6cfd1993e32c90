from dataclasses import dataclass

import pytest

from stlkit.bst import BST

VALUES = [5, 3, 7, 2, 4, 6, 8]
EXAMPLE = [5, 3, 7, 1, 9, 4, 6, 2, 8]


def make(values):
    return BST(lambda a, b: a < b, values)


def test_basic_operations():
    bst = BST(lambda a, b: a < b)
    for v in VALUES:
        bst.insert(v)
    assert len(bst) == len(VALUES)
    for v in VALUES:
        assert bst.search(v)
    assert bst.search(99) is False
    assert bst.min() == 2
    assert bst.max() == 8


def test_remove():
    bst = make(VALUES)
    bst.delete(2)
    assert 2 not in bst
    assert len(bst) == len(VALUES) - 1
    bst.delete(3)
    assert 3 not in bst
    bst.delete(7)
    assert 7 not in bst
    bst.delete(5)
    assert 5 not in bst
    assert bst.in_order() == [4, 6, 8]


def test_delete_missing_raises():
    bst = make(VALUES)
    with pytest.raises(KeyError):
        bst.delete(42)
    assert len(bst) == len(VALUES)


def test_from_items():
    bst = make(VALUES)
    assert len(bst) == len(VALUES)
    assert all(v in bst for v in VALUES)


def test_duplicates_ignored():
    bst = make([1, 1, 2, 2])
    assert len(bst) == 2
    assert bst.in_order() == [1, 2]


def test_height():
    bst = BST(lambda a, b: a < b)
    assert bst.height() == -1
    bst.insert(1)
    assert bst.height() == 0
    bst.insert(2)
    bst.insert(3)
    assert bst.height() == 2


def test_is_empty_and_clear():
    bst = make(VALUES)
    assert len(bst) == 7
    bst.clear()
    assert len(bst) == 0
    assert bst.in_order() == []


@dataclass(frozen=True)
class Person:
    name: str
    age: int


def test_custom_type():
    bst = BST(lambda a, b: a.age < b.age)
    people = [Person("Alice", 30), Person("Bob", 25), Person("Charlie", 35)]
    for p in people:
        bst.insert(p)
    assert len(bst) == len(people)
    assert bst.min().name == "Bob"
    assert bst.max().name == "Charlie"


def test_traversals():
    bst = make(EXAMPLE)
    assert bst.in_order() == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert bst.pre_order() == [5, 3, 1, 2, 4, 7, 6, 9, 8]
    assert bst.post_order() == [2, 1, 4, 3, 6, 8, 9, 7, 5]
    assert bst.level_order() == [5, 3, 7, 1, 4, 6, 9, 2, 8]
    assert list(bst) == bst.in_order()


def test_floor_and_ceiling():
    bst = make([1, 3, 5, 7, 9])
    assert bst.floor(4) == 3
    assert bst.floor(5) == 5
    assert bst.ceiling(4) == 5
    assert bst.ceiling(9) == 9
    with pytest.raises(KeyError):
        bst.floor(0)
    with pytest.raises(KeyError):
        bst.ceiling(10)


def test_delete_root_then_queries():
    bst = make(EXAMPLE)
    bst.delete(5)
    assert bst.in_order() == [1, 2, 3, 4, 6, 7, 8, 9]
    assert bst.level_order()[0] == 6
    assert bst.range(3, 7) == [3, 4, 6, 7]
    assert bst.successor(4) == 6
    assert bst.predecessor(6) == 4


def test_successor_predecessor_bounds():
    bst = make(EXAMPLE)
    assert bst.successor(9 - 1) == 9
    assert bst.predecessor(2) == 1
    with pytest.raises(KeyError):
        bst.successor(9)
    with pytest.raises(KeyError):
        bst.predecessor(1)


def test_rank_and_select():
    bst = make([1, 3, 5, 7, 9])
    assert bst.rank(3) == 1
    assert bst.rank(6) == 3
    assert bst.select(0) == 1
    assert bst.select(2) == 5
    with pytest.raises(IndexError):
        bst.select(5)
    with pytest.raises(IndexError):
        bst.select(-1)


def test_min_max_empty_raise():
    bst = BST()
    with pytest.raises(ValueError):
        bst.min()
    with pytest.raises(ValueError):
        bst.max()


def test_is_balanced():
    assert make(EXAMPLE).is_balanced() is True
    assert make([1, 2, 3]).is_balanced() is False
    assert BST().is_balanced() is True


def test_filter_copy_and_equality():
    bst = make(EXAMPLE)
    evens = bst.filter(lambda x: x % 2 == 0)
    assert evens.in_order() == [2, 4, 6, 8]

    clone = bst.copy()
    assert clone == bst
    clone.insert(10)
    assert not clone == bst
    assert 10 not in bst


def test_default_ordering_and_repr():
    bst = BST(items=["b", "a", "c"])
    assert bst.in_order() == ["a", "b", "c"]
    assert repr(bst) == "BST(['a', 'b', 'c'])"


def test_deep_sorted_insertion():
    bst = BST(items=range(3000))
    assert len(bst) == 3000
    assert bst.height() == 2999
    assert bst.select(1500) == 1500
    bst.delete(0)
    assert bst.min() == 1