import pytest

from stlkit.ringdeque import Deque


def test_basic_operations():
    deque = Deque(capacity=10)
    deque.push_front(1)
    deque.push_back(2)
    deque.push_front(0)
    deque.push_back(3)
    assert len(deque) == 4
    assert deque.front() == 0
    assert deque.back() == 3
    assert deque.pop_front() == 0
    assert len(deque) == 3
    assert deque.pop_back() == 3
    assert len(deque) == 2
    assert deque.to_list() == [1, 2]


def test_empty_operations():
    deque = Deque(capacity=10)
    assert len(deque) == 0
    with pytest.raises(IndexError):
        deque.front()
    with pytest.raises(IndexError):
        deque.back()
    with pytest.raises(IndexError):
        deque.pop_front()
    with pytest.raises(IndexError):
        deque.pop_back()


def test_auto_resize():
    deque = Deque(capacity=2)
    for i in range(20):
        deque.push_back(i)
    assert len(deque) == 20
    assert deque.capacity() == 32
    assert [deque.pop_front() for _ in range(20)] == list(range(20))
    assert len(deque) == 0


def test_circular_buffer():
    deque = Deque(capacity=4)
    for i in range(4):
        deque.push_back(i)
    for i in range(4):
        deque.pop_front()
        deque.push_back(i + 10)
    assert deque.capacity() == 4
    assert [deque.pop_front() for _ in range(4)] == [10, 11, 12, 13]


def test_clear():
    deque = Deque(capacity=10)
    for i in range(5):
        deque.push_back(i)
    deque.clear()
    assert len(deque) == 0
    assert deque.to_list() == []
    assert deque.capacity() == 10


def test_from_items():
    items = [1, 2, 3, 4, 5]
    deque = Deque(items)
    assert len(deque) == len(items)
    assert deque.capacity() == 8
    assert [deque.pop_front() for _ in items] == items


def test_default_capacities():
    assert Deque().capacity() == 16
    assert Deque(capacity=0).capacity() == 16
    assert Deque([7]).capacity() == 1


def test_indexing():
    deque = Deque([1, 2, 3])
    assert deque[1] == 2
    deque[1] = 20
    assert deque.to_list() == [1, 20, 3]
    with pytest.raises(IndexError):
        deque[3]
    with pytest.raises(IndexError):
        deque[-1]
    with pytest.raises(IndexError):
        deque[5] = 1


def test_example_walkthrough():
    deque = Deque(capacity=8)
    deque.push_back(1)
    deque.push_back(2)
    deque.push_front(0)
    deque.push_back(3)
    deque.push_front(-1)
    assert deque.to_list() == [-1, 0, 1, 2, 3]
    assert deque.pop_front() == -1
    assert deque.pop_back() == 3
    assert deque[1] == 1
    deque.insert(1, 10)
    assert deque.to_list() == [0, 10, 1, 2]
    deque.rotate_left(1)
    assert deque.to_list() == [10, 1, 2, 0]
    deque.rotate_right(1)
    assert deque.to_list() == [0, 10, 1, 2]
    assert deque.filter(lambda x: x > 0).to_list() == [10, 1, 2]


def test_insert_and_remove_across_wrap():
    deque = Deque(capacity=4)
    for value in (1, 2, 3):
        deque.push_back(value)
    deque.pop_front()
    deque.pop_front()
    deque.push_back(4)
    deque.push_back(5)
    assert deque.to_list() == [3, 4, 5]
    deque.insert(1, 9)
    assert deque.to_list() == [3, 9, 4, 5]
    deque.insert(2, 8)
    assert deque.to_list() == [3, 9, 8, 4, 5]
    assert deque.capacity() == 8
    assert deque.remove(2) == 8
    assert deque.to_list() == [3, 9, 4, 5]
    assert deque.remove(0) == 3
    assert deque.remove(2) == 5
    assert deque.to_list() == [9, 4]


def test_insert_remove_bounds():
    deque = Deque([1, 2])
    with pytest.raises(IndexError):
        deque.insert(3, 0)
    with pytest.raises(IndexError):
        deque.insert(-1, 0)
    with pytest.raises(IndexError):
        deque.remove(2)
    deque.insert(2, 3)
    assert deque.to_list() == [1, 2, 3]


def test_rotation_with_large_and_negative_counts():
    deque = Deque([1, 2, 3, 4])
    deque.rotate_left(5)
    assert deque.to_list() == [2, 3, 4, 1]
    deque.rotate_left(-1)
    assert deque.to_list() == [1, 2, 3, 4]
    deque.rotate_right(6)
    assert deque.to_list() == [3, 4, 1, 2]


def test_reverse_and_swap():
    deque = Deque(capacity=4)
    for value in (0, 1, 2):
        deque.push_back(value)
    deque.pop_front()
    deque.push_back(3)
    deque.push_back(4)
    deque.reverse()
    assert deque.to_list() == [4, 3, 2, 1]
    deque.swap(0, 3)
    assert deque.to_list() == [1, 3, 2, 4]
    with pytest.raises(IndexError):
        deque.swap(0, 4)


def test_reserve_and_shrink():
    deque = Deque([1, 2, 3], capacity=4)
    deque.reserve(10)
    assert deque.capacity() == 10
    deque.reserve(5)
    assert deque.capacity() == 10
    deque.shrink_to_fit()
    assert deque.capacity() == 3
    assert deque.to_list() == [1, 2, 3]
    deque.push_back(4)
    assert deque.to_list() == [1, 2, 3, 4]
    assert deque.capacity() == 6


def test_any_all_copy_equality():
    deque = Deque([2, 4, 6])
    assert deque.all(lambda x: x % 2 == 0)
    assert not deque.any(lambda x: x > 10)
    clone = deque.copy()
    assert clone == deque
    clone.push_back(8)
    assert clone != deque
    assert deque.to_list() == [2, 4, 6]


def test_sliding_window_maximum():
    numbers = [1, 3, -1, -3, 5, 3, 6, 7]
    k = 3
    window = Deque(capacity=len(numbers))
    result = []
    for i, num in enumerate(numbers):
        if len(window) and window.front() <= i - k:
            window.pop_front()
        while len(window) and numbers[window.back()] < num:
            window.pop_back()
        window.push_back(i)
        if i >= k - 1:
            result.append(numbers[window.front()])
    assert result == [3, 3, 5, 5, 6, 7]