import pytest

from plaquette.arraylist_core import ArrayListCore, SizeType


def make(items, capacity=8, size_type=SizeType.DYNAMIC):
    lst = ArrayListCore(capacity, size_type)
    lst.add_all(items)
    return lst


def test_new_list_is_empty_with_default_capacity():
    lst = ArrayListCore()
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.capacity() == 8


def test_add_keeps_order():
    lst = ArrayListCore()
    for value in [3, 1, 2]:
        lst.add(value)
    assert list(lst) == [3, 1, 2]
    assert not lst.is_empty()


def test_dynamic_list_grows_by_half():
    lst = ArrayListCore(8)
    for value in range(8):
        lst.add(value)
    assert lst.capacity() == 12
    assert list(lst) == list(range(8))


def test_dynamic_growth_keeps_room_for_all_items():
    lst = ArrayListCore(1)
    for value in range(50):
        lst.add(value)
    assert len(lst) == 50
    assert lst.capacity() >= len(lst)


def test_fixed_list_rejects_overflow():
    lst = ArrayListCore(2, SizeType.FIXED)
    lst.add("a")
    lst.add("b")
    with pytest.raises(OverflowError):
        lst.add("c")
    assert list(lst) == ["a", "b"]


def test_add_all_fixed_overflow_leaves_list_unchanged():
    lst = make([1, 2], capacity=3, size_type=SizeType.FIXED)
    with pytest.raises(OverflowError):
        lst.add_all([3, 4])
    assert list(lst) == [1, 2]


def test_add_all_dynamic_grows_enough():
    lst = make(range(20), capacity=2)
    assert list(lst) == list(range(20))
    assert lst.capacity() >= 20


def test_insert_in_middle_and_end():
    lst = make([1, 3])
    lst.insert(1, 2)
    lst.insert(3, 4)
    assert list(lst) == [1, 2, 3, 4]


def test_insert_out_of_range():
    lst = make([1])
    with pytest.raises(IndexError):
        lst.insert(2, 5)


def test_insert_into_full_fixed_list():
    lst = make([1, 2], capacity=2, size_type=SizeType.FIXED)
    with pytest.raises(OverflowError):
        lst.insert(0, 0)


def test_insert_all():
    lst = make([1, 4])
    lst.insert_all(1, [2, 3])
    assert list(lst) == [1, 2, 3, 4]


def test_insert_all_out_of_range():
    lst = make([1])
    with pytest.raises(IndexError):
        lst.insert_all(5, [2])


def test_remove_item_first_occurrence():
    lst = make([1, 2, 1])
    assert lst.remove_item(1) is True
    assert list(lst) == [2, 1]
    assert lst.remove_item(9) is False
    assert list(lst) == [2, 1]


def test_remove_by_index():
    lst = make(["a", "b", "c"])
    lst.remove(1)
    assert list(lst) == ["a", "c"]
    with pytest.raises(IndexError):
        lst.remove(2)


def test_remove_if():
    lst = make(range(6))
    assert lst.remove_if(lambda x: x % 2 == 0) is True
    assert list(lst) == [1, 3, 5]
    assert lst.remove_if(lambda x: x > 100) is False


def test_remove_range():
    lst = make(range(6))
    lst.remove_range(1, 4)
    assert list(lst) == [0, 4, 5]


@pytest.mark.parametrize("bounds", [(3, 1), (0, 10), (-1, 2)])
def test_remove_range_invalid(bounds):
    lst = make(range(4))
    with pytest.raises(IndexError):
        lst.remove_range(*bounds)
    assert list(lst) == [0, 1, 2, 3]


def test_retain_all():
    lst = make([1, 2, 3, 4])
    other = make([2, 4, 6])
    assert lst.retain_all(other) is True
    assert list(lst) == [2, 4]
    assert lst.retain_all([2, 4]) is False


def test_clear_keeps_capacity():
    lst = make(range(10))
    capacity = lst.capacity()
    lst.clear()
    assert len(lst) == 0
    assert lst.capacity() == capacity


def test_get_and_getitem():
    lst = make(["x", "y"])
    assert lst.get(1) == "y"
    assert lst[0] == "x"
    with pytest.raises(IndexError):
        lst.get(2)
    with pytest.raises(IndexError):
        lst[-1]


def test_get_as_string():
    lst = make([42, 1.5])
    assert lst.get_as_string(0) == "42"
    assert lst.get_as_string(1) == "1.5"


def test_contains_and_index_of():
    lst = make([5, 6, 5])
    assert lst.contains(6)
    assert 5 in lst
    assert 7 not in lst
    assert lst.index_of(5) == 0
    assert lst.index_of(6) == 1
    assert lst.index_of(7) == -1


def test_set():
    lst = make([1, 2])
    lst.set(1, 20)
    assert list(lst) == [1, 20]
    with pytest.raises(IndexError):
        lst.set(2, 3)


def test_iteration_is_snapshot():
    lst = make([1, 2, 3])
    seen = []
    for item in lst:
        seen.append(item)
        if item == 1:
            lst.add(4)
    assert seen == [1, 2, 3]
    assert len(lst) == 4


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayListCore(-1)