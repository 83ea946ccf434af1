import pytest

from cookbook.slist import SList, run_list_test


def test_push_and_pop_front():
    values = SList()
    values.push_front(1)
    values.push_front(2)
    assert list(values) == [2, 1]
    assert values.pop_front() == 2
    assert len(values) == 1


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        SList().pop_front()


def test_construct_keeps_order():
    assert list(SList([3, 1, 2])) == [3, 1, 2]


def test_find_and_erase_after():
    values = SList([777, 776, 775])
    node = values.find(777)
    assert node.value == 777
    assert values.erase_after(node) == 776
    assert list(values) == [777, 775]
    assert node.value == 777


def test_find_missing_returns_none():
    assert SList([1, 2]).find(5) is None


def test_erase_after_last_raises():
    values = SList([1])
    with pytest.raises(ValueError):
        values.erase_after(values.find(1))


def test_clear():
    values = SList([1, 2, 3])
    values.clear()
    assert len(values) == 0
    assert list(values) == []


def test_run_list_test_erases_776():
    values = run_list_test(50, 1000)
    contents = list(values)
    assert 776 not in contents
    position = contents.index(777)
    assert contents[position + 1] == 775
    assert contents.count(0) == 50 + 1
    assert len(values) == len(contents)


def test_run_list_test_needs_777():
    with pytest.raises(LookupError):
        run_list_test(10, 500)