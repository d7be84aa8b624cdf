import pytest

from dsakit.linked_lists import (
    CircularLinkedList,
    DoublyLinkedList,
    SinglyLinkedList,
)


def _sample_singly():
    lst = SinglyLinkedList()
    for value in (4, 5, 6):
        lst.insert_at_tail(value)
    lst.insert_at_head(7)
    return lst


def test_singly_insertions_order():
    assert list(_sample_singly()) == [7, 4, 5, 6]


def test_singly_search():
    lst = _sample_singly()
    assert 7 in lst
    assert 9 not in lst


def test_singly_str_joins_with_spaces():
    lst = _sample_singly()
    assert str(lst) == " ".join(str(v) for v in [7, 4, 5, 6])


def test_singly_reverse_iterative():
    lst = _sample_singly()
    before = list(lst)
    lst.reverse()
    assert list(lst) == before[::-1]


def test_singly_reverse_recursive():
    lst = _sample_singly()
    before = list(lst)
    lst.reverse_recursive()
    assert list(lst) == before[::-1]


def test_singly_reverse_keeps_tail_usable():
    lst = SinglyLinkedList([1, 2, 3])
    lst.reverse()
    lst.insert_at_tail(9)
    assert list(lst) == [3, 2, 1, 9]
    lst.reverse_recursive()
    lst.insert_at_tail(8)
    assert list(lst) == [9, 1, 2, 3, 8]


def test_singly_delete_first_match():
    lst = SinglyLinkedList([1, 2, 2, 3])
    lst.delete(2)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_singly_delete_head_and_last():
    lst = SinglyLinkedList([1, 2, 3])
    lst.delete(1)
    lst.delete(3)
    assert list(lst) == [2]
    lst.insert_at_tail(4)
    assert list(lst) == [2, 4]


def test_singly_delete_missing_raises():
    lst = SinglyLinkedList([1, 2])
    with pytest.raises(ValueError):
        lst.delete(5)


def test_singly_delete_from_empty_raises():
    with pytest.raises(ValueError):
        SinglyLinkedList().delete(1)


def _sample_doubly():
    lst = DoublyLinkedList()
    for value in (1, 2, 3, 4, 5):
        lst.insert_at_tail(value)
    lst.insert_at_head(0)
    return lst


def test_doubly_insertions():
    assert list(_sample_doubly()) == [0, 1, 2, 3, 4, 5]


def test_doubly_delete_middle():
    lst = _sample_doubly()
    assert lst.delete_at(3) == 2
    assert list(lst) == [0, 1, 3, 4, 5]
    assert list(reversed(lst)) == [5, 4, 3, 1, 0]


def test_doubly_delete_head_and_tail():
    lst = _sample_doubly()
    assert lst.delete_at(1) == 0
    assert lst.delete_at(len(lst)) == 5
    assert list(lst) == [1, 2, 3, 4]
    assert list(reversed(lst)) == [4, 3, 2, 1]


def test_doubly_delete_only_element():
    lst = DoublyLinkedList([7])
    assert lst.delete_at(1) == 7
    assert list(lst) == []
    assert len(lst) == 0


@pytest.mark.parametrize("position", [0, 7, -1])
def test_doubly_delete_out_of_range(position):
    with pytest.raises(IndexError):
        _sample_doubly().delete_at(position)


def test_doubly_str_format():
    assert str(DoublyLinkedList([0, 1])) == "0 --> 1 --> NULL"
    assert str(DoublyLinkedList()) == "NULL"


def test_circular_insertions():
    lst = CircularLinkedList()
    lst.insert_at_head(1)
    for value in (2, 3, 4):
        lst.insert_at_tail(value)
    lst.insert_at_head(5)
    assert list(lst) == [5, 1, 2, 3, 4]
    assert str(lst) == "5->1->2->3->4->"
    assert len(lst) == 5


def test_circular_single_element_loops_once():
    lst = CircularLinkedList()
    lst.insert_at_tail(3)
    assert list(lst) == [3]


def test_circular_empty():
    lst = CircularLinkedList()
    assert list(lst) == []
    assert len(lst) == 0