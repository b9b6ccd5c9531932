import pytest

from labworks.linked_list import DoublyLinkedList, Node


def make(values):
    lst = DoublyLinkedList()
    for value in values:
        lst.insert(value)
    return lst


def contents(lst):
    return [node.data for node in lst]


def check_links(lst):
    nodes = list(lst)
    if nodes:
        assert nodes[0].previous is None
    for earlier, later in zip(nodes, nodes[1:]):
        assert earlier.next is later
        assert later.previous is earlier
    assert len(nodes) == len(lst)


def test_append_keeps_order():
    lst = make([1, 2, 3])
    assert contents(lst) == [1, 2, 3]
    assert len(lst) == 3
    check_links(lst)


def test_empty_list():
    lst = DoublyLinkedList()
    assert len(lst) == 0
    assert contents(lst) == []
    assert not lst.search(1)


def test_insert_at_zero_becomes_head():
    lst = make([1, 2, 3])
    lst.insert(9, 0)
    assert contents(lst) == [9, 1, 2, 3]
    assert lst[0].data == 9
    check_links(lst)


def test_insert_in_middle():
    lst = make([1, 2, 3])
    lst.insert(9, 2)
    assert contents(lst) == [1, 2, 9, 3]
    check_links(lst)


def test_insert_past_end_appends():
    lst = make([1, 2])
    lst.insert(9, 50)
    assert contents(lst) == [1, 2, 9]
    assert len(lst) == 3
    check_links(lst)


def test_insert_with_index_into_empty():
    lst = DoublyLinkedList()
    lst.insert(4, 3)
    assert contents(lst) == [4]
    assert len(lst) == 1


def test_delete_head_middle_tail():
    lst = make([1, 2, 3, 4])
    assert lst.delete(1)
    assert contents(lst) == [2, 3, 4]
    check_links(lst)
    assert lst.delete(3)
    assert contents(lst) == [2, 4]
    check_links(lst)
    assert lst.delete(4)
    assert contents(lst) == [2]
    check_links(lst)
    assert lst.delete(2)
    assert contents(lst) == []
    assert len(lst) == 0


def test_delete_missing_returns_false():
    lst = make([1, 2])
    assert not lst.delete(5)
    assert len(lst) == 2


def test_delete_removes_first_match_only():
    lst = make([1, 2, 1])
    assert lst.delete(1)
    assert contents(lst) == [2, 1]


def test_search_and_contains():
    lst = make([1, 2, 3])
    assert lst.search(2)
    assert 3 in lst
    assert not lst.search(7)


def test_getitem_returns_nodes():
    lst = make(["a", "b", "c"])
    assert [lst[i].data for i in range(len(lst))] == ["a", "b", "c"]


@pytest.mark.parametrize("index", [3, 10, -1])
def test_getitem_out_of_range(index):
    lst = make([1, 2, 3])
    with pytest.raises(IndexError):
        lst[index]
    assert contents(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_node_defaults():
    node = Node(5)
    assert (node.data, node.previous, node.next) == (5, None, None)