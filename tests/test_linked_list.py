import pytest

from bitsy import InvalidPositionError, LinkedList, LinkedNode


def build(*values):
    linked = LinkedList()
    for value in reversed(values):
        linked.add(value, 0)
    return linked


def test_add_at_head_then_get():
    linked = LinkedList()
    linked.add("v", 0)
    assert linked.get(0) == "v"
    assert len(linked) == 1


def test_construct_from_head_counts_chain():
    head = LinkedNode(1, LinkedNode(2, LinkedNode(3)))
    linked = LinkedList(head)
    assert linked.length == 3
    assert list(linked) == [1, 2, 3]
    assert linked.get_node(1) is head.next


def test_add_splices_between_existing_nodes():
    linked = build(1, 2, 3)
    linked.add(9, 1)
    assert list(linked) == [1, 9, 2, 3]
    assert linked.length == 4


def test_add_then_remove_restores_list():
    linked = build(1, 2, 3)
    before = linked.get(1)
    linked.add(7, 1)
    linked.remove(1)
    assert linked.length == 3
    assert linked.get(1) == before


def test_add_past_last_node_fails_without_change():
    linked = build(1, 2)
    with pytest.raises(InvalidPositionError):
        linked.add(5, 2)
    with pytest.raises(InvalidPositionError):
        linked.add(5, 10)
    with pytest.raises(InvalidPositionError):
        linked.add(5, -1)
    assert list(linked) == [1, 2]
    assert linked.length == 2


def test_get_out_of_range():
    linked = build(1, 2)
    with pytest.raises(InvalidPositionError):
        linked.get(2)
    with pytest.raises(InvalidPositionError):
        linked.get(-1)
    with pytest.raises(InvalidPositionError):
        LinkedList().get(0)


def test_remove_head():
    linked = build(1, 2, 3)
    linked.remove(0)
    assert list(linked) == [2, 3]
    assert linked.length == 2


def test_remove_out_of_range_keeps_length():
    linked = build(1, 2, 3)
    with pytest.raises(InvalidPositionError):
        linked.remove(5)
    # The last node has no successor, so it cannot be unlinked.
    with pytest.raises(InvalidPositionError):
        linked.remove(2)
    assert linked.length == 3
    assert list(linked) == [1, 2, 3]


def test_remove_only_node_is_refused():
    linked = build(1)
    with pytest.raises(InvalidPositionError):
        linked.remove(0)
    assert linked.length == 1
    with pytest.raises(InvalidPositionError):
        LinkedList().remove(0)
