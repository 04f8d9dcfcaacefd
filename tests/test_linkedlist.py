import pytest

from ftkit.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["node1", "node2", "node3"])
    assert list(lst) == ["node1", "node2", "node3"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ("node1", "node2", "node3"):
        lst.push_front(item)
    assert list(lst) == ["node3", "node2", "node1"]
    assert lst.last().content == "node1"


def test_push_back_then_last():
    lst = LinkedList()
    lst.push_front("node1")
    lst.push_front("node2")
    lst.push_back("node3")
    assert lst.last().content == "node3"
    assert list(lst) == ["node2", "node1", "node3"]
    assert len(lst) == 3


def test_push_returns_linked_nodes():
    lst = LinkedList()
    first = lst.push_back("a")
    second = lst.push_back("b")
    assert isinstance(first, Node)
    assert first.next is second
    assert second.next is None
    assert lst.head is first


def test_last_of_single_node_is_head():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last() is lst.head


def test_none_content_is_stored():
    lst = LinkedList([None, None])
    assert len(lst) == 2
    assert list(lst) == [None, None]


def test_for_each_visits_in_order():
    lst = LinkedList(["node1", "node2", "node3"])
    seen = []
    lst.for_each(seen.append)
    assert seen == ["node1", "node2", "node3"]


def test_for_each_on_empty_list_calls_nothing():
    seen = []
    LinkedList().for_each(seen.append)
    assert seen == []


def test_map_builds_new_list():
    lst = LinkedList(["node1", "node2", "node3"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["NODE1", "NODE2", "NODE3"]
    assert list(lst) == ["node1", "node2", "node3"]
    assert len(mapped) == len(lst)


def test_map_failure_deletes_made_contents_and_raises():
    deleted = []

    def f(content):
        if content == "node3":
            raise RuntimeError("boom")
        return content.upper()

    lst = LinkedList(["node1", "node2", "node3"])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == ["NODE1", "NODE2"]
    assert list(lst) == ["node1", "node2", "node3"]


def test_map_failure_without_delete_still_raises():
    lst = LinkedList([1, 0])
    with pytest.raises(ZeroDivisionError):
        lst.map(lambda x: 1 // x)


def test_clear_calls_delete_and_empties():
    deleted = []
    lst = LinkedList(["node1", "node2", "node3"])
    lst.clear(deleted.append)
    assert deleted == ["node1", "node2", "node3"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_then_reuse():
    lst = LinkedList(["x", "y"])
    lst.clear()
    lst.push_back("z")
    assert list(lst) == ["z"]
    assert lst.last() is lst.head


def test_repr_shows_contents():
    assert repr(LinkedList(["node1"])) == "LinkedList(['node1'])"