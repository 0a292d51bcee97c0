import pytest

from marvin.linkedlist import LinkedList, Node


def test_new_node_has_no_successor():
    node = Node("I AM CONTENT!")
    assert node.content == "I AM CONTENT!"
    assert node.next is None


def test_push_front_reverses_insertion_order():
    items = LinkedList()
    items.push_front("Node 1")
    assert list(items) == ["Node 1"]
    items.push_front("Node 2")
    items.push_front("Node 3")
    assert list(items) == ["Node 3", "Node 2", "Node 1"]


def test_push_back_keeps_insertion_order():
    items = LinkedList(["First", "Second", "Third"])
    items.push_back("New Last")
    assert list(items) == ["First", "Second", "Third", "New Last"]


def test_push_back_on_empty_list_sets_head():
    items = LinkedList()
    node = items.push_back("only")
    assert items.head is node
    assert items.last() is node


def test_size_counts_nodes():
    items = LinkedList()
    assert len(items) == 0
    items.push_back("Node 1")
    assert len(items) == 1
    items.push_back("Node 2")
    items.push_back("Node 3")
    assert len(items) == 3


def test_last_returns_final_node():
    items = LinkedList(["First", "Second", "Third", "Fourth"])
    last = items.last()
    assert last.content == "Fourth"
    assert last.next is None


def test_last_of_empty_list_is_none():
    assert LinkedList().last() is None


def test_last_follows_push_front_on_empty():
    items = LinkedList()
    items.push_front("a")
    items.push_front("b")
    assert items.last().content == "a"


def test_nodes_are_linked():
    items = LinkedList(["x", "y"])
    assert items.head.content == "x"
    assert items.head.next.content == "y"
    assert items.head.next.next is None


def test_remove_first_returns_content_and_calls_delete():
    deleted = []
    items = LinkedList(["First", "Second", "Third"])
    assert items.remove_first(deleted.append) == "First"
    assert deleted == ["First"]
    assert list(items) == ["Second", "Third"]
    assert len(items) == 2


def test_remove_first_skips_delete_for_empty_content():
    deleted = []
    items = LinkedList([None, "kept"])
    assert items.remove_first(deleted.append) is None
    assert deleted == []
    assert list(items) == ["kept"]


def test_remove_first_of_last_node_empties_list():
    items = LinkedList(["only"])
    items.remove_first()
    assert len(items) == 0
    assert items.head is None
    assert items.last() is None
    items.push_back("again")
    assert list(items) == ["again"]


def test_remove_first_from_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = LinkedList(["First", "Second", "Third"])
    items.clear(deleted.append)
    assert deleted == ["First", "Second", "Third"]
    assert items.head is None
    assert len(items) == 0
    assert list(items) == []


def test_clear_without_delete_empties_list():
    items = LinkedList([1, 2])
    items.clear()
    assert len(items) == 0
    assert items.last() is None


def test_for_each_visits_all_contents():
    contents = [["first"], ["second"], ["third"]]
    items = LinkedList(contents)

    def upper(cell):
        cell[0] = cell[0].upper()

    items.for_each(upper)
    assert [cell[0] for cell in items] == ["FIRST", "SECOND", "THIRD"]


def test_map_builds_independent_list():
    items = LinkedList(["first", "second", "third"])
    mapped = items.map(str.upper)
    assert list(mapped) == ["FIRST", "SECOND", "THIRD"]
    assert list(items) == ["first", "second", "third"]
    assert len(mapped) == len(items)
    assert mapped.head is not items.head


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(content):
        if content == "bad":
            raise ValueError(content)
        return content * 2

    items = LinkedList(["a", "b", "bad", "c"])
    with pytest.raises(ValueError):
        items.map(func, deleted.append)
    assert deleted == ["aa", "bb"]
    assert list(items) == ["a", "b", "bad", "c"]


def test_iteration_round_trip():
    contents = [3, "x", None, (1, 2)]
    assert list(LinkedList(contents)) == contents