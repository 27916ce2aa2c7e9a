import pytest

from navgraph.algorithms.priority_queue import UpdatablePriorityQueue


def test_pop_in_priority_order():
    pq = UpdatablePriorityQueue()
    pq.push("c", 3)
    pq.push("a", 1)
    pq.push("b", 2)
    assert [pq.pop() for _ in range(3)] == [("a", 1), ("b", 2), ("c", 3)]
    assert not pq
    assert len(pq) == 0


def test_bulk_load():
    pq = UpdatablePriorityQueue([("x", 5.0), ("y", 0.5), ("z", 2.0)])
    assert len(pq) == 3
    assert pq.peek() == ("y", 0.5)
    assert pq.pop() == ("y", 0.5)


def test_bulk_load_rejects_duplicates():
    with pytest.raises(ValueError, match="already queued"):
        UpdatablePriorityQueue([("x", 1), ("x", 2)])


def test_equal_priorities_pop_in_insertion_order():
    pq = UpdatablePriorityQueue()
    for item in ["first", "second", "third"]:
        pq.push(item, 1)
    assert [pq.pop()[0] for _ in range(3)] == ["first", "second", "third"]


def test_update_decreases_key():
    pq = UpdatablePriorityQueue([("a", 1), ("b", 5), ("c", 3)])
    pq.update("b", 0)
    assert pq.priority("b") == 0
    assert len(pq) == 3
    assert [pq.pop()[0] for _ in range(3)] == ["b", "a", "c"]


def test_update_increases_key():
    pq = UpdatablePriorityQueue([("a", 1), ("b", 2)])
    pq.update("a", 10)
    assert pq.pop() == ("b", 2)
    assert pq.pop() == ("a", 10)


def test_update_unknown_item_raises():
    pq = UpdatablePriorityQueue()
    with pytest.raises(KeyError):
        pq.update("ghost", 1)


def test_push_existing_item_replaces_priority():
    pq = UpdatablePriorityQueue()
    pq.push("a", 4)
    pq.push("a", 2)
    assert len(pq) == 1
    assert pq.pop() == ("a", 2)
    with pytest.raises(IndexError):
        pq.pop()


def test_discard():
    pq = UpdatablePriorityQueue([("a", 1), ("b", 2)])
    pq.discard("a")
    pq.discard("missing")
    assert "a" not in pq
    assert "b" in pq
    assert pq.peek() == ("b", 2)
    assert pq.pop() == ("b", 2)


def test_empty_queue_errors():
    pq = UpdatablePriorityQueue()
    with pytest.raises(IndexError):
        pq.pop()
    with pytest.raises(IndexError):
        pq.peek()
    with pytest.raises(KeyError):
        pq.priority("a")


def test_infinite_priorities_sort_last():
    pq = UpdatablePriorityQueue([("far", float("inf")), ("near", 0.0)])
    pq.update("far", 7.0)
    pq.push("unreachable", float("inf"))
    assert [pq.pop()[0] for _ in range(3)] == ["near", "far", "unreachable"]


def test_repr():
    assert repr(UpdatablePriorityQueue([("a", 1)])) == "UpdatablePriorityQueue(size=1)"
