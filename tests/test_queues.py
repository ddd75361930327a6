import pytest

from coursebench.queues import (
    ArrayQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    RecursiveArrayQueue,
    RecursiveLinkedQueue,
)


def test_dequeue_is_first_in_first_out():
    for q in (ArrayQueue(10), RecursiveArrayQueue(10), LinkedQueue(), RecursiveLinkedQueue()):
        for value in [1, 2, 3]:
            q.enqueue(value)
        assert q.peek() == 1
        assert [q.dequeue(), q.dequeue(), q.dequeue()] == [1, 2, 3]
        assert q.is_empty()


def test_empty_queue_raises():
    for q in (ArrayQueue(10), RecursiveArrayQueue(10), LinkedQueue(), RecursiveLinkedQueue()):
        with pytest.raises(QueueEmptyError, match="Queue is empty! Please enqueue before dequeuing"):
            q.dequeue()
        with pytest.raises(QueueEmptyError):
            q.peek()


def test_array_queue_full():
    for q in (ArrayQueue(2), RecursiveArrayQueue(2)):
        q.enqueue("a")
        q.enqueue("b")
        with pytest.raises(QueueFullError, match="Queue is full! Please dequeue before enqueueing"):
            q.enqueue("c")
        assert q.dequeue() == "a"
        q.enqueue("c")
        assert list(q) == ["b", "c"]


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayQueue(-3)


def test_array_queue_reuse_after_draining():
    for q in (ArrayQueue(3), RecursiveArrayQueue(3)):
        q.enqueue(1)
        q.enqueue(2)
        q.dequeue()
        q.dequeue()
        q.enqueue(3)
        assert list(q) == [3]
        assert len(q) == 1
        assert q.peek() == 3


def test_iteration_and_rendering_front_to_rear():
    for q in (ArrayQueue(10), RecursiveArrayQueue(10), LinkedQueue(), RecursiveLinkedQueue()):
        for value in [7, 8, 9]:
            q.enqueue(value)
        assert list(q) == [7, 8, 9]
        assert str(q) == "7 8 9"
        assert len(q) == 3


def test_array_copy_is_independent():
    pairs = [(ArrayQueue(6), ArrayQueue(1)), (RecursiveArrayQueue(6), RecursiveArrayQueue(1))]
    for src, dest in pairs:
        for value in range(4):
            src.enqueue(value)
        dest.copy_from(src)
        assert list(dest) == list(src)
        assert dest.max_size == src.max_size
        assert dest.dequeue() == src.peek()
        assert len(src) == 4


def test_array_clear_drops_capacity():
    for q in (ArrayQueue(3), RecursiveArrayQueue(3)):
        q.enqueue(1)
        q.clear()
        assert q.is_empty()
        assert q.max_size == 0
        with pytest.raises(QueueFullError):
            q.enqueue(1)


def test_linked_clear_then_reuse():
    for q in (LinkedQueue(), RecursiveLinkedQueue()):
        for value in range(5):
            q.enqueue(value)
        q.clear()
        assert len(q) == 0
        assert list(q) == []
        q.enqueue("x")
        q.enqueue("y")
        assert q.dequeue() == "x"
        assert list(q) == ["y"]


def test_linked_dequeue_to_empty_resets_tail():
    for q in (LinkedQueue(), RecursiveLinkedQueue()):
        q.enqueue(1)
        assert q.dequeue() == 1
        q.enqueue(2)
        q.enqueue(3)
        assert list(q) == [2, 3]


def test_recursive_array_matches_loop_on_large_input():
    n = 20000
    loop_src = ArrayQueue(n)
    rec_src = RecursiveArrayQueue(n)
    for value in range(n):
        loop_src.enqueue(value)
        rec_src.enqueue(value)
    loop_dest = ArrayQueue(1)
    rec_dest = RecursiveArrayQueue(1)
    loop_dest.copy_from(loop_src)
    rec_dest.copy_from(rec_src)
    assert list(rec_dest) == list(loop_dest)
    assert str(rec_dest) == str(loop_dest) == " ".join(map(str, loop_dest))


def test_recursive_linked_matches_loop_on_large_input():
    n = 20000
    loop_q = LinkedQueue()
    rec_q = RecursiveLinkedQueue()
    for value in range(n):
        loop_q.enqueue(value)
        rec_q.enqueue(value)
    assert str(rec_q) == str(loop_q)
    rec_q.clear()
    assert rec_q.is_empty()
    assert len(rec_q) == 0