import threading

import pytest

from generic_queue import BaseQueue, ConcurrentQueue, EmptyQueueError


def test_concurrent_queue_keeps_fifo_contract():
    q = ConcurrentQueue([1, 2])
    q.enqueue(3)
    assert isinstance(q, BaseQueue)
    assert q.peek() == 1
    assert [q.dequeue() for _ in range(3)] == [1, 2, 3]
    assert q.is_empty()


def test_concurrent_queue_empty_dequeue_fails_immediately():
    q = ConcurrentQueue()
    with pytest.raises(EmptyQueueError):
        q.dequeue()
    assert len(q) == 0


def test_concurrent_producers_lose_no_items(stats):
    q = ConcurrentQueue(stats=stats)
    per_thread = 500

    def produce(offset):
        for i in range(per_thread):
            q.enqueue(offset + i)

    threads = [threading.Thread(target=produce, args=(n * per_thread,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert q.size() == 4 * per_thread
    assert sorted(q.items) == list(range(4 * per_thread))
    assert q.stats is stats
    assert stats.enqueued == 4 * per_thread


def test_each_producer_order_is_preserved():
    q = ConcurrentQueue()

    def produce(tag):
        for i in range(200):
            q.enqueue((tag, i))

    threads = [threading.Thread(target=produce, args=(tag,)) for tag in "ab"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    drained = [q.dequeue() for _ in range(len(q))]
    for tag in "ab":
        assert [i for t, i in drained if t == tag] == list(range(200))


def test_concurrent_consumers_take_each_item_once():
    q = ConcurrentQueue(range(1000))
    taken = []
    taken_lock = threading.Lock()

    def consume():
        while True:
            try:
                item = q.dequeue()
            except EmptyQueueError:
                return
            with taken_lock:
                taken.append(item)

    threads = [threading.Thread(target=consume) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(taken) == list(range(1000))
    assert q.is_empty()


def test_repr_and_iteration():
    q = ConcurrentQueue(["a", "b"])
    assert list(q) == ["a", "b"]
    assert repr(q) == "ConcurrentQueue(items=['a', 'b'])"
