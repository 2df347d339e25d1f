from threading import Lock
from typing import Iterable, Iterator, List, Optional

from generic_queue.queue_stats import QueueStats
from generic_queue.queues.base_queue import BaseQueue, T
from generic_queue.queues.fifo_queue import FIFOQueue


class ConcurrentQueue(BaseQueue[T]):
    """Thread-safe FIFO queue: a FIFOQueue guarded by a lock.

    Dequeue on an empty queue fails immediately with EmptyQueueError; there is
    no waiting for a producer.
    """

    def __init__(self, items: Optional[Iterable[T]] = None, stats: Optional[QueueStats] = None):
        self.lock = Lock()
        self._queue: FIFOQueue[T] = FIFOQueue(items, stats=stats)

    @property
    def stats(self) -> Optional[QueueStats]:
        return self._queue.stats

    def enqueue(self, item: T) -> None:
        with self.lock:
            self._queue.enqueue(item)

    def dequeue(self) -> T:
        with self.lock:
            return self._queue.dequeue()

    def peek(self) -> T:
        with self.lock:
            return self._queue.peek()

    def size(self) -> int:
        with self.lock:
            return self._queue.size()

    @property
    def items(self) -> List[T]:
        with self.lock:
            return self._queue.items

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __repr__(self):
        return f"{type(self).__name__}(items={self.items!r})"
