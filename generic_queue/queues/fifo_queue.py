import logging
from collections import deque
from typing import Iterable, Iterator, List, Optional

from generic_queue.errors import EmptyQueueError
from generic_queue.queue_stats import QueueStats
from generic_queue.queues.base_queue import BaseQueue, T

logger = logging.getLogger(__name__)


class FIFOQueue(BaseQueue[T]):
    """First-In, First-Out (FIFO) queue implementation.

    Items are removed in the order they were inserted. The queue copies the
    initial items into its own storage, so later changes to the iterable passed
    in are not seen by the queue.

    Args:
        items (Iterable[T], optional): Initial contents, head first.
        stats (QueueStats, optional): Counters updated on every operation.
    """

    def __init__(self, items: Optional[Iterable[T]] = None, stats: Optional[QueueStats] = None):
        self.queue = deque(items if items is not None else ())
        self.stats = stats
        if self.stats is not None and self.queue:
            self.stats.record("enqueue", len(self.queue))
        logger.debug("Created %s with %d item(s)", type(self).__name__, len(self.queue))

    def enqueue(self, item: T) -> None:
        self.queue.append(item)
        if self.stats is not None:
            self.stats.record("enqueue")

    def dequeue(self) -> T:
        if not self.queue:
            if self.stats is not None:
                self.stats.record("failed_dequeue")
            logger.debug("Dequeue requested on an empty %s", type(self).__name__)
            raise EmptyQueueError("dequeue")
        item = self.queue.popleft()
        if self.stats is not None:
            self.stats.record("dequeue")
        return item

    def peek(self) -> T:
        if not self.queue:
            raise EmptyQueueError("peek")
        return self.queue[0]

    def size(self) -> int:
        return len(self.queue)

    @property
    def items(self) -> List[T]:
        """Snapshot of the queue contents, head first."""
        return list(self.queue)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __repr__(self):
        return f"{type(self).__name__}(items={self.items!r})"
