from generic_queue.errors import EmptyQueueError
from generic_queue.queue_stats import QueueStats
from generic_queue.queues import BaseQueue, ConcurrentQueue, FIFOQueue

Queue = FIFOQueue

__all__ = [
    "BaseQueue",
    "ConcurrentQueue",
    "EmptyQueueError",
    "FIFOQueue",
    "Queue",
    "QueueStats",
]
