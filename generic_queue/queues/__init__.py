from generic_queue.queues.base_queue import BaseQueue
from generic_queue.queues.concurrent_queue import ConcurrentQueue
from generic_queue.queues.fifo_queue import FIFOQueue

__all__ = ["BaseQueue", "ConcurrentQueue", "FIFOQueue"]
