import logging

from generic_queue import EmptyQueueError, Queue, QueueStats
from generic_queue.config import load_config
from generic_queue.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def usage_example(seed_items):
    stats = QueueStats()
    my_queue = Queue(seed_items, stats=stats)

    my_queue.enqueue(4)
    my_queue.enqueue(5)
    print(f"Dequeued: {my_queue.dequeue()}")
    print(f"Remaining items: {my_queue.items}")

    # Drain the queue, then ask for one more
    while not my_queue.is_empty():
        print(f"Dequeued: {my_queue.dequeue()}")
    try:
        my_queue.dequeue()
    except EmptyQueueError as error:
        print(f"An error is raised: {error}")

    words = Queue(["first", "second"])
    words.enqueue("third")
    print(f"Word queue: {words.items}, head is {words.peek()!r}")

    stats.report()
    return stats


def main():
    cfg = load_config()
    setup_logging(cfg)
    logger.info("Starting queue walkthrough with seed items %s", cfg["seed_items"])
    usage_example(cfg["seed_items"])


if __name__ == "__main__":
    main()
