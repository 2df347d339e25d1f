import logging

logger = logging.getLogger(__name__)


class QueueStats:
    def __init__(self):
        self.enqueued = 0
        self.dequeued = 0
        self.failed_dequeues = 0

    def record(self, operation, count=1):
        if operation == "enqueue":
            self.enqueued += count
        elif operation == "dequeue":
            self.dequeued += count
        elif operation == "failed_dequeue":
            self.failed_dequeues += count
        else:
            raise ValueError(f"Unknown queue operation: {operation!r}")

    def expected_size(self):
        return self.enqueued - self.dequeued

    def as_dict(self):
        return {
            "enqueued": self.enqueued,
            "dequeued": self.dequeued,
            "failed_dequeues": self.failed_dequeues,
            "expected_size": self.expected_size(),
        }

    def report(self):
        logger.info("Enqueued: %d", self.enqueued)
        logger.info("Dequeued: %d", self.dequeued)
        logger.info("Failed dequeues: %d", self.failed_dequeues)
        logger.info("Expected size: %d", self.expected_size())
