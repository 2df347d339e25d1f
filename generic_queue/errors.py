class EmptyQueueError(IndexError):
    """Raised when an item is requested from a queue that holds none."""

    def __init__(self, operation: str = "dequeue"):
        self.operation = operation
        super().__init__(f"{operation.capitalize()} from an empty queue.")
