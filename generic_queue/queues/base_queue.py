from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class BaseQueue(ABC, Generic[T]):
    """Abstract base class for queue implementations."""

    @abstractmethod
    def enqueue(self, item: T) -> None:
        """Insert an item at the tail of the queue."""
        pass

    @abstractmethod
    def dequeue(self) -> T:
        """Remove and return the item at the head of the queue."""
        pass

    @abstractmethod
    def peek(self) -> T:
        """Return the item at the head of the queue without removing it."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of items in the queue."""
        pass

    def is_empty(self) -> bool:
        """Return True if the queue is empty, else False."""
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()
