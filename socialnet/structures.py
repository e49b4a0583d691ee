"""Small container types used throughout the social graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V")

TABLE_SIZE = 100


class HashMap(Generic[V]):
    """Separate-chaining map from strings to values.

    A key hashes to the sum of its character codes modulo the table size.
    New keys go to the front of their bucket, and inserting an existing key
    replaces its value.
    """

    def __init__(self, size: int = TABLE_SIZE) -> None:
        self._buckets: list[list[tuple[str, V]]] = [[] for _ in range(size)]

    def _bucket(self, key: str) -> list[tuple[str, V]]:
        return self._buckets[sum(map(ord, key)) % len(self._buckets)]

    def insert(self, key: str, value: V) -> None:
        """Store value under key, replacing any earlier value."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.insert(0, (key, value))

    def get(self, key: str) -> V:
        """Return the value stored under key; raise KeyError if there is none."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(f"Key not found: {key}")

    def find(self, key: str) -> bool:
        """Tell whether key is stored."""
        return any(existing == key for existing, _ in self._bucket(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


class Stack(Generic[T]):
    """Last-in, first-out stack. Iteration runs from the top down."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty. Cannot pop.")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is empty. No top element.")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def copy(self) -> Stack[T]:
        """Return a new stack holding the same items in the same order."""
        duplicate: Stack[T] = Stack()
        duplicate._items = list(self._items)
        return duplicate

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Queue(Generic[T]):
    """First-in, first-out queue. Iteration runs from the front back."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T | None:
        """Remove and return the front item; do nothing on an empty queue."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self) -> T:
        """Return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("Queue is empty. No top element.")
        return self._items[0]

    def empty(self) -> bool:
        return not self._items

    def copy(self) -> Queue[T]:
        """Return a new queue holding the same items in the same order."""
        duplicate: Queue[T] = Queue()
        duplicate._items = deque(self._items)
        return duplicate

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class MaxHeap(Generic[T]):
    """Binary max-heap over comparable items."""

    def __init__(self) -> None:
        self._heap: list[T] = []

    def insert(self, item: T) -> None:
        heap = self._heap
        heap.append(item)
        child = len(heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not heap[child] > heap[parent]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent

    def extract_max(self) -> T:
        """Remove and return the largest item; raise IndexError when empty."""
        heap = self._heap
        if not heap:
            raise IndexError("heap is empty")
        root = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down(0)
        return root

    def peek_max(self) -> T:
        """Return the largest item; raise IndexError when empty."""
        if not self._heap:
            raise IndexError("Heap is empty")
        return self._heap[0]

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child] > heap[largest]:
                    largest = child
            if largest == index:
                return
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest

    def __iter__(self) -> Iterator[T]:
        return iter(self._heap)

    def __len__(self) -> int:
        return len(self._heap)