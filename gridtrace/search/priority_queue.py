"""Array-backed binary min-heap without decrease-key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class _Entry(Generic[T]):
    item: T
    priority: float


class PriorityQueue(Generic[T]):
    """Min-heap over (item, priority) pairs.

    Items are never removed or re-prioritised in place. Pushing the same item
    again at a lower priority leaves the older entry in the heap; callers skip
    such stale entries when they surface.
    """

    def __init__(self) -> None:
        self._heap: list[_Entry[T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, item: T, priority: float) -> None:
        self._heap.append(_Entry(item, priority))
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> T | None:
        if self.is_empty():
            return None
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top.item

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        element = heap[index]
        while index > 0:
            parent_index = (index + 1) // 2 - 1
            parent = heap[parent_index]
            if element.priority >= parent.priority:
                break
            heap[parent_index] = element
            heap[index] = parent
            index = parent_index

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        length = len(heap)
        element = heap[index]
        while True:
            left_index = 2 * (index + 1) - 1
            right_index = 2 * (index + 1)
            swap: int | None = None

            if left_index < length:
                if heap[left_index].priority < element.priority:
                    swap = left_index

            if right_index < length:
                right = heap[right_index]
                if swap is None:
                    if right.priority < element.priority:
                        swap = right_index
                elif right.priority < heap[left_index].priority:
                    swap = right_index

            if swap is None:
                break
            heap[index] = heap[swap]
            heap[swap] = element
            index = swap
