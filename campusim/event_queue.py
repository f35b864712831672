"""
Event Queue - binary max-heap of scheduled events.

Ordering: higher priority first; among equal priorities the event with the
LATER start time surfaces first. Insert and extract are O(log n).
Update/remove go through ``rebuild_excluding`` (snapshot, filter, reinsert),
which is O(n) per call.
"""

from typing import Iterator, List, Optional

from .schemas import Event


def compare_events(a: Event, b: Event) -> int:
    """Positive when ``a`` outranks ``b``, negative when ``b`` does, 0 on a tie."""

    if a.priority != b.priority:
        return int(a.priority) - int(b.priority)
    return a.start_time - b.start_time


class EventQueue:
    """Priority container over Event.

    Unbounded unless ``capacity`` is given; inserting into a full bounded
    queue is a no-op that returns False.
    """

    def __init__(self, capacity: Optional[int] = None):
        self.capacity = capacity
        self._heap: List[Event] = []

    def insert(self, event: Event) -> bool:
        """Append and sift up. Returns False (dropping the event) when full."""
        if self.capacity is not None and len(self._heap) >= self.capacity:
            return False
        self._heap.append(event)
        self._sift_up(len(self._heap) - 1)
        return True

    def extract_max(self) -> Optional[Event]:
        """Remove and return the highest-ranked event, or None if empty."""
        if not self._heap:
            return None
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> Optional[Event]:
        return self._heap[0] if self._heap else None

    def peek_all(self) -> List[Event]:
        """Snapshot of every event in heap-storage order (not sorted)."""
        return list(self._heap)

    def find(self, event_id: str) -> Optional[Event]:
        """Last event with ``event_id`` in storage order, or None."""
        found = None
        for event in self._heap:
            if event.event_id == event_id:
                found = event
        return found

    def rebuild_excluding(self, event_id: str) -> "EventQueue":
        """New queue holding every event whose id differs; all duplicates go.

        The receiver is left unchanged so callers can keep it for rollback.
        """
        rebuilt = EventQueue(capacity=self.capacity)
        for event in self._heap:
            if event.event_id != event_id:
                rebuilt.insert(event)
        return rebuilt

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.peek_all())

    # Heap internals -----------------------------------------------------------

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if compare_events(heap[i], heap[parent]) <= 0:
                break
            heap[i], heap[parent] = heap[parent], heap[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            largest, left, right = i, 2 * i + 1, 2 * i + 2
            if left < size and compare_events(heap[left], heap[largest]) > 0:
                largest = left
            if right < size and compare_events(heap[right], heap[largest]) > 0:
                largest = right
            if largest == i:
                return
            heap[i], heap[largest] = heap[largest], heap[i]
            i = largest
