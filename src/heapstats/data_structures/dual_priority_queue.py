from collections import Counter
from typing import Generic, TypeVar

from heapstats.data_structures.binary_heap import BinaryHeap

T = TypeVar("T")


class DualPriorityQueue(Generic[T]):
	"""
	Multiset with O(log n) access to both its maximum and its minimum.

	Every value is pushed onto a max-heap and a min-heap. Removing through one
	side leaves a stale copy in the other heap; instead of searching for it, the
	value is counted in that heap's deletion ledger and discarded once it surfaces
	at the root.

	Each heap has its own ledger, so a pending removal recorded against one heap
	is only ever consumed by that heap, even when an equal value is inserted
	again later.

	Not thread-safe.

	Attributes:
		max_heap: Heap whose root is the largest value (possibly stale).
		min_heap: Heap whose root is the smallest value (possibly stale).
	"""

	def __init__(self) -> None:
		self.max_heap: BinaryHeap[T] = BinaryHeap.max_heap()
		self.min_heap: BinaryHeap[T] = BinaryHeap.min_heap()
		# value -> copies in that heap already removed through the other side
		self._stale_in_max: Counter[T] = Counter()
		self._stale_in_min: Counter[T] = Counter()
		self._size = 0

	def insert(self, value: T) -> None:
		"""Add a value to the multiset.

		Time Complexity: O(log n)
		"""
		self.max_heap.insert(value)
		self.min_heap.insert(value)
		self._size += 1

	def get_max(self) -> T | None:
		"""Return the largest live value, or None if the queue is empty."""
		self._clean(self.max_heap, self._stale_in_max)
		return self.max_heap.peek_root()

	def get_min(self) -> T | None:
		"""Return the smallest live value, or None if the queue is empty."""
		self._clean(self.min_heap, self._stale_in_min)
		return self.min_heap.peek_root()

	def remove_max(self) -> T | None:
		"""Remove and return the largest live value, or None if empty.

		Time Complexity: Amortized O(log n)
		"""
		return self._remove(self.max_heap, self._stale_in_max, self._stale_in_min)

	def remove_min(self) -> T | None:
		"""Remove and return the smallest live value, or None if empty.

		Time Complexity: Amortized O(log n)
		"""
		return self._remove(self.min_heap, self._stale_in_min, self._stale_in_max)

	def size(self) -> int:
		"""Return the number of live values."""
		return self._size

	def is_empty(self) -> bool:
		return self._size == 0

	def __len__(self) -> int:
		return self._size

	def _remove(self, heap: BinaryHeap[T], stale: Counter[T], stale_in_other: Counter[T]) -> T | None:
		self._clean(heap, stale)
		if heap.is_empty():
			return None
		value = heap.extract_root()
		# The copy in the other heap is now stale
		stale_in_other[value] += 1
		self._size -= 1
		return value

	def _clean(self, heap: BinaryHeap[T], stale: Counter[T]) -> None:
		"""Drop stale roots until the root is live or the heap is empty."""
		while not heap.is_empty():
			root = heap.peek_root()
			if stale[root] <= 0:
				break
			heap.extract_root()
			stale[root] -= 1
			if stale[root] == 0:
				del stale[root]
