import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class BinaryHeap(Generic[T]):
	"""
	Array-backed binary heap ordered by an explicit predicate.

	The children of index ``i`` live at ``2i + 1`` and ``2i + 2``. ``before(a, b)``
	is a strict ordering that is true when ``a`` must sit above ``b``; a min-heap
	uses ``<`` and a max-heap uses ``>``, so both are the same structure with
	opposite predicates.

	Reads on an empty heap return ``None`` instead of raising. Callers that store
	``None`` as an element must check ``is_empty()`` first.

	Not thread-safe.

	Attributes:
		before: Strict "sits above" predicate used for every comparison.
	"""

	def __init__(self, before: Callable[[T, T], bool], items: Iterable[T] | None = None) -> None:
		"""Initialize the heap.

		Args:
			before: Strict ordering predicate; ``before(a, b)`` means ``a`` is closer to the root.
			items: Optional initial elements, bulk-loaded in O(n).
		"""
		self.before = before
		self._data: list[T] = []
		if items is not None:
			self.heapify(items)

	@classmethod
	def min_heap(cls, items: Iterable[T] | None = None) -> "BinaryHeap[T]":
		"""Build a heap whose root is the smallest element."""
		return cls(operator.lt, items)

	@classmethod
	def max_heap(cls, items: Iterable[T] | None = None) -> "BinaryHeap[T]":
		"""Build a heap whose root is the largest element."""
		return cls(operator.gt, items)

	def heapify(self, items: Iterable[T]) -> None:
		"""Replace the contents with ``items`` using bottom-up construction.

		Time Complexity: O(n)
		"""
		self._data = list(items)
		for pos in range(len(self._data) // 2 - 1, -1, -1):
			self._sift_down(pos)

	def insert(self, item: T) -> None:
		"""Add an element and restore the ordering.

		Time Complexity: O(log n)
		"""
		self._data.append(item)
		self._sift_up(len(self._data) - 1)

	def peek_root(self) -> T | None:
		"""Return the extreme element without removing it, or None if empty."""
		if not self._data:
			return None
		return self._data[0]

	def extract_root(self) -> T | None:
		"""Remove and return the extreme element.

		Time Complexity: O(log n)

		Returns:
			The root element, or None if the heap is empty.
		"""
		if not self._data:
			return None
		last = self._data.pop()
		if not self._data:
			return last
		root = self._data[0]
		self._data[0] = last
		self._sift_down(0)
		return root

	def size(self) -> int:
		"""Return the number of stored elements."""
		return len(self._data)

	def is_empty(self) -> bool:
		"""Check whether the heap holds no elements."""
		return len(self._data) == 0

	def clear(self) -> None:
		self._data.clear()

	def to_list(self) -> list[T]:
		"""Return a copy of the backing array in heap order."""
		return list(self._data)

	def __len__(self) -> int:
		return len(self._data)

	def __bool__(self) -> bool:
		return bool(self._data)

	def __iter__(self) -> Iterator[T]:
		# Heap order, not sorted order
		return iter(list(self._data))

	def __repr__(self) -> str:
		return f"{type(self).__name__}({self._data!r})"

	def _sift_up(self, pos: int) -> None:
		data = self._data
		while pos > 0:
			parent = (pos - 1) >> 1
			if not self.before(data[pos], data[parent]):
				break
			data[parent], data[pos] = data[pos], data[parent]
			pos = parent

	def _sift_down(self, pos: int) -> None:
		data = self._data
		n = len(data)
		while True:
			left = 2 * pos + 1
			if left >= n:
				break
			right = left + 1
			child = right if right < n and self.before(data[right], data[left]) else left
			if not self.before(data[child], data[pos]):
				break
			data[child], data[pos] = data[pos], data[child]
			pos = child
