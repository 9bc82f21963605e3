from collections.abc import Iterable

from heapstats.data_structures.binary_heap import BinaryHeap


class RunningMedian:
	"""
	Median of an unbounded numeric stream using two balanced heaps.

	``lower`` is a max-heap over the smaller half and ``upper`` a min-heap over
	the larger half. After every insertion ``lower`` holds either the same number
	of elements as ``upper`` or exactly one more, and every element of ``lower``
	is at most every element of ``upper``.

	Not thread-safe.
	"""

	def __init__(self, values: Iterable[int | float] | None = None) -> None:
		self.lower: BinaryHeap[int | float] = BinaryHeap.max_heap()
		self.upper: BinaryHeap[int | float] = BinaryHeap.min_heap()
		if values is not None:
			self.extend(values)

	def add_num(self, num: int | float) -> None:
		"""Add a value to the stream.

		Time Complexity: O(log n)
		"""
		if self.lower.is_empty() or num <= self.lower.peek_root():
			self.lower.insert(num)
		else:
			self.upper.insert(num)

		if len(self.lower) > len(self.upper) + 1:
			self.upper.insert(self.lower.extract_root())
		elif len(self.upper) > len(self.lower):
			self.lower.insert(self.upper.extract_root())

	def extend(self, values: Iterable[int | float]) -> None:
		for num in values:
			self.add_num(num)

	def find_median(self) -> float:
		"""Return the median of everything added so far.

		Time Complexity: O(1)

		Returns:
			The middle value for an odd count, the mean of the two middle values for
			an even count, or 0.0 for an empty stream.
		"""
		if self.lower.is_empty():
			return 0.0
		if len(self.lower) > len(self.upper):
			return float(self.lower.peek_root())
		return (self.lower.peek_root() + self.upper.peek_root()) / 2.0

	def size(self) -> int:
		return len(self.lower) + len(self.upper)

	def __len__(self) -> int:
		return self.size()
