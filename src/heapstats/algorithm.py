import logging
import operator
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from heapstats.data_structures import BinaryHeap
from heapstats.types import MergeCursor

logger = logging.getLogger(__name__)

T = TypeVar("T")


def top_k(values: Iterable[T] | None, k: int) -> list[T]:
	"""Select the k largest values of a stream with a bounded min-heap.

	The heap never holds more than k + 1 elements: each value is inserted and the
	current minimum is evicted whenever the heap overflows.

	Time Complexity: O(n log k)

	Args:
		values: Values to select from. Any iterable; consumed once.
		k: Number of values to keep.

	Returns:
		The k largest values (all of them if fewer than k were given) in heap
		order, not sorted order. Empty if k <= 0 or values is None or empty.
	"""
	if values is None or k <= 0:
		logger.debug("top_k: nothing to select (k=%s, values=%s)", k, "None" if values is None else "given")
		return []

	heap: BinaryHeap[T] = BinaryHeap.min_heap()
	for value in values:
		heap.insert(value)
		if len(heap) > k:
			heap.extract_root()
	return heap.to_list()


def merge_sorted(sequences: Sequence[Sequence[T]] | None) -> list[T]:
	"""Merge already sorted sequences into one sorted list.

	Each input must be non-decreasing on its own; this is not checked and unsorted
	input produces an unspecified order. Equal values from different sources come
	out in heap order, not source order.

	Time Complexity: O(n log k), with n total elements across k sequences.

	Args:
		sequences: The sorted inputs. Empty inner sequences are skipped.

	Returns:
		All elements of all inputs in non-decreasing order.
	"""
	if sequences is None or len(sequences) == 0:
		return []

	heap: BinaryHeap[MergeCursor[T]] = BinaryHeap(MergeCursor.comes_before)
	for source, seq in enumerate(sequences):
		if len(seq) > 0:
			heap.insert(MergeCursor(seq[0], source, 0))

	result: list[T] = []
	while heap:
		cursor = heap.extract_root()
		result.append(cursor.value)

		# Advance within the same source so only one cursor per source is live
		position = cursor.position + 1
		seq = sequences[cursor.source]
		if position < len(seq):
			heap.insert(MergeCursor(seq[position], cursor.source, position))

	return result


def is_heap(array: Sequence[T] | None, before: Callable[[T, T], bool]) -> bool:
	"""Check that an array satisfies the heap property for a given ordering.

	Only non-leaf indices 0 .. n//2 - 1 are visited.

	Time Complexity: O(n)

	Args:
		array: The candidate heap in 0-based array layout.
		before: Strict ordering predicate; a child violates the property when it
			comes ``before`` its parent.

	Returns:
		True if no child comes before its parent, False at the first violation.
	"""
	if array is None or len(array) <= 1:
		return True

	n = len(array)
	for i in range(n // 2):
		left = 2 * i + 1
		right = left + 1
		if before(array[left], array[i]):
			return False
		if right < n and before(array[right], array[i]):
			return False
	return True


def is_min_heap(array: Sequence[T] | None) -> bool:
	"""Check ``parent <= child`` for every parent/child pair."""
	return is_heap(array, operator.lt)


def is_max_heap(array: Sequence[T] | None) -> bool:
	"""Check ``parent >= child`` for every parent/child pair."""
	return is_heap(array, operator.gt)
