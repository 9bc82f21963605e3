from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class MergeCursor(Generic[T]):
	"""
	The in-flight head of one source sequence during a K-way merge.

	Attributes:
		value: Element at ``position`` in the source.
		source: Index of the source sequence among the merge inputs.
		position: Index of ``value`` within its source.
	"""

	value: T
	source: int
	position: int

	def comes_before(self, other: "MergeCursor[T]") -> bool:
		"""Order cursors by value only; equal values have no preferred source."""
		return self.value < other.value
