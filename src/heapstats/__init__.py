"""Priority-queue based order statistics: top-K, K-way merge, dual-sided queue, heap checks and running median."""

from heapstats.algorithm import is_heap, is_max_heap, is_min_heap, merge_sorted, top_k
from heapstats.data_structures import BinaryHeap, DualPriorityQueue, RunningMedian

__version__ = "0.1.0"

__all__ = [
	"BinaryHeap",
	"DualPriorityQueue",
	"RunningMedian",
	"is_heap",
	"is_max_heap",
	"is_min_heap",
	"merge_sorted",
	"top_k",
]
