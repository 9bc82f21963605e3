from heapstats.data_structures.binary_heap import BinaryHeap
from heapstats.data_structures.dual_priority_queue import DualPriorityQueue
from heapstats.data_structures.running_median import RunningMedian

__all__ = ["BinaryHeap", "DualPriorityQueue", "RunningMedian"]
