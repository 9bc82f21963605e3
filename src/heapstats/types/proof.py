from typing import TypedDict


class Proof(TypedDict):
	"""
	Represents a complexity claim for a single public operation.

	Attributes:
		operation: Dotted name of the operation (e.g. "algorithm.top_k").
		complexity: Big-O string over the operation's size parameters.
	"""

	operation: str
	complexity: str


# n: total elements, k: selection size or number of sources.
PROOFS: list[Proof] = [
	{"operation": "BinaryHeap.insert", "complexity": "O(log(n))"},
	{"operation": "BinaryHeap.extract_root", "complexity": "O(log(n))"},
	{"operation": "BinaryHeap.heapify", "complexity": "O(n)"},
	{"operation": "algorithm.top_k", "complexity": "O(n*log(k))"},
	{"operation": "algorithm.merge_sorted", "complexity": "O(n*log(k))"},
	{"operation": "algorithm.is_min_heap", "complexity": "O(n)"},
	{"operation": "DualPriorityQueue.insert", "complexity": "O(log(n))"},
	{"operation": "DualPriorityQueue.remove_max", "complexity": "O(log(n))"},
	{"operation": "DualPriorityQueue.remove_min", "complexity": "O(log(n))"},
	{"operation": "RunningMedian.add_num", "complexity": "O(log(n))"},
	{"operation": "RunningMedian.find_median", "complexity": "O(1)"},
]


def find_proof(operation: str) -> Proof:
	"""Look up the registered complexity claim for an operation.

	Raises:
		KeyError: If no claim is registered under that name.
	"""
	for proof in PROOFS:
		if proof["operation"] == operation:
			return proof
	raise KeyError(operation)
