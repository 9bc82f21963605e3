import logging
import random
from collections import Counter

import pytest

from heapstats import BinaryHeap, is_heap, is_max_heap, is_min_heap, merge_sorted, top_k


class TestTopK:
	def test_example(self):
		assert sorted(top_k([3, 2, 1, 5, 6, 4], 2)) == [5, 6]

	@pytest.mark.parametrize("k", [0, -1, -10])
	def test_non_positive_k_is_empty(self, k):
		assert top_k([1, 2, 3], k) == []

	def test_none_and_empty_input(self):
		assert top_k(None, 3) == []
		assert top_k([], 3) == []

	def test_fewer_values_than_k(self):
		assert sorted(top_k([4, 1], 5)) == [1, 4]

	def test_duplicates_are_kept(self):
		assert sorted(top_k([7, 7, 7, 1], 2)) == [7, 7]

	def test_degenerate_arguments_are_logged(self, caplog):
		with caplog.at_level(logging.DEBUG, logger="heapstats.algorithm"):
			assert top_k(None, 3) == []
			assert top_k([1, 2], 0) == []

		messages = [r.getMessage() for r in caplog.records if r.name == "heapstats.algorithm"]
		assert len(messages) == 2
		assert all(m.startswith("top_k: nothing to select") for m in messages)
		assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == "heapstats.algorithm")

	def test_accepts_generators(self):
		assert sorted(top_k((x * x for x in range(10)), 3)) == [49, 64, 81]

	@pytest.mark.parametrize("seed", range(10))
	def test_returns_exactly_the_top_multiset(self, seed):
		rng = random.Random(seed)
		values = [rng.randint(-100, 100) for _ in range(rng.randint(1, 60))]
		k = rng.randint(1, 70)
		result = top_k(values, k)

		assert len(result) == min(k, len(values))
		assert sorted(result) == sorted(values)[len(values) - len(result) :]
		rest = Counter(values) - Counter(result)
		if result and rest:
			assert min(result) >= max(rest.elements())


class TestMergeSorted:
	def test_example(self):
		assert merge_sorted([[1, 4, 5], [1, 3, 4], [2, 6]]) == [1, 1, 2, 3, 4, 4, 5, 6]

	def test_empty_inputs(self):
		assert merge_sorted([]) == []
		assert merge_sorted(None) == []
		assert merge_sorted([[], []]) == []

	def test_skips_empty_sources(self):
		assert merge_sorted([[], [2, 3], [], [1]]) == [1, 2, 3]

	def test_single_source(self):
		assert merge_sorted([[1, 2, 2, 9]]) == [1, 2, 2, 9]

	def test_accepts_tuples_and_floats(self):
		assert merge_sorted(((0.5, 2.5), (1.0,))) == [0.5, 1.0, 2.5]

	def test_accepts_numpy_arrays(self):
		np = pytest.importorskip("numpy")
		merged = merge_sorted([np.array([1, 4]), np.array([], dtype=int), np.array([2, 3])])
		assert [int(x) for x in merged] == [1, 2, 3, 4]
		assert merge_sorted(np.empty((0, 3))) == []

	def test_one_live_cursor_per_source(self, monkeypatch):
		sizes = []
		original_insert = BinaryHeap.insert

		def recording_insert(heap, item):
			original_insert(heap, item)
			sizes.append(len(heap))

		monkeypatch.setattr(BinaryHeap, "insert", recording_insert)
		sources = [list(range(100)), [5], [], [50], [99]]
		merged = merge_sorted(sources)

		assert merged == sorted(x for seq in sources for x in seq)
		assert len(sizes) == len(merged)
		assert max(sizes) <= sum(1 for seq in sources if seq)

	@pytest.mark.parametrize("seed", range(10))
	def test_output_is_sorted_permutation(self, seed):
		rng = random.Random(seed)
		sources = [sorted(rng.randint(0, 20) for _ in range(rng.randint(0, 15))) for _ in range(rng.randint(1, 8))]
		merged = merge_sorted(sources)

		assert merged == sorted(merged)
		assert Counter(merged) == Counter(x for seq in sources for x in seq)


class TestHeapValidator:
	def test_examples(self):
		assert is_min_heap([1, 3, 6, 5, 9, 8])
		assert not is_min_heap([10, 5, 8, 3, 1])

	@pytest.mark.parametrize("array", [None, [], [5]])
	def test_trivial_arrays(self, array):
		assert is_min_heap(array)
		assert is_max_heap(array)

	def test_equal_elements(self):
		assert is_min_heap([2, 2, 2, 2])
		assert is_max_heap([2, 2, 2, 2])

	def test_missing_right_child(self):
		assert is_min_heap([1, 2, 3, 4])
		assert not is_min_heap([1, 2, 3, 0])

	def test_max_heap(self):
		assert is_max_heap([9, 5, 8, 1, 4])
		assert not is_max_heap([1, 3, 6, 5, 9, 8])

	def test_custom_predicate(self):
		assert is_heap(["a", "bb", "ccc"], lambda a, b: len(a) < len(b))
		assert not is_heap(["ccc", "a"], lambda a, b: len(a) < len(b))

	@pytest.mark.parametrize("seed", range(20))
	def test_single_violation_is_detected(self, seed):
		rng = random.Random(seed)
		n = rng.randint(2, 40)
		array = list(range(0, 2 * n, 2))  # sorted, so a valid min-heap
		assert is_min_heap(array)

		child = rng.randint(1, n - 1)
		parent = (child - 1) // 2
		array[child] = array[parent] - 1
		assert not is_min_heap(array)
