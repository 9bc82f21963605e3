import logging
import re
import time
import warnings
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np
from scipy.optimize import curve_fit

from heapstats.types import Proof

logger = logging.getLogger(__name__)

# Big-O function names mapped to their numpy equivalents
_BIG_O_REPLACEMENTS = {
	r"\blog\b": "np.log",
	r"\bln\b": "np.log",
	r"\blog2\b": "np.log2",
	r"\blog10\b": "np.log10",
	r"\bsqrt\b": "np.sqrt",
	r"\bmax\b": "np.maximum",
	r"\bmin\b": "np.minimum",
	r"\^": "**",
}


@dataclass
class ComplexityCheckResult:
	"""Outcome of fitting measured run times to a big-O curve.

	Attributes:
		is_match: Whether the fit reached the confidence threshold.
		confidence: Confidence score (0-1) of the match; the fit's R-squared.
		measured_coefficient: Fitted constant ``c`` in ``time = c * f(params)``.
		r_squared: R-squared value of the curve fit.
		message: Human-readable summary.
	"""

	is_match: bool
	confidence: float
	measured_coefficient: float
	r_squared: float
	message: str

	@classmethod
	def failed(cls, message: str) -> "ComplexityCheckResult":
		return cls(is_match=False, confidence=0.0, measured_coefficient=0.0, r_squared=0.0, message=message)


def parse_big_o_expression(big_o_str: str) -> str:
	"""Translate a big-O string into an expression numpy can evaluate.

	Args:
		big_o_str: Big-O notation string (e.g., "O(n*log(k))").

	Returns:
		Expression string over lower-cased parameter names and ``np``.

	Raises:
		ValueError: If the string is not of the form ``O(...)``.
	"""
	match = re.match(r"^O\((.*)\)$", big_o_str.strip(), re.IGNORECASE)
	if not match or not match.group(1).strip():
		raise ValueError(f"Invalid big-O format: {big_o_str}")

	expr = match.group(1)
	for pattern, replacement in _BIG_O_REPLACEMENTS.items():
		expr = re.sub(pattern, replacement, expr, flags=re.IGNORECASE)
	return expr.lower()


def generate_test_sizes(param_ranges: dict[str, tuple[int, int]], num_samples: int = 10) -> list[dict[str, int]]:
	"""Generate parameter combinations, log-spaced within each range.

	Args:
		param_ranges: Parameter name to inclusive (min, max) range.
		num_samples: Number of sizes per parameter.

	Returns:
		One dict per sample, with every parameter advancing together.
	"""
	axes = [
		np.logspace(np.log10(low), np.log10(high), num_samples, dtype=int) for low, high in param_ranges.values()
	]
	return [
		{name: int(size) for name, size in zip(param_ranges.keys(), sizes, strict=True)} for sizes in zip(*axes)
	]


def measure_execution_time(func: Callable[..., Any], test_input: Any, num_runs: int = 5) -> float:
	"""Median wall time of ``func(test_input)`` over several runs, in seconds."""
	times = []
	for _ in range(num_runs):
		start = time.perf_counter()
		func(test_input)
		times.append(time.perf_counter() - start)
	return float(np.median(times))


def check_complexity(
	func: Callable[..., Any],
	big_o_string: str,
	param_dict: dict[str, tuple[int, int]],
	input_generator: Callable[[dict[str, int]], Any] | None = None,
	confidence_threshold: float = 0.85,
	num_samples: int = 10,
	num_runs: int = 5,
) -> ComplexityCheckResult:
	"""Empirically check that ``func`` grows like the given big-O curve.

	Runs ``func`` over log-spaced input sizes, fits ``time = c * f(params)`` with
	``scipy.optimize.curve_fit`` and accepts the claim when R-squared reaches
	``confidence_threshold``.

	Args:
		func: The operation under test; called with the generated input.
		big_o_string: Expected complexity (e.g., "O(n*log(k))").
		param_dict: Parameter name to (min, max) range, e.g. {"n": (100, 10000), "k": (2, 64)}.
		input_generator: Builds the input for one parameter combination. If None,
			the single parameter value itself is passed to ``func``.
		confidence_threshold: R-squared needed for a match (0-1).
		num_samples: Number of input sizes to measure.
		num_runs: Runs per size; the median is used.

	Returns:
		ComplexityCheckResult with the fit statistics.

	Raises:
		ValueError: If the big-O string cannot be parsed.

	Example:
		>>> from heapstats.algorithm import top_k
		>>> result = check_complexity(
		...     func=lambda args: top_k(*args),
		...     big_o_string="O(n*log(k))",
		...     param_dict={"n": (1000, 100000), "k": (2, 256)},
		...     input_generator=lambda p: (list(range(p["n"])), p["k"]),
		... )
	"""
	try:
		complexity_expr = parse_big_o_expression(big_o_string)
	except ValueError as e:
		raise ValueError(f"Failed to parse big-O expression: {e}") from e

	if input_generator is None:

		def input_generator(params: dict[str, int]) -> int:
			return next(iter(params.values()))

	measured_times = []
	expected_complexities = []
	for params in generate_test_sizes(param_dict, num_samples):
		try:
			test_input = input_generator(params)
			exec_time = measure_execution_time(func, test_input, num_runs)
			namespace = {"np": np, **{name.lower(): size for name, size in params.items()}}
			expected = float(eval(complexity_expr, namespace))  # noqa: S307
		except Exception as e:  # noqa: BLE001
			warnings.warn(f"Failed to test with params {params}: {e}", stacklevel=2)
			continue
		measured_times.append(exec_time)
		expected_complexities.append(expected)

	if len(measured_times) < 3:
		return ComplexityCheckResult.failed("Insufficient data points for analysis")

	times = np.array(measured_times)
	expected = np.array(expected_complexities)

	def linear_model(x, coefficient):
		return coefficient * x

	try:
		popt, _ = curve_fit(linear_model, expected, times)
	except (RuntimeError, ValueError) as e:
		return ComplexityCheckResult.failed(f"Curve fitting failed: {e}")

	coefficient = float(popt[0])
	residuals = times - linear_model(expected, coefficient)
	ss_res = np.sum(residuals**2)
	ss_tot = np.sum((times - np.mean(times)) ** 2)
	r_squared = float(1 - ss_res / ss_tot) if ss_tot > 0 else 0.0
	is_match = r_squared >= confidence_threshold

	if is_match:
		message = (
			f"Function matches {big_o_string} complexity "
			f"(R² = {r_squared:.3f}, coefficient = {coefficient:.2e})"
		)
	else:
		message = f"Function does NOT match {big_o_string} complexity (R² = {r_squared:.3f} < {confidence_threshold})"
	logger.info(message)

	return ComplexityCheckResult(
		is_match=is_match,
		confidence=r_squared,
		measured_coefficient=coefficient,
		r_squared=r_squared,
		message=message,
	)


def check_proof(
	proof: Proof,
	func: Callable[..., Any],
	param_dict: dict[str, tuple[int, int]],
	input_generator: Callable[[dict[str, int]], Any] | None = None,
	**kwargs: Any,
) -> ComplexityCheckResult:
	"""Check a registered complexity claim against ``func``.

	Args:
		proof: The claim, e.g. ``find_proof("algorithm.top_k")``.
		func: Callable implementing ``proof["operation"]``.
		param_dict: Ranges for every parameter named in the claim.
		input_generator: See ``check_complexity``.
		**kwargs: Forwarded to ``check_complexity``.

	Returns:
		ComplexityCheckResult whose message is prefixed with the operation name.
	"""
	result = check_complexity(func, proof["complexity"], param_dict, input_generator, **kwargs)
	result.message = f"{proof['operation']}: {result.message}"
	return result
