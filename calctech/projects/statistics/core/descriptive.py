"""
Descriptive statistics over a list of numbers.
"""
import math
import statistics
from collections import Counter

from calctech.core.errors import CalculatorInputError
from calctech.utils.parsing import parse_number_list

TOO_LARGE = "Numbers are too large to compute statistics."


def modes(data):
    """Every value tied for the highest count, or [] when nothing repeats."""
    counts = Counter(data)
    top = max(counts.values())
    if top <= 1:
        return []
    return sorted(value for value, count in counts.items() if count == top)


def describe(data):
    n = len(data)
    if n == 0:
        raise CalculatorInputError("Please enter at least one number.")

    ordered = sorted(data)
    try:
        total = math.fsum(data)
        mean = total / n
        squared_diffs = math.fsum((x - mean) ** 2 for x in data)
    except OverflowError as e:
        raise CalculatorInputError(TOO_LARGE) from e

    sample_variance = squared_diffs / (n - 1) if n > 1 else 0
    population_variance = squared_diffs / n
    median = statistics.median(ordered)
    spread = ordered[-1] - ordered[0]
    if not all(math.isfinite(v) for v in (mean, median, spread, sample_variance)):
        raise CalculatorInputError(TOO_LARGE)

    return {
        "count": n,
        "sum": total,
        "mean": mean,
        "median": median,
        "mode": modes(data),
        "min": ordered[0],
        "max": ordered[-1],
        "range": spread,
        "variance": sample_variance,
        "standard_deviation": math.sqrt(sample_variance),
        "population_variance": population_variance,
        "population_standard_deviation": math.sqrt(population_variance),
        "sorted_data": ordered,
    }


def calculate_statistics(data=""):
    """Statistics for free-text input such as "2, 4, 6, 8, 10"."""
    values, rejected = parse_number_list(data)
    if not values:
        raise CalculatorInputError("Please enter valid numbers separated by commas or spaces.")
    result = describe(values)
    result["rejected"] = rejected
    return result
