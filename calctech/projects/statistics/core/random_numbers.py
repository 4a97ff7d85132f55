import random
import statistics

from calctech.core.errors import CalculatorInputError

_system_random = random.SystemRandom()


def generate_random_numbers(minimum=0, maximum=100, count=1, allow_duplicates=True,
                            sort_results=False, rng=None):
    """
    Random integers in [minimum, maximum], inclusive.

    rng defaults to the OS-backed generator; tests pass a seeded random.Random.
    """
    rng = rng or _system_random
    minimum = 0 if minimum is None else minimum
    maximum = 100 if maximum is None else maximum
    count = count or 1

    if minimum > maximum:
        raise CalculatorInputError("Minimum value cannot be greater than maximum value!")
    span = maximum - minimum + 1
    if not allow_duplicates and count > span:
        raise CalculatorInputError(
            f"Cannot generate {count} unique numbers from a range of {span} numbers!"
        )

    if allow_duplicates:
        numbers = [rng.randint(minimum, maximum) for _ in range(count)]
    else:
        numbers = rng.sample(range(minimum, maximum + 1), count)

    if sort_results:
        numbers.sort()

    total = sum(numbers)
    return {
        "numbers": numbers,
        "stats": {
            "sum": total,
            "average": total / len(numbers),
            "min": min(numbers),
            "max": max(numbers),
            "median": statistics.median(numbers),
        },
    }
