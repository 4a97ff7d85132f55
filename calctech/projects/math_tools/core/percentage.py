from calctech.core.errors import CalculatorInputError

MODE_LABELS = {
    "what_is": "What is X% of Y?",
    "is_what_percent": "X is what percent of Y?",
    "percent_change": "Percentage Change",
    "increase": "Percentage Increase",
    "decrease": "Percentage Decrease",
}


def _n(value):
    return f"{value:g}"


def calculate_percentage(mode="what_is", percentage=0, of_value=0, part_value=0, total_value=0,
                         old_value=0, new_value=0, base_value=0, percent_change=0):
    """
    Five percentage questions. A zero divisor gives a result of 0 rather
    than an error.
    """
    if mode == "what_is":
        result = percentage / 100 * of_value
        formula = f"({_n(percentage)} ÷ 100) × {_n(of_value)} = {_n(result)}"
        explanation = f"{_n(percentage)}% of {_n(of_value)} equals {_n(result)}"
    elif mode == "is_what_percent":
        result = part_value / total_value * 100 if total_value != 0 else 0
        formula = f"({_n(part_value)} ÷ {_n(total_value)}) × 100 = {result:.2f}%"
        explanation = f"{_n(part_value)} is {result:.2f}% of {_n(total_value)}"
    elif mode == "percent_change":
        result = (new_value - old_value) / old_value * 100 if old_value != 0 else 0
        formula = f"(({_n(new_value)} - {_n(old_value)}) ÷ {_n(old_value)}) × 100 = {result:.2f}%"
        direction = "An increase" if result >= 0 else "A decrease"
        explanation = f"{direction} of {abs(result):.2f}% from {_n(old_value)} to {_n(new_value)}"
    elif mode == "increase":
        result = base_value + base_value * percent_change / 100
        formula = f"{_n(base_value)} + ({_n(base_value)} × {_n(percent_change)} ÷ 100) = {_n(result)}"
        explanation = f"{_n(base_value)} increased by {_n(percent_change)}% equals {_n(result)}"
    elif mode == "decrease":
        result = base_value - base_value * percent_change / 100
        formula = f"{_n(base_value)} - ({_n(base_value)} × {_n(percent_change)} ÷ 100) = {_n(result)}"
        explanation = f"{_n(base_value)} decreased by {_n(percent_change)}% equals {_n(result)}"
    else:
        raise CalculatorInputError(f"Unknown percentage mode: {mode}")

    return {
        "mode": MODE_LABELS[mode],
        "result": result,
        "formula": formula,
        "explanation": explanation,
    }
