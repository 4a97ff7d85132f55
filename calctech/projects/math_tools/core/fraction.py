"""
Fraction arithmetic on integer numerators and denominators.
"""
import math

from calctech.core.errors import CalculatorInputError

OPERATIONS = ("+", "-", "*", "/")


def lcm(a, b):
    return abs(a * b) // math.gcd(a, b)


def simplify(numerator, denominator):
    """Lowest terms with a positive denominator."""
    divisor = math.gcd(numerator, denominator) or 1
    numerator //= divisor
    denominator //= divisor
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def to_mixed_number(numerator, denominator):
    """{whole, numerator, denominator} or None for a proper fraction."""
    whole, remainder = divmod(abs(numerator), abs(denominator))
    if whole == 0:
        return None
    return {
        "whole": -whole if numerator < 0 else whole,
        "numerator": remainder,
        "denominator": abs(denominator),
    }


def calculate_fraction(num1=1, den1=2, operation="+", num2=1, den2=3):
    num1 = num1 or 0
    num2 = num2 or 0
    if not den1 or not den2:
        raise CalculatorInputError("Denominators cannot be zero.")
    if operation not in OPERATIONS:
        raise CalculatorInputError(f"Unknown operation: {operation}")

    steps = [f"Operation: {num1}/{den1} {operation} {num2}/{den2}"]

    if operation in ("+", "-"):
        common = lcm(den1, den2)
        scaled1 = num1 * (common // den1)
        scaled2 = num2 * (common // den2)
        result_num = scaled1 + scaled2 if operation == "+" else scaled1 - scaled2
        result_den = common
        verb = "Add" if operation == "+" else "Subtract"
        steps.append(f"Find common denominator: LCM({den1}, {den2}) = {common}")
        steps.append(f"Convert fractions: {scaled1}/{common} {operation} {scaled2}/{common}")
        steps.append(f"{verb} numerators: {scaled1} {operation} {scaled2} = {result_num}")
    elif operation == "*":
        result_num = num1 * num2
        result_den = den1 * den2
        steps.append(f"Multiply numerators: {num1} × {num2} = {result_num}")
        steps.append(f"Multiply denominators: {den1} × {den2} = {result_den}")
    else:
        if num2 == 0:
            raise CalculatorInputError("Cannot divide by a fraction equal to zero.")
        result_num = num1 * den2
        result_den = den1 * num2
        steps.append(f"Flip the second fraction: {num2}/{den2} → {den2}/{num2}")
        steps.append(f"Multiply: {num1}/{den1} × {den2}/{num2}")
        steps.append(f"Result: {result_num}/{result_den}")

    simple_num, simple_den = simplify(result_num, result_den)
    divisor = math.gcd(result_num, result_den)
    if divisor > 1:
        steps.append(f"Simplify by dividing by GCD({abs(result_num)}, {abs(result_den)}) = {divisor}")
        steps.append(f"Final result: {simple_num}/{simple_den}")

    return {
        "numerator": result_num,
        "denominator": result_den,
        "simplified": {"numerator": simple_num, "denominator": simple_den},
        "mixed": to_mixed_number(simple_num, simple_den),
        "decimal": simple_num / simple_den,
        "steps": steps,
    }
