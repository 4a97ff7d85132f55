"""
Scientific calculator.

Expressions are parsed with the ``ast`` module and walked node by node;
only numbers, the constants pi and e, arithmetic operators and the
functions in FUNCTIONS are accepted. ``^`` is exponentiation.
"""
import ast
import math

from calctech.core.errors import CalculatorInputError

ANGLE_MODES = ("deg", "rad")
MAX_EXPRESSION_LENGTH = 200
MAX_FACTORIAL = 170

CONSTANTS = {"pi": math.pi, "e": math.e}


def _power(a, b):
    result = a ** b
    if isinstance(result, complex):
        raise CalculatorInputError("The result is not a real number.")
    return result


_BINARY = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: lambda a, b: a / b,
    ast.Pow: _power,
}
_UNARY = {
    ast.UAdd: lambda a: a,
    ast.USub: lambda a: -a,
}


def _factorial(x):
    if x < 0:
        raise CalculatorInputError("Factorial is only defined for non-negative numbers.")
    if x > MAX_FACTORIAL:
        raise CalculatorInputError(f"Factorial is limited to {MAX_FACTORIAL}.")
    return float(math.factorial(int(x)))


def _reciprocal(x):
    return 1 / x


def _functions(angle_mode):
    to_radians = math.radians if angle_mode == "deg" else (lambda x: x)
    from_radians = math.degrees if angle_mode == "deg" else (lambda x: x)
    return {
        "sin": lambda x: math.sin(to_radians(x)),
        "cos": lambda x: math.cos(to_radians(x)),
        "tan": lambda x: math.tan(to_radians(x)),
        "asin": lambda x: from_radians(math.asin(x)),
        "acos": lambda x: from_radians(math.acos(x)),
        "atan": lambda x: from_radians(math.atan(x)),
        "log": math.log10,
        "ln": math.log,
        "sqrt": math.sqrt,
        "square": lambda x: x * x,
        "cube": lambda x: x * x * x,
        "exp": math.exp,
        "abs": abs,
        "factorial": _factorial,
        "reciprocal": _reciprocal,
    }


FUNCTIONS = tuple(_functions("rad"))


class _Evaluator:

    def __init__(self, angle_mode):
        self.functions = _functions(angle_mode)

    def visit(self, node):
        if isinstance(node, ast.Expression):
            return self.visit(node.body)
        if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)) \
                and not isinstance(node.value, bool):
            return float(node.value)
        if isinstance(node, ast.Name) and node.id in CONSTANTS:
            return CONSTANTS[node.id]
        if isinstance(node, ast.BinOp) and type(node.op) in _BINARY:
            return _BINARY[type(node.op)](self.visit(node.left), self.visit(node.right))
        if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY:
            return _UNARY[type(node.op)](self.visit(node.operand))
        if (isinstance(node, ast.Call) and isinstance(node.func, ast.Name)
                and node.func.id in self.functions and len(node.args) == 1 and not node.keywords):
            return self.functions[node.func.id](self.visit(node.args[0]))
        if isinstance(node, ast.Name):
            raise CalculatorInputError(f"Unknown name: {node.id}")
        raise CalculatorInputError("Invalid expression.")


def evaluate_expression(expression="2 * (3 + 4)", angle_mode="deg"):
    """
    Evaluate an arithmetic expression such as ``sin(30) + 2^3`` or
    ``sqrt(2) * pi``. Trigonometric functions work in degrees or radians.
    """
    if angle_mode not in ANGLE_MODES:
        raise CalculatorInputError(f"Unknown angle mode: {angle_mode}")
    text = (expression or "").strip()
    if not text:
        raise CalculatorInputError("Enter an expression.")
    if len(text) > MAX_EXPRESSION_LENGTH:
        raise CalculatorInputError(f"Expressions are limited to {MAX_EXPRESSION_LENGTH} characters.")

    try:
        tree = ast.parse(text.replace("^", "**"), mode="eval")
    except SyntaxError as e:
        raise CalculatorInputError("Invalid expression.") from e

    try:
        result = _Evaluator(angle_mode).visit(tree)
    except CalculatorInputError:
        raise
    except ZeroDivisionError as e:
        raise CalculatorInputError("Cannot divide by zero.") from e
    except OverflowError as e:
        raise CalculatorInputError("The result is too large.") from e
    except RecursionError as e:
        raise CalculatorInputError("The expression is nested too deeply.") from e
    except ValueError as e:
        raise CalculatorInputError("The expression is outside the domain of a function.") from e

    if not math.isfinite(result):
        raise CalculatorInputError("The result is not a real number.")
    return {
        "expression": text,
        "angle_mode": angle_mode,
        "result": result,
        "display": f"{result:.12g}",
    }
