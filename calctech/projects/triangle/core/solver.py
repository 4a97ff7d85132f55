"""
Triangle solver.

Sides a, b, c sit opposite angles A, B, C. Each mode fills in the missing
sides and angles, then area, perimeter, classification and a list of
worked steps are derived from the full set.
"""
import math

from calctech.core.errors import CalculatorInputError

MODES = ("sss", "sas", "asa", "base_height")

SIDE_TOLERANCE = 0.01
RIGHT_ANGLE_TOLERANCE = 0.1


def _require_positive(**values):
    for name, value in values.items():
        if value is None or value <= 0:
            raise CalculatorInputError(f"{name.replace('_', ' ').capitalize()} must be greater than zero.")


def _opposite_angle(adjacent1, adjacent2, opposite):
    """Law of Cosines angle in degrees, cosine clamped to [-1, 1] for nearly flat triangles."""
    cosine = (adjacent1 * adjacent1 + adjacent2 * adjacent2 - opposite * opposite) / (2 * adjacent1 * adjacent2)
    return math.degrees(math.acos(max(-1.0, min(1.0, cosine))))


def _solve_sss(a, b, c, steps):
    _require_positive(side_a=a, side_b=b, side_c=c)
    steps.append(f"Given three sides: a = {a:g}, b = {b:g}, c = {c:g}")

    if a + b <= c or a + c <= b or b + c <= a:
        raise CalculatorInputError("These sides cannot form a valid triangle!")

    angle_a = _opposite_angle(b, c, a)
    angle_b = _opposite_angle(a, c, b)
    angle_c = 180 - angle_a - angle_b
    steps.append("Using Law of Cosines to find angles:")
    steps.append(f"Angle A = arccos((b² + c² - a²) / (2bc)) = {angle_a:.2f}°")
    steps.append(f"Angle B = arccos((a² + c² - b²) / (2ac)) = {angle_b:.2f}°")
    steps.append(f"Angle C = 180° - A - B = {angle_c:.2f}°")

    s = (a + b + c) / 2
    area = math.sqrt(max(0.0, s * (s - a) * (s - b) * (s - c)))
    steps.append(f"Using Heron's Formula: s = (a + b + c) / 2 = {s:.2f}")
    steps.append(f"Area = √(s(s-a)(s-b)(s-c)) = {area:.2f}")
    return a, b, c, angle_a, angle_b, angle_c, area


def _solve_sas(a, angle_c, b, steps):
    _require_positive(side1=a, side2=b)
    if angle_c is None or not 0 < angle_c < 180:
        raise CalculatorInputError("The included angle must be between 0° and 180°.")
    steps.append(f"Given two sides and included angle: a = {a:g}, angle C = {angle_c:g}°, b = {b:g}")

    c = math.sqrt(max(0.0, a * a + b * b - 2 * a * b * math.cos(math.radians(angle_c))))
    if c == 0:
        raise CalculatorInputError("These sides and angle cannot form a valid triangle!")
    steps.append(f"Using Law of Cosines: c = √(a² + b² - 2ab·cos(C)) = {c:.2f}")

    angle_a = _opposite_angle(b, c, a)
    angle_b = 180 - angle_a - angle_c
    steps.append(f"Angle A = {angle_a:.2f}°")
    steps.append(f"Angle B = 180° - A - C = {angle_b:.2f}°")

    area = 0.5 * a * b * math.sin(math.radians(angle_c))
    steps.append(f"Area = (1/2) × a × b × sin(C) = {area:.2f}")
    return a, b, c, angle_a, angle_b, angle_c, area


def _solve_asa(angle_a, c, angle_b, steps):
    _require_positive(side_ab=c, angle_a=angle_a, angle_b=angle_b)
    angle_c = 180 - angle_a - angle_b
    if angle_c <= 0:
        raise CalculatorInputError("The sum of two angles cannot be >= 180°!")

    steps.append(f"Given two angles and included side: A = {angle_a:g}°, c = {c:g}, B = {angle_b:g}°")
    steps.append(f"Angle C = 180° - A - B = {angle_c:.2f}°")

    sin_c = math.sin(math.radians(angle_c))
    a = c * math.sin(math.radians(angle_a)) / sin_c
    b = c * math.sin(math.radians(angle_b)) / sin_c
    steps.append("Using Law of Sines:")
    steps.append(f"a = c × sin(A) / sin(C) = {a:.2f}")
    steps.append(f"b = c × sin(B) / sin(C) = {b:.2f}")

    area = 0.5 * a * b * sin_c
    steps.append(f"Area = (1/2) × a × b × sin(C) = {area:.2f}")
    return a, b, c, angle_a, angle_b, angle_c, area


def _solve_base_height(base, height, steps):
    _require_positive(base=base, height=height)
    steps.append(f"Given base = {base:g} and height = {height:g}")

    area = 0.5 * base * height
    steps.append(f"Area = (1/2) × base × height = {area:.2f}")

    a, b = base, height
    c = math.hypot(a, b)
    steps.append(f"Assuming right triangle: hypotenuse c = √(a² + b²) = {c:.2f}")

    angle_a = math.degrees(math.atan(b / a))
    angle_b = math.degrees(math.atan(a / b))
    angle_c = 90
    steps.append(f"Angle A = arctan(b/a) = {angle_a:.2f}°")
    steps.append(f"Angle B = arctan(a/b) = {angle_b:.2f}°")
    steps.append("Angle C = 90°")
    return a, b, c, angle_a, angle_b, angle_c, area


def classify(sides, angles):
    """e.g. "Scalene Right", "Equilateral Acute"."""
    s = sorted(sides)
    if abs(s[0] - s[1]) < SIDE_TOLERANCE and abs(s[1] - s[2]) < SIDE_TOLERANCE:
        kind = "Equilateral"
    elif (abs(s[0] - s[1]) < SIDE_TOLERANCE or abs(s[1] - s[2]) < SIDE_TOLERANCE
          or abs(s[0] - s[2]) < SIDE_TOLERANCE):
        kind = "Isosceles"
    else:
        kind = "Scalene"

    if any(abs(angle - 90) < RIGHT_ANGLE_TOLERANCE for angle in angles):
        return f"{kind} Right"
    if any(angle > 90 for angle in angles):
        return f"{kind} Obtuse"
    return f"{kind} Acute"


def solve_triangle(mode="sss", side_a=None, side_b=None, side_c=None,
                   side1=None, angle=None, side2=None,
                   angle_a=None, side_ab=None, angle_b=None,
                   base=None, height=None):
    steps = []
    if mode == "sss":
        solved = _solve_sss(side_a, side_b, side_c, steps)
    elif mode == "sas":
        solved = _solve_sas(side1, angle, side2, steps)
    elif mode == "asa":
        solved = _solve_asa(angle_a, side_ab, angle_b, steps)
    elif mode == "base_height":
        solved = _solve_base_height(base, height, steps)
    else:
        raise CalculatorInputError(f"Unknown triangle mode: {mode}")

    a, b, c, angle_a, angle_b, angle_c, area = solved
    perimeter = a + b + c
    steps.append(f"Perimeter = a + b + c = {perimeter:.2f}")

    return {
        "side_a": a,
        "side_b": b,
        "side_c": c,
        "angle_a": angle_a,
        "angle_b": angle_b,
        "angle_c": angle_c,
        "area": area,
        "perimeter": perimeter,
        "type": classify((a, b, c), (angle_a, angle_b, angle_c)),
        "steps": steps,
    }
