"""
Concrete volume, bag counts and cost.

In feet mode lengths are feet and thickness, diameter and step sizes are
inches. In meters mode everything is metres. Volumes are worked in cubic
feet.
"""
import math

from calctech.core.errors import CalculatorInputError

FEET_PER_METER = 3.28084
CUBIC_METERS_PER_CUBIC_FOOT = 0.0283168
CUBIC_FEET_PER_YARD = 27

# bag weight (lb) -> cubic feet of mixed concrete it yields
BAG_YIELDS = {80: 0.6, 60: 0.45, 40: 0.3}

SHAPES = ("slab", "footing", "column", "stairs")


def _to_feet(value, unit, inches=False):
    if unit == "meters":
        return value * FEET_PER_METER
    return value / 12 if inches else value


def shape_volume(shape, unit="feet", length=0, width=0, thickness=0, diameter=0, height=0,
                 steps=0, step_width=0, step_height=0, step_depth=0):
    """Volume in cubic feet before waste."""
    if unit not in ("feet", "meters"):
        raise CalculatorInputError(f"Unknown unit: {unit}")

    if shape in ("slab", "footing"):
        return _to_feet(length, unit) * _to_feet(width, unit) * _to_feet(thickness, unit, inches=True)
    if shape == "column":
        radius = _to_feet(diameter, unit, inches=True) / 2
        return math.pi * radius * radius * _to_feet(height, unit)
    if shape == "stairs":
        step = (_to_feet(step_width, unit, inches=True)
                * _to_feet(step_depth, unit, inches=True)
                * _to_feet(step_height, unit, inches=True))
        # Step k stands k risers tall, so the prisms add up as 1 + 2 + ... + n
        return step * steps * (steps + 1) / 2
    raise CalculatorInputError(f"Unknown shape: {shape}")


def bags_needed(cubic_feet, bag_yield):
    # Rounded first so 6.0 / 0.6 is 10 bags, not 11
    return math.ceil(round(cubic_feet / bag_yield, 9))


def calculate_concrete(shape="slab", unit="feet", length=20, width=10, thickness=4, diameter=12, height=8,
                       steps=10, step_width=36, step_height=7, step_depth=11, waste_percent=10,
                       ready_mix_price=125, bag_80lb_price=5, bag_60lb_price=4):
    base = shape_volume(
        shape, unit,
        length=length or 0, width=width or 0, thickness=thickness or 0,
        diameter=diameter or 0, height=height or 0,
        steps=steps or 0, step_width=step_width or 0,
        step_height=step_height or 0, step_depth=step_depth or 0,
    )
    cubic_feet = base * (1 + (waste_percent or 0) / 100)
    cubic_yards = cubic_feet / CUBIC_FEET_PER_YARD
    bags = {f"bags_{weight}lb": bags_needed(cubic_feet, size) for weight, size in BAG_YIELDS.items()}

    return {
        "cubic_feet": cubic_feet,
        "cubic_yards": cubic_yards,
        "cubic_meters": cubic_feet * CUBIC_METERS_PER_CUBIC_FOOT,
        **bags,
        "estimated_cost": {
            "ready_mix": cubic_yards * (ready_mix_price or 0),
            "bags_80lb": bags["bags_80lb"] * (bag_80lb_price or 0),
            "bags_60lb": bags["bags_60lb"] * (bag_60lb_price or 0),
        },
    }
