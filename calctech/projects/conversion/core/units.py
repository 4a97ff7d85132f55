"""
Unit conversion through a base unit per category.

Every category except temperature is a plain ratio to its base unit
(meters, kilograms, square meters, liters, m/s, seconds, bytes).
"""
from calctech.core.errors import CalculatorInputError

# category -> unit -> (display name, base units per one of this unit)
RATIO_UNITS = {
    "length": {
        "meters": ("Meters", 1),
        "kilometers": ("Kilometers", 1000),
        "centimeters": ("Centimeters", 0.01),
        "millimeters": ("Millimeters", 0.001),
        "miles": ("Miles", 1609.344),
        "yards": ("Yards", 0.9144),
        "feet": ("Feet", 0.3048),
        "inches": ("Inches", 0.0254),
    },
    "weight": {
        "kilograms": ("Kilograms", 1),
        "grams": ("Grams", 0.001),
        "milligrams": ("Milligrams", 0.000001),
        "pounds": ("Pounds", 0.453592),
        "ounces": ("Ounces", 0.0283495),
        "tons": ("Metric Tons", 1000),
    },
    "area": {
        "square_meters": ("Square Meters", 1),
        "square_kilometers": ("Square Kilometers", 1000000),
        "square_feet": ("Square Feet", 0.092903),
        "square_yards": ("Square Yards", 0.836127),
        "acres": ("Acres", 4046.86),
        "hectares": ("Hectares", 10000),
    },
    "volume": {
        "liters": ("Liters", 1),
        "milliliters": ("Milliliters", 0.001),
        "gallons": ("Gallons (US)", 3.78541),
        "quarts": ("Quarts (US)", 0.946353),
        "pints": ("Pints (US)", 0.473176),
        "cups": ("Cups (US)", 0.236588),
        "cubic_meters": ("Cubic Meters", 1000),
    },
    "speed": {
        "meters_per_second": ("Meters/Second", 1),
        "kilometers_per_hour": ("Kilometers/Hour", 1 / 3.6),
        "miles_per_hour": ("Miles/Hour", 0.44704),
        "knots": ("Knots", 0.514444),
    },
    "time": {
        "seconds": ("Seconds", 1),
        "minutes": ("Minutes", 60),
        "hours": ("Hours", 3600),
        "days": ("Days", 86400),
        "weeks": ("Weeks", 604800),
        "months": ("Months (30 days)", 2592000),
        "years": ("Years (365 days)", 31536000),
    },
    "data": {
        "bytes": ("Bytes", 1),
        "kilobytes": ("Kilobytes (KB)", 1024),
        "megabytes": ("Megabytes (MB)", 1024 ** 2),
        "gigabytes": ("Gigabytes (GB)", 1024 ** 3),
        "terabytes": ("Terabytes (TB)", 1024 ** 4),
    },
}

# unit -> (display name, to celsius, from celsius)
TEMPERATURE_UNITS = {
    "celsius": ("Celsius", lambda v: v, lambda v: v),
    "fahrenheit": ("Fahrenheit", lambda v: (v - 32) * 5 / 9, lambda v: v * 9 / 5 + 32),
    "kelvin": ("Kelvin", lambda v: v - 273.15, lambda v: v + 273.15),
}

TEMPERATURE_FORMULAS = {
    ("celsius", "fahrenheit"): "({value} × 9/5) + 32 = {result:.2f}",
    ("fahrenheit", "celsius"): "({value} - 32) × 5/9 = {result:.2f}",
    ("celsius", "kelvin"): "{value} + 273.15 = {result:.2f}",
    ("kelvin", "celsius"): "{value} - 273.15 = {result:.2f}",
}

CATEGORY_LABELS = {
    "length": "Length",
    "weight": "Weight",
    "temperature": "Temperature",
    "area": "Area",
    "volume": "Volume",
    "speed": "Speed",
    "time": "Time",
    "data": "Data Storage",
}


def units_for(category):
    """[(unit key, display name)] for a category, in table order."""
    if category == "temperature":
        return [(key, spec[0]) for key, spec in TEMPERATURE_UNITS.items()]
    if category not in RATIO_UNITS:
        raise CalculatorInputError(f"Unknown conversion category: {category}")
    return [(key, spec[0]) for key, spec in RATIO_UNITS[category].items()]


def all_unit_choices():
    return [
        (key, f"{CATEGORY_LABELS[category]}: {name}")
        for category in CATEGORY_LABELS
        for key, name in units_for(category)
    ]


def _number_text(value):
    return f"{value:g}"


def _convert_temperature(value, from_unit, to_unit):
    try:
        from_name, to_celsius, _ = TEMPERATURE_UNITS[from_unit]
        to_name, _, from_celsius = TEMPERATURE_UNITS[to_unit]
    except KeyError as e:
        raise CalculatorInputError(f"Unknown temperature unit: {e.args[0]}") from e

    result = from_celsius(to_celsius(value))
    template = TEMPERATURE_FORMULAS.get((from_unit, to_unit), "Conversion: {value} → {result:.6f}")
    return from_name, to_name, result, template.format(value=_number_text(value), result=result)


def _convert_ratio(category, value, from_unit, to_unit):
    units = RATIO_UNITS[category]
    try:
        from_name, from_factor = units[from_unit]
        to_name, to_factor = units[to_unit]
    except KeyError as e:
        raise CalculatorInputError(f"Unknown {category} unit: {e.args[0]}") from e

    result = value * from_factor / to_factor
    ratio = from_factor / to_factor
    formula = f"{_number_text(value)} × {ratio:.6f} = {result:.6f}"
    return from_name, to_name, result, formula


def convert(category="length", value=0, from_unit="meters", to_unit="feet"):
    value = value or 0
    if category == "temperature":
        from_name, to_name, result, formula = _convert_temperature(value, from_unit, to_unit)
    elif category in RATIO_UNITS:
        from_name, to_name, result, formula = _convert_ratio(category, value, from_unit, to_unit)
    else:
        raise CalculatorInputError(f"Unknown conversion category: {category}")

    return {
        "category": category,
        "from": from_name,
        "to": to_name,
        "value": value,
        "result": result,
        "formula": formula,
    }
