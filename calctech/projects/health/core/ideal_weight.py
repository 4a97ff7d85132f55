from calctech.utils.units import INCH_TO_M, KG_TO_LB, height_in_inches

# kg = base + per_inch * (inches over 5 ft)
FORMULAS = {
    "robinson": {"male": (52, 1.9), "female": (49, 1.7)},
    "miller": {"male": (56.2, 1.41), "female": (53.1, 1.36)},
    "devine": {"male": (50, 2.3), "female": (45.5, 2.3)},
    "hamwi": {"male": (48, 2.7), "female": (45.5, 2.2)},
}


def calculate_ideal_weight(unit_system="imperial", gender="male", height_primary=0, height_inches=0):
    """
    Ideal weight by four published formulas and the BMI 18.5-24.9 range.
    Results are in pounds for imperial input and kilograms for metric.
    """
    inches = height_in_inches(unit_system, height_primary, height_inches)
    height_m = inches * INCH_TO_M
    to_unit = KG_TO_LB if unit_system == "imperial" else 1

    result = {}
    for name, by_gender in FORMULAS.items():
        base, per_inch = by_gender.get(gender, by_gender["male"])
        result[name] = (base + per_inch * (inches - 60)) * to_unit

    result["healthy_range"] = {
        "min": 18.5 * height_m * height_m * to_unit,
        "max": 24.9 * height_m * height_m * to_unit,
    }
    result["weight_unit"] = "lb" if unit_system == "imperial" else "kg"
    return result
