"""Body-measurement conversions shared by the health calculators."""

LB_TO_KG = 0.453592
KG_TO_LB = 2.20462
INCH_TO_CM = 2.54
INCH_TO_M = 0.0254


def height_in_inches(unit_system, height_primary, height_inches=0):
    """
    Imperial height is feet plus inches; metric height is centimetres.
    """
    if unit_system == "imperial":
        return (height_primary or 0) * 12 + (height_inches or 0)
    return (height_primary or 0) / INCH_TO_CM


def height_in_cm(unit_system, height_primary, height_inches=0):
    if unit_system == "imperial":
        return height_in_inches(unit_system, height_primary, height_inches) * INCH_TO_CM
    return height_primary or 0


def weight_in_kg(unit_system, weight):
    if unit_system == "imperial":
        return (weight or 0) * LB_TO_KG
    return weight or 0
