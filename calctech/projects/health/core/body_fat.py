import math

from calctech.core.errors import CalculatorInputError
from calctech.utils.units import INCH_TO_CM

# (upper bound exclusive, category, description) per gender
BODY_FAT_CATEGORIES = {
    "male": [
        (6, "Essential Fat", "This level is very low and may not be sustainable for most people."),
        (14, "Athletes", "Athletic body fat percentage. Common among competitive athletes."),
        (18, "Fitness", "Fit and healthy body fat percentage with visible muscle definition."),
        (25, "Average", "Average body fat percentage for men."),
        (float("inf"), "Obese", "Higher than recommended. Consider consulting a healthcare provider."),
    ],
    "female": [
        (14, "Essential Fat", "This level is very low and may not be sustainable for most women."),
        (21, "Athletes", "Athletic body fat percentage. Common among competitive athletes."),
        (25, "Fitness", "Fit and healthy body fat percentage."),
        (32, "Average", "Average body fat percentage for women."),
        (float("inf"), "Obese", "Higher than recommended. Consider consulting a healthcare provider."),
    ],
}


def body_fat_category(gender, percentage):
    table = BODY_FAT_CATEGORIES.get(gender, BODY_FAT_CATEGORIES["male"])
    for upper, category, description in table:
        if percentage < upper:
            return category, description
    return table[-1][1], table[-1][2]


def navy_body_fat(gender, height_in, neck_in, waist_in, hip_in=0):
    """
    U.S. Navy circumference method. All measurements in inches.
    """
    if height_in <= 0:
        raise CalculatorInputError("Height must be greater than zero.")

    if gender == "male":
        girth = waist_in - neck_in
        if girth <= 0:
            raise CalculatorInputError("Waist must be larger than neck.")
        density = 1.0324 - 0.19077 * math.log10(girth) + 0.15456 * math.log10(height_in)
    else:
        girth = waist_in + hip_in - neck_in
        if girth <= 0:
            raise CalculatorInputError("Waist plus hip must be larger than neck.")
        density = 1.29579 - 0.35004 * math.log10(girth) + 0.22100 * math.log10(height_in)

    return 495 / density - 450


def calculate_body_fat(unit_system="imperial", gender="male", height_primary=0, height_inches=0,
                       weight=0, neck=0, waist=0, hip=0):
    """
    Body fat percentage plus fat and lean mass in the weight unit entered.

    Imperial: feet + inches, pounds, circumferences in inches.
    Metric: centimetres, kilograms, circumferences in centimetres.
    """
    if unit_system == "imperial":
        height_in = (height_primary or 0) * 12 + (height_inches or 0)
        scale = 1
    else:
        height_in = (height_primary or 0) / INCH_TO_CM
        scale = 1 / INCH_TO_CM

    percentage = navy_body_fat(
        gender,
        height_in,
        (neck or 0) * scale,
        (waist or 0) * scale,
        (hip or 0) * scale,
    )

    fat_mass = (weight or 0) * (percentage / 100)
    category, description = body_fat_category(gender, percentage)

    return {
        "body_fat_percentage": percentage,
        "body_fat_mass": fat_mass,
        "lean_body_mass": (weight or 0) - fat_mass,
        "weight_unit": "lb" if unit_system == "imperial" else "kg",
        "category": category,
        "description": description,
    }
