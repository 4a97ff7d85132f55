from calctech.utils.units import INCH_TO_M, KG_TO_LB, LB_TO_KG

HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

# (upper bound exclusive, category, description)
BMI_CATEGORIES = [
    (18.5, "Underweight",
     "Your BMI indicates you may be underweight. Consider consulting with a healthcare "
     "provider about healthy weight gain strategies."),
    (25, "Normal Weight",
     "Congratulations! Your BMI falls within the healthy weight range. Maintain your current "
     "lifestyle with balanced nutrition and regular exercise."),
    (30, "Overweight",
     "Your BMI indicates you may be overweight. Consider adopting healthier eating habits "
     "and increasing physical activity."),
    (float("inf"), "Obese",
     "Your BMI indicates obesity. We recommend consulting with a healthcare provider to "
     "develop a personalized weight management plan."),
]


def bmi_category(bmi):
    """Returns (category, description) for a BMI value."""
    for upper, category, description in BMI_CATEGORIES:
        if bmi < upper:
            return category, description
    return BMI_CATEGORIES[-1][1], BMI_CATEGORIES[-1][2]


def calculate_bmi(unit_system="imperial", height_primary=0, height_inches=0, weight=0):
    """
    Body mass index.

    Imperial: height_primary is feet, height_inches inches, weight pounds.
    Metric: height_primary is centimetres, weight kilograms.
    A missing height or weight gives a BMI of 0.
    """
    if unit_system == "imperial":
        total_inches = (height_primary or 0) * 12 + (height_inches or 0)
        height_m = total_inches * INCH_TO_M
        weight_kg = (weight or 0) * LB_TO_KG
    else:
        height_m = (height_primary or 0) / 100
        weight_kg = weight or 0

    bmi = 0
    if height_m > 0 and weight_kg > 0:
        bmi = weight_kg / (height_m * height_m)

    category, description = bmi_category(bmi)

    height_squared = height_m * height_m
    min_weight = HEALTHY_BMI_MIN * height_squared
    max_weight = HEALTHY_BMI_MAX * height_squared
    if unit_system == "imperial":
        min_weight *= KG_TO_LB
        max_weight *= KG_TO_LB

    return {
        "bmi": bmi,
        "category": category,
        "description": description,
        "healthy_weight_range": {"min": min_weight, "max": max_weight},
        "weight_unit": "lb" if unit_system == "imperial" else "kg",
    }
