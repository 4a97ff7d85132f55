"""
Basal metabolic rate and daily calorie needs.
"""
from calctech.utils.units import height_in_cm, weight_in_kg

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "lightly": 1.375,
    "moderately": 1.55,
    "very": 1.725,
    "extra": 1.9,
}

ACTIVITY_LABELS = {
    "sedentary": "Sedentary (little or no exercise)",
    "lightly": "Lightly active (1-3 days/week)",
    "moderately": "Moderately active (3-5 days/week)",
    "very": "Very active (6-7 days/week)",
    "extra": "Extra active (physical job or 2x training)",
}

# One pound of fat is roughly 3500 kcal, so 500 kcal/day is about 1 lb/week
MILD_DELTA = 250
NORMAL_DELTA = 500
EXTREME_DELTA = 1000


def mifflin_st_jeor(gender, weight_kg, height_cm, age):
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == "male" else base - 161


def harris_benedict(gender, weight_kg, height_cm, age):
    """Revised (Roza and Shizgal, 1984) Harris-Benedict equation."""
    if gender == "male":
        return 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age + 88.362
    return 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age + 447.593


def daily_energy_table(bmr):
    """TDEE for every activity level."""
    return {level: bmr * multiplier for level, multiplier in ACTIVITY_MULTIPLIERS.items()}


def calculate_bmr(unit_system="metric", gender="male", age=0, height_primary=0,
                  height_inches=0, weight=0, formula="mifflin"):
    weight_kg = weight_in_kg(unit_system, weight)
    height_cm = height_in_cm(unit_system, height_primary, height_inches)
    age = age or 0

    if formula == "mifflin":
        bmr = mifflin_st_jeor(gender, weight_kg, height_cm, age)
    else:
        bmr = harris_benedict(gender, weight_kg, height_cm, age)

    return {
        "bmr": bmr,
        "formula": "Mifflin-St Jeor" if formula == "mifflin" else "Revised Harris-Benedict",
        "daily_calories": daily_energy_table(bmr),
    }


def calculate_calories(unit_system="imperial", gender="male", age=0, height_primary=0,
                       height_inches=0, weight=0, activity_level="moderately"):
    weight_kg = weight_in_kg(unit_system, weight)
    height_cm = height_in_cm(unit_system, height_primary, height_inches)

    bmr = mifflin_st_jeor(gender, weight_kg, height_cm, age or 0)
    table = daily_energy_table(bmr)
    maintain = table.get(activity_level, table["moderately"])

    return {
        "bmr": bmr,
        "daily_calories": table,
        "maintain_weight": maintain,
        "mild_weight_loss": maintain - MILD_DELTA,
        "weight_loss": maintain - NORMAL_DELTA,
        "extreme_weight_loss": maintain - EXTREME_DELTA,
        "mild_weight_gain": maintain + MILD_DELTA,
        "weight_gain": maintain + NORMAL_DELTA,
        "extreme_weight_gain": maintain + EXTREME_DELTA,
    }
