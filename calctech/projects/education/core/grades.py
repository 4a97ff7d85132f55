"""
Course grade and GPA calculations.
"""
from calctech.core.errors import CalculatorInputError

LETTER_GRADES = [
    (93, "A"), (90, "A-"), (87, "B+"), (83, "B"), (80, "B-"), (77, "C+"),
    (73, "C"), (70, "C-"), (67, "D+"), (63, "D"), (60, "D-"),
]

FINAL_EXAM_TARGETS = {"for_a": 93, "for_b": 83, "for_c": 73}

GRADE_POINTS = {
    "A+": {"4.0": 4.0, "5.0": 5.0},
    "A": {"4.0": 4.0, "5.0": 5.0},
    "A-": {"4.0": 3.7, "5.0": 4.7},
    "B+": {"4.0": 3.3, "5.0": 4.3},
    "B": {"4.0": 3.0, "5.0": 4.0},
    "B-": {"4.0": 2.7, "5.0": 3.7},
    "C+": {"4.0": 2.3, "5.0": 3.3},
    "C": {"4.0": 2.0, "5.0": 3.0},
    "C-": {"4.0": 1.7, "5.0": 2.7},
    "D+": {"4.0": 1.3, "5.0": 2.3},
    "D": {"4.0": 1.0, "5.0": 2.0},
    "D-": {"4.0": 0.7, "5.0": 1.7},
    "F": {"4.0": 0.0, "5.0": 0.0},
}

# (minimum GPA, letter, classification), 4.0 scale only
GPA_CLASSIFICATIONS = [
    (3.7, "A", "Excellent"),
    (3.3, "B+", "Very Good"),
    (3.0, "B", "Good"),
    (2.7, "B-", "Above Average"),
    (2.0, "C", "Average"),
    (1.0, "D", "Below Average"),
]


def letter_grade(percent):
    for minimum, letter in LETTER_GRADES:
        if percent >= minimum:
            return letter
    return "F"


def calculate_grade(assignments=(), final_exam_weight=0):
    """
    Current standing from weighted assignments and the score needed on the
    final exam for an A, B or C.

    current_grade is the average over completed weight only. weighted_average
    is the weighted score with the final still counting as zero, which is
    what the needed-on-final figures are based on.
    """
    weighted_score = 0
    total_weight = 0
    points_earned = 0
    points_possible = 0

    for assignment in assignments:
        score = assignment.get("score") or 0
        max_score = assignment.get("max_score") or 0
        weight = assignment.get("weight") or 0
        if max_score <= 0:
            continue
        weighted_score += score / max_score * 100 * (weight / 100)
        total_weight += weight
        points_earned += score
        points_possible += max_score

    final_weight = final_exam_weight or 0
    planned_weight = total_weight + final_weight
    current = weighted_score / total_weight * 100 if total_weight > 0 else 0

    def needed(target):
        if final_weight == 0:
            return 0
        return max(0, min(100, (target - weighted_score) / final_weight * 100))

    return {
        "current_grade": current,
        "letter_grade": letter_grade(current),
        "weighted_average": weighted_score,
        "points_earned": points_earned,
        "points_possible": points_possible,
        "percentage_complete": total_weight / planned_weight * 100 if planned_weight > 0 else 0,
        "grade_needed": {key: needed(target) for key, target in FINAL_EXAM_TARGETS.items()},
    }


def calculate_gpa(courses=(), scale="4.0"):
    if scale not in ("4.0", "5.0"):
        raise CalculatorInputError(f"Unknown grade scale: {scale}")

    quality_points = 0
    total_credits = 0
    for course in courses:
        credits = course.get("credits") or 0
        points = GRADE_POINTS.get(course.get("grade"), {}).get(scale, 0)
        quality_points += points * credits
        total_credits += credits

    gpa = quality_points / total_credits if total_credits > 0 else 0

    letter = None
    classification = None
    if scale == "4.0":
        letter, classification = "F", "Failing"
        for minimum, grade, label in GPA_CLASSIFICATIONS:
            if gpa >= minimum:
                letter, classification = grade, label
                break

    return {
        "gpa": gpa,
        "total_credits": total_credits,
        "total_quality_points": quality_points,
        "letter_grade": letter,
        "classification": classification,
    }
