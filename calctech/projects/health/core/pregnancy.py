"""
Pregnancy date estimates.

Everything is anchored on the first day of the last menstrual period (LMP):
due date = LMP + 280 days (Naegele's rule), conception ~ LMP + 14 days.
"""
from datetime import date

from calctech.core.errors import CalculatorInputError
from calctech.utils.dates import shift_date

GESTATION_DAYS = 280
CONCEPTION_TO_DUE_DAYS = 266
LMP_TO_OVULATION_DAYS = 14
CONCEPTION_WINDOW_DAYS = 3


def _gestational_age(lmp, today):
    """Returns (week, day) since LMP."""
    days_since = (today - lmp).days
    return days_since // 7, days_since % 7


def _require(value, message):
    if value is None:
        raise CalculatorInputError(message)
    return value


def _lmp_from_ultrasound(ultrasound_date, gestational_weeks):
    _require(ultrasound_date, "Enter the ultrasound date.")
    if gestational_weeks is None or gestational_weeks < 0:
        raise CalculatorInputError("Enter the gestational age at the ultrasound in weeks.")
    return shift_date(ultrasound_date, weeks=-gestational_weeks)


def calculate_due_date(method="lmp", last_period=None, cycle_length=28, conception_date=None,
                       ultrasound_date=None, gestational_weeks=None, today=None):
    today = today or date.today()

    if method == "lmp":
        lmp = _require(last_period, "Enter the first day of your last period.")
        cycle = cycle_length or 28
        due = shift_date(lmp, days=GESTATION_DAYS)
        # Ovulation is about 14 days before the next period
        conception = shift_date(lmp, days=cycle - LMP_TO_OVULATION_DAYS)
    elif method == "conception":
        conception = _require(conception_date, "Enter the conception date.")
        due = shift_date(conception, days=CONCEPTION_TO_DUE_DAYS)
        lmp = shift_date(conception, days=-LMP_TO_OVULATION_DAYS)
    elif method == "ultrasound":
        lmp = _lmp_from_ultrasound(ultrasound_date, gestational_weeks)
        due = shift_date(lmp, days=GESTATION_DAYS)
        conception = shift_date(lmp, days=LMP_TO_OVULATION_DAYS)
    else:
        raise CalculatorInputError(f"Unknown calculation method: {method}")

    week, day = _gestational_age(lmp, today)
    days_remaining = (due - today).days

    return {
        "due_date": due,
        "conception_date": conception,
        "current_week": week,
        "current_day": day,
        "first_trimester_end": shift_date(lmp, weeks=13),
        "second_trimester_end": shift_date(lmp, weeks=27),
        "third_trimester_end": due,
        "days_remaining": days_remaining,
        "weeks_remaining": days_remaining // 7,
    }


def calculate_conception(method="lmp", last_period=None, due_date=None, ultrasound_date=None,
                         gestational_weeks=None, today=None):
    today = today or date.today()

    if method == "lmp":
        lmp = _require(last_period, "Enter the first day of your last period.")
        conception = shift_date(lmp, days=LMP_TO_OVULATION_DAYS)
        due = shift_date(lmp, days=GESTATION_DAYS)
    elif method == "due_date":
        due = _require(due_date, "Enter the due date.")
        conception = shift_date(due, days=-CONCEPTION_TO_DUE_DAYS)
    elif method == "ultrasound":
        lmp = _lmp_from_ultrasound(ultrasound_date, gestational_weeks)
        conception = shift_date(lmp, days=LMP_TO_OVULATION_DAYS)
        due = shift_date(lmp, days=GESTATION_DAYS)
    else:
        raise CalculatorInputError(f"Unknown calculation method: {method}")

    week, day = _gestational_age(shift_date(conception, days=-LMP_TO_OVULATION_DAYS), today)

    return {
        "conception_date": conception,
        "due_date": due,
        "conception_range_start": shift_date(conception, days=-CONCEPTION_WINDOW_DAYS),
        "conception_range_end": shift_date(conception, days=CONCEPTION_WINDOW_DAYS),
        "current_week": week,
        "current_day": day,
    }
