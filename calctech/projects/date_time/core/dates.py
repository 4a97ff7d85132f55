"""
Calendar arithmetic on plain dates.

Month and year steps use dateutil's relativedelta, so Jan 31 + 1 month is
the last day of February rather than spilling into March.
"""
from datetime import date

from dateutil.relativedelta import relativedelta

from calctech.core.errors import CalculatorInputError
from calctech.utils.dates import shift_date

MINUTES_PER_DAY = 24 * 60


def _long_date(value):
    return f"{value:%B} {value.day}, {value.year}"


def _span(start, end):
    delta = relativedelta(end, start)
    total_days = (end - start).days
    return {
        "years": delta.years,
        "months": delta.months,
        "days": delta.days,
        "total_days": total_days,
        "total_weeks": total_days // 7,
        "total_hours": total_days * 24,
    }


def next_birthday(birth_date, as_of):
    """The first birthday on or after as_of. Feb 29 falls back to Feb 28."""
    years = as_of.year - birth_date.year
    upcoming = shift_date(birth_date, years=years)
    if upcoming < as_of:
        upcoming = shift_date(birth_date, years=years + 1)
    return upcoming


def calculate_age(birth_date=None, as_of=None):
    if birth_date is None:
        raise CalculatorInputError("Enter a date of birth.")
    as_of = as_of or date.today()
    if birth_date > as_of:
        raise CalculatorInputError("Birth date cannot be in the future!")

    span = _span(birth_date, as_of)
    upcoming = next_birthday(birth_date, as_of)

    return {
        "years": span["years"],
        "months": span["months"],
        "days": span["days"],
        "total_days": span["total_days"],
        "total_weeks": span["total_weeks"],
        "total_months": span["years"] * 12 + span["months"],
        "total_hours": span["total_hours"],
        "total_minutes": span["total_days"] * MINUTES_PER_DAY,
        "next_birthday": {
            "date": upcoming,
            "display": _long_date(upcoming),
            "days_until": (upcoming - as_of).days,
            "day_of_week": f"{upcoming:%A}",
        },
    }


def add_to_date(start, years=0, months=0, days=0, subtract=False):
    if start is None:
        raise CalculatorInputError("Enter a start date.")
    sign = -1 if subtract else 1
    result = shift_date(start, years=sign * (years or 0), months=sign * (months or 0),
                        days=sign * (days or 0))
    return {
        "mode": "Date After Subtracting Time" if subtract else "Date After Adding Time",
        "result_date": result,
        "display": _long_date(result),
        "day_of_week": f"{result:%A}",
    }


def date_difference(start, end):
    if start is None or end is None:
        raise CalculatorInputError("Enter both a start and an end date.")
    if start > end:
        raise CalculatorInputError("Start date must be before end date!")
    return {"mode": "Date Difference", "difference": _span(start, end)}


def calculate_date(mode="add", start_date=None, end_date=None, years=0, months=0, days=0):
    if mode == "add":
        return add_to_date(start_date, years, months, days)
    if mode == "subtract":
        return add_to_date(start_date, years, months, days, subtract=True)
    if mode == "difference":
        return date_difference(start_date, end_date)
    raise CalculatorInputError(f"Unknown date mode: {mode}")
