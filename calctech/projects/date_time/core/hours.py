"""
Timesheet totals with a weekly overtime threshold.
"""
from calctech.core.errors import CalculatorInputError

MINUTES_PER_DAY = 24 * 60


def _minutes_of_day(value):
    """Minutes since midnight from a datetime.time or an "HH:MM" string."""
    if hasattr(value, "hour"):
        return value.hour * 60 + value.minute
    try:
        hour, minute = str(value).split(":")[:2]
        return int(hour) * 60 + int(minute)
    except ValueError as e:
        raise CalculatorInputError(f"Invalid time: {value}") from e


def worked_minutes(start_time, end_time, break_minutes=0):
    """End minus start minus break. Negative spans are treated as overnight shifts."""
    minutes = _minutes_of_day(end_time) - _minutes_of_day(start_time) - (break_minutes or 0)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def calculate_hours(entries=(), hourly_rate=0, regular_hours_limit=40, overtime_multiplier=1.5):
    rate = hourly_rate or 0
    regular_limit = regular_hours_limit or 40
    multiplier = overtime_multiplier or 1.5

    total_minutes = 0
    rows = []
    for entry in entries:
        start, end = entry.get("start_time"), entry.get("end_time")
        if not start or not end:
            continue
        minutes = worked_minutes(start, end, entry.get("break_minutes"))
        total_minutes += minutes
        rows.append({
            "date": entry.get("date"),
            "hours": minutes // 60,
            "minutes": minutes % 60,
        })

    total_hours = total_minutes / 60
    regular_hours = min(total_hours, regular_limit)
    overtime_hours = max(0, total_hours - regular_limit)
    earnings = regular_hours * rate
    overtime_earnings = overtime_hours * rate * multiplier

    return {
        "total_hours": total_hours,
        "total_minutes": total_minutes,
        "regular_hours": regular_hours,
        "overtime_hours": overtime_hours,
        "earnings": earnings,
        "overtime_earnings": overtime_earnings,
        "total_earnings": earnings + overtime_earnings,
        "entries": rows,
    }
