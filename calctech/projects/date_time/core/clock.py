from calctech.core.errors import CalculatorInputError
from calctech.utils.formatting import format_clock

SECONDS_PER_UNIT = {
    "seconds": 1,
    "minutes": 60,
    "hours": 3600,
    "days": 86400,
}

MODE_LABELS = {
    "add": "Time Addition",
    "subtract": "Time Subtraction",
    "convert": "Time Conversion",
}


def to_seconds(hours=0, minutes=0, seconds=0):
    return (hours or 0) * 3600 + (minutes or 0) * 60 + (seconds or 0)


def calculate_time(mode="add", hours1=0, minutes1=0, seconds1=0, hours2=0, minutes2=0, seconds2=0,
                   convert_value=0, convert_from="minutes"):
    """Add or subtract two durations, or express one quantity in h/m/s.

    A subtraction that goes negative reports the absolute difference.
    """
    if mode == "convert":
        if convert_from not in SECONDS_PER_UNIT:
            raise CalculatorInputError(f"Unknown time unit: {convert_from}")
        total = (convert_value or 0) * SECONDS_PER_UNIT[convert_from]
    elif mode in ("add", "subtract"):
        first = to_seconds(hours1, minutes1, seconds1)
        second = to_seconds(hours2, minutes2, seconds2)
        total = abs(first + second if mode == "add" else first - second)
    else:
        raise CalculatorInputError(f"Unknown time mode: {mode}")

    if total < 0:
        raise CalculatorInputError("Time cannot be negative.")

    hours, remainder = divmod(total, 3600)
    return {
        "mode": MODE_LABELS[mode],
        "hours": int(hours),
        "minutes": int(remainder // 60),
        "seconds": int(remainder % 60),
        "total_seconds": total,
        "total_minutes": total / 60,
        "total_hours": total / 3600,
        "formatted": format_clock(total),
    }
