import math

from calctech.core.errors import CalculatorInputError
from calctech.utils.formatting import format_duration

KM_PER_MILE = 1.60934

RACE_DISTANCES_KM = {
    "5k": 5,
    "10k": 10,
    "half_marathon": 21.0975,
    "marathon": 42.195,
}


def _split_minutes(minutes):
    """Decimal minutes -> (whole minutes, rounded seconds)."""
    whole = math.floor(minutes)
    secs = round((minutes - whole) * 60)
    if secs == 60:
        whole, secs = whole + 1, 0
    return whole, secs


def calculate_pace(distance=0, distance_unit="miles", hours=0, minutes=0, seconds=0):
    total_minutes = (hours or 0) * 60 + (minutes or 0) + (seconds or 0) / 60
    if not distance or distance <= 0:
        raise CalculatorInputError("Distance must be greater than zero.")
    if total_minutes <= 0:
        raise CalculatorInputError("Time must be greater than zero.")

    if distance_unit == "km":
        km = distance
        miles = distance / KM_PER_MILE
    elif distance_unit == "meters":
        km = distance / 1000
        miles = distance / 1609.34
    else:
        miles = distance
        km = distance * KM_PER_MILE

    total_seconds = total_minutes * 60
    pace_mile_min, pace_mile_sec = _split_minutes(total_minutes / miles)
    pace_km_min, pace_km_sec = _split_minutes(total_minutes / km)

    return {
        "pace_per_mile": {"minutes": pace_mile_min, "seconds": pace_mile_sec},
        "pace_per_km": {"minutes": pace_km_min, "seconds": pace_km_sec},
        "speed_mph": miles / (total_minutes / 60),
        "speed_kmh": km / (total_minutes / 60),
        "race_times": {
            race: format_duration(race_km / km * total_seconds)
            for race, race_km in RACE_DISTANCES_KM.items()
        },
    }
