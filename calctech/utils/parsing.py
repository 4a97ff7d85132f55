"""
Parse free-text numeric input.

Every parser returns a (value, error) pair. value is None when error is set.
Nothing here raises for bad user input.
"""
import math
import re

_LIST_SEPARATORS = re.compile(r"[,\s]+")


def parse_number(raw):
    """
    Parse a single finite number from user input.

    Returns (number, error_message).
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None, "A value is required."

    if isinstance(raw, bool):
        return None, f"'{raw}' is not a number."

    if isinstance(raw, (int, float)):
        value = raw
    else:
        text = str(raw).strip()
        try:
            value = float(text)
        except ValueError:
            return None, f"'{text}' is not a valid number."

    if isinstance(value, float) and not math.isfinite(value):
        return None, "Value must be a finite number."
    return value, None


def parse_number_list(raw):
    """
    Parse a list of numbers separated by commas, spaces or line breaks.

    Returns (values, rejected) where rejected holds the tokens that were not
    numbers. An empty input gives ([], []).
    """
    if not raw:
        return [], []
    values = []
    rejected = []
    for token in _LIST_SEPARATORS.split(str(raw)):
        if not token:
            continue
        value, err = parse_number(token)
        if err:
            rejected.append(token)
        else:
            values.append(value)
    return values, rejected
