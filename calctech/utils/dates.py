from datetime import datetime

import pytz
from dateutil.relativedelta import relativedelta
from flask import current_app, has_app_context

from calctech.core.errors import CalculatorInputError

DATE_OUT_OF_RANGE = "Resulting date is out of range."


def site_today():
    """Current date in the site's configured time zone."""
    tz_name = 'UTC'
    if has_app_context():
        tz_name = current_app.config.get('SITE_TIME_ZONE', 'UTC')
    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc  # Fallback to UTC if timezone is invalid
    return datetime.now(tz).date()


def shift_date(start, **delta):
    """
    start + relativedelta(**delta).

    Raises CalculatorInputError when the result falls outside the years
    1 to 9999 that Python dates can hold.
    """
    try:
        return start + relativedelta(**delta)
    except (OverflowError, ValueError) as e:
        raise CalculatorInputError(DATE_OUT_OF_RANGE) from e
