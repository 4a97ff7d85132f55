from datetime import date, time

from wtforms import (
    DateField, FieldList, Form, FormField, IntegerField, SelectField, TimeField,
)
from wtforms.validators import InputRequired, NumberRange, Optional

from calctech.forms import CalculatorForm, FiniteFloatField
from calctech.projects.date_time.core.clock import MODE_LABELS, SECONDS_PER_UNIT

MAX_TIMESHEET_ROWS = 31
MAX_TIME_PART = 1000000


class AgeForm(CalculatorForm):
    birth_date = DateField("Date of Birth", validators=[InputRequired()], default=date(1990, 1, 1))
    as_of = DateField("Age at the Date of (blank for today)", validators=[Optional()])


class DateForm(CalculatorForm):
    mode = SelectField(
        "Calculation",
        choices=[("add", "Add to a date"), ("subtract", "Subtract from a date"),
                 ("difference", "Days between two dates")],
        default="add",
    )
    start_date = DateField("Start Date", validators=[Optional()])
    end_date = DateField("End Date", validators=[Optional()])
    years = IntegerField("Years", validators=[Optional(), NumberRange(min=0, max=1000)], default=0)
    months = IntegerField("Months", validators=[Optional(), NumberRange(min=0, max=12000)], default=0)
    days = IntegerField("Days", validators=[Optional(), NumberRange(min=0, max=365000)], default=30)


def _time_part(label, default):
    return IntegerField(label, validators=[Optional(), NumberRange(min=0, max=MAX_TIME_PART)], default=default)


class TimeForm(CalculatorForm):
    mode = SelectField("Calculation", choices=list(MODE_LABELS.items()), default="add")
    hours1 = _time_part("Hours", 2)
    minutes1 = _time_part("Minutes", 30)
    seconds1 = _time_part("Seconds", 0)
    hours2 = _time_part("Hours", 1)
    minutes2 = _time_part("Minutes", 45)
    seconds2 = _time_part("Seconds", 30)
    convert_value = FiniteFloatField(
        "Value to convert", validators=[Optional(), NumberRange(min=0, max=1e9)], default=120)
    convert_from = SelectField(
        "Convert from",
        choices=[(unit, unit.capitalize()) for unit in SECONDS_PER_UNIT],
        default="minutes",
    )


class TimeEntryForm(Form):
    date = DateField("Date", validators=[Optional()])
    start_time = TimeField("Start", validators=[Optional()])
    end_time = TimeField("End", validators=[Optional()])
    break_minutes = IntegerField("Break (minutes)", validators=[Optional(), NumberRange(min=0)])


class HoursForm(CalculatorForm):
    entries = FieldList(
        FormField(TimeEntryForm),
        max_entries=MAX_TIMESHEET_ROWS,
        default=[{"start_time": time(9, 0), "end_time": time(17, 0), "break_minutes": 30}],
    )
    hourly_rate = FiniteFloatField("Hourly Rate ($)", validators=[Optional(), NumberRange(min=0)], default=25)
    regular_hours_limit = FiniteFloatField(
        "Regular Hours per Week",
        validators=[Optional(), NumberRange(min=0)],
        default=40,
    )
    overtime_multiplier = FiniteFloatField(
        "Overtime Multiplier",
        validators=[Optional(), NumberRange(min=1)],
        default=1.5,
    )
