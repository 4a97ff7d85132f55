from wtforms import DateField, IntegerField, SelectField
from wtforms.validators import InputRequired, NumberRange, Optional

from calctech.forms import CalculatorForm, FiniteFloatField, gender_field, unit_system_field
from calctech.projects.health.core.metabolism import ACTIVITY_LABELS


class BodyMeasurementsForm(CalculatorForm):
    """Height and weight in either unit system."""

    unit_system = unit_system_field()
    height_primary = FiniteFloatField(
        "Height (feet, or cm for metric)",
        validators=[InputRequired(), NumberRange(min=0, max=300)],
        default=5,
    )
    height_inches = FiniteFloatField(
        "Height (inches, US units only)",
        validators=[Optional(), NumberRange(min=0, max=11.99)],
        default=10,
    )
    weight = FiniteFloatField(
        "Weight (lb, or kg for metric)",
        validators=[InputRequired(), NumberRange(min=0, max=1500)],
        default=160,
    )


class BMIForm(BodyMeasurementsForm):
    pass


class BMRForm(BodyMeasurementsForm):
    gender = gender_field()
    age = IntegerField("Age", validators=[InputRequired(), NumberRange(min=1, max=120)], default=30)
    formula = SelectField(
        "Formula",
        choices=[("mifflin", "Mifflin-St Jeor"), ("harris", "Revised Harris-Benedict")],
        default="mifflin",
    )


class CalorieForm(BodyMeasurementsForm):
    gender = gender_field()
    age = IntegerField("Age", validators=[InputRequired(), NumberRange(min=15, max=80)], default=30)
    activity_level = SelectField(
        "Activity Level",
        choices=list(ACTIVITY_LABELS.items()),
        default="moderately",
    )


class BodyFatForm(BodyMeasurementsForm):
    gender = gender_field()
    neck = FiniteFloatField("Neck (in, or cm)", validators=[InputRequired(), NumberRange(min=0)], default=15)
    waist = FiniteFloatField("Waist (in, or cm)", validators=[InputRequired(), NumberRange(min=0)], default=34)
    hip = FiniteFloatField(
        "Hip (in, or cm; women only)",
        validators=[Optional(), NumberRange(min=0)],
        default=0,
    )


class IdealWeightForm(CalculatorForm):
    unit_system = unit_system_field()
    gender = gender_field()
    height_primary = FiniteFloatField(
        "Height (feet, or cm for metric)",
        validators=[InputRequired(), NumberRange(min=0, max=300)],
        default=5,
    )
    height_inches = FiniteFloatField(
        "Height (inches, US units only)",
        validators=[Optional(), NumberRange(min=0, max=11.99)],
        default=10,
    )


class PaceForm(CalculatorForm):
    distance = FiniteFloatField("Distance", validators=[InputRequired(), NumberRange(min=0)], default=3.1)
    distance_unit = SelectField(
        "Distance Unit",
        choices=[("miles", "Miles"), ("km", "Kilometers"), ("meters", "Meters")],
        default="miles",
    )
    hours = IntegerField("Hours", validators=[Optional(), NumberRange(min=0)], default=0)
    minutes = IntegerField("Minutes", validators=[Optional(), NumberRange(min=0, max=59)], default=25)
    seconds = IntegerField("Seconds", validators=[Optional(), NumberRange(min=0, max=59)], default=0)


class DueDateForm(CalculatorForm):
    method = SelectField(
        "Calculate Based On",
        choices=[
            ("lmp", "Last Menstrual Period"),
            ("conception", "Conception Date"),
            ("ultrasound", "Ultrasound"),
        ],
        default="lmp",
    )
    last_period = DateField("First Day of Last Period", validators=[Optional()])
    cycle_length = IntegerField(
        "Average Cycle Length (days)",
        validators=[Optional(), NumberRange(min=20, max=45)],
        default=28,
    )
    conception_date = DateField("Conception Date", validators=[Optional()])
    ultrasound_date = DateField("Ultrasound Date", validators=[Optional()])
    gestational_weeks = IntegerField(
        "Weeks Pregnant at Ultrasound",
        validators=[Optional(), NumberRange(min=0, max=42)],
    )


class ConceptionForm(CalculatorForm):
    method = SelectField(
        "Calculate Based On",
        choices=[
            ("lmp", "Last Menstrual Period"),
            ("due_date", "Due Date"),
            ("ultrasound", "Ultrasound"),
        ],
        default="lmp",
    )
    last_period = DateField("First Day of Last Period", validators=[Optional()])
    due_date = DateField("Due Date", validators=[Optional()])
    ultrasound_date = DateField("Ultrasound Date", validators=[Optional()])
    gestational_weeks = IntegerField(
        "Weeks Pregnant at Ultrasound",
        validators=[Optional(), NumberRange(min=0, max=42)],
    )
