import math

from flask_wtf import FlaskForm
from wtforms import FieldList, FloatField, FormField, SelectField, SubmitField


UNIT_SYSTEM_CHOICES = [("imperial", "US Units (ft, in, lb)"), ("metric", "Metric (cm, kg)")]
GENDER_CHOICES = [("male", "Male"), ("female", "Female")]

_SKIPPED_FIELDS = ("csrf_token", "submit")


def _field_value(field):
    if isinstance(field, FieldList):
        return [_field_value(entry) for entry in field.entries]
    if isinstance(field, FormField):
        return form_values(field.form)
    data = field.data
    if data is None and field.default is not None:
        data = field.default() if callable(field.default) else field.default
    return data


def form_values(form):
    """
    Collect parsed field data keyed by field short name.

    Blank optional fields fall back to their declared default. Nested
    FieldList/FormField data becomes lists of dicts.
    """
    values = {}
    for field in form:
        if field.short_name in _SKIPPED_FIELDS:
            continue
        values[field.short_name] = _field_value(field)
    return values


class FiniteFloatField(FloatField):
    """FloatField that rejects nan and infinity."""

    def process_formdata(self, valuelist):
        super().process_formdata(valuelist)
        if self.data is not None and not math.isfinite(self.data):
            self.data = None
            raise ValueError(self.gettext("Not a finite number."))


class CalculatorForm(FlaskForm):
    """Base form for every calculator page.

    Field names match the keyword arguments of the calculator function the
    form feeds, so ``calculate(**form.values())`` works.
    """

    submit = SubmitField("Calculate")

    def values(self):
        return form_values(self)


def unit_system_field(default="imperial"):
    return SelectField("Units", choices=UNIT_SYSTEM_CHOICES, default=default)


def gender_field(default="male"):
    return SelectField("Gender", choices=GENDER_CHOICES, default=default)
