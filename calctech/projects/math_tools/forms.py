from wtforms import IntegerField, SelectField, StringField
from wtforms.validators import InputRequired, Length, Optional

from calctech.forms import CalculatorForm, FiniteFloatField
from calctech.projects.math_tools.core.percentage import MODE_LABELS
from calctech.projects.math_tools.core.scientific import MAX_EXPRESSION_LENGTH


def _optional_number(label, default):
    return FiniteFloatField(label, validators=[Optional()], default=default)


class PercentageForm(CalculatorForm):
    mode = SelectField("Question", choices=list(MODE_LABELS.items()), default="what_is")
    percentage = _optional_number("Percentage (%)", 25)
    of_value = _optional_number("Of value", 200)
    part_value = _optional_number("Part", 50)
    total_value = _optional_number("Total", 200)
    old_value = _optional_number("Original value", 100)
    new_value = _optional_number("New value", 150)
    base_value = _optional_number("Base value", 100)
    percent_change = _optional_number("Percent to increase/decrease by", 20)


class FractionForm(CalculatorForm):
    num1 = IntegerField("First numerator", validators=[InputRequired()], default=1)
    den1 = IntegerField("First denominator", validators=[InputRequired()], default=2)
    operation = SelectField(
        "Operation",
        choices=[("+", "+ Add"), ("-", "− Subtract"), ("*", "× Multiply"), ("/", "÷ Divide")],
        default="+",
    )
    num2 = IntegerField("Second numerator", validators=[InputRequired()], default=1)
    den2 = IntegerField("Second denominator", validators=[InputRequired()], default=3)


class ScientificForm(CalculatorForm):
    expression = StringField(
        "Expression",
        validators=[InputRequired(), Length(max=MAX_EXPRESSION_LENGTH)],
        default="2 * (3 + 4)",
    )
    angle_mode = SelectField("Angles", choices=[("deg", "Degrees"), ("rad", "Radians")], default="deg")
