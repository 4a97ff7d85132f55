from wtforms import BooleanField, IntegerField, TextAreaField
from wtforms.validators import InputRequired, NumberRange, Optional

from calctech.forms import CalculatorForm

MAX_RANDOM_COUNT = 10000


class StandardDeviationForm(CalculatorForm):
    data = TextAreaField(
        "Numbers (comma, space or line separated)",
        validators=[InputRequired()],
        default="2, 4, 6, 8, 10",
    )


class RandomNumberForm(CalculatorForm):
    minimum = IntegerField("Minimum", validators=[Optional()], default=1)
    maximum = IntegerField("Maximum", validators=[Optional()], default=100)
    count = IntegerField(
        "How many numbers",
        validators=[Optional(), NumberRange(min=1, max=MAX_RANDOM_COUNT)],
        default=1,
    )
    allow_duplicates = BooleanField("Allow duplicates", default=True)
    sort_results = BooleanField("Sort results", default=False)
