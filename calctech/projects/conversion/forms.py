from wtforms import SelectField
from wtforms.validators import InputRequired

from calctech.forms import CalculatorForm, FiniteFloatField
from calctech.projects.conversion.core.units import CATEGORY_LABELS, all_unit_choices


class ConversionForm(CalculatorForm):
    category = SelectField("Category", choices=list(CATEGORY_LABELS.items()), default="length")
    value = FiniteFloatField("Value", validators=[InputRequired()], default=1)
    from_unit = SelectField("From", choices=all_unit_choices(), default="meters")
    to_unit = SelectField("To", choices=all_unit_choices(), default="feet")
