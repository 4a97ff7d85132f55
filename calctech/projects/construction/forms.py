from wtforms import IntegerField, SelectField
from wtforms.validators import NumberRange, Optional

from calctech.forms import CalculatorForm, FiniteFloatField


def _size(label, default):
    return FiniteFloatField(label, validators=[Optional(), NumberRange(min=0)], default=default)


class ConcreteForm(CalculatorForm):
    shape = SelectField(
        "Shape",
        choices=[("slab", "Slab"), ("footing", "Footing"), ("column", "Round Column"), ("stairs", "Stairs")],
        default="slab",
    )
    unit = SelectField("Units", choices=[("feet", "Feet / inches"), ("meters", "Meters")], default="feet")
    length = _size("Length (ft or m)", 20)
    width = _size("Width (ft or m)", 10)
    thickness = _size("Thickness (in or m)", 4)
    diameter = _size("Column Diameter (in or m)", 12)
    height = _size("Column Height (ft or m)", 8)
    steps = IntegerField("Number of Steps", validators=[Optional(), NumberRange(min=0, max=200)], default=10)
    step_width = _size("Step Width (in or m)", 36)
    step_height = _size("Step Rise (in or m)", 7)
    step_depth = _size("Step Run (in or m)", 11)
    waste_percent = FiniteFloatField("Waste (%)", validators=[Optional(), NumberRange(min=0, max=100)], default=10)
    ready_mix_price = _size("Ready-Mix Price ($/yd³)", 125)
    bag_80lb_price = _size("80 lb Bag Price ($)", 5)
    bag_60lb_price = _size("60 lb Bag Price ($)", 4)
