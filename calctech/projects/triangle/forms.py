from wtforms import SelectField
from wtforms.validators import Optional

from calctech.forms import CalculatorForm, FiniteFloatField


def _measure(label, default):
    return FiniteFloatField(label, validators=[Optional()], default=default)


class TriangleForm(CalculatorForm):
    mode = SelectField(
        "Known Values",
        choices=[
            ("sss", "Three sides (SSS)"),
            ("sas", "Two sides and included angle (SAS)"),
            ("asa", "Two angles and included side (ASA)"),
            ("base_height", "Base and height"),
        ],
        default="sss",
    )
    side_a = _measure("Side a", 3)
    side_b = _measure("Side b", 4)
    side_c = _measure("Side c", 5)

    side1 = _measure("Side a (SAS)", 5)
    angle = _measure("Included angle C° (SAS)", 60)
    side2 = _measure("Side b (SAS)", 5)

    angle_a = _measure("Angle A° (ASA)", 60)
    side_ab = _measure("Included side c (ASA)", 5)
    angle_b = _measure("Angle B° (ASA)", 60)

    base = _measure("Base", 4)
    height = _measure("Height", 3)
