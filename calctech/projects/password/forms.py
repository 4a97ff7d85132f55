from wtforms import BooleanField, IntegerField
from wtforms.validators import NumberRange, Optional

from calctech.forms import CalculatorForm
from calctech.projects.password.core.generator import MAX_LENGTH, MIN_LENGTH


class PasswordForm(CalculatorForm):
    length = IntegerField(
        "Password Length",
        validators=[Optional(), NumberRange(min=MIN_LENGTH, max=MAX_LENGTH)],
        default=16,
    )
    uppercase = BooleanField("Uppercase letters (A-Z)", default=True)
    lowercase = BooleanField("Lowercase letters (a-z)", default=True)
    numbers = BooleanField("Numbers (0-9)", default=True)
    symbols = BooleanField("Symbols (!@#$...)", default=True)
    exclude_similar = BooleanField("Exclude similar characters (i, l, 1, L, o, 0, O)", default=True)
    exclude_ambiguous = BooleanField("Exclude ambiguous symbols ({ } [ ] ( ) / \\ ' \" ` ~ , ; : . < >)",
                                     default=False)
