from wtforms import SelectField, TextAreaField
from wtforms.validators import NumberRange, Optional

from calctech.forms import CalculatorForm, FiniteFloatField


def _price_field(label, default):
    return FiniteFloatField(label, validators=[Optional()], default=default)


def _amount_field(label, default):
    return FiniteFloatField(label, validators=[Optional(), NumberRange(min=0)], default=default)


class ProbabilityForm(CalculatorForm):
    mode = SelectField(
        "Convert",
        choices=[
            ("price_to_probability", "Share price → probability"),
            ("probability_to_price", "Probability % → share price"),
        ],
        default="price_to_probability",
    )
    price = _price_field("Share price ($0.01 - $0.99)", 0.65)
    probability = FiniteFloatField("Probability (%)", validators=[Optional()], default=65)
    batch = TextAreaField("Batch prices (comma or line separated)", validators=[Optional()], default="")


class ExpectedValueForm(CalculatorForm):
    price = _price_field("Market price", 0.65)
    true_probability = _price_field("Your probability (0.01 - 0.99)", 0.75)
    position_size = _amount_field("Position size ($)", 100)


class ArbitrageForm(CalculatorForm):
    yes_price = _price_field("YES price", 0.52)
    no_price = _price_field("NO price", 0.52)
    investment = _amount_field("Total investment ($)", 1000)


class KellyForm(CalculatorForm):
    bankroll = _amount_field("Bankroll ($)", 10000)
    price = _price_field("Market price", 0.60)
    true_probability = _price_field("Your probability (0.01 - 0.99)", 0.70)
