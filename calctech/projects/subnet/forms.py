from wtforms import BooleanField, IntegerField, StringField
from wtforms.validators import InputRequired, Optional

from calctech.forms import CalculatorForm


class SubnetForm(CalculatorForm):
    ip_address = StringField("IP Address", validators=[InputRequired()], default="192.168.1.100")
    use_subnet_mask = BooleanField("Enter a subnet mask instead of CIDR", default=True)
    subnet_mask = StringField("Subnet Mask", validators=[Optional()], default="255.255.255.0")
    # Range is checked by the calculator so the message matches the mask errors
    cidr = IntegerField("CIDR Prefix", validators=[Optional()], default=24)
