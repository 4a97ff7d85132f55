from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.subnet.core.subnet import calculate_subnet
from calctech.projects.subnet.forms import SubnetForm

subnet_bp = Blueprint('subnet', __name__, template_folder='templates')


@subnet_bp.route('/', methods=['GET', 'POST'])
def index():
    return calculator_page('subnet', SubnetForm, calculate_subnet)


@subnet_bp.route('/api', methods=['GET', 'POST'])
def api_subnet():
    return calculator_api('subnet', SubnetForm, calculate_subnet)
