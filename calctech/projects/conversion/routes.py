from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.conversion.core.units import convert
from calctech.projects.conversion.forms import ConversionForm

conversion_bp = Blueprint('conversion', __name__, template_folder='templates')


@conversion_bp.route('/', methods=['GET', 'POST'])
def index():
    return calculator_page('conversion', ConversionForm, convert)


@conversion_bp.route('/api', methods=['GET', 'POST'])
def api_convert():
    return calculator_api('conversion', ConversionForm, convert)
