from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.math_tools.core.fraction import calculate_fraction
from calctech.projects.math_tools.core.percentage import calculate_percentage
from calctech.projects.math_tools.core.scientific import evaluate_expression
from calctech.projects.math_tools.forms import FractionForm, PercentageForm, ScientificForm

math_tools_bp = Blueprint('math_tools', __name__, template_folder='templates')


@math_tools_bp.route('/percentage', methods=['GET', 'POST'])
def percentage():
    return calculator_page('percentage', PercentageForm, calculate_percentage)

@math_tools_bp.route('/api/percentage', methods=['GET', 'POST'])
def api_percentage():
    return calculator_api('percentage', PercentageForm, calculate_percentage)


@math_tools_bp.route('/fraction', methods=['GET', 'POST'])
def fraction():
    return calculator_page('fraction', FractionForm, calculate_fraction)

@math_tools_bp.route('/api/fraction', methods=['GET', 'POST'])
def api_fraction():
    return calculator_api('fraction', FractionForm, calculate_fraction)


@math_tools_bp.route('/scientific', methods=['GET', 'POST'])
def scientific():
    return calculator_page('scientific', ScientificForm, evaluate_expression)

@math_tools_bp.route('/api/scientific', methods=['GET', 'POST'])
def api_scientific():
    return calculator_api('scientific', ScientificForm, evaluate_expression)
