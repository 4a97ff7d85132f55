from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.statistics.core.descriptive import calculate_statistics
from calctech.projects.statistics.core.random_numbers import generate_random_numbers
from calctech.projects.statistics.forms import RandomNumberForm, StandardDeviationForm

statistics_bp = Blueprint('statistics', __name__, template_folder='templates')


@statistics_bp.route('/standard-deviation', methods=['GET', 'POST'])
def standard_deviation():
    return calculator_page('standard_deviation', StandardDeviationForm, calculate_statistics)

@statistics_bp.route('/api/standard-deviation', methods=['GET', 'POST'])
def api_standard_deviation():
    return calculator_api('standard_deviation', StandardDeviationForm, calculate_statistics)


@statistics_bp.route('/random-number', methods=['GET', 'POST'])
def random_number():
    return calculator_page('random_number', RandomNumberForm, generate_random_numbers)

@statistics_bp.route('/api/random-number', methods=['GET', 'POST'])
def api_random_number():
    return calculator_api('random_number', RandomNumberForm, generate_random_numbers)
