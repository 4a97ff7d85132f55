"""
Fitness & Health calculators. Public, no inputs are stored.
"""
from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.health.core.bmi import calculate_bmi
from calctech.projects.health.core.body_fat import calculate_body_fat
from calctech.projects.health.core.ideal_weight import calculate_ideal_weight
from calctech.projects.health.core.metabolism import calculate_bmr, calculate_calories
from calctech.projects.health.core.pace import calculate_pace
from calctech.projects.health.core.pregnancy import calculate_conception, calculate_due_date
from calctech.projects.health.forms import (
    BMIForm,
    BMRForm,
    BodyFatForm,
    CalorieForm,
    ConceptionForm,
    DueDateForm,
    IdealWeightForm,
    PaceForm,
)
from calctech.utils.dates import site_today

health_bp = Blueprint('health', __name__, template_folder='templates')


def _due_date(**values):
    return calculate_due_date(today=site_today(), **values)


def _conception(**values):
    return calculate_conception(today=site_today(), **values)


@health_bp.route('/bmi', methods=['GET', 'POST'])
def bmi():
    return calculator_page('bmi', BMIForm, calculate_bmi)

@health_bp.route('/api/bmi', methods=['GET', 'POST'])
def api_bmi():
    return calculator_api('bmi', BMIForm, calculate_bmi)


@health_bp.route('/bmr', methods=['GET', 'POST'])
def bmr():
    return calculator_page('bmr', BMRForm, calculate_bmr)

@health_bp.route('/api/bmr', methods=['GET', 'POST'])
def api_bmr():
    return calculator_api('bmr', BMRForm, calculate_bmr)


@health_bp.route('/body-fat', methods=['GET', 'POST'])
def body_fat():
    return calculator_page('body_fat', BodyFatForm, calculate_body_fat)

@health_bp.route('/api/body-fat', methods=['GET', 'POST'])
def api_body_fat():
    return calculator_api('body_fat', BodyFatForm, calculate_body_fat)


@health_bp.route('/calorie', methods=['GET', 'POST'])
def calorie():
    return calculator_page('calorie', CalorieForm, calculate_calories)

@health_bp.route('/api/calorie', methods=['GET', 'POST'])
def api_calorie():
    return calculator_api('calorie', CalorieForm, calculate_calories)


@health_bp.route('/ideal-weight', methods=['GET', 'POST'])
def ideal_weight():
    return calculator_page('ideal_weight', IdealWeightForm, calculate_ideal_weight)

@health_bp.route('/api/ideal-weight', methods=['GET', 'POST'])
def api_ideal_weight():
    return calculator_api('ideal_weight', IdealWeightForm, calculate_ideal_weight)


@health_bp.route('/pace', methods=['GET', 'POST'])
def pace():
    return calculator_page('pace', PaceForm, calculate_pace)

@health_bp.route('/api/pace', methods=['GET', 'POST'])
def api_pace():
    return calculator_api('pace', PaceForm, calculate_pace)


@health_bp.route('/due-date', methods=['GET', 'POST'])
def due_date():
    return calculator_page('due_date', DueDateForm, _due_date)

@health_bp.route('/api/due-date', methods=['GET', 'POST'])
def api_due_date():
    return calculator_api('due_date', DueDateForm, _due_date)


@health_bp.route('/conception', methods=['GET', 'POST'])
def conception():
    return calculator_page('conception', ConceptionForm, _conception)

@health_bp.route('/api/conception', methods=['GET', 'POST'])
def api_conception():
    return calculator_api('conception', ConceptionForm, _conception)
