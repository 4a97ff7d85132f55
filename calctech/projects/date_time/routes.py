from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.date_time.core.clock import calculate_time
from calctech.projects.date_time.core.dates import calculate_age, calculate_date
from calctech.projects.date_time.core.hours import calculate_hours
from calctech.projects.date_time.forms import AgeForm, DateForm, HoursForm, TimeForm
from calctech.utils.dates import site_today

date_time_bp = Blueprint('date_time', __name__, template_folder='templates')


def _age(birth_date=None, as_of=None):
    return calculate_age(birth_date, as_of or site_today())


def _date(start_date=None, **values):
    return calculate_date(start_date=start_date or site_today(), **values)


@date_time_bp.route('/age', methods=['GET', 'POST'])
def age():
    return calculator_page('age', AgeForm, _age)

@date_time_bp.route('/api/age', methods=['GET', 'POST'])
def api_age():
    return calculator_api('age', AgeForm, _age)


@date_time_bp.route('/date', methods=['GET', 'POST'])
def date_calculator():
    return calculator_page('date', DateForm, _date)

@date_time_bp.route('/api/date', methods=['GET', 'POST'])
def api_date():
    return calculator_api('date', DateForm, _date)


@date_time_bp.route('/time', methods=['GET', 'POST'])
def time_calculator():
    return calculator_page('time', TimeForm, calculate_time)

@date_time_bp.route('/api/time', methods=['GET', 'POST'])
def api_time():
    return calculator_api('time', TimeForm, calculate_time)


@date_time_bp.route('/hours', methods=['GET', 'POST'])
def hours():
    return calculator_page('hours', HoursForm, calculate_hours)

@date_time_bp.route('/api/hours', methods=['GET', 'POST'])
def api_hours():
    return calculator_api('hours', HoursForm, calculate_hours)
