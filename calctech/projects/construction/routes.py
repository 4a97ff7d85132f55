from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.construction.core.concrete import calculate_concrete
from calctech.projects.construction.forms import ConcreteForm

construction_bp = Blueprint('construction', __name__, template_folder='templates')


@construction_bp.route('/concrete', methods=['GET', 'POST'])
def concrete():
    return calculator_page('concrete', ConcreteForm, calculate_concrete)

@construction_bp.route('/api/concrete', methods=['GET', 'POST'])
def api_concrete():
    return calculator_api('concrete', ConcreteForm, calculate_concrete)
