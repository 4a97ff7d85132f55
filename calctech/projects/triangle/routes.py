from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.triangle.core.solver import solve_triangle
from calctech.projects.triangle.forms import TriangleForm

triangle_bp = Blueprint('triangle', __name__, template_folder='templates')


@triangle_bp.route('/', methods=['GET', 'POST'])
def index():
    return calculator_page('triangle', TriangleForm, solve_triangle)


@triangle_bp.route('/api', methods=['GET', 'POST'])
def api_solve():
    return calculator_api('triangle', TriangleForm, solve_triangle)
