from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.password.core.generator import generate_password
from calctech.projects.password.forms import PasswordForm

password_bp = Blueprint('password', __name__, template_folder='templates')


@password_bp.route('/', methods=['GET', 'POST'])
def index():
    return calculator_page('password', PasswordForm, generate_password)


@password_bp.route('/api', methods=['GET', 'POST'])
def api_generate():
    response = calculator_api('password', PasswordForm, generate_password)
    if not isinstance(response, tuple):
        response.headers['Cache-Control'] = 'no-store'
    return response
