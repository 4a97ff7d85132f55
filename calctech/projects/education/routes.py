from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.education.core.grades import calculate_gpa, calculate_grade
from calctech.projects.education.forms import GPAForm, GradeForm

education_bp = Blueprint('education', __name__, template_folder='templates')


@education_bp.route('/grade', methods=['GET', 'POST'])
def grade():
    return calculator_page('grade', GradeForm, calculate_grade)

@education_bp.route('/api/grade', methods=['GET', 'POST'])
def api_grade():
    return calculator_api('grade', GradeForm, calculate_grade)


@education_bp.route('/gpa', methods=['GET', 'POST'])
def gpa():
    return calculator_page('gpa', GPAForm, calculate_gpa)

@education_bp.route('/api/gpa', methods=['GET', 'POST'])
def api_gpa():
    return calculator_api('gpa', GPAForm, calculate_gpa)
