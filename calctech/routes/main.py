from flask import Blueprint, abort, render_template

from calctech.projects.registry import get_children_of_category, get_homepage_items, get_project_by_id
from calctech.utils.logging import log_project_visit

main_bp = Blueprint('main', __name__)

@main_bp.route('/')
def index():
    # Categories only; calculators are listed on each category page
    categories = get_homepage_items()

    return render_template('index.html', categories=categories)

@main_bp.route('/category/<category_id>')
def category(category_id):
    category = get_project_by_id(category_id)
    if not category or category['type'] != 'category':
        abort(404)

    calculators = get_children_of_category(category_id)
    log_project_visit(category_id, category['name'])

    return render_template('category.html', category=category, calculators=calculators)
