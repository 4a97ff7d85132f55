"""
Shared request handling for calculator pages and their JSON endpoints.

Each project blueprint routes a page and an API URL per calculator and hands
the form class and the calculator function to the helpers below.
"""
import math
from datetime import date, datetime

from flask import jsonify, render_template, request
from werkzeug.datastructures import MultiDict
from wtforms import BooleanField

from calctech.core.errors import CalculatorInputError
from calctech.projects.registry import get_project_by_id
from calctech.utils.logging import log_project_visit, log_rejected_input

TOO_LARGE = "The numbers entered are too large to calculate."


def _flatten(value, prefix, out):
    """Flatten nested JSON into WTForms-style keys (``courses-0-grade``)."""
    if isinstance(value, dict):
        for key, item in value.items():
            _flatten(item, f"{prefix}-{key}" if prefix else str(key), out)
    elif isinstance(value, list) and value and isinstance(value[0], (dict, list)):
        for index, item in enumerate(value):
            _flatten(item, f"{prefix}-{index}", out)
    elif isinstance(value, list):
        for item in value:
            _flatten(item, prefix, out)
    elif isinstance(value, bool):
        # BooleanField treats "false" and "" as unchecked
        out.append((prefix, "true" if value else "false"))
    elif value is None:
        out.append((prefix, ""))
    else:
        out.append((prefix, str(value)))


def request_formdata():
    """Query args, form fields and JSON body merged into one MultiDict."""
    items = list(request.args.items(multi=True))
    items.extend(request.form.items(multi=True))
    if request.is_json:
        payload = request.get_json(silent=True)
        if isinstance(payload, dict):
            _flatten(payload, "", items)
    return MultiDict(items)


def to_jsonable(value):
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _is_finite(value):
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_is_finite(item) for item in value.values())
    if isinstance(value, (list, tuple)):
        return all(_is_finite(item) for item in value)
    return True


def _run(calculator_id, compute, form):
    """Returns (result, error)."""
    try:
        result = compute(**form.values())
    except CalculatorInputError as e:
        log_rejected_input(calculator_id, str(e))
        return None, str(e)
    except OverflowError:
        log_rejected_input(calculator_id, "arithmetic overflow")
        return None, TOO_LARGE
    if not _is_finite(result):
        log_rejected_input(calculator_id, "non-finite result")
        return None, TOO_LARGE
    return result, None


def calculator_page(calculator_id, form_class, compute, template="calculator.html"):
    """Render a calculator form; on a valid POST, render the result too."""
    calculator = get_project_by_id(calculator_id)
    form = form_class()
    result = None
    error = None

    if form.validate_on_submit():
        result, error = _run(calculator_id, compute, form)
    elif request.method == "GET":
        log_project_visit(calculator_id, calculator["name"])

    return render_template(
        template,
        calculator=calculator,
        form=form,
        result=result,
        error=error,
    )


def calculator_api(calculator_id, form_class, compute):
    """Run a calculator from query args / form data / JSON. Returns result JSON or {error}."""
    formdata = request_formdata()
    form = form_class(formdata=formdata, meta={"csrf": False})
    # An absent checkbox means "unchecked" in HTML; over the API it means "use the default"
    for field in form:
        if isinstance(field, BooleanField) and field.name not in formdata:
            field.data = bool(field.default)

    if not form.validate():
        log_rejected_input(calculator_id, form.errors)
        return jsonify({"error": "Invalid input.", "fields": form.errors}), 400

    result, error = _run(calculator_id, compute, form)
    if error:
        return jsonify({"error": error}), 400
    return jsonify(to_jsonable(result))
