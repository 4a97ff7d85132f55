"""
Polymarket trading calculators.
"""
from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.polymarket.core.trading import (
    calculate_arbitrage,
    calculate_expected_value,
    calculate_kelly,
    calculate_probability,
)
from calctech.projects.polymarket.forms import ArbitrageForm, ExpectedValueForm, KellyForm, ProbabilityForm

polymarket_bp = Blueprint('polymarket', __name__, template_folder='templates')


@polymarket_bp.route('/probability', methods=['GET', 'POST'])
def probability():
    return calculator_page('polymarket_probability', ProbabilityForm, calculate_probability)

@polymarket_bp.route('/api/probability', methods=['GET', 'POST'])
def api_probability():
    return calculator_api('polymarket_probability', ProbabilityForm, calculate_probability)


@polymarket_bp.route('/ev', methods=['GET', 'POST'])
def expected_value():
    return calculator_page('polymarket_ev', ExpectedValueForm, calculate_expected_value)

@polymarket_bp.route('/api/ev', methods=['GET', 'POST'])
def api_expected_value():
    return calculator_api('polymarket_ev', ExpectedValueForm, calculate_expected_value)


@polymarket_bp.route('/arbitrage', methods=['GET', 'POST'])
def arbitrage():
    return calculator_page('polymarket_arbitrage', ArbitrageForm, calculate_arbitrage)

@polymarket_bp.route('/api/arbitrage', methods=['GET', 'POST'])
def api_arbitrage():
    return calculator_api('polymarket_arbitrage', ArbitrageForm, calculate_arbitrage)


@polymarket_bp.route('/kelly', methods=['GET', 'POST'])
def kelly():
    return calculator_page('polymarket_kelly', KellyForm, calculate_kelly)

@polymarket_bp.route('/api/kelly', methods=['GET', 'POST'])
def api_kelly():
    return calculator_api('polymarket_kelly', KellyForm, calculate_kelly)
