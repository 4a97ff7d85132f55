"""
Prediction-market math for binary YES/NO shares that pay $1 on resolution.

A share priced at p implies a p * 100 % chance. Prices and probabilities
are clamped to [0.01, 0.99] so odds stay finite.
"""
import math

from calctech.core.errors import CalculatorInputError
from calctech.utils.parsing import parse_number_list

MIN_PRICE = 0.01
MAX_PRICE = 0.99


def clamp_price(value):
    return min(max(value, MIN_PRICE), MAX_PRICE)


def price_to_probability(price):
    price = clamp_price(price)
    implied = price * 100
    odds_against = round((1 - price) * 100)
    odds_for = round(price * 100)
    divisor = math.gcd(odds_against, odds_for) or 1
    return {
        "price": price,
        "implied_probability": implied,
        "decimal_odds": 1 / price,
        "true_odds": f"{odds_against // divisor}/{odds_for // divisor}",
        "no_side_probability": 100 - implied,
        "breakeven_win_rate": implied,
    }


def _batch_rows(batch):
    prices, _ = parse_number_list(batch)
    rows = []
    for price in prices:
        # Out-of-range prices are dropped, not clamped
        if not MIN_PRICE <= price <= MAX_PRICE:
            continue
        converted = price_to_probability(price)
        rows.append({
            "price": price,
            "implied_probability": converted["implied_probability"],
            "true_odds": converted["true_odds"],
            "fair_value": f"${price:.2f}",
        })
    return rows


def calculate_probability(mode="price_to_probability", price=0.65, probability=65, batch=""):
    if mode == "price_to_probability":
        result = price_to_probability(price or 0.65)
    elif mode == "probability_to_price":
        percent = min(max(probability or 65, 1), 99)
        result = price_to_probability(percent / 100)
    else:
        raise CalculatorInputError(f"Unknown conversion mode: {mode}")

    result["batch"] = _batch_rows(batch) if batch and batch.strip() else []
    return result


def kelly_fraction(price, true_probability):
    """Raw Kelly fraction f* = (b*p - q) / b with b = (1 - price) / price."""
    b = (1 - price) / price
    return (b * true_probability - (1 - true_probability)) / b


def calculate_expected_value(price=0.65, true_probability=0.75, position_size=100):
    price = clamp_price(price or 0.65)
    prob = clamp_price(true_probability or 0.75)
    size = position_size or 100

    shares = size / price
    profit_if_yes = shares * (1 - price)
    loss_if_no = size

    return {
        "expected_value": prob * profit_if_yes - (1 - prob) * loss_if_no,
        "shares": shares,
        "profit_if_yes": profit_if_yes,
        "roi_if_wins": (1 - price) / price * 100,
        "loss_if_no": loss_if_no,
        "edge": (prob - price) * 100,
        "kelly_percent": max(0, kelly_fraction(price, prob)) * 100,
    }


def calculate_arbitrage(yes_price=0.52, no_price=0.52, investment=1000):
    """
    Buy both sides so each outcome pays the same. An arbitrage exists when
    YES + NO costs less than $1.
    """
    yes = clamp_price(yes_price or 0.52)
    no = clamp_price(no_price or 0.52)
    investment = investment or 1000

    total_cost = yes + no
    yes_allocation = investment * yes / total_cost
    no_allocation = investment * no / total_cost
    yes_shares = yes_allocation / yes
    no_shares = no_allocation / no
    payout = investment / total_cost

    return {
        "total_cost": total_cost,
        "has_arbitrage": total_cost < 1,
        "payout_per_dollar": 1 / total_cost,
        "guaranteed_payout": payout,
        "guaranteed_profit": payout - investment,
        "roi": (1 / total_cost - 1) * 100,
        "yes_allocation": yes_allocation,
        "no_allocation": no_allocation,
        "yes_shares": yes_shares,
        "no_shares": no_shares,
        "payout_if_yes": yes_shares,
        "payout_if_no": no_shares,
    }


def calculate_kelly(bankroll=10000, price=0.60, true_probability=0.70):
    bankroll = bankroll or 10000
    price = clamp_price(price or 0.60)
    p = clamp_price(true_probability or 0.70)
    q = 1 - p
    b = (1 - price) / price

    fraction = kelly_fraction(price, p)
    has_edge = fraction > 0
    full_bet = fraction * bankroll if has_edge else 0

    growth = 0
    if 0 < fraction < 1:
        growth = p * math.log(1 + fraction * b) + q * math.log(1 - fraction)

    return {
        "kelly_fraction": fraction,
        "has_edge": has_edge,
        "full_kelly_bet": full_bet,
        "half_kelly_bet": full_bet / 2,
        "quarter_kelly_bet": full_bet / 4,
        "edge": (p - price) * 100,
        "odds": b,
        "expected_growth_rate": growth,
    }
