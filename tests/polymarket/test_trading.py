"""
Unit tests for the prediction-market calculators.
Run: pytest tests/polymarket/
"""
import unittest

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.polymarket.core.trading import (
    calculate_arbitrage,
    calculate_expected_value,
    calculate_kelly,
    calculate_probability,
    price_to_probability,
)
from calctech.projects.polymarket.routes import polymarket_bp


class TestProbability(unittest.TestCase):

    def test_price_to_probability(self):
        result = price_to_probability(0.65)
        self.assertAlmostEqual(result["implied_probability"], 65)
        self.assertAlmostEqual(result["decimal_odds"], 1.5385, places=4)
        self.assertEqual(result["true_odds"], "7/13")
        self.assertAlmostEqual(result["no_side_probability"], 35)

    def test_price_is_clamped(self):
        result = price_to_probability(1.5)
        self.assertEqual(result["price"], 0.99)
        self.assertEqual(result["true_odds"], "1/99")

    def test_probability_to_price(self):
        result = calculate_probability("probability_to_price", probability=25)
        self.assertAlmostEqual(result["price"], 0.25)
        self.assertEqual(result["true_odds"], "3/1")

    def test_batch_drops_out_of_range_prices(self):
        result = calculate_probability("price_to_probability", price=0.5, batch="0.25, 1.5\n0.5")
        self.assertEqual([row["price"] for row in result["batch"]], [0.25, 0.5])
        self.assertEqual(result["batch"][1]["true_odds"], "1/1")
        self.assertEqual(result["batch"][0]["fair_value"], "$0.25")

    def test_unknown_mode(self):
        with self.assertRaises(CalculatorInputError):
            calculate_probability("odds_to_price")


class TestExpectedValue(unittest.TestCase):

    def test_positive_edge(self):
        result = calculate_expected_value(price=0.65, true_probability=0.75, position_size=100)
        self.assertAlmostEqual(result["shares"], 153.846, places=3)
        self.assertAlmostEqual(result["profit_if_yes"], 53.846, places=3)
        self.assertAlmostEqual(result["expected_value"], 15.385, places=3)
        self.assertAlmostEqual(result["edge"], 10)
        self.assertAlmostEqual(result["kelly_percent"], 28.571, places=3)

    def test_negative_edge_has_no_kelly_stake(self):
        result = calculate_expected_value(price=0.80, true_probability=0.60, position_size=100)
        self.assertLess(result["expected_value"], 0)
        self.assertEqual(result["kelly_percent"], 0)


class TestArbitrage(unittest.TestCase):

    def test_arbitrage_exists_below_one_dollar(self):
        result = calculate_arbitrage(yes_price=0.45, no_price=0.50, investment=1000)
        self.assertAlmostEqual(result["total_cost"], 0.95)
        self.assertTrue(result["has_arbitrage"])
        self.assertAlmostEqual(result["payout_per_dollar"], 1.0526, places=4)
        self.assertAlmostEqual(result["guaranteed_profit"], 52.63, places=2)
        self.assertAlmostEqual(result["payout_if_yes"], result["payout_if_no"])
        self.assertAlmostEqual(result["yes_allocation"] + result["no_allocation"], 1000)

    def test_no_arbitrage_at_one_or_more(self):
        result = calculate_arbitrage(yes_price=0.52, no_price=0.52, investment=1000)
        self.assertFalse(result["has_arbitrage"])
        self.assertLess(result["roi"], 0)


class TestKelly(unittest.TestCase):

    def test_bet_sizes(self):
        result = calculate_kelly(bankroll=10000, price=0.60, true_probability=0.70)
        self.assertAlmostEqual(result["kelly_fraction"], 0.25)
        self.assertAlmostEqual(result["full_kelly_bet"], 2500)
        self.assertAlmostEqual(result["half_kelly_bet"], 1250)
        self.assertAlmostEqual(result["quarter_kelly_bet"], 625)
        self.assertAlmostEqual(result["expected_growth_rate"], 0.0216, places=4)

    def test_no_edge(self):
        result = calculate_kelly(bankroll=10000, price=0.70, true_probability=0.60)
        self.assertFalse(result["has_edge"])
        self.assertEqual(result["full_kelly_bet"], 0)
        self.assertEqual(result["expected_growth_rate"], 0)


class TestPolymarketApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.register_blueprint(polymarket_bp, url_prefix="/polymarket")
        self.client = app.test_client()

    def test_arbitrage_defaults(self):
        r = self.client.get("/polymarket/api/arbitrage")
        self.assertEqual(r.status_code, 200)
        self.assertFalse(r.get_json()["has_arbitrage"])

    def test_kelly_query(self):
        r = self.client.get("/polymarket/api/kelly?bankroll=1000&price=0.6&true_probability=0.7")
        self.assertEqual(r.status_code, 200)
        self.assertAlmostEqual(r.get_json()["full_kelly_bet"], 250)

    def test_negative_bankroll_rejected(self):
        r = self.client.get("/polymarket/api/kelly?bankroll=-5")
        self.assertEqual(r.status_code, 400)


if __name__ == "__main__":
    unittest.main()
