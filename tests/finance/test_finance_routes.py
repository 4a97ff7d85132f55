"""
Unit tests for the finance JSON endpoints.
Uses Flask test client with only the finance blueprint (no database).
"""
import unittest

from flask import Flask

from calctech.projects.finance.routes import finance_bp


def _create_test_app():
    """Minimal app with only finance blueprint."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["WTF_CSRF_ENABLED"] = False
    app.config["SITE_TIME_ZONE"] = "UTC"
    app.register_blueprint(finance_bp, url_prefix="/finance")
    return app


class TestFinanceApi(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()

    def test_auto_loan_defaults(self):
        r = self.client.get("/finance/api/auto-loan?auto_price=30000&start=2026-01-01")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["loan_amount"], 26700)
        self.assertEqual(data["payoff_date"], "2031-01-01")

    def test_unchecked_taxes_over_json(self):
        r = self.client.post("/finance/api/auto-loan", json={
            "auto_price": 30000,
            "include_taxes_in_loan": False,
            "start": "2026-01-01",
        })
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["upfront_payment"], 8700)

    def test_blank_start_means_today(self):
        r = self.client.get("/finance/api/amortization?loan_amount=100000&loan_term_years=1")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(len(r.get_json()["schedule"]), 12)

    def test_debt_payoff_rows(self):
        r = self.client.post("/finance/api/debt-payoff", json={
            "debts": [{"name": "Card", "balance": 1000, "minimum_payment": 100, "interest_rate": 0}],
            "extra_monthly": 100,
            "extra_yearly": 0,
            "start": "2026-01-01",
        })
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["payoff_months"], 5)
        self.assertEqual(data["payoff_order"][0]["name"], "Card")

    def test_credit_card_below_minimum(self):
        r = self.client.get("/finance/api/credit-card?balance=5000&interest_rate=18.5&monthly_payment=100")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json(), {"error": "The monthly payment must be at least $127.08."})

    def test_salary(self):
        r = self.client.get("/finance/api/salary?amount=30&pay_frequency=hourly")
        self.assertEqual(r.status_code, 200)
        self.assertAlmostEqual(r.get_json()["adjusted"]["annual"], 56400)

    def test_retirement_longevity(self):
        r = self.client.get("/finance/api/retirement?mode=longevity&savings_amount=12000"
                            "&monthly_withdrawal=1000&withdrawal_return=0")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["months_lasting"], 12)

    def test_college_cost_has_school_years(self):
        r = self.client.get("/finance/api/college-cost?college_type=public_in_state")
        self.assertEqual(r.status_code, 200)
        self.assertIn("school_year", r.get_json()["yearly_breakdown"][0])

    def test_non_finite_input_is_rejected(self):
        r = self.client.get("/finance/api/salary?amount=inf")
        self.assertEqual(r.status_code, 400)
        self.assertIn("amount", r.get_json()["fields"])

    def test_missing_required_amount(self):
        r = self.client.get("/finance/api/rent")
        self.assertEqual(r.status_code, 400)
        self.assertIn("income", r.get_json()["fields"])


if __name__ == "__main__":
    unittest.main()
