"""
Page rendering tests against the full application with an in-memory
SQLite database, so visit logging runs for real.
Run: pytest tests/core/
"""
import os
import unittest
from unittest.mock import patch

from calctech import create_app, db
from calctech.models import LogEntry
from calctech.projects.registry import get_calculators

TEST_ENV = {
    "DATABASE_URL": "sqlite://",
    "SECRET_KEY": "test-secret",
    "SITE_TIME_ZONE": "UTC",
}


def _create_test_app():
    """Full app on an in-memory database with CSRF off."""
    with patch.dict(os.environ, TEST_ENV):
        app = create_app()
    app.config["TESTING"] = True
    app.config["WTF_CSRF_ENABLED"] = False
    return app


class SiteTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()


class TestNavigationPages(SiteTestCase):
    """Home and category pages."""

    def test_home_lists_categories(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        html = r.get_data(as_text=True)
        self.assertIn("Calc-Tech.com", html)
        self.assertIn("Financial Calculators", html)

    def test_category_page_lists_calculators_and_logs_visit(self):
        r = self.client.get("/category/finance")
        self.assertEqual(r.status_code, 200)
        self.assertIn("Mortgage Calculator", r.get_data(as_text=True))
        entry = LogEntry.query.one()
        self.assertEqual(entry.project, "finance")
        self.assertEqual(entry.category, "Visit")

    def test_unknown_category_is_404(self):
        r = self.client.get("/category/astrology")
        self.assertEqual(r.status_code, 404)

    def test_calculator_id_is_not_a_category(self):
        r = self.client.get("/category/bmi")
        self.assertEqual(r.status_code, 404)


class TestCalculatorPages(SiteTestCase):
    """Every calculator renders its form and handles a submission."""

    def test_every_registered_calculator_renders(self):
        for calc in get_calculators():
            r = self.client.get(calc["url"])
            self.assertEqual(r.status_code, 200, calc["url"])
            self.assertIn(calc["name"], r.get_data(as_text=True))

    def test_get_logs_visit_without_inputs(self):
        self.client.get("/health/bmi?weight=200")
        entry = LogEntry.query.one()
        self.assertEqual(entry.project, "bmi")
        self.assertNotIn("200", entry.description)

    def test_post_shows_result_and_is_not_logged(self):
        r = self.client.post("/health/bmi", data={
            "unit_system": "metric",
            "height_primary": "180",
            "weight": "80",
        })
        self.assertEqual(r.status_code, 200)
        self.assertIn("Normal Weight", r.get_data(as_text=True))
        self.assertEqual(LogEntry.query.count(), 0)

    def test_post_shows_calculator_error(self):
        r = self.client.post("/math/fraction", data={
            "num1": "1", "den1": "0", "operation": "+", "num2": "1", "den2": "3",
        })
        self.assertEqual(r.status_code, 200)
        self.assertIn("Denominators cannot be zero.", r.get_data(as_text=True))

    def test_post_renders_schedule_rows(self):
        r = self.client.post("/finance/loan", data={
            "loan_type": "amortized",
            "principal": "1200",
            "years": "1",
            "months": "0",
            "interest_rate": "0",
            "compound_frequency": "monthly",
            "payment_frequency": "monthly",
        })
        self.assertEqual(r.status_code, 200)
        self.assertIn("100.00", r.get_data(as_text=True))

    def test_visit_logging_can_be_disabled(self):
        self.app.config["LOG_VISITS"] = False
        self.client.get("/health/bmi")
        self.assertEqual(LogEntry.query.count(), 0)


if __name__ == "__main__":
    unittest.main()
