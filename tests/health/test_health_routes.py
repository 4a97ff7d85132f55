"""
Unit tests for the Fitness & Health JSON endpoints.
Uses Flask test client with only the health blueprint (no database).
"""
import unittest

from flask import Flask

from calctech.projects.health.routes import health_bp


def _create_test_app():
    """Minimal app with only health blueprint."""
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["WTF_CSRF_ENABLED"] = False
    app.config["SITE_TIME_ZONE"] = "UTC"
    app.register_blueprint(health_bp, url_prefix="/health")
    return app


class TestHealthApi(unittest.TestCase):
    """API runs the calculator with query args or a JSON body."""

    def setUp(self):
        self.app = _create_test_app()
        self.client = self.app.test_client()

    def test_bmi_query_args(self):
        r = self.client.get("/health/api/bmi?unit_system=metric&height_primary=180&weight=80")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertAlmostEqual(data["bmi"], 24.69, places=2)
        self.assertEqual(data["category"], "Normal Weight")

    def test_bmr_json_body(self):
        r = self.client.post("/health/api/bmr", json={
            "unit_system": "metric",
            "gender": "male",
            "age": 30,
            "height_primary": 178,
            "weight": 80,
        })
        self.assertEqual(r.status_code, 200)
        self.assertAlmostEqual(r.get_json()["bmr"], 1767.5)

    def test_non_numeric_weight_returns_400_with_fields(self):
        r = self.client.get("/health/api/bmi?weight=heavy&height_primary=5")
        self.assertEqual(r.status_code, 400)
        data = r.get_json()
        self.assertIn("error", data)
        self.assertIn("weight", data["fields"])

    def test_unknown_choice_returns_400(self):
        r = self.client.get("/health/api/calorie?activity_level=couch&height_primary=5&weight=160&age=30")
        self.assertEqual(r.status_code, 400)
        self.assertIn("activity_level", r.get_json()["fields"])

    def test_due_date_dates_serialized_as_iso(self):
        r = self.client.get("/health/api/due-date?method=lmp&last_period=2026-01-01")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["due_date"], "2026-10-08")

    def test_due_date_missing_date_returns_error_message(self):
        r = self.client.get("/health/api/due-date?method=lmp")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json()["error"], "Enter the first day of your last period.")

    def test_pace_blank_optional_fields_use_defaults(self):
        r = self.client.get("/health/api/pace?distance=3.1&hours=&minutes=25&seconds=")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["pace_per_mile"], {"minutes": 8, "seconds": 4})


if __name__ == "__main__":
    unittest.main()
