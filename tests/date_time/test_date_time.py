"""
Unit tests for the age, date, time and hours calculators.
Run: pytest tests/date_time/
"""
import unittest
from datetime import date, time

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.date_time.core.clock import calculate_time
from calctech.projects.date_time.core.dates import (
    add_to_date,
    calculate_age,
    calculate_date,
    date_difference,
    next_birthday,
)
from calctech.projects.date_time.core.hours import calculate_hours, worked_minutes
from calctech.projects.date_time.routes import date_time_bp


class TestAge(unittest.TestCase):

    def test_years_months_days(self):
        result = calculate_age(date(1990, 1, 1), date(2026, 10, 18))
        self.assertEqual((result["years"], result["months"], result["days"]), (36, 9, 17))
        self.assertEqual(result["total_months"], 441)
        self.assertEqual(result["total_weeks"], result["total_days"] // 7)
        self.assertEqual(result["total_hours"], result["total_days"] * 24)

    def test_next_birthday(self):
        upcoming = calculate_age(date(1990, 1, 1), date(2026, 10, 18))["next_birthday"]
        self.assertEqual(upcoming["date"], date(2027, 1, 1))
        self.assertEqual(upcoming["days_until"], 75)
        self.assertEqual(upcoming["day_of_week"], "Friday")
        self.assertEqual(upcoming["display"], "January 1, 2027")

    def test_birthday_today_is_zero_days_away(self):
        upcoming = calculate_age(date(2000, 10, 18), date(2026, 10, 18))["next_birthday"]
        self.assertEqual(upcoming["days_until"], 0)

    def test_leap_day_birthday(self):
        self.assertEqual(next_birthday(date(2000, 2, 29), date(2026, 3, 1)), date(2027, 2, 28))

    def test_future_birth_date(self):
        with self.assertRaisesRegex(CalculatorInputError, "cannot be in the future"):
            calculate_age(date(2030, 1, 1), date(2026, 10, 18))


class TestDate(unittest.TestCase):

    def test_adding_a_month_clamps_to_month_end(self):
        result = add_to_date(date(2026, 1, 31), months=1)
        self.assertEqual(result["result_date"], date(2026, 2, 28))
        self.assertEqual(result["day_of_week"], "Saturday")
        self.assertEqual(result["display"], "February 28, 2026")

    def test_subtract_days(self):
        result = calculate_date("subtract", start_date=date(2026, 3, 1), days=30)
        self.assertEqual(result["result_date"], date(2026, 1, 30))

    def test_difference(self):
        result = date_difference(date(2026, 1, 1), date(2026, 10, 18))["difference"]
        self.assertEqual((result["years"], result["months"], result["days"]), (0, 9, 17))
        self.assertEqual(result["total_days"], 290)
        self.assertEqual(result["total_weeks"], 41)

    def test_difference_requires_ordered_dates(self):
        with self.assertRaisesRegex(CalculatorInputError, "Start date must be before end date!"):
            calculate_date("difference", start_date=date(2026, 2, 1), end_date=date(2026, 1, 1))

    def test_result_past_year_9999(self):
        with self.assertRaisesRegex(CalculatorInputError, "Resulting date is out of range."):
            calculate_date("add", start_date=date(9999, 12, 15), days=30)

    def test_result_before_year_one(self):
        with self.assertRaisesRegex(CalculatorInputError, "Resulting date is out of range."):
            calculate_date("subtract", start_date=date(1, 1, 5), months=1)

    def test_last_representable_day(self):
        result = calculate_date("add", start_date=date(9999, 12, 1), days=30)
        self.assertEqual(result["result_date"], date(9999, 12, 31))


class TestTime(unittest.TestCase):

    def test_add(self):
        result = calculate_time("add", 2, 30, 0, 1, 45, 30)
        self.assertEqual(result["formatted"], "04:15:30")
        self.assertEqual(result["total_seconds"], 15330)

    def test_subtract_reports_absolute_difference(self):
        result = calculate_time("subtract", 1, 45, 30, 2, 30, 0)
        self.assertEqual(result["formatted"], "00:44:30")

    def test_convert(self):
        self.assertEqual(calculate_time("convert", convert_value=120, convert_from="minutes")["total_hours"], 2)
        self.assertEqual(calculate_time("convert", convert_value=1.5, convert_from="days")["formatted"],
                         "36:00:00")

    def test_unknown_unit(self):
        with self.assertRaises(CalculatorInputError):
            calculate_time("convert", convert_value=1, convert_from="weeks")


class TestHours(unittest.TestCase):

    def test_overnight_shift(self):
        self.assertEqual(worked_minutes(time(22, 0), time(6, 0)), 480)
        self.assertEqual(worked_minutes("09:00", "17:00", 30), 450)

    def test_overtime(self):
        entries = [{"start_time": "09:00", "end_time": "18:00", "break_minutes": 0}] * 5
        result = calculate_hours(entries, hourly_rate=20)
        self.assertEqual(result["total_hours"], 45)
        self.assertEqual(result["regular_hours"], 40)
        self.assertEqual(result["overtime_hours"], 5)
        self.assertEqual(result["earnings"], 800)
        self.assertEqual(result["overtime_earnings"], 150)
        self.assertEqual(result["total_earnings"], 950)

    def test_incomplete_rows_are_skipped(self):
        result = calculate_hours([{"start_time": "09:00", "end_time": None}], hourly_rate=20)
        self.assertEqual(result["total_hours"], 0)
        self.assertEqual(result["entries"], [])

    def test_bad_time_text(self):
        with self.assertRaises(CalculatorInputError):
            worked_minutes("nine", "17:00")


class TestDateTimeApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.config["SITE_TIME_ZONE"] = "UTC"
        app.register_blueprint(date_time_bp, url_prefix="/date-time")
        self.client = app.test_client()

    def test_age_with_as_of(self):
        r = self.client.get("/date-time/api/age?birth_date=1990-01-01&as_of=2026-10-18")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["years"], 36)
        self.assertEqual(data["next_birthday"]["date"], "2027-01-01")

    def test_bad_date_returns_400(self):
        r = self.client.get("/date-time/api/age?birth_date=01/01/1990")
        self.assertEqual(r.status_code, 400)
        self.assertIn("birth_date", r.get_json()["fields"])

    def test_api_out_of_range_date_returns_400(self):
        r = self.client.get("/date-time/api/date?mode=add&start_date=9999-12-15&days=30")
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json(), {"error": "Resulting date is out of range."})

    def test_hours_json_rows(self):
        r = self.client.post("/date-time/api/hours", json={
            "entries": [
                {"date": "2026-10-12", "start_time": "09:00", "end_time": "17:00", "break_minutes": 30},
                {"date": "2026-10-13", "start_time": "22:00", "end_time": "06:00", "break_minutes": 0},
            ],
            "hourly_rate": 20,
        })
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["total_minutes"], 930)
        self.assertEqual(data["total_earnings"], 310)
        self.assertEqual(data["entries"][1]["date"], "2026-10-13")


if __name__ == "__main__":
    unittest.main()
