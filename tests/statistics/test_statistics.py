"""
Unit tests for descriptive statistics and the random number generator.
Run: pytest tests/statistics/
"""
import random
import unittest

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.statistics.core.descriptive import TOO_LARGE, calculate_statistics, describe, modes
from calctech.projects.statistics.core.random_numbers import generate_random_numbers
from calctech.projects.statistics.routes import statistics_bp


class TestDescribe(unittest.TestCase):

    def test_sample_and_population(self):
        result = describe([2, 4, 6, 8, 10])
        self.assertEqual(result["mean"], 6)
        self.assertEqual(result["median"], 6)
        self.assertAlmostEqual(result["variance"], 10)
        self.assertAlmostEqual(result["standard_deviation"], 3.1623, places=4)
        self.assertAlmostEqual(result["population_variance"], 8)
        self.assertAlmostEqual(result["population_standard_deviation"], 2.8284, places=4)
        self.assertEqual(result["range"], 8)
        self.assertEqual(result["mode"], [])

    def test_single_value_has_zero_variance(self):
        result = describe([42])
        self.assertEqual(result["variance"], 0)
        self.assertEqual(result["standard_deviation"], 0)

    def test_multimodal(self):
        self.assertEqual(modes([3, 1, 2, 2, 3]), [2, 3])

    def test_parses_text_and_reports_rejected_tokens(self):
        result = calculate_statistics("10\n 2, x, 6")
        self.assertEqual(result["count"], 3)
        self.assertEqual(result["sorted_data"], [2, 6, 10])
        self.assertEqual(result["rejected"], ["x"])

    def test_no_numbers(self):
        with self.assertRaises(CalculatorInputError):
            calculate_statistics("a, b")

    def test_huge_values_are_rejected(self):
        for data in ("1e308 1e308", "1e200 -1e200"):
            with self.assertRaises(CalculatorInputError) as ctx:
                calculate_statistics(data)
            self.assertEqual(str(ctx.exception), TOO_LARGE, data)

    def test_large_but_summable_values(self):
        result = calculate_statistics("1e150 3e150")
        self.assertAlmostEqual(result["mean"] / 2e150, 1)


class TestRandomNumbers(unittest.TestCase):

    def test_unique_draw_covers_whole_range(self):
        result = generate_random_numbers(1, 10, 10, allow_duplicates=False, sort_results=True,
                                         rng=random.Random(42))
        self.assertEqual(result["numbers"], list(range(1, 11)))
        self.assertEqual(result["stats"]["sum"], 55)
        self.assertEqual(result["stats"]["median"], 5.5)

    def test_values_stay_in_range(self):
        result = generate_random_numbers(-5, 5, 500, rng=random.Random(7))
        self.assertEqual(len(result["numbers"]), 500)
        self.assertTrue(all(-5 <= n <= 5 for n in result["numbers"]))

    def test_min_above_max(self):
        with self.assertRaisesRegex(CalculatorInputError, "Minimum value cannot be greater"):
            generate_random_numbers(10, 1, 1)

    def test_too_many_unique_numbers(self):
        with self.assertRaisesRegex(CalculatorInputError, "Cannot generate 11 unique numbers from a range of 10"):
            generate_random_numbers(1, 10, 11, allow_duplicates=False)


class TestStatisticsApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.register_blueprint(statistics_bp, url_prefix="/statistics")
        self.client = app.test_client()

    def test_standard_deviation(self):
        r = self.client.post("/statistics/api/standard-deviation", json={"data": "2, 4, 6, 8, 10"})
        self.assertEqual(r.status_code, 200)
        self.assertAlmostEqual(r.get_json()["population_variance"], 8)

    def test_huge_values_return_400(self):
        r = self.client.post("/statistics/api/standard-deviation", json={"data": "1e308 1e308"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.get_json(), {"error": TOO_LARGE})

    def test_random_number_count_limit(self):
        r = self.client.get("/statistics/api/random-number?minimum=1&maximum=10&count=20000")
        self.assertEqual(r.status_code, 400)
        self.assertIn("count", r.get_json()["fields"])


if __name__ == "__main__":
    unittest.main()
