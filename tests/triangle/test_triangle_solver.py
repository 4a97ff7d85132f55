"""
Unit tests for the triangle solver.
Run: pytest tests/triangle/
"""
import unittest

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.triangle.core.solver import classify, solve_triangle
from calctech.projects.triangle.routes import triangle_bp


class TestSideSideSide(unittest.TestCase):

    def test_three_four_five(self):
        result = solve_triangle("sss", side_a=3, side_b=4, side_c=5)
        self.assertAlmostEqual(result["angle_a"], 36.87, places=2)
        self.assertAlmostEqual(result["angle_b"], 53.13, places=2)
        self.assertAlmostEqual(result["angle_c"], 90, places=6)
        self.assertAlmostEqual(result["area"], 6)
        self.assertEqual(result["perimeter"], 12)
        self.assertEqual(result["type"], "Scalene Right")
        self.assertIn("Using Law of Cosines to find angles:", result["steps"])

    def test_angles_sum_to_180(self):
        result = solve_triangle("sss", side_a=7, side_b=8, side_c=9)
        self.assertAlmostEqual(result["angle_a"] + result["angle_b"] + result["angle_c"], 180)

    def test_triangle_inequality(self):
        with self.assertRaisesRegex(CalculatorInputError, "cannot form a valid triangle"):
            solve_triangle("sss", side_a=1, side_b=2, side_c=3)

    def test_non_positive_side(self):
        with self.assertRaises(CalculatorInputError):
            solve_triangle("sss", side_a=0, side_b=4, side_c=5)


class TestOtherModes(unittest.TestCase):

    def test_sas_equilateral(self):
        result = solve_triangle("sas", side1=5, angle=60, side2=5)
        self.assertAlmostEqual(result["side_c"], 5)
        self.assertAlmostEqual(result["area"], 10.825, places=3)
        self.assertEqual(result["type"], "Equilateral Acute")

    def test_sas_angle_out_of_range(self):
        with self.assertRaises(CalculatorInputError):
            solve_triangle("sas", side1=5, angle=180, side2=5)

    def test_asa(self):
        result = solve_triangle("asa", angle_a=60, side_ab=5, angle_b=60)
        self.assertAlmostEqual(result["side_a"], 5)
        self.assertAlmostEqual(result["side_b"], 5)
        self.assertAlmostEqual(result["angle_c"], 60)

    def test_asa_angles_too_large(self):
        with self.assertRaisesRegex(CalculatorInputError, "cannot be >= 180"):
            solve_triangle("asa", angle_a=100, side_ab=5, angle_b=80)

    def test_base_height_assumes_right_triangle(self):
        result = solve_triangle("base_height", base=4, height=3)
        self.assertAlmostEqual(result["side_c"], 5)
        self.assertAlmostEqual(result["area"], 6)
        self.assertEqual(result["angle_c"], 90)
        self.assertEqual(result["type"], "Scalene Right")

    def test_unknown_mode(self):
        with self.assertRaises(CalculatorInputError):
            solve_triangle("aaa")


class TestClassify(unittest.TestCase):

    def test_isosceles_obtuse(self):
        result = solve_triangle("sss", side_a=5, side_b=5, side_c=8)
        self.assertEqual(result["type"], "Isosceles Obtuse")

    def test_right_angle_tolerance(self):
        self.assertEqual(classify((3, 4, 5), (36.9, 53.15, 89.95)), "Scalene Right")
        self.assertEqual(classify((3, 4, 5), (36.8, 53.0, 90.2)), "Scalene Obtuse")


class TestNearlyFlatTriangles(unittest.TestCase):
    """Rounding can push a Law of Cosines ratio just past ±1."""

    def test_thin_sss_triangle_solves(self):
        result = solve_triangle("sss", side_a=7.819254112725914e-07, side_b=781.9254112725914,
                                side_c=781.9254112733735)
        angles = (result["angle_a"], result["angle_b"], result["angle_c"])
        self.assertTrue(all(0 <= angle <= 180 for angle in angles))
        self.assertAlmostEqual(sum(angles), 180)
        self.assertGreaterEqual(result["area"], 0)

    def test_sas_with_almost_straight_angle(self):
        result = solve_triangle("sas", side1=1, angle=179.9999999, side2=1)
        self.assertAlmostEqual(result["side_c"], 2, places=6)
        self.assertAlmostEqual(result["angle_a"] + result["angle_b"] + result["angle_c"], 180)


class TestTriangleApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.register_blueprint(triangle_bp, url_prefix="/triangle")
        self.client = app.test_client()

    def test_thin_triangle_returns_200(self):
        r = self.client.get("/triangle/api", query_string={
            "mode": "sss",
            "side_a": "7.819254112725914e-07",
            "side_b": "781.9254112725914",
            "side_c": "781.9254112733735",
        })
        self.assertEqual(r.status_code, 200)

    def test_nan_and_infinity_are_rejected(self):
        for bad in ("nan", "inf", "-inf"):
            r = self.client.get(f"/triangle/api?mode=sss&side_a={bad}&side_b=4&side_c=5")
            self.assertEqual(r.status_code, 400, bad)
            self.assertIn("side_a", r.get_json()["fields"])


if __name__ == "__main__":
    unittest.main()
