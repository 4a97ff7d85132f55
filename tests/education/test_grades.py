"""
Unit tests for the grade and GPA calculators.
Run: pytest tests/education/
"""
import unittest

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.education.core.grades import calculate_gpa, calculate_grade, letter_grade
from calctech.projects.education.routes import education_bp

ASSIGNMENTS = [
    {"name": "Homework", "score": 85, "max_score": 100, "weight": 20},
    {"name": "Midterm Exam", "score": 78, "max_score": 100, "weight": 30},
    {"name": "Project", "score": 92, "max_score": 100, "weight": 25},
]

COURSES = [
    {"name": "Course 1", "grade": "A", "credits": 3},
    {"name": "Course 2", "grade": "B", "credits": 3},
    {"name": "Course 3", "grade": "A-", "credits": 4},
]


class TestGrade(unittest.TestCase):

    def test_current_grade_and_final_exam_targets(self):
        result = calculate_grade(ASSIGNMENTS, final_exam_weight=25)
        self.assertAlmostEqual(result["weighted_average"], 63.4)
        self.assertAlmostEqual(result["current_grade"], 84.5333, places=4)
        self.assertEqual(result["letter_grade"], "B")
        self.assertEqual(result["percentage_complete"], 75)
        self.assertEqual(result["points_earned"], 255)
        self.assertEqual(result["points_possible"], 300)
        self.assertEqual(result["grade_needed"]["for_a"], 100)
        self.assertAlmostEqual(result["grade_needed"]["for_b"], 78.4)
        self.assertAlmostEqual(result["grade_needed"]["for_c"], 38.4)

    def test_no_final_needs_nothing(self):
        result = calculate_grade(ASSIGNMENTS, final_exam_weight=0)
        self.assertEqual(result["grade_needed"], {"for_a": 0, "for_b": 0, "for_c": 0})

    def test_rows_without_max_score_are_skipped(self):
        result = calculate_grade([{"score": 10, "max_score": 0, "weight": 50}], final_exam_weight=0)
        self.assertEqual(result["current_grade"], 0)
        self.assertEqual(result["letter_grade"], "F")

    def test_letter_boundaries(self):
        self.assertEqual(letter_grade(93), "A")
        self.assertEqual(letter_grade(92.9), "A-")
        self.assertEqual(letter_grade(59.9), "F")


class TestGPA(unittest.TestCase):

    def test_four_point_scale(self):
        result = calculate_gpa(COURSES, "4.0")
        self.assertAlmostEqual(result["gpa"], 3.58)
        self.assertEqual(result["total_credits"], 10)
        self.assertEqual(result["letter_grade"], "B+")
        self.assertEqual(result["classification"], "Very Good")

    def test_five_point_scale_has_no_classification(self):
        result = calculate_gpa(COURSES, "5.0")
        self.assertAlmostEqual(result["gpa"], 4.58)
        self.assertIsNone(result["letter_grade"])
        self.assertIsNone(result["classification"])

    def test_no_courses(self):
        result = calculate_gpa([], "4.0")
        self.assertEqual(result["gpa"], 0)
        self.assertEqual(result["classification"], "Failing")

    def test_unknown_scale(self):
        with self.assertRaises(CalculatorInputError):
            calculate_gpa(COURSES, "10.0")


class TestEducationApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.register_blueprint(education_bp, url_prefix="/education")
        self.client = app.test_client()

    def test_gpa_rows_from_json(self):
        r = self.client.post("/education/api/gpa", json={"courses": COURSES, "scale": "4.0"})
        self.assertEqual(r.status_code, 200)
        self.assertAlmostEqual(r.get_json()["gpa"], 3.58)

    def test_grade_rows_from_json(self):
        r = self.client.post("/education/api/grade", json={
            "assignments": [{"name": "Essay", "score": 90, "max_score": 100, "weight": 50}],
            "final_exam_weight": 50,
        })
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertAlmostEqual(data["current_grade"], 90)
        self.assertEqual(data["letter_grade"], "A-")
        self.assertAlmostEqual(data["grade_needed"]["for_a"], 96)

    def test_invalid_letter_grade_returns_400(self):
        r = self.client.post("/education/api/gpa", json={
            "courses": [{"name": "Art", "grade": "Z", "credits": 3}],
        })
        self.assertEqual(r.status_code, 400)
        self.assertIn("courses", r.get_json()["fields"])


if __name__ == "__main__":
    unittest.main()
