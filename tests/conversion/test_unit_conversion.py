"""
Unit tests for the unit converter and its JSON endpoint.
Run: pytest tests/conversion/
"""
import unittest

from flask import Flask

from calctech.core.errors import CalculatorInputError
from calctech.projects.conversion.core.units import (
    CATEGORY_LABELS,
    RATIO_UNITS,
    TEMPERATURE_UNITS,
    all_unit_choices,
    convert,
    units_for,
)
from calctech.projects.conversion.routes import conversion_bp

ROUND_TRIP_VALUES = (0, -40, 12.5, 1e6)


class TestRatioConversion(unittest.TestCase):

    def test_meters_to_feet(self):
        result = convert("length", 1, "meters", "feet")
        self.assertAlmostEqual(result["result"], 3.28084, places=5)
        self.assertEqual(result["formula"], "1 × 3.280840 = 3.280840")
        self.assertEqual(result["from"], "Meters")
        self.assertEqual(result["to"], "Feet")

    def test_data_uses_binary_multiples(self):
        result = convert("data", 1, "gigabytes", "megabytes")
        self.assertEqual(result["result"], 1024)

    def test_converting_there_and_back_returns_the_value(self):
        for category, units in RATIO_UNITS.items():
            for from_unit in units:
                for to_unit in units:
                    for value in ROUND_TRIP_VALUES:
                        there = convert(category, value, from_unit, to_unit)["result"]
                        back = convert(category, there, to_unit, from_unit)["result"]
                        self.assertAlmostEqual(back, value, delta=abs(value) * 1e-9 + 1e-9,
                                               msg=f"{category}: {from_unit} -> {to_unit} ({value})")

    def test_same_unit_is_identity(self):
        for category, units in RATIO_UNITS.items():
            for unit in units:
                for value in ROUND_TRIP_VALUES:
                    self.assertAlmostEqual(convert(category, value, unit, unit)["result"], value,
                                           delta=abs(value) * 1e-12, msg=f"{category}: {unit}")

    def test_unit_from_another_category_rejected(self):
        with self.assertRaises(CalculatorInputError):
            convert("length", 1, "meters", "kilograms")

    def test_unknown_category_rejected(self):
        with self.assertRaises(CalculatorInputError):
            convert("luminosity", 1, "lux", "lux")


class TestTemperature(unittest.TestCase):

    def test_celsius_to_fahrenheit(self):
        result = convert("temperature", 100, "celsius", "fahrenheit")
        self.assertAlmostEqual(result["result"], 212)
        self.assertEqual(result["formula"], "(100 × 9/5) + 32 = 212.00")

    def test_fahrenheit_to_kelvin_uses_generic_formula(self):
        result = convert("temperature", 32, "fahrenheit", "kelvin")
        self.assertAlmostEqual(result["result"], 273.15)
        self.assertEqual(result["formula"], "Conversion: 32 → 273.150000")

    def test_every_pair_converts_there_and_back(self):
        for from_unit in TEMPERATURE_UNITS:
            for to_unit in TEMPERATURE_UNITS:
                for value in ROUND_TRIP_VALUES:
                    there = convert("temperature", value, from_unit, to_unit)["result"]
                    back = convert("temperature", there, to_unit, from_unit)["result"]
                    self.assertAlmostEqual(back, value, delta=abs(value) * 1e-9 + 1e-9,
                                           msg=f"{from_unit} -> {to_unit} ({value})")

    def test_same_unit_is_identity(self):
        for unit in TEMPERATURE_UNITS:
            for value in ROUND_TRIP_VALUES:
                self.assertAlmostEqual(convert("temperature", value, unit, unit)["result"], value,
                                       delta=abs(value) * 1e-12 + 1e-9, msg=unit)

    def test_negative_forty_is_the_same_in_both_scales(self):
        self.assertAlmostEqual(convert("temperature", -40, "celsius", "fahrenheit")["result"], -40)


class TestUnitChoices(unittest.TestCase):

    def test_every_category_has_units(self):
        for category in CATEGORY_LABELS:
            self.assertTrue(units_for(category), category)

    def test_choice_labels_name_the_category(self):
        self.assertIn(("kelvin", "Temperature: Kelvin"), all_unit_choices())


class TestConversionApi(unittest.TestCase):

    def setUp(self):
        app = Flask(__name__)
        app.config["TESTING"] = True
        app.register_blueprint(conversion_bp, url_prefix="/conversion")
        self.client = app.test_client()

    def test_convert_via_query(self):
        r = self.client.get("/conversion/api?category=weight&value=10&from_unit=kilograms&to_unit=pounds")
        self.assertEqual(r.status_code, 200)
        self.assertAlmostEqual(r.get_json()["result"], 22.0462, places=3)

    def test_mismatched_units_return_400(self):
        r = self.client.get("/conversion/api?category=weight&value=10&from_unit=meters&to_unit=pounds")
        self.assertEqual(r.status_code, 400)
        self.assertIn("Unknown weight unit", r.get_json()["error"])


if __name__ == "__main__":
    unittest.main()
