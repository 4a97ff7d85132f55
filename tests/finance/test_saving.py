"""
Unit tests for the savings, CD and investment calculators.
Run: pytest tests/finance/
"""
import math
import unittest

from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.saving import calculate_cd, calculate_investment, calculate_savings


class TestSavings(unittest.TestCase):

    def test_monthly_compounding(self):
        result = calculate_savings(initial_deposit=1000, monthly_contribution=0, interest_rate=12, years=1,
                                   compounding=12)
        self.assertAlmostEqual(result["end_balance"], 1000 * 1.01 ** 12)
        self.assertAlmostEqual(result["total_interest"], result["end_balance"] - 1000)

    def test_contributions_grow_each_year(self):
        result = calculate_savings(initial_deposit=0, monthly_contribution=100, interest_rate=0, years=2,
                                   contribution_increase=10)
        self.assertAlmostEqual(result["schedule"][0]["deposits"], 1200)
        self.assertAlmostEqual(result["schedule"][1]["deposits"], 1320)
        self.assertAlmostEqual(result["end_balance"], 2520)
        self.assertAlmostEqual(result["contributions_percentage"], 100)

    def test_shares_add_up(self):
        result = calculate_savings()
        total = (result["initial_deposit_percentage"] + result["contributions_percentage"]
                 + result["interest_percentage"])
        self.assertAlmostEqual(total, 100)

    def test_year_limits(self):
        for years in (0, 101):
            with self.assertRaises(CalculatorInputError):
                calculate_savings(years=years)


class TestCD(unittest.TestCase):

    def test_annual_compounding_with_tax(self):
        result = calculate_cd(10000, 5, "annually", years=2, months=0, tax_rate=20)
        self.assertAlmostEqual(result["end_balance"], 11025)
        self.assertAlmostEqual(result["annual_percentage_yield"], 5)
        self.assertAlmostEqual(result["after_tax_interest"], 820)
        self.assertAlmostEqual(result["after_tax_balance"], 10820)
        self.assertEqual(len(result["schedule"]), 24)
        self.assertAlmostEqual(result["schedule"][-1]["balance"], result["end_balance"])

    def test_continuous_compounding(self):
        result = calculate_cd(10000, 5, "continuously", years=1)
        self.assertAlmostEqual(result["end_balance"], 10000 * math.exp(0.05))

    def test_term_in_months(self):
        result = calculate_cd(10000, 6, "monthly", years=0, months=6)
        self.assertAlmostEqual(result["end_balance"], 10000 * 1.005 ** 6)
        self.assertAlmostEqual(result["average_monthly_interest"], result["total_interest"] / 6)

    def test_zero_term(self):
        with self.assertRaises(CalculatorInputError):
            calculate_cd(10000, 5, "monthly", years=0, months=0)


class TestInvestment(unittest.TestCase):

    def test_growth_without_contributions(self):
        result = calculate_investment(starting_amount=1000, contribution=0, years=2, return_rate=10,
                                      compound_frequency="annually")
        self.assertAlmostEqual(result["end_balance"], 1210)
        self.assertAlmostEqual(result["total_interest"], 210)

    def test_contribution_timing(self):
        end = calculate_investment(starting_amount=0, contribution=100, contribution_frequency="annually",
                                   years=1, return_rate=10, contribution_timing="end")
        beginning = calculate_investment(starting_amount=0, contribution=100, contribution_frequency="annually",
                                         years=1, return_rate=10, contribution_timing="beginning")
        self.assertAlmostEqual(end["end_balance"], 100)
        self.assertAlmostEqual(beginning["end_balance"], 110)
        self.assertEqual(end["total_contributions"], 100)

    def test_continuous_growth(self):
        result = calculate_investment(starting_amount=1000, contribution=0, years=1, return_rate=10,
                                      compound_frequency="continuously")
        self.assertAlmostEqual(result["end_balance"], 1000 * math.exp(0.1))

    def test_unknown_timing(self):
        with self.assertRaises(CalculatorInputError):
            calculate_investment(contribution_timing="middle")


if __name__ == "__main__":
    unittest.main()
