"""
Unit tests for APR, implied interest rate, auto, personal and business
loans, and refinancing.
Run: pytest tests/finance/
"""
import unittest
from datetime import date

from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.borrowing import (
    balance_after,
    calculate_apr,
    calculate_auto_loan,
    calculate_business_loan,
    calculate_interest_rate,
    calculate_personal_loan,
    calculate_refinance,
    solve_rate_per_period,
)
from calctech.projects.finance.core.loans import amortized_payment


class TestRateSolver(unittest.TestCase):

    def test_recovers_the_rate_behind_a_payment(self):
        payment = amortized_payment(100000, 0.005, 120)
        self.assertAlmostEqual(solve_rate_per_period(100000, payment, 120), 0.005, places=10)

    def test_payments_that_only_return_the_principal(self):
        self.assertAlmostEqual(solve_rate_per_period(1200, 100, 12), 0, places=10)

    def test_payments_below_the_principal(self):
        with self.assertRaisesRegex(CalculatorInputError, "too small"):
            solve_rate_per_period(1200, 99, 12)

    def test_balloon_payment(self):
        # 1% interest each month on 1000 with the principal due at the end
        self.assertAlmostEqual(solve_rate_per_period(1000, 10, 12, balloon=1000), 0.01, places=10)


class TestAPR(unittest.TestCase):

    def test_no_fees_matches_the_nominal_rate(self):
        result = calculate_apr(100000, 10, 0, 6, upfront_fees=0)
        self.assertAlmostEqual(result["real_apr"], 6, places=6)
        self.assertAlmostEqual(result["effective_annual_rate"], 6.1678, places=4)
        self.assertEqual(result["number_of_payments"], 120)

    def test_upfront_fees_raise_the_apr(self):
        result = calculate_apr(100000, 10, 0, 6, upfront_fees=1500)
        self.assertGreater(result["real_apr"], 6.3)
        self.assertLess(result["real_apr"], 6.4)
        self.assertEqual(result["amount_received"], 98500)
        self.assertEqual(result["total_fees"], 1500)

    def test_loaned_fees_are_financed(self):
        result = calculate_apr(100000, 10, 0, 6, loaned_fees=2000, upfront_fees=0)
        self.assertEqual(result["amount_financed"], 102000)
        self.assertAlmostEqual(result["payment"], amortized_payment(102000, 0.005, 120))
        self.assertGreater(result["real_apr"], 6)

    def test_biweekly_payments(self):
        result = calculate_apr(100000, 10, 0, 6, payment_frequency="biweekly", upfront_fees=0)
        self.assertEqual(result["number_of_payments"], 260)
        self.assertAlmostEqual(result["effective_annual_rate"], 6.1678, places=4)

    def test_fees_larger_than_the_loan(self):
        with self.assertRaises(CalculatorInputError):
            calculate_apr(1000, 1, 0, 6, upfront_fees=1000)


class TestInterestRate(unittest.TestCase):

    def test_rate_from_payment(self):
        payment = amortized_payment(250000, 0.06 / 12, 60)
        result = calculate_interest_rate(250000, 5, 0, payment)
        self.assertAlmostEqual(result["interest_rate"], 6, places=6)
        self.assertAlmostEqual(result["total_interest"], payment * 60 - 250000)

    def test_payment_too_small(self):
        with self.assertRaisesRegex(CalculatorInputError, "too small to repay"):
            calculate_interest_rate(250000, 5, 0, 4000)


class TestAutoLoan(unittest.TestCase):

    def test_taxes_and_fees_in_the_loan(self):
        result = calculate_auto_loan(start=date(2026, 1, 1))
        self.assertEqual(result["sales_tax"], 2400)
        self.assertEqual(result["loan_amount"], 26700)
        self.assertEqual(result["upfront_payment"], 6000)
        self.assertAlmostEqual(result["monthly_payment"], amortized_payment(26700, 0.005, 60))
        self.assertEqual(result["payoff_date"], date(2031, 1, 1))
        self.assertEqual(len(result["annual_schedule"]), 5)

    def test_taxes_and_fees_paid_upfront(self):
        result = calculate_auto_loan(include_taxes_in_loan=False, start=date(2026, 1, 1))
        self.assertEqual(result["loan_amount"], 24000)
        self.assertEqual(result["upfront_payment"], 8700)

    def test_trade_in_reduces_taxed_amount(self):
        result = calculate_auto_loan(trade_in_value=10000, amount_owed_on_trade_in=4000,
                                     start=date(2026, 1, 1))
        self.assertEqual(result["sales_tax"], 1600)
        self.assertEqual(result["loan_amount"], 19900)

    def test_nothing_left_to_borrow(self):
        with self.assertRaises(CalculatorInputError):
            calculate_auto_loan(auto_price=10000, down_payment=15000, start=date(2026, 1, 1))


class TestPersonalLoan(unittest.TestCase):

    def test_origination_fee_raises_the_apr(self):
        result = calculate_personal_loan(start=date(2026, 1, 1))
        self.assertEqual(result["origination_fee"], 400)
        self.assertEqual(result["amount_received"], 19600)
        self.assertGreater(result["real_apr"], 7.5)

    def test_without_fees_the_apr_is_the_rate(self):
        result = calculate_personal_loan(origination_fee=0, start=date(2026, 1, 1))
        self.assertAlmostEqual(result["real_apr"], 7.5, places=6)

    def test_fixed_fee_and_insurance(self):
        result = calculate_personal_loan(origination_fee_type="fixed", origination_fee=500,
                                         insurance_premium=20, start=date(2026, 1, 1))
        self.assertEqual(result["origination_fee"], 500)
        self.assertEqual(result["total_insurance"], 1200)
        self.assertAlmostEqual(result["monthly_payment_with_insurance"], result["monthly_payment"] + 20)


class TestBusinessLoan(unittest.TestCase):

    def test_interest_only_has_a_balloon(self):
        result = calculate_business_loan(payment_frequency="interest_only", origination_fee=0,
                                         documentation_fee=0, other_fees=0)
        self.assertAlmostEqual(result["payment"], 312.5)
        self.assertEqual(result["balloon_payment"], 50000)
        self.assertAlmostEqual(result["total_interest"], 18750)
        self.assertAlmostEqual(result["real_apr"], 7.5, places=6)

    def test_fees_count_toward_cost(self):
        result = calculate_business_loan()
        self.assertEqual(result["total_fees"], 2000)
        self.assertEqual(result["amount_received"], 48000)
        self.assertAlmostEqual(result["total_cost"], result["total_interest"] + 2000)
        self.assertGreater(result["real_apr"], 7.5)

    def test_quarterly_payments(self):
        result = calculate_business_loan(payment_frequency="quarterly")
        self.assertEqual(result["number_of_payments"], 20)
        self.assertAlmostEqual(result["monthly_equivalent"], result["payment"] / 3)


class TestRefinance(unittest.TestCase):

    def test_lower_rate_breaks_even(self):
        result = calculate_refinance(points=1)
        self.assertEqual(result["points_cost"], 3500)
        self.assertEqual(result["total_closing_costs"], 7000)
        self.assertGreater(result["monthly_savings"], 0)
        self.assertAlmostEqual(result["break_even_months"],
                               result["total_closing_costs"] / result["monthly_savings"])

    def test_higher_payment_never_breaks_even(self):
        result = calculate_refinance(new_rate=9)
        self.assertLess(result["monthly_savings"], 0)
        self.assertIsNone(result["break_even_months"])

    def test_balance_from_original_loan(self):
        result = calculate_refinance(know_balance=False, original_loan_amount=400000, original_term=30,
                                     years_remaining=30)
        self.assertAlmostEqual(result["current_balance"], 400000)
        self.assertAlmostEqual(result["current_payment"], amortized_payment(400000, 0.07 / 12, 360))

    def test_balance_after_full_term_is_zero(self):
        self.assertAlmostEqual(balance_after(100000, 0.005, 120, 120), 0, places=6)
        self.assertAlmostEqual(balance_after(1200, 0, 12, 6), 600)

    def test_payment_must_cover_interest(self):
        with self.assertRaises(CalculatorInputError):
            calculate_refinance(remaining_balance=350000, current_payment=2000, current_rate=7)


if __name__ == "__main__":
    unittest.main()
