"""
Amortized borrowing: mortgages, loans, deferred payment loans and bonds.
"""
import math
from datetime import date

from calctech.core.errors import CalculatorInputError
from calctech.utils.dates import shift_date

COMPOUNDING_PER_YEAR = {
    "annually": 1,
    "semiannually": 2,
    "quarterly": 4,
    "monthly": 12,
    "semimonthly": 24,
    "biweekly": 26,
    "weekly": 52,
    "daily": 365,
    "continuously": None,
}

PAYMENTS_PER_YEAR = {
    "yearly": 1,
    "semiannually": 2,
    "quarterly": 4,
    "monthly": 12,
    "semimonthly": 24,
    "biweekly": 26,
    "weekly": 52,
    "daily": 365,
}

LOAN_TYPES = ("amortized", "deferred", "bond")


def amortized_payment(principal, rate_per_period, periods):
    """Level payment that retires principal over periods. A zero rate is principal / periods."""
    if periods <= 0:
        raise CalculatorInputError("The loan term must be greater than zero.")
    if rate_per_period == 0:
        return principal / periods
    growth = (1 + rate_per_period) ** periods
    return principal * rate_per_period * growth / (growth - 1)


def amortization_schedule(principal, payment, rate_per_period, periods):
    rows = []
    balance = principal
    for period in range(1, periods + 1):
        interest = balance * rate_per_period
        principal_paid = payment - interest
        balance = max(0, balance - principal_paid)
        rows.append({
            "period": period,
            "payment": payment,
            "principal": principal_paid,
            "interest": interest,
            "balance": balance,
        })
    return rows


def calculate_mortgage(home_price=0, down_payment=0, loan_term_years=30, interest_rate=0,
                       property_tax=0, home_insurance=0, start=None):
    """
    Monthly mortgage payment plus monthly tax and insurance.

    property_tax and home_insurance are monthly amounts. start is the month
    the loan begins; payments are dated one month apart from there.
    """
    start = start or date.today()
    loan_amount = (home_price or 0) - (down_payment or 0)
    if loan_amount <= 0:
        raise CalculatorInputError("The down payment must be less than the home price.")
    years = loan_term_years or 30
    months = round(years * 12)
    monthly_rate = (interest_rate or 0) / 100 / 12
    tax = property_tax or 0
    insurance = home_insurance or 0

    payment = amortized_payment(loan_amount, monthly_rate, months)
    total_payment = payment * months

    schedule = amortization_schedule(loan_amount, payment, monthly_rate, months)
    for row in schedule:
        row["date"] = shift_date(start, months=row["period"])

    payoff = shift_date(start, months=months)

    return {
        "loan_amount": loan_amount,
        "monthly_payment": payment,
        "total_payment": total_payment,
        "total_interest": total_payment - loan_amount,
        "property_tax_monthly": tax,
        "property_tax_total": tax * months,
        "insurance_monthly": insurance,
        "insurance_total": insurance * months,
        "total_monthly": payment + tax + insurance,
        "total_out_of_pocket": total_payment + (tax + insurance) * months,
        "payoff_date": payoff,
        "payoff_display": f"{payoff:%B %Y}",
        "schedule": schedule,
    }


def _rate_per_payment(annual_rate, compound_frequency, payments_per_year):
    """Effective rate per payment period for any compounding frequency."""
    compounds = COMPOUNDING_PER_YEAR[compound_frequency]
    if compounds is None:
        return math.exp(annual_rate / payments_per_year) - 1
    return (1 + annual_rate / compounds) ** (compounds / payments_per_year) - 1


def _growth_factor(annual_rate, compound_frequency, years):
    compounds = COMPOUNDING_PER_YEAR[compound_frequency]
    if compounds is None:
        return math.exp(annual_rate * years)
    return (1 + annual_rate / compounds) ** (years * compounds)


def calculate_loan(loan_type="amortized", principal=100000, years=10, months=0, interest_rate=6,
                   compound_frequency="monthly", payment_frequency="monthly"):
    """
    amortized: level payments over the term.
    deferred: nothing paid until maturity, amount due is the future value.
    bond: principal is the face value paid at maturity, result is its price today.
    """
    if loan_type not in LOAN_TYPES:
        raise CalculatorInputError(f"Unknown loan type: {loan_type}")
    if compound_frequency not in COMPOUNDING_PER_YEAR:
        raise CalculatorInputError(f"Unknown compounding frequency: {compound_frequency}")
    if payment_frequency not in PAYMENTS_PER_YEAR:
        raise CalculatorInputError(f"Unknown payment frequency: {payment_frequency}")

    total_years = (years or 0) + (months or 0) / 12
    annual_rate = (interest_rate or 0) / 100
    if not principal or principal <= 0:
        raise CalculatorInputError("The loan amount must be greater than zero.")
    if total_years <= 0:
        raise CalculatorInputError("The loan term must be greater than zero.")
    if annual_rate < 0:
        raise CalculatorInputError("The interest rate cannot be negative.")

    schedule = []
    if loan_type == "amortized":
        per_year = PAYMENTS_PER_YEAR[payment_frequency]
        periods = round(total_years * per_year)
        rate = _rate_per_payment(annual_rate, compound_frequency, per_year)
        payment = amortized_payment(principal, rate, periods)
        total_paid = payment * periods
        total_interest = total_paid - principal
        base = total_paid
        principal_share = principal
        schedule = amortization_schedule(principal, payment, rate, periods)
    elif loan_type == "deferred":
        payment = principal * _growth_factor(annual_rate, compound_frequency, total_years)
        total_paid = payment
        total_interest = payment - principal
        base = payment
        principal_share = principal
    else:
        payment = principal / _growth_factor(annual_rate, compound_frequency, total_years)
        total_paid = principal
        total_interest = principal - payment
        base = principal
        principal_share = payment

    return {
        "loan_type": loan_type,
        "payment_amount": payment,
        "total_payments": total_paid,
        "total_interest": total_interest,
        "principal_percentage": principal_share / base * 100,
        "interest_percentage": total_interest / base * 100,
        "schedule": schedule,
    }
