"""
Saving and investing: savings accounts, certificates of deposit and
investments with regular contributions.
"""
import math

from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.interest import TIMINGS
from calctech.projects.finance.core.loans import COMPOUNDING_PER_YEAR, _growth_factor

CD_COMPOUNDING = ("annually", "semiannually", "quarterly", "monthly", "continuously")
CONTRIBUTION_FREQUENCIES = {"monthly": 12, "annually": 1}
MAX_YEARS = 100


def _require_years(years):
    if years is None or years <= 0:
        raise CalculatorInputError("The number of years must be greater than zero.")
    if years > MAX_YEARS:
        raise CalculatorInputError(f"The number of years cannot be more than {MAX_YEARS}.")


def _share(part, whole):
    return part / whole * 100 if whole else 0


def calculate_savings(initial_deposit=20000, monthly_contribution=500, interest_rate=4.5, years=10,
                      compounding=12, contribution_increase=0):
    """
    Savings balance with monthly deposits that grow by contribution_increase
    percent each year.

    compounding is periods per year; interest is credited monthly at the
    equivalent monthly rate, after that month's deposit.
    """
    _require_years(years)
    if not compounding or compounding <= 0:
        raise CalculatorInputError("Compounding frequency must be at least once a year.")
    rate = (interest_rate or 0) / 100
    monthly_growth = (1 + rate / compounding) ** (compounding / 12) - 1
    deposit = monthly_contribution or 0
    increase = (contribution_increase or 0) / 100

    balance = initial_deposit or 0
    total_contributions = 0
    total_interest = 0
    schedule = []
    for year in range(1, int(years) + 1):
        year_deposits = 0
        year_interest = 0
        for _ in range(12):
            balance += deposit
            interest = balance * monthly_growth
            balance += interest
            year_deposits += deposit
            year_interest += interest
        total_contributions += year_deposits
        total_interest += year_interest
        schedule.append({
            "year": year,
            "deposits": year_deposits,
            "interest": year_interest,
            "balance": balance,
        })
        deposit *= 1 + increase

    return {
        "end_balance": balance,
        "initial_deposit": initial_deposit or 0,
        "total_contributions": total_contributions,
        "total_interest": total_interest,
        "initial_deposit_percentage": _share(initial_deposit or 0, balance),
        "contributions_percentage": _share(total_contributions, balance),
        "interest_percentage": _share(total_interest, balance),
        "schedule": schedule,
    }


def calculate_cd(initial_deposit=10000, interest_rate=4.89, compounding="monthly", years=3, months=0, tax_rate=0):
    """Certificate of deposit value at maturity, before and after tax on the interest."""
    if compounding not in CD_COMPOUNDING:
        raise CalculatorInputError(f"Unknown compounding frequency: {compounding}")
    if not initial_deposit or initial_deposit <= 0:
        raise CalculatorInputError("The initial deposit must be greater than zero.")
    total_months = round((years or 0) * 12 + (months or 0))
    if total_months <= 0:
        raise CalculatorInputError("The term must be greater than zero.")
    rate = (interest_rate or 0) / 100
    term = total_months / 12

    end_balance = initial_deposit * _growth_factor(rate, compounding, term)
    interest = end_balance - initial_deposit
    after_tax_interest = interest * (1 - (tax_rate or 0) / 100)

    schedule = []
    previous = initial_deposit
    for month in range(1, total_months + 1):
        balance = initial_deposit * _growth_factor(rate, compounding, month / 12)
        schedule.append({"month": month, "interest": balance - previous, "balance": balance})
        previous = balance

    return {
        "end_balance": end_balance,
        "total_interest": interest,
        "after_tax_interest": after_tax_interest,
        "after_tax_balance": initial_deposit + after_tax_interest,
        "annual_percentage_yield": ((end_balance / initial_deposit) ** (1 / term) - 1) * 100,
        "average_monthly_interest": interest / total_months,
        "schedule": schedule,
    }


def calculate_investment(starting_amount=20000, contribution=1000, contribution_frequency="monthly", years=10,
                         return_rate=6, compound_frequency="annually", contribution_timing="end"):
    """
    Investment growth with contributions spread evenly over the compounding
    periods, added at the beginning or end of each one.
    """
    if compound_frequency not in COMPOUNDING_PER_YEAR:
        raise CalculatorInputError(f"Unknown compounding frequency: {compound_frequency}")
    if contribution_frequency not in CONTRIBUTION_FREQUENCIES:
        raise CalculatorInputError(f"Unknown contribution frequency: {contribution_frequency}")
    if contribution_timing not in TIMINGS:
        raise CalculatorInputError(f"Unknown contribution timing: {contribution_timing}")
    _require_years(years)

    rate = (return_rate or 0) / 100
    periods = COMPOUNDING_PER_YEAR[compound_frequency]
    if periods is None:
        # continuous growth, stepped monthly
        periods = 12
        period_rate = math.exp(rate / periods) - 1
    else:
        period_rate = rate / periods
    yearly_contribution = (contribution or 0) * CONTRIBUTION_FREQUENCIES[contribution_frequency]
    per_period = yearly_contribution / periods

    balance = starting_amount or 0
    total_interest = 0
    schedule = []
    for year in range(1, int(years) + 1):
        year_interest = 0
        for _ in range(periods):
            if contribution_timing == "beginning":
                balance += per_period
            interest = balance * period_rate
            balance += interest
            year_interest += interest
            if contribution_timing == "end":
                balance += per_period
        total_interest += year_interest
        schedule.append({
            "year": year,
            "contributions": yearly_contribution,
            "interest": year_interest,
            "balance": balance,
        })

    total_contributions = yearly_contribution * int(years)
    return {
        "end_balance": balance,
        "starting_amount": starting_amount or 0,
        "total_contributions": total_contributions,
        "total_interest": total_interest,
        "interest_percentage": _share(total_interest, balance),
        "schedule": schedule,
    }
