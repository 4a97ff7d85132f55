"""
Retirement and education planning: 401(k), traditional and Roth IRAs,
retirement needs and withdrawals, and college costs.

Growth is applied once a year; ages are whole years.
"""
from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.loans import amortized_payment

RETIREMENT_MODES = ("need", "save", "withdraw", "longevity")

ROTH_CONTRIBUTION_LIMIT = 7000
ROTH_CATCH_UP_LIMIT = 8000
CATCH_UP_AGE = 50

SAFE_WITHDRAWAL_RATE = 0.04
MAX_LONGEVITY_MONTHS = 1200

# Average yearly cost of attendance
COLLEGE_COSTS = {
    "public_in_state": 29910,
    "public_out_of_state": 49080,
    "private": 62990,
    "two_year": 20570,
}
COLLEGE_TYPE_LABELS = {
    "public_in_state": "Public 4-year, in-state",
    "public_out_of_state": "Public 4-year, out-of-state",
    "private": "Private 4-year",
    "two_year": "Public 2-year",
    "custom": "Custom amount",
}


def _years_between(current_age, retirement_age):
    if current_age is None or retirement_age is None or retirement_age <= current_age:
        raise CalculatorInputError("The retirement age must be greater than the current age.")
    return int(retirement_age - current_age)


def _real_rate(nominal, inflation):
    return (1 + nominal) / (1 + inflation) - 1


def calculate_401k(current_age=30, annual_salary=75000, current_balance=50000, contribution_percent=6,
                   employer_match=50, employer_match_limit=6, retirement_age=65, life_expectancy=85,
                   salary_increase=2.5, annual_return=7, inflation_rate=2.5):
    """
    401(k) balance at retirement and the monthly income it supports.

    The employer matches employer_match percent of contributions up to
    employer_match_limit percent of salary. Retirement income is drawn
    evenly until life_expectancy at the inflation-adjusted return.
    """
    years = _years_between(current_age, retirement_age)
    if life_expectancy is None or life_expectancy <= retirement_age:
        raise CalculatorInputError("Life expectancy must be greater than the retirement age.")
    salary = annual_salary or 0
    balance = current_balance or 0
    growth = (annual_return or 0) / 100

    employee_total = 0
    employer_total = 0
    schedule = []
    for year in range(years):
        employee = salary * (contribution_percent or 0) / 100
        matched = min(salary * (employer_match_limit or 0) / 100, employee)
        employer = matched * (employer_match or 0) / 100
        employee_total += employee
        employer_total += employer
        balance = (balance + employee + employer) * (1 + growth)
        schedule.append({
            "age": current_age + year + 1,
            "salary": salary,
            "employee_contribution": employee,
            "employer_contribution": employer,
            "balance": balance,
        })
        salary *= 1 + (salary_increase or 0) / 100

    months = int(life_expectancy - retirement_age) * 12
    monthly_rate = _real_rate(growth, (inflation_rate or 0) / 100) / 12
    monthly_income = amortized_payment(balance, max(0, monthly_rate), months)

    return {
        "retirement_balance": balance,
        "total_contributions": employee_total,
        "employer_contributions": employer_total,
        "investment_gains": balance - (current_balance or 0) - employee_total - employer_total,
        "monthly_retirement_income": monthly_income,
        "total_retirement_withdrawals": monthly_income * months,
        "schedule": schedule,
    }


def calculate_ira(current_balance=50000, annual_contribution=6500, expected_return=7, current_age=35,
                  retirement_age=65, current_tax_rate=24, retirement_tax_rate=22):
    """
    The same yearly contribution in a traditional IRA, a Roth IRA and a
    taxable account.

    Traditional contributions go in pre-tax and are taxed on withdrawal.
    Roth and taxable contributions are made from after-tax money, and the
    taxable account also pays tax on its gains every year.
    """
    years = _years_between(current_age, retirement_age)
    contribution = annual_contribution or 0
    growth = (expected_return or 0) / 100
    tax_now = (current_tax_rate or 0) / 100
    tax_later = (retirement_tax_rate or 0) / 100
    after_tax_contribution = contribution * (1 - tax_now)

    traditional = roth = taxable = current_balance or 0
    schedule = []
    for year in range(1, years + 1):
        traditional = (traditional + contribution) * (1 + growth)
        roth = (roth + after_tax_contribution) * (1 + growth)
        taxable += after_tax_contribution
        taxable += taxable * growth * (1 - tax_now)
        schedule.append({
            "age": current_age + year,
            "traditional": traditional,
            "roth": roth,
            "taxable": taxable,
        })

    total_contributions = (current_balance or 0) + contribution * years
    return {
        "traditional_balance": traditional,
        "traditional_after_tax": traditional * (1 - tax_later),
        "roth_balance": roth,
        "taxable_balance": taxable,
        "total_contributions": total_contributions,
        "traditional_growth": traditional - total_contributions,
        "tax_at_withdrawal": traditional * tax_later,
        "schedule": schedule,
    }


def calculate_roth_ira(current_balance=0, annual_contribution=7000, maximize_contributions=False,
                       expected_return=8, current_age=30, retirement_age=65, marginal_tax_rate=22):
    """
    Roth IRA against a taxable account holding the same contributions.

    maximize_contributions uses the yearly limit, with the catch-up limit
    from age 50.
    """
    years = _years_between(current_age, retirement_age)
    if maximize_contributions:
        contribution = ROTH_CATCH_UP_LIMIT if current_age >= CATCH_UP_AGE else ROTH_CONTRIBUTION_LIMIT
    else:
        contribution = annual_contribution or 0
    growth = (expected_return or 0) / 100
    tax_rate = (marginal_tax_rate or 0) / 100

    roth = taxable = current_balance or 0
    tax_paid = 0
    schedule = []
    for year in range(1, years + 1):
        roth = roth * (1 + growth) + contribution
        gain = taxable * growth
        tax_paid += gain * tax_rate
        taxable += gain * (1 - tax_rate) + contribution
        schedule.append({"age": current_age + year, "roth": roth, "taxable": taxable})

    total_contributions = (current_balance or 0) + contribution * years
    return {
        "annual_contribution": contribution,
        "roth_balance": roth,
        "taxable_balance": taxable,
        "roth_advantage": roth - taxable,
        "total_contributions": total_contributions,
        "roth_earnings": roth - total_contributions,
        "taxes_paid_on_taxable": tax_paid,
        "schedule": schedule,
    }


def _retirement_need(current_age, retirement_age, life_expectancy, current_income, income_increase,
                     retirement_income_percent, investment_return, inflation_rate, other_income,
                     current_savings):
    years = _years_between(current_age, retirement_age)
    if life_expectancy is None or life_expectancy <= retirement_age:
        raise CalculatorInputError("Life expectancy must be greater than the retirement age.")
    growth = (investment_return or 0) / 100
    income_at_retirement = (current_income or 0) * (1 + (income_increase or 0) / 100) ** years
    annual_income = income_at_retirement * (retirement_income_percent or 0) / 100
    from_savings = max(0, annual_income - (other_income or 0) * 12)

    real_rate = _real_rate(growth, (inflation_rate or 0) / 100)
    total_needed = sum(from_savings / (1 + real_rate) ** year
                       for year in range(int(life_expectancy - retirement_age)))
    savings_at_retirement = (current_savings or 0) * (1 + growth) ** years
    additional = max(0, total_needed - savings_at_retirement)

    months = years * 12
    monthly_rate = growth / 12
    if monthly_rate > 0:
        monthly = additional * monthly_rate / ((1 + monthly_rate) ** months - 1)
    else:
        monthly = additional / months
    return {
        "annual_income_needed": annual_income,
        "annual_income_from_savings": from_savings,
        "total_needed": total_needed,
        "savings_at_retirement": savings_at_retirement,
        "additional_savings_needed": additional,
        "monthly_contribution": monthly,
    }


def _grow_with_contributions(balance, growth, yearly, years):
    for _ in range(years):
        balance = balance * (1 + growth) + yearly
    return balance


def _retirement_save(current_age, retirement_age, current_income, savings_percent, current_savings,
                     investment_return, amount_needed):
    years = _years_between(current_age, retirement_age)
    yearly = (current_income or 0) * (savings_percent or 0) / 100
    fund = _grow_with_contributions(current_savings or 0, (investment_return or 0) / 100, yearly, years)
    contributed = (current_savings or 0) + yearly * years
    return {
        "annual_savings": yearly,
        "monthly_savings": yearly / 12,
        "projected_fund": fund,
        "total_contributions": contributed,
        "total_interest": fund - contributed,
        "amount_needed": amount_needed or 0,
        "shortfall": max(0, (amount_needed or 0) - fund),
        "meets_goal": fund >= (amount_needed or 0),
    }


def _retirement_withdraw(current_age, retirement_age, current_savings, investment_return, annual_contribution,
                         monthly_contribution):
    years = _years_between(current_age, retirement_age)
    yearly = (annual_contribution or 0) + (monthly_contribution or 0) * 12
    fund = _grow_with_contributions(current_savings or 0, (investment_return or 0) / 100, yearly, years)
    annual = fund * SAFE_WITHDRAWAL_RATE
    return {
        "fund_at_retirement": fund,
        "safe_annual_withdrawal": annual,
        "safe_monthly_withdrawal": annual / 12,
    }


def _retirement_longevity(savings_amount, monthly_withdrawal, withdrawal_return):
    balance = savings_amount or 0
    rate = (withdrawal_return or 0) / 100 / 12
    months = 0
    while balance > 0 and months < MAX_LONGEVITY_MONTHS:
        balance = balance * (1 + rate) - (monthly_withdrawal or 0)
        months += 1
    years, remainder = divmod(months, 12)
    return {
        "months_lasting": months,
        "years_lasting": years,
        "extra_months_lasting": remainder,
        "lasts_indefinitely": balance > 0,
    }


def calculate_retirement(mode="need", current_age=35, retirement_age=65, life_expectancy=85,
                         current_income=75000, income_increase=2, retirement_income_percent=80,
                         investment_return=7, inflation_rate=3, other_income=2000, current_savings=100000,
                         amount_needed=1500000, savings_percent=15, annual_contribution=10000,
                         monthly_contribution=833, savings_amount=1000000, monthly_withdrawal=4000,
                         withdrawal_return=5):
    """
    need: what to save to replace a share of income in retirement.
    save: the fund a fixed share of income grows into.
    withdraw: the 4% safe withdrawal from a growing fund.
    longevity: how long a fund lasts under monthly withdrawals.
    """
    if mode == "need":
        result = _retirement_need(current_age, retirement_age, life_expectancy, current_income,
                                  income_increase, retirement_income_percent, investment_return,
                                  inflation_rate, other_income, current_savings)
    elif mode == "save":
        result = _retirement_save(current_age, retirement_age, current_income, savings_percent,
                                  current_savings, investment_return, amount_needed)
    elif mode == "withdraw":
        result = _retirement_withdraw(current_age, retirement_age, current_savings, investment_return,
                                      annual_contribution, monthly_contribution)
    elif mode == "longevity":
        result = _retirement_longevity(savings_amount, monthly_withdrawal, withdrawal_return)
    else:
        raise CalculatorInputError(f"Unknown mode: {mode}")
    return {"mode": mode, **result}


def calculate_college_cost(college_type="public_in_state", custom_cost=29910, cost_increase=5,
                           years_to_college=10, college_duration=4, current_savings=50000,
                           percent_from_savings=75, investment_return=6, tax_rate=0, today=None):
    """
    Future cost of college and how much of it savings will cover.

    Savings grow at the after-tax return until college starts. Each year
    draws up to percent_from_savings of that year's cost from what is left.
    """
    if college_type == "custom":
        annual_cost = custom_cost
    elif college_type in COLLEGE_COSTS:
        annual_cost = COLLEGE_COSTS[college_type]
    else:
        raise CalculatorInputError(f"Unknown college type: {college_type}")
    if not annual_cost or annual_cost <= 0:
        raise CalculatorInputError("The yearly cost must be greater than zero.")
    if not college_duration or college_duration <= 0:
        raise CalculatorInputError("College must last at least one year.")
    years_until = int(years_to_college or 0)
    inflation = (cost_increase or 0) / 100
    share = (percent_from_savings or 0) / 100
    after_tax_return = (investment_return or 0) / 100 * (1 - (tax_rate or 0) / 100)

    future_savings = (current_savings or 0) * (1 + after_tax_return) ** years_until
    remaining = future_savings
    breakdown = []
    for year in range(int(college_duration)):
        cost = annual_cost * (1 + inflation) ** (years_until + year)
        used = min(remaining, cost * share)
        remaining -= used
        row = {"year": year + 1}
        if today is not None:
            row["school_year"] = today.year + years_until + year
        row.update({
            "cost": cost,
            "savings_used": used,
            "other_sources": cost - used,
            "savings_balance": remaining,
        })
        breakdown.append(row)

    future_total = sum(row["cost"] for row in breakdown)
    savings_used = sum(row["savings_used"] for row in breakdown)
    return {
        "annual_cost_today": annual_cost,
        "total_cost_today": annual_cost * int(college_duration),
        "future_total_cost": future_total,
        "future_savings": future_savings,
        "savings_gap": max(0, future_total - future_savings),
        "percent_covered_by_savings": savings_used / future_total * 100,
        "amount_from_other_sources": future_total - savings_used,
        "yearly_breakdown": breakdown,
    }
