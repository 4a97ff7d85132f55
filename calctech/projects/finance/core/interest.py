"""
Interest, growth and discounting.

Rates are entered as percentages. Periods in the future/present value
calculators are whatever the rate is quoted per.
"""
import math

from calctech.core.errors import CalculatorInputError

TIMINGS = ("end", "beginning")


def calculate_compound_interest(principal=0, monthly_contribution=0, rate=0, years=0,
                                compounding="12", contributions_per_year=12):
    """
    Balance after years of compounding with regular deposits.

    compounding is the number of compounding periods per year, or
    "continuous". Deposits for a period are added before it earns interest.
    """
    p = principal or 0
    deposit = monthly_contribution or 0
    r = (rate or 0) / 100
    t = years or 0
    c = contributions_per_year or 12
    if p < 0 or r < 0:
        raise CalculatorInputError("Principal and interest rate cannot be negative.")
    if t <= 0:
        raise CalculatorInputError("The number of years must be greater than zero.")

    yearly_contribution = deposit * c
    schedule = []

    if compounding == "continuous":
        growth = math.exp(r * t)
        contribution_value = yearly_contribution * ((growth - 1) / r) if r else yearly_contribution * t
        future_value = p * growth + contribution_value
        balance = p
        for year in range(1, int(t) + 1):
            starting = balance
            interest = balance * (math.exp(r) - 1)
            balance = balance * math.exp(r) + yearly_contribution
            schedule.append({
                "year": year,
                "starting_balance": starting,
                "contribution": yearly_contribution,
                "interest": interest,
                "ending_balance": balance,
            })
        return {
            "future_value": future_value,
            "total_principal": p,
            "total_contributions": yearly_contribution * t,
            "total_interest": future_value - p - yearly_contribution * t,
            "effective_annual_rate": (math.exp(r) - 1) * 100,
            "doubling_time": math.log(2) / r if r else None,
            "schedule": schedule,
        }

    try:
        n = int(compounding)
    except (TypeError, ValueError) as e:
        raise CalculatorInputError(f"Unknown compounding frequency: {compounding}") from e
    if n <= 0:
        raise CalculatorInputError("Compounding frequency must be at least once a year.")

    balance = p
    total_interest = 0
    per_period_deposit = yearly_contribution / n
    for year in range(1, int(t) + 1):
        starting = balance
        for _ in range(n):
            balance += per_period_deposit
            interest = balance * r / n
            balance += interest
            total_interest += interest
        schedule.append({
            "year": year,
            "starting_balance": starting,
            "contribution": yearly_contribution,
            "interest": balance - starting - yearly_contribution,
            "ending_balance": balance,
        })

    return {
        "future_value": balance,
        "total_principal": p,
        "total_contributions": yearly_contribution * t,
        "total_interest": total_interest,
        "effective_annual_rate": ((1 + r / n) ** n - 1) * 100,
        # Rule of 72
        "doubling_time": 72 / (rate or 1),
        "schedule": schedule,
    }


def calculate_simple_interest(principal=20000, rate=3, term=10):
    p = principal or 20000
    r = rate or 3
    t = term or 10
    interest = p * (r / 100) * t
    return {
        "principal": p,
        "rate": r,
        "term": t,
        "total_interest": interest,
        "end_balance": p + interest,
    }


def _check_timing(timing):
    if timing not in TIMINGS:
        raise CalculatorInputError(f"Unknown payment timing: {timing}")


def annuity_future_value(payment, rate, periods, timing="end"):
    if rate == 0:
        return payment * periods
    value = payment * (((1 + rate) ** periods - 1) / rate)
    return value * (1 + rate) if timing == "beginning" else value


def annuity_present_value(payment, rate, periods, timing="end"):
    if rate == 0:
        return payment * periods
    value = payment * ((1 - (1 + rate) ** -periods) / rate)
    return value * (1 + rate) if timing == "beginning" else value


def calculate_future_value(present_value=0, periodic_deposit=0, rate=0, periods=0, timing="end"):
    _check_timing(timing)
    pv = present_value or 0
    pmt = periodic_deposit or 0
    i = (rate or 0) / 100
    n = periods or 0
    if n < 0:
        raise CalculatorInputError("The number of periods cannot be negative.")

    future_value = pv * (1 + i) ** n + annuity_future_value(pmt, i, n, timing)
    total_deposits = pmt * n

    schedule = []
    balance = pv
    for period in range(1, n + 1):
        starting = balance
        if timing == "beginning":
            balance += pmt
            interest = balance * i
            balance += interest
        else:
            interest = balance * i
            balance += interest + pmt
        schedule.append({
            "period": period,
            "starting_balance": starting,
            "deposit": pmt,
            "interest": interest,
            "ending_balance": balance,
        })

    return {
        "future_value": future_value,
        "present_value": pv,
        "total_deposits": total_deposits,
        "total_interest": future_value - pv - total_deposits,
        "periods": n,
        "schedule": schedule,
    }


def calculate_present_value(future_value=0, periodic_payment=0, rate=5, periods=10, timing="end"):
    """
    Present value of a lump sum received after periods, and of a stream of
    periodic payments, each discounted at rate per period.
    """
    _check_timing(timing)
    fv = future_value or 0
    pmt = periodic_payment or 0
    i = (rate or 0) / 100
    n = periods or 0
    if n < 0:
        raise CalculatorInputError("The number of periods cannot be negative.")

    lump_sum_pv = fv / (1 + i) ** n
    lump_sum_schedule = []
    for period in range(0, n + 1):
        value = lump_sum_pv * (1 + i) ** period
        lump_sum_schedule.append({
            "period": period,
            "interest": value - lump_sum_pv * (1 + i) ** (period - 1) if period else 0,
            "balance": value,
        })

    annuity_pv = annuity_present_value(pmt, i, n, timing)
    annuity_fv = annuity_future_value(pmt, i, n, timing)
    annuity_schedule = []
    balance = 0
    for period in range(1, n + 1):
        if timing == "beginning":
            balance += pmt
            interest = balance * i
            balance += interest
        else:
            interest = balance * i
            balance += interest + pmt
        annuity_schedule.append({"period": period, "payment": pmt, "interest": interest, "balance": balance})

    return {
        "lump_sum": {
            "present_value": lump_sum_pv,
            "future_value": fv,
            "total_interest": fv - lump_sum_pv,
            "schedule": lump_sum_schedule,
        },
        "annuity": {
            "present_value": annuity_pv,
            "future_value": annuity_fv,
            "total_payments": pmt * n,
            "total_interest": annuity_fv - pmt * n,
            "schedule": annuity_schedule,
        },
        "total_present_value": lump_sum_pv + annuity_pv,
    }


def calculate_roi(invested=50000, returned=70000, years=2):
    invested = invested or 50000
    returned = returned if returned is not None else 70000
    years = years or 2
    gain = returned - invested
    roi = gain / invested * 100
    growth = 1 + roi / 100
    annualized = (growth ** (1 / years) - 1) * 100 if growth >= 0 else None
    return {
        "investment_gain": gain,
        "roi": roi,
        "annualized_roi": annualized,
        "investment_length": years,
    }
