"""
Paying balances down: amortization with extra payments, payment size or
payoff time, student loans, credit cards, multi-debt payoff plans and
debt consolidation.
"""
from datetime import date

from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.borrowing import (
    FEE_TYPES,
    _require_amount,
    _term_months,
    monthly_summary,
    solve_rate_per_period,
)
from calctech.projects.finance.core.loans import amortization_schedule, amortized_payment
from calctech.utils.dates import shift_date
from calctech.utils.formatting import format_currency

PAYMENT_MODES = ("fixed_term", "fixed_payment")
CREDIT_CARD_MODES = ("amount", "timeframe")

PAID_OFF = 0.005
MAX_MONTHS = 1200
MAX_CARD_MONTHS = 600
MIN_CARD_PAYMENT = 15
MIN_CARD_PRINCIPAL_PERCENT = 1

NEVER_PAID_OFF = "The monthly payment is too small to ever pay off the balance."


def _monthly_rate(percent):
    rate = (percent or 0) / 100
    if rate < 0:
        raise CalculatorInputError("The interest rate cannot be negative.")
    return rate / 12


def _duration(months):
    years, remainder = divmod(months, 12)
    return f"{years} {'year' if years == 1 else 'years'}, {remainder} {'month' if remainder == 1 else 'months'}"


def payoff_schedule(balance, monthly_rate, payment, max_months=MAX_MONTHS):
    """
    Pay a fixed amount every month until the balance is gone.

    The last payment only covers what is left. Raises when the payment
    never gets ahead of the interest within max_months.
    """
    rows = []
    while balance > PAID_OFF:
        if len(rows) >= max_months:
            raise CalculatorInputError(NEVER_PAID_OFF)
        interest = balance * monthly_rate
        principal = min(payment - interest, balance)
        if principal <= 0:
            raise CalculatorInputError(NEVER_PAID_OFF)
        balance -= principal
        rows.append({
            "period": len(rows) + 1,
            "payment": interest + principal,
            "principal": principal,
            "interest": interest,
            "balance": balance,
        })
    return rows


def _dated(schedule, start):
    for row in schedule:
        row["date"] = shift_date(start, months=row["period"])
    return schedule


def calculate_amortization(loan_amount=250000, loan_term_years=30, loan_term_months=0, interest_rate=6.5,
                           start=None, extra_monthly=0, extra_monthly_start=1, extra_yearly=0,
                           extra_yearly_start=1):
    """
    Amortization schedule with optional extra payments.

    extra_monthly is added to every payment from month extra_monthly_start
    on. extra_yearly is added once a year, first in month extra_yearly_start.
    Extra payments never exceed what is owed.
    """
    start = start or date.today()
    _require_amount(loan_amount)
    months = _term_months(loan_term_years, loan_term_months)
    rate = _monthly_rate(interest_rate)
    payment = amortized_payment(loan_amount, rate, months)
    monthly_extra = extra_monthly or 0
    yearly_extra = extra_yearly or 0
    monthly_from = extra_monthly_start or 1
    yearly_from = extra_yearly_start or 1

    schedule = []
    balance = loan_amount
    while balance > PAID_OFF and len(schedule) < months:
        month = len(schedule) + 1
        interest = balance * rate
        principal = min(payment - interest, balance)
        extra = 0
        if month >= monthly_from:
            extra += monthly_extra
        if month >= yearly_from and (month - yearly_from) % 12 == 0:
            extra += yearly_extra
        extra = min(extra, balance - principal)
        balance -= principal + extra
        schedule.append({
            "period": month,
            "payment": interest + principal + extra,
            "principal": principal,
            "extra": extra,
            "interest": interest,
            "balance": balance,
        })
    _dated(schedule, start)

    total_interest = sum(row["interest"] for row in schedule)
    standard_interest = payment * months - loan_amount
    payoff = schedule[-1]["date"]
    return {
        "monthly_payment": payment,
        "number_of_payments": len(schedule),
        "total_paid": sum(row["payment"] for row in schedule),
        "total_interest": total_interest,
        "interest_saved": max(0, standard_interest - total_interest),
        "months_saved": months - len(schedule),
        "payoff_date": payoff,
        "payoff_display": f"{payoff:%B %Y}",
        "annual_schedule": monthly_summary(schedule),
        "schedule": schedule,
    }


def calculate_payment(mode="fixed_term", loan_amount=200000, loan_term=15, interest_rate=6, monthly_payment=2000):
    """
    fixed_term: the monthly payment that retires the loan over loan_term years.
    fixed_payment: how long monthly_payment takes to retire the loan.
    """
    if mode not in PAYMENT_MODES:
        raise CalculatorInputError(f"Unknown mode: {mode}")
    _require_amount(loan_amount)
    rate = _monthly_rate(interest_rate)

    if mode == "fixed_term":
        months = _term_months(loan_term, 0)
        payment = amortized_payment(loan_amount, rate, months)
        schedule = amortization_schedule(loan_amount, payment, rate, months)
    else:
        if monthly_payment is None or monthly_payment <= loan_amount * rate:
            raise CalculatorInputError(NEVER_PAID_OFF)
        payment = monthly_payment
        schedule = payoff_schedule(loan_amount, rate, payment)

    total_paid = sum(row["payment"] for row in schedule)
    return {
        "monthly_payment": payment,
        "number_of_payments": len(schedule),
        "payoff_time": _duration(len(schedule)),
        "total_paid": total_paid,
        "total_interest": total_paid - loan_amount,
        "schedule": schedule,
    }


def calculate_student_loan(loan_balance=35000, loan_term=10, interest_rate=4.5, extra_monthly=0,
                           extra_yearly=0, one_time_payment=0, start=None):
    """
    Standard repayment compared with paying extra.

    The one-time payment comes off the balance up front, extra_yearly is
    added every twelfth payment.
    """
    start = start or date.today()
    _require_amount(loan_balance, "The loan balance")
    months = _term_months(loan_term, 0)
    rate = _monthly_rate(interest_rate)
    payment = amortized_payment(loan_balance, rate, months)
    standard_interest = payment * months - loan_balance
    one_time = min(one_time_payment or 0, loan_balance)

    schedule = []
    balance = loan_balance - one_time
    while balance > PAID_OFF and len(schedule) < months:
        month = len(schedule) + 1
        interest = balance * rate
        principal = min(payment - interest, balance)
        extra = (extra_monthly or 0) + ((extra_yearly or 0) if month % 12 == 0 else 0)
        extra = min(extra, balance - principal)
        balance -= principal + extra
        schedule.append({
            "period": month,
            "payment": interest + principal + extra,
            "principal": principal + extra,
            "interest": interest,
            "balance": balance,
        })
    _dated(schedule, start)

    total_interest = sum(row["interest"] for row in schedule)
    standard_payoff = shift_date(start, months=months)
    payoff = schedule[-1]["date"] if schedule else start
    return {
        "monthly_payment": payment,
        "standard_total_interest": standard_interest,
        "standard_payoff_display": f"{standard_payoff:%B %Y}",
        "total_interest": total_interest,
        "total_paid": one_time + sum(row["payment"] for row in schedule),
        "interest_savings": max(0, standard_interest - total_interest),
        "payoff_months": len(schedule),
        "months_saved": months - len(schedule),
        "payoff_date": payoff,
        "payoff_display": f"{payoff:%B %Y}",
        "schedule": schedule,
    }


def minimum_card_payment(balance, monthly_rate):
    """The larger of $15 and 1% of the balance plus a month's interest, never more than the payoff amount."""
    interest = balance * monthly_rate
    minimum = max(MIN_CARD_PAYMENT, balance * MIN_CARD_PRINCIPAL_PERCENT / 100 + interest)
    return min(minimum, balance + interest)


def calculate_credit_card(balance=5000, interest_rate=18.5, mode="amount", monthly_payment=150,
                          payoff_years=3, payoff_months=0, start=None):
    """
    amount: how long a fixed monthly payment takes to clear the card.
    timeframe: the monthly payment that clears it in a set time.
    """
    if mode not in CREDIT_CARD_MODES:
        raise CalculatorInputError(f"Unknown mode: {mode}")
    start = start or date.today()
    _require_amount(balance, "The balance")
    rate = _monthly_rate(interest_rate)
    minimum = minimum_card_payment(balance, rate)

    if mode == "amount":
        if monthly_payment is None or monthly_payment < minimum:
            raise CalculatorInputError(f"The monthly payment must be at least {format_currency(minimum)}.")
        schedule = payoff_schedule(balance, rate, monthly_payment, max_months=MAX_CARD_MONTHS)
        payment = monthly_payment
    else:
        months = _term_months(payoff_years, payoff_months)
        payment = amortized_payment(balance, rate, months)
        schedule = amortization_schedule(balance, payment, rate, months)
    _dated(schedule, start)

    total_paid = sum(row["payment"] for row in schedule)
    payoff = schedule[-1]["date"]
    return {
        "monthly_payment": payment,
        "minimum_payment": minimum,
        "months_to_payoff": len(schedule),
        "payoff_time": _duration(len(schedule)),
        "total_paid": total_paid,
        "total_interest": total_paid - balance,
        "payoff_date": payoff,
        "payoff_display": f"{payoff:%B %Y}",
        "schedule": schedule,
    }


def _clean_debts(debts):
    rows = []
    for debt in debts or ():
        balance = debt.get("balance") or 0
        if balance <= 0:
            continue
        rows.append({
            "name": debt.get("name") or f"Debt {len(rows) + 1}",
            "balance": balance,
            "minimum_payment": debt.get("minimum_payment") or 0,
            "interest_rate": debt.get("interest_rate") or 0,
        })
    if not rows:
        raise CalculatorInputError("Enter at least one debt with a balance.")
    return rows


def _simulate_avalanche(debts, extra_for_month, roll_over=True):
    """
    Month by month: interest accrues, every minimum is paid, then the extra
    goes to the highest-rate balance. With roll_over the minimums of paid-off
    debts join the extra.

    Returns (months, total_interest, payoff month per debt), or None when
    the debts are still open after MAX_MONTHS.
    """
    balances = [debt["balance"] for debt in debts]
    rates = [debt["interest_rate"] / 100 / 12 for debt in debts]
    order = sorted(range(len(debts)), key=lambda i: debts[i]["interest_rate"], reverse=True)
    paid_off = [None] * len(debts)
    total_interest = 0
    month = 0

    while any(balance > PAID_OFF for balance in balances):
        if month >= MAX_MONTHS:
            return None
        month += 1
        pool = extra_for_month(month)
        for i, debt in enumerate(debts):
            if paid_off[i] is not None:
                if roll_over:
                    pool += debt["minimum_payment"]
                continue
            interest = balances[i] * rates[i]
            total_interest += interest
            balances[i] += interest
            paid = min(debt["minimum_payment"], balances[i])
            balances[i] -= paid
            if roll_over:
                pool += debt["minimum_payment"] - paid
        for i in order:
            if pool <= 0:
                break
            paid = min(pool, balances[i])
            balances[i] -= paid
            pool -= paid
        for i, balance in enumerate(balances):
            if paid_off[i] is None and balance <= PAID_OFF:
                paid_off[i] = month
    return month, total_interest, paid_off


def calculate_debt_payoff(debts=(), extra_monthly=200, extra_yearly=1000, one_time_payment=0,
                          one_time_month=0, start=None):
    """
    Avalanche payoff plan compared with paying only the minimums.

    debts is a list of dicts with name, balance, minimum_payment and
    interest_rate. extra_yearly arrives in month 1 and every twelve months
    after; the one-time payment arrives in one_time_month.
    """
    start = start or date.today()
    debts = _clean_debts(debts)

    def extra_for_month(month):
        extra = extra_monthly or 0
        if month % 12 == 1:
            extra += extra_yearly or 0
        if month == one_time_month:
            extra += one_time_payment or 0
        return extra

    plan = _simulate_avalanche(debts, extra_for_month)
    if plan is None:
        raise CalculatorInputError("These payments never pay off the debts.")
    months, total_interest, paid_off = plan
    baseline = _simulate_avalanche(debts, lambda month: 0, roll_over=False)

    total_debt = sum(debt["balance"] for debt in debts)
    payoff = shift_date(start, months=months)
    order = sorted(range(len(debts)), key=lambda i: (paid_off[i], -debts[i]["interest_rate"]))
    return {
        "total_debt": total_debt,
        "total_minimum_payments": sum(debt["minimum_payment"] for debt in debts),
        "payoff_months": months,
        "payoff_time": _duration(months),
        "payoff_display": f"{payoff:%B %Y}",
        "total_interest": total_interest,
        "total_paid": total_debt + total_interest,
        "minimum_only_months": baseline[0] if baseline else None,
        "minimum_only_interest": baseline[1] if baseline else None,
        "months_saved": max(0, baseline[0] - months) if baseline else None,
        "interest_saved": max(0, baseline[1] - total_interest) if baseline else None,
        "payoff_order": [
            {
                "name": debts[i]["name"],
                "interest_rate": debts[i]["interest_rate"],
                "payoff_month": paid_off[i],
            }
            for i in order
        ],
    }


def _single_debt_payoff(debt):
    """(months, interest, paid off) paying only the minimum, capped at MAX_CARD_MONTHS."""
    balance = debt["balance"]
    rate = debt["interest_rate"] / 100 / 12
    interest_total = 0
    months = 0
    while balance > PAID_OFF and months < MAX_CARD_MONTHS:
        months += 1
        interest = balance * rate
        interest_total += interest
        balance = balance + interest - min(debt["minimum_payment"], balance + interest)
    return months, interest_total, balance <= PAID_OFF


def calculate_debt_consolidation(debts=(), loan_amount=25000, loan_interest_rate=9.5, loan_term_years=5,
                                 loan_term_months=0, loan_fee_type="percentage", loan_fee=3):
    """
    Current debts paid at their minimums against one consolidation loan.

    The loan fee is deducted from the proceeds, so it counts toward the
    loan's real APR and its cost.
    """
    if loan_fee_type not in FEE_TYPES:
        raise CalculatorInputError(f"Unknown fee type: {loan_fee_type}")
    debts = _clean_debts(debts)
    _require_amount(loan_amount)
    months = _term_months(loan_term_years, loan_term_months)
    fee = loan_fee or 0
    if loan_fee_type == "percentage":
        fee = loan_amount * fee / 100
    if fee >= loan_amount:
        raise CalculatorInputError("The loan fee must be less than the loan amount.")

    total_debt = sum(debt["balance"] for debt in debts)
    current_monthly = sum(debt["minimum_payment"] for debt in debts)
    weighted_apr = sum(debt["balance"] * debt["interest_rate"] for debt in debts) / total_debt
    payoffs = [_single_debt_payoff(debt) for debt in debts]
    current_months = max(payoff[0] for payoff in payoffs)
    current_interest = sum(payoff[1] for payoff in payoffs)

    rate = _monthly_rate(loan_interest_rate)
    payment = amortized_payment(loan_amount, rate, months)
    loan_total = payment * months
    loan_interest = loan_total - loan_amount
    real_apr = solve_rate_per_period(loan_amount - fee, payment, months) * 12 * 100

    monthly_savings = current_monthly - payment
    return {
        "total_debt": total_debt,
        "current_monthly_payment": current_monthly,
        "weighted_apr": weighted_apr,
        "current_payoff_months": current_months,
        "current_total_interest": current_interest,
        "all_debts_paid_off": all(payoff[2] for payoff in payoffs),
        "loan_fee": fee,
        "consolidation_payment": payment,
        "consolidation_total_paid": loan_total,
        "consolidation_total_interest": loan_interest,
        "real_apr": real_apr,
        "monthly_savings": monthly_savings,
        "interest_savings": current_interest - loan_interest - fee,
        "months_saved": current_months - months,
        "is_worthwhile": real_apr < weighted_apr and monthly_savings > 0,
    }
