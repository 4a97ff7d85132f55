"""
What borrowing really costs: APR, implied interest rates, auto, personal
and business loans, and refinancing.

Rates are entered as annual percentages. Every schedule here is monthly
unless a payment frequency says otherwise.
"""
from datetime import date

from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.loans import (
    COMPOUNDING_PER_YEAR,
    PAYMENTS_PER_YEAR,
    _rate_per_payment,
    amortization_schedule,
    amortized_payment,
)
from calctech.utils.dates import shift_date

FEE_TYPES = ("percentage", "fixed")
INTEREST_ONLY = "interest_only"

_SOLVER_ITERATIONS = 200
_MAX_RATE_PER_PERIOD = 1e6


def _term_months(years, months):
    total = round((years or 0) * 12 + (months or 0))
    if total <= 0:
        raise CalculatorInputError("The loan term must be greater than zero.")
    return total


def _require_amount(amount, label="The loan amount"):
    if amount is None or amount <= 0:
        raise CalculatorInputError(f"{label} must be greater than zero.")


def _present_value(rate, payment, periods, balloon=0):
    if rate == 0:
        return payment * periods + balloon
    discount = (1 + rate) ** -periods
    return payment * (1 - discount) / rate + balloon * discount


def solve_rate_per_period(present_value, payment, periods, balloon=0):
    """
    Rate per period at which ``periods`` payments (plus an optional final
    balloon) are worth ``present_value`` today.

    Uses bisection, so any loan whose payments add up to at least the amount
    received has exactly one non-negative answer.
    """
    if present_value <= 0:
        raise CalculatorInputError("The amount received must be greater than zero.")
    if _present_value(0, payment, periods, balloon) < present_value:
        raise CalculatorInputError("The payments are too small to repay the loan amount.")

    low, high = 0.0, 1.0
    while _present_value(high, payment, periods, balloon) > present_value:
        high *= 2
        if high > _MAX_RATE_PER_PERIOD:
            raise CalculatorInputError("The implied interest rate is too high to calculate.")
    for _ in range(_SOLVER_ITERATIONS):
        mid = (low + high) / 2
        if _present_value(mid, payment, periods, balloon) > present_value:
            low = mid
        else:
            high = mid
    return (low + high) / 2


def monthly_summary(schedule):
    """Roll a monthly schedule up into loan years, twelve payments each."""
    years = []
    for index in range(0, len(schedule), 12):
        chunk = schedule[index:index + 12]
        years.append({
            "year": index // 12 + 1,
            "principal": sum(row["principal"] for row in chunk),
            "interest": sum(row["interest"] for row in chunk),
            "balance": chunk[-1]["balance"],
        })
    return years


def calculate_apr(loan_amount=100000, loan_term_years=10, loan_term_months=0, interest_rate=6,
                  compound_frequency="monthly", payment_frequency="monthly",
                  loaned_fees=0, upfront_fees=1500):
    """
    Real APR once fees are counted.

    loaned_fees are added to the balance, upfront_fees come out of the money
    received. The APR is the rate at which the payments are worth exactly
    what the borrower walks away with.
    """
    if compound_frequency not in COMPOUNDING_PER_YEAR:
        raise CalculatorInputError(f"Unknown compounding frequency: {compound_frequency}")
    if payment_frequency not in PAYMENTS_PER_YEAR:
        raise CalculatorInputError(f"Unknown payment frequency: {payment_frequency}")
    _require_amount(loan_amount)
    months = _term_months(loan_term_years, loan_term_months)

    per_year = PAYMENTS_PER_YEAR[payment_frequency]
    periods = max(1, round(months * per_year / 12))
    financed = loan_amount + (loaned_fees or 0)
    received = loan_amount - (upfront_fees or 0)
    if received <= 0:
        raise CalculatorInputError("Upfront fees must be less than the loan amount.")

    rate = _rate_per_payment((interest_rate or 0) / 100, compound_frequency, per_year)
    payment = amortized_payment(financed, rate, periods)
    total_paid = payment * periods
    apr_rate = solve_rate_per_period(received, payment, periods)

    return {
        "real_apr": apr_rate * per_year * 100,
        "effective_annual_rate": ((1 + apr_rate) ** per_year - 1) * 100,
        "nominal_rate": interest_rate or 0,
        "payment": payment,
        "number_of_payments": periods,
        "amount_financed": financed,
        "amount_received": received,
        "total_fees": (loaned_fees or 0) + (upfront_fees or 0),
        "total_paid": total_paid,
        "total_interest": total_paid - financed,
    }


def calculate_interest_rate(loan_amount=250000, loan_term_years=5, loan_term_months=0, monthly_payment=4800):
    """Interest rate implied by a loan amount, a term and a monthly payment."""
    _require_amount(loan_amount)
    months = _term_months(loan_term_years, loan_term_months)
    if monthly_payment is None or monthly_payment * months < loan_amount:
        raise CalculatorInputError("The monthly payment is too small to repay the loan amount.")

    monthly_rate = solve_rate_per_period(loan_amount, monthly_payment, months)
    total_paid = monthly_payment * months
    return {
        "interest_rate": monthly_rate * 12 * 100,
        "monthly_rate": monthly_rate * 100,
        "effective_annual_rate": ((1 + monthly_rate) ** 12 - 1) * 100,
        "number_of_payments": months,
        "total_paid": total_paid,
        "total_interest": total_paid - loan_amount,
    }


def calculate_auto_loan(auto_price=30000, down_payment=6000, trade_in_value=0, amount_owed_on_trade_in=0,
                        sales_tax_rate=8, title_fees=300, interest_rate=6, loan_term_months=60,
                        cash_incentives=0, include_taxes_in_loan=True, start=None):
    """
    Car loan from the sticker price.

    Sales tax is charged on the price less the trade-in. Taxes and fees are
    either rolled into the loan or paid upfront with the down payment.
    """
    start = start or date.today()
    _require_amount(auto_price, "The auto price")
    months = _term_months(0, loan_term_months)
    trade_in = trade_in_value or 0
    owed = amount_owed_on_trade_in or 0
    fees = title_fees or 0

    sales_tax = max(0, auto_price - trade_in) * (sales_tax_rate or 0) / 100
    loan_amount = auto_price - (down_payment or 0) - trade_in + owed - (cash_incentives or 0)
    upfront = (down_payment or 0) + trade_in - owed
    if include_taxes_in_loan:
        loan_amount += sales_tax + fees
    else:
        upfront += sales_tax + fees
    if loan_amount <= 0:
        raise CalculatorInputError("The down payment, trade-in and incentives cover the whole price.")

    monthly_rate = (interest_rate or 0) / 100 / 12
    payment = amortized_payment(loan_amount, monthly_rate, months)
    total_payments = payment * months
    total_interest = total_payments - loan_amount

    schedule = amortization_schedule(loan_amount, payment, monthly_rate, months)
    for row in schedule:
        row["date"] = shift_date(start, months=row["period"])
    payoff = shift_date(start, months=months)

    return {
        "loan_amount": loan_amount,
        "sales_tax": sales_tax,
        "upfront_payment": upfront,
        "monthly_payment": payment,
        "total_payments": total_payments,
        "total_interest": total_interest,
        "total_cost": upfront + total_payments,
        "principal_percentage": loan_amount / total_payments * 100,
        "interest_percentage": total_interest / total_payments * 100,
        "payoff_date": payoff,
        "payoff_display": f"{payoff:%B %Y}",
        "annual_schedule": monthly_summary(schedule),
        "schedule": schedule,
    }


def calculate_personal_loan(loan_amount=20000, interest_rate=7.5, loan_term_years=5, loan_term_months=0,
                            origination_fee_type="percentage", origination_fee=2, insurance_premium=0,
                            start=None):
    """
    Personal loan with an origination fee taken out of the proceeds and an
    optional monthly insurance premium. The real APR counts both.
    """
    if origination_fee_type not in FEE_TYPES:
        raise CalculatorInputError(f"Unknown fee type: {origination_fee_type}")
    start = start or date.today()
    _require_amount(loan_amount)
    months = _term_months(loan_term_years, loan_term_months)

    fee = origination_fee or 0
    if origination_fee_type == "percentage":
        fee = loan_amount * fee / 100
    received = loan_amount - fee
    if received <= 0:
        raise CalculatorInputError("The origination fee must be less than the loan amount.")
    insurance = insurance_premium or 0

    monthly_rate = (interest_rate or 0) / 100 / 12
    payment = amortized_payment(loan_amount, monthly_rate, months)
    total_payments = payment * months
    apr_rate = solve_rate_per_period(received, payment + insurance, months)

    schedule = amortization_schedule(loan_amount, payment, monthly_rate, months)
    for row in schedule:
        row["date"] = shift_date(start, months=row["period"])
    payoff = shift_date(start, months=months)

    return {
        "monthly_payment": payment,
        "monthly_payment_with_insurance": payment + insurance,
        "origination_fee": fee,
        "amount_received": received,
        "total_payments": total_payments,
        "total_interest": total_payments - loan_amount,
        "total_insurance": insurance * months,
        "total_cost": total_payments + fee + insurance * months,
        "real_apr": apr_rate * 12 * 100,
        "payoff_date": payoff,
        "payoff_display": f"{payoff:%B %Y}",
        "schedule": schedule,
    }


def calculate_business_loan(loan_amount=50000, interest_rate=7.5, loan_term_years=5, loan_term_months=0,
                            compound_frequency="monthly", payment_frequency="monthly",
                            origination_fee=1250, documentation_fee=500, other_fees=250):
    """
    Business loan repaid on any schedule, or interest-only with the
    principal due at the end.
    """
    if compound_frequency not in COMPOUNDING_PER_YEAR:
        raise CalculatorInputError(f"Unknown compounding frequency: {compound_frequency}")
    if payment_frequency != INTEREST_ONLY and payment_frequency not in PAYMENTS_PER_YEAR:
        raise CalculatorInputError(f"Unknown payment frequency: {payment_frequency}")
    _require_amount(loan_amount)
    months = _term_months(loan_term_years, loan_term_months)
    fees = (origination_fee or 0) + (documentation_fee or 0) + (other_fees or 0)
    received = loan_amount - fees
    if received <= 0:
        raise CalculatorInputError("Fees must be less than the loan amount.")

    annual_rate = (interest_rate or 0) / 100
    if payment_frequency == INTEREST_ONLY:
        per_year = 12
        periods = months
        rate = _rate_per_payment(annual_rate, compound_frequency, per_year)
        payment = loan_amount * rate
        total_paid = payment * periods + loan_amount
        balloon = loan_amount
        schedule = []
    else:
        per_year = PAYMENTS_PER_YEAR[payment_frequency]
        periods = max(1, round(months * per_year / 12))
        rate = _rate_per_payment(annual_rate, compound_frequency, per_year)
        payment = amortized_payment(loan_amount, rate, periods)
        total_paid = payment * periods
        balloon = 0
        schedule = amortization_schedule(loan_amount, payment, rate, periods)

    total_interest = total_paid - loan_amount
    apr_rate = solve_rate_per_period(received, payment, periods, balloon)

    return {
        "payment": payment,
        "monthly_equivalent": payment * per_year / 12,
        "number_of_payments": periods,
        "balloon_payment": balloon,
        "total_fees": fees,
        "amount_received": received,
        "total_paid": total_paid,
        "total_interest": total_interest,
        "total_cost": total_interest + fees,
        "real_apr": apr_rate * per_year * 100,
        "schedule": schedule,
    }


def balance_after(principal, monthly_rate, months, paid):
    """Balance left on a level-payment loan after ``paid`` payments."""
    payment = amortized_payment(principal, monthly_rate, months)
    if monthly_rate == 0:
        return max(0, principal - payment * paid)
    growth = (1 + monthly_rate) ** paid
    return max(0, principal * growth - payment * (growth - 1) / monthly_rate)


def calculate_refinance(know_balance=True, remaining_balance=350000, current_payment=2500,
                        original_loan_amount=400000, original_term=30, years_remaining=25, months_remaining=0,
                        current_rate=7, new_term=30, new_rate=5.5, points=0, closing_costs=3500, cash_out=0):
    """
    Compare keeping the current loan against refinancing it.

    When the balance isn't known it is worked out from the original loan,
    its term and how much of it is left. Points are a percentage of the
    balance and are paid at closing.
    """
    current_monthly_rate = (current_rate or 0) / 100 / 12
    remaining = _term_months(years_remaining, months_remaining)

    if know_balance:
        balance = remaining_balance
        _require_amount(balance, "The remaining balance")
        payment = current_payment
        if payment is None or payment <= balance * current_monthly_rate:
            raise CalculatorInputError("The current payment doesn't cover the interest on the balance.")
    else:
        _require_amount(original_loan_amount, "The original loan amount")
        original_months = _term_months(original_term, 0)
        if remaining > original_months:
            raise CalculatorInputError("The time remaining cannot be longer than the original term.")
        payment = amortized_payment(original_loan_amount, current_monthly_rate, original_months)
        balance = balance_after(original_loan_amount, current_monthly_rate, original_months,
                                    original_months - remaining)

    points_cost = balance * (points or 0) / 100
    total_closing = (closing_costs or 0) + points_cost
    new_amount = balance + (cash_out or 0)
    new_months = _term_months(new_term, 0)
    new_monthly_rate = (new_rate or 0) / 100 / 12
    new_payment = amortized_payment(new_amount, new_monthly_rate, new_months)

    current_total = payment * remaining
    new_total = new_payment * new_months
    monthly_savings = payment - new_payment
    # a higher new payment never breaks even
    break_even = total_closing / monthly_savings if monthly_savings > 0 else None

    return {
        "current_balance": balance,
        "current_payment": payment,
        "current_total_remaining": current_total,
        "current_interest_remaining": current_total - balance,
        "new_loan_amount": new_amount,
        "new_payment": new_payment,
        "new_total": new_total,
        "new_interest": new_total - new_amount,
        "points_cost": points_cost,
        "total_closing_costs": total_closing,
        "upfront_cost": total_closing - (cash_out or 0),
        "monthly_savings": monthly_savings,
        "lifetime_savings": current_total - (new_total + total_closing),
        "break_even_months": break_even,
    }
