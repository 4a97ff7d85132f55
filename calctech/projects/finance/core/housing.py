"""
Home buying and renting: down payment, how much house you can afford and
how much rent you can afford.
"""
from calctech.core.errors import CalculatorInputError
from calctech.projects.finance.core.loans import amortized_payment

AFFORDABILITY_MODES = ("income", "budget")
INCOME_TYPES = ("annual", "monthly")
RENT_SHARES = (25, 30, 33)


def _mortgage_factor(interest_rate, loan_term):
    """Monthly principal and interest per dollar borrowed."""
    months = round((loan_term or 0) * 12)
    if months <= 0:
        raise CalculatorInputError("The loan term must be greater than zero.")
    return amortized_payment(1, (interest_rate or 0) / 100 / 12, months)


def calculate_down_payment(home_price=450000, down_payment_percent=20, closing_costs_percent=3,
                           interest_rate=6.5, loan_term=30):
    if not home_price or home_price <= 0:
        raise CalculatorInputError("The home price must be greater than zero.")
    down = home_price * (down_payment_percent or 0) / 100
    closing = home_price * (closing_costs_percent or 0) / 100
    loan_amount = home_price - down
    return {
        "home_price": home_price,
        "down_payment": down,
        "closing_costs": closing,
        "total_upfront_cash": down + closing,
        "loan_amount": loan_amount,
        "monthly_payment": loan_amount * _mortgage_factor(interest_rate, loan_term),
    }


def calculate_house_affordability(mode="income", annual_income=85000, monthly_debt=500, monthly_budget=2500,
                                  loan_term=30, interest_rate=7, down_payment_percent=20,
                                  property_tax_percent=1.2, hoa_fee=100, insurance=150, maintenance_percent=1,
                                  debt_to_income=36, front_end_ratio=28):
    """
    The most expensive home whose monthly cost fits.

    income: housing costs stay under front_end_ratio percent of gross income
    and housing plus other debts under debt_to_income percent.
    budget: housing costs, including upkeep, stay under monthly_budget.

    Principal and interest, property tax and upkeep all scale with the
    price, so the price comes straight from what is left after HOA and
    insurance.
    """
    if mode not in AFFORDABILITY_MODES:
        raise CalculatorInputError(f"Unknown mode: {mode}")
    hoa = hoa_fee or 0
    ins = insurance or 0
    down_share = (down_payment_percent or 0) / 100
    tax_share = (property_tax_percent or 0) / 100

    per_dollar = (1 - down_share) * _mortgage_factor(interest_rate, loan_term) + tax_share / 12
    if mode == "income":
        if not annual_income or annual_income <= 0:
            raise CalculatorInputError("Annual income must be greater than zero.")
        monthly_income = annual_income / 12
        max_payment = min(monthly_income * (front_end_ratio or 0) / 100,
                          monthly_income * (debt_to_income or 0) / 100 - (monthly_debt or 0))
    else:
        monthly_income = None
        max_payment = monthly_budget or 0
        per_dollar += (maintenance_percent or 0) / 100 / 12

    remaining = max_payment - hoa - ins
    if remaining <= 0:
        raise CalculatorInputError("Nothing is left for a mortgage after debts, HOA fees and insurance.")
    price = remaining / per_dollar
    loan_amount = price * (1 - down_share)
    principal_interest = loan_amount * _mortgage_factor(interest_rate, loan_term)
    property_tax = price * tax_share / 12
    maintenance = price * (maintenance_percent or 0) / 100 / 12 if mode == "budget" else 0
    total = principal_interest + property_tax + maintenance + hoa + ins

    result = {
        "max_home_price": price,
        "down_payment": price * down_share,
        "loan_amount": loan_amount,
        "monthly_payment": total,
        "monthly_principal_interest": principal_interest,
        "monthly_property_tax": property_tax,
        "monthly_maintenance": maintenance,
        "monthly_hoa": hoa,
        "monthly_insurance": ins,
        "max_monthly_payment": max_payment,
    }
    if monthly_income:
        result["front_end_ratio"] = total / monthly_income * 100
        result["back_end_ratio"] = (total + (monthly_debt or 0)) / monthly_income * 100
    return result


def calculate_rent(income=75000, income_type="annual", monthly_debt=500):
    """Rent at 25%, 30% and 33% of gross monthly income."""
    if income_type not in INCOME_TYPES:
        raise CalculatorInputError(f"Unknown income type: {income_type}")
    if not income or income <= 0:
        raise CalculatorInputError("Income must be greater than zero.")
    monthly_income = income / 12 if income_type == "annual" else income
    debt = monthly_debt or 0

    options = []
    for share in RENT_SHARES:
        rent = monthly_income * share / 100
        options.append({
            "share_of_income": share,
            "rent": rent,
            "left_after_rent_and_debt": monthly_income - rent - debt,
            "debt_to_income": (rent + debt) / monthly_income * 100,
        })
    return {
        "monthly_income": monthly_income,
        "recommended_rent": monthly_income * 0.30,
        "current_debt_to_income": debt / monthly_income * 100,
        "options": options,
    }
