"""
Household budget and salary conversion.
"""
from calctech.core.errors import CalculatorInputError

# Monthly expense fields by category
BUDGET_CATEGORIES = {
    "housing": ("mortgage", "property_tax", "home_insurance", "utilities", "home_maintenance"),
    "transportation": ("auto_loan", "auto_insurance", "gasoline", "auto_maintenance", "parking"),
    "debt": ("credit_cards", "student_loans", "personal_loans"),
    "living": ("groceries", "dining_out", "clothing", "household_supplies"),
    "healthcare": ("health_insurance", "medical_expenses"),
    "children": ("childcare", "tuition", "child_support"),
    "savings": ("retirement_401k", "college_savings", "investments", "emergency_fund"),
    "miscellaneous": ("pets", "gifts", "entertainment", "travel", "other_expenses"),
}
FOOD_FIELDS = ("groceries", "dining_out")
BALANCED_MARGIN = 100

WEEKS_PER_YEAR = 52
PAY_PERIODS_PER_YEAR = {
    "annual": 1,
    "quarterly": 4,
    "monthly": 12,
    "semimonthly": 24,
    "biweekly": 26,
    "weekly": 52,
}
PAY_FREQUENCIES = ("hourly", "daily") + tuple(PAY_PERIODS_PER_YEAR)


def calculate_budget(salary=0, pension=0, investment_income=0, other_income=0, tax_rate=0, **expenses):
    """
    Monthly budget summary.

    salary and investment_income are yearly, pension and other_income are
    monthly. Every expense is monthly and named as in BUDGET_CATEGORIES.
    """
    known = {name for names in BUDGET_CATEGORIES.values() for name in names}
    unknown = sorted(set(expenses) - known)
    if unknown:
        raise CalculatorInputError(f"Unknown expense: {', '.join(unknown)}")

    income = (salary or 0) / 12 + (pension or 0) + (investment_income or 0) / 12 + (other_income or 0)
    after_tax = income * (1 - (tax_rate or 0) / 100)
    totals = {
        category: sum(expenses.get(name) or 0 for name in names)
        for category, names in BUDGET_CATEGORIES.items()
    }
    total_expenses = sum(totals.values())
    net = after_tax - total_expenses
    food = sum(expenses.get(name) or 0 for name in FOOD_FIELDS)

    if net > BALANCED_MARGIN:
        status = "surplus"
    elif net < -BALANCED_MARGIN:
        status = "deficit"
    else:
        status = "balanced"

    def share(part, whole):
        return part / whole * 100 if whole > 0 else 0

    return {
        "monthly_income": income,
        "after_tax_income": after_tax,
        "category_totals": totals,
        "total_expenses": total_expenses,
        "net_income": net,
        "savings_rate": share(totals["savings"], after_tax),
        "housing_percentage": share(totals["housing"], income),
        "transportation_percentage": share(totals["transportation"], after_tax),
        "food_percentage": share(food, after_tax),
        "status": status,
    }


def calculate_salary(amount=30, pay_frequency="hourly", hours_per_week=40, days_per_week=5, holidays=10,
                     vacation_days=15):
    """
    Pay at every frequency, as quoted and adjusted for unpaid holidays and
    vacation days.
    """
    if pay_frequency not in PAY_FREQUENCIES:
        raise CalculatorInputError(f"Unknown pay frequency: {pay_frequency}")
    if not hours_per_week or hours_per_week <= 0 or not days_per_week or days_per_week <= 0:
        raise CalculatorInputError("Hours and days per week must be greater than zero.")
    hours_per_day = hours_per_week / days_per_week
    working_days = WEEKS_PER_YEAR * days_per_week
    adjusted_days = working_days - (holidays or 0) - (vacation_days or 0)
    if adjusted_days <= 0:
        raise CalculatorInputError("Holidays and vacation days cannot cover the whole year.")

    pay = amount or 0
    if pay_frequency == "hourly":
        hourly = pay
    elif pay_frequency == "daily":
        hourly = pay / hours_per_day
    else:
        hourly = pay * PAY_PERIODS_PER_YEAR[pay_frequency] / (hours_per_week * WEEKS_PER_YEAR)

    annual = hourly * hours_per_week * WEEKS_PER_YEAR
    adjusted_annual = hourly * hours_per_day * adjusted_days

    def by_frequency(yearly):
        rates = {"hourly": hourly, "daily": hourly * hours_per_day}
        rates.update((name, yearly / periods) for name, periods in reversed(PAY_PERIODS_PER_YEAR.items()))
        return rates

    return {
        "working_days": working_days,
        "adjusted_working_days": adjusted_days,
        "unadjusted": by_frequency(annual),
        "adjusted": by_frequency(adjusted_annual),
    }
