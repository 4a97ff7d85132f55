from wtforms import BooleanField, DateField, FieldList, Form, FormField, IntegerField, SelectField, StringField
from wtforms.validators import InputRequired, NumberRange, Optional

from calctech.forms import CalculatorForm, FiniteFloatField
from calctech.projects.finance.core.borrowing import INTEREST_ONLY
from calctech.projects.finance.core.loans import COMPOUNDING_PER_YEAR, PAYMENTS_PER_YEAR
from calctech.projects.finance.core.retirement import COLLEGE_TYPE_LABELS
from calctech.projects.finance.core.saving import CD_COMPOUNDING

FREQUENCY_LABELS = {
    "annually": "Annually",
    "yearly": "Yearly",
    "semiannually": "Every 6 Months",
    "quarterly": "Quarterly",
    "monthly": "Monthly",
    "semimonthly": "Every Half Month",
    "biweekly": "Every 2 Weeks",
    "weekly": "Weekly",
    "daily": "Daily",
    "continuously": "Continuously",
}

TIMING_CHOICES = [("end", "End of each period"), ("beginning", "Beginning of each period")]

MAX_DEBTS = 20


def _money(label, default, required=False):
    first = InputRequired() if required else Optional()
    return FiniteFloatField(label, validators=[first, NumberRange(min=0)], default=default)


def _percent(label, default):
    return FiniteFloatField(label, validators=[Optional(), NumberRange(min=0, max=100)], default=default)


class MortgageForm(CalculatorForm):
    home_price = _money("Home Price ($)", 1000000, required=True)
    down_payment = _money("Down Payment ($)", 200000)
    loan_term_years = FiniteFloatField("Loan Term (years)", validators=[Optional(), NumberRange(min=1, max=50)],
                                 default=25)
    interest_rate = _percent("Interest Rate (%)", 6.5)
    property_tax = _money("Property Tax ($/month)", 800)
    home_insurance = _money("Home Insurance ($/month)", 250)
    start = DateField("Start Date (blank for today)", validators=[Optional()])


class LoanForm(CalculatorForm):
    loan_type = SelectField(
        "Loan Type",
        choices=[
            ("amortized", "Amortized loan (fixed payments)"),
            ("deferred", "Deferred payment loan (lump sum at maturity)"),
            ("bond", "Bond (face value at maturity)"),
        ],
        default="amortized",
    )
    principal = _money("Loan Amount / Face Value ($)", 100000)
    years = IntegerField("Term (years)", validators=[Optional(), NumberRange(min=0, max=100)], default=10)
    months = IntegerField("Term (months)", validators=[Optional(), NumberRange(min=0, max=11)], default=0)
    interest_rate = _percent("Interest Rate (%)", 6)
    compound_frequency = SelectField(
        "Compound",
        choices=[(key, FREQUENCY_LABELS[key]) for key in COMPOUNDING_PER_YEAR],
        default="monthly",
    )
    payment_frequency = SelectField(
        "Pay Back",
        choices=[(key, FREQUENCY_LABELS[key]) for key in PAYMENTS_PER_YEAR],
        default="monthly",
    )


class CompoundInterestForm(CalculatorForm):
    principal = _money("Initial Investment ($)", 10000)
    monthly_contribution = _money("Regular Contribution ($)", 200)
    rate = _percent("Annual Interest Rate (%)", 5)
    years = FiniteFloatField("Years", validators=[InputRequired(), NumberRange(min=0, max=100)], default=10)
    compounding = SelectField(
        "Compounding",
        choices=[("1", "Annually"), ("2", "Semiannually"), ("4", "Quarterly"), ("12", "Monthly"),
                 ("365", "Daily"), ("continuous", "Continuously")],
        default="12",
    )
    contributions_per_year = SelectField(
        "Contribution Frequency",
        choices=[(1, "Annually"), (4, "Quarterly"), (12, "Monthly"), (26, "Biweekly"), (52, "Weekly")],
        coerce=int,
        default=12,
    )


class SimpleInterestForm(CalculatorForm):
    principal = _money("Principal ($)", 20000)
    rate = _percent("Annual Interest Rate (%)", 3)
    term = FiniteFloatField("Term (years)", validators=[Optional(), NumberRange(min=0)], default=10)


class FutureValueForm(CalculatorForm):
    present_value = _money("Present Value ($)", 10000)
    periodic_deposit = _money("Periodic Deposit ($)", 500)
    rate = _percent("Interest Rate per Period (%)", 6)
    periods = IntegerField("Number of Periods", validators=[Optional(), NumberRange(min=0, max=1200)],
                           default=120)
    timing = SelectField("Deposit Timing", choices=TIMING_CHOICES, default="end")


class PresentValueForm(CalculatorForm):
    future_value = _money("Future Value ($)", 100000)
    periodic_payment = _money("Periodic Payment ($)", 1000)
    rate = _percent("Interest Rate per Period (%)", 5)
    periods = IntegerField("Number of Periods", validators=[Optional(), NumberRange(min=0, max=1200)],
                           default=10)
    timing = SelectField("Payment Timing", choices=TIMING_CHOICES, default="end")


class ROIForm(CalculatorForm):
    invested = _money("Amount Invested ($)", 50000)
    returned = _money("Amount Returned ($)", 70000)
    years = FiniteFloatField("Investment Length (years)", validators=[Optional(), NumberRange(min=0)], default=2)


class SalesTaxForm(CalculatorForm):
    mode = SelectField(
        "Calculate",
        choices=[("add_tax", "Price after tax"), ("remove_tax", "Price before tax"),
                 ("find_rate", "Tax rate")],
        default="add_tax",
    )
    before_tax = _money("Before Tax Price ($)", 100)
    tax_rate = _percent("Sales Tax Rate (%)", 7.5)
    after_tax = _money("After Tax Price ($)", None)


class DiscountForm(CalculatorForm):
    price = _money("Original Price ($)", 100)
    discount = _money("Discount", 20)
    discount_type = SelectField("Discount Type", choices=[("percent", "Percent off (%)"),
                                                          ("fixed", "Fixed amount off ($)")],
                                default="percent")


class CommissionForm(CalculatorForm):
    sales = _money("Sales Amount ($)", 50000)
    rate = _percent("Commission Rate (%)", 5)
    has_base_salary = BooleanField("Include base salary", default=False)
    base_salary = _money("Base Salary ($)", 30000)
    is_tiered = BooleanField("Tiered commission", default=False)
    tier1_max = _money("Tier 1 up to ($)", 25000)
    tier1_rate = _percent("Tier 1 rate (%)", 3)
    tier2_max = _money("Tier 2 up to ($)", 50000)
    tier2_rate = _percent("Tier 2 rate (%)", 5)
    tier3_rate = _percent("Tier 3 rate, above tier 2 (%)", 7)


def _term_years(label, default, max_years=50):
    return IntegerField(label, validators=[Optional(), NumberRange(min=0, max=max_years)], default=default)


def _term_months(default=0):
    return IntegerField("Term (months)", validators=[Optional(), NumberRange(min=0, max=11)], default=default)


def _age(label, default):
    return IntegerField(label, validators=[Optional(), NumberRange(min=0, max=120)], default=default)


def _fee_type(label, default="percentage"):
    return SelectField(label, choices=[("percentage", "Percent of loan (%)"), ("fixed", "Fixed amount ($)")],
                       default=default)


class AmortizationForm(CalculatorForm):
    loan_amount = _money("Loan Amount ($)", 250000, required=True)
    loan_term_years = _term_years("Loan Term (years)", 30)
    loan_term_months = _term_months()
    interest_rate = _percent("Interest Rate (%)", 6.5)
    start = DateField("Start Date (blank for today)", validators=[Optional()])
    extra_monthly = _money("Extra Monthly Payment ($)", 0)
    extra_monthly_start = IntegerField("Starting with payment #", validators=[Optional(), NumberRange(min=1)],
                                       default=1)
    extra_yearly = _money("Extra Yearly Payment ($)", 0)
    extra_yearly_start = IntegerField("Starting with payment #", validators=[Optional(), NumberRange(min=1)],
                                      default=1)


class PaymentForm(CalculatorForm):
    mode = SelectField("Calculate", choices=[("fixed_term", "Monthly payment for a fixed term"),
                                             ("fixed_payment", "Time to pay off with a fixed payment")],
                       default="fixed_term")
    loan_amount = _money("Loan Amount ($)", 200000, required=True)
    loan_term = _term_years("Loan Term (years)", 15)
    interest_rate = _percent("Interest Rate (%)", 6)
    monthly_payment = _money("Monthly Payment ($)", 2000)


class APRForm(CalculatorForm):
    loan_amount = _money("Loan Amount ($)", 100000, required=True)
    loan_term_years = _term_years("Loan Term (years)", 10)
    loan_term_months = _term_months()
    interest_rate = _percent("Interest Rate (%)", 6)
    compound_frequency = SelectField(
        "Compound",
        choices=[(key, FREQUENCY_LABELS[key]) for key in COMPOUNDING_PER_YEAR],
        default="monthly",
    )
    payment_frequency = SelectField(
        "Pay Back",
        choices=[(key, FREQUENCY_LABELS[key]) for key in PAYMENTS_PER_YEAR],
        default="monthly",
    )
    loaned_fees = _money("Loaned Fees ($)", 0)
    upfront_fees = _money("Upfront Fees ($)", 1500)


class InterestRateForm(CalculatorForm):
    loan_amount = _money("Loan Amount ($)", 250000, required=True)
    loan_term_years = _term_years("Loan Term (years)", 5)
    loan_term_months = _term_months()
    monthly_payment = _money("Monthly Payment ($)", 4800, required=True)


class AutoLoanForm(CalculatorForm):
    auto_price = _money("Auto Price ($)", 30000, required=True)
    loan_term_months = IntegerField("Loan Term (months)", validators=[Optional(), NumberRange(min=1, max=120)],
                                    default=60)
    interest_rate = _percent("Interest Rate (%)", 6)
    cash_incentives = _money("Cash Incentives ($)", 0)
    down_payment = _money("Down Payment ($)", 6000)
    trade_in_value = _money("Trade-in Value ($)", 0)
    amount_owed_on_trade_in = _money("Amount Owed on Trade-in ($)", 0)
    sales_tax_rate = _percent("Sales Tax (%)", 8)
    title_fees = _money("Title, Registration and Other Fees ($)", 300)
    include_taxes_in_loan = BooleanField("Include taxes and fees in loan", default=True)
    start = DateField("Start Date (blank for today)", validators=[Optional()])


class PersonalLoanForm(CalculatorForm):
    loan_amount = _money("Loan Amount ($)", 20000, required=True)
    interest_rate = _percent("Interest Rate (%)", 7.5)
    loan_term_years = _term_years("Loan Term (years)", 5)
    loan_term_months = _term_months()
    origination_fee_type = _fee_type("Origination Fee Type")
    origination_fee = _money("Origination Fee", 2)
    insurance_premium = _money("Insurance Premium ($/month)", 0)
    start = DateField("Start Date (blank for today)", validators=[Optional()])


class StudentLoanForm(CalculatorForm):
    loan_balance = _money("Loan Balance ($)", 35000, required=True)
    loan_term = _term_years("Remaining Term (years)", 10, max_years=30)
    interest_rate = _percent("Interest Rate (%)", 4.5)
    extra_monthly = _money("Extra Monthly Payment ($)", 0)
    extra_yearly = _money("Extra Yearly Payment ($)", 0)
    one_time_payment = _money("One-time Payment ($)", 0)
    start = DateField("Start Date (blank for today)", validators=[Optional()])


class BusinessLoanForm(CalculatorForm):
    loan_amount = _money("Loan Amount ($)", 50000, required=True)
    interest_rate = _percent("Interest Rate (%)", 7.5)
    loan_term_years = _term_years("Loan Term (years)", 5, max_years=30)
    loan_term_months = _term_months()
    compound_frequency = SelectField(
        "Compound",
        choices=[(key, FREQUENCY_LABELS[key]) for key in COMPOUNDING_PER_YEAR],
        default="monthly",
    )
    payment_frequency = SelectField(
        "Pay Back",
        choices=[(key, FREQUENCY_LABELS[key]) for key in PAYMENTS_PER_YEAR]
        + [(INTEREST_ONLY, "Interest only, principal at the end")],
        default="monthly",
    )
    origination_fee = _money("Origination Fee ($)", 1250)
    documentation_fee = _money("Documentation Fee ($)", 500)
    other_fees = _money("Other Fees ($)", 250)


class RefinanceForm(CalculatorForm):
    know_balance = BooleanField("I know my remaining balance", default=True)
    remaining_balance = _money("Remaining Balance ($)", 350000)
    current_payment = _money("Current Monthly Payment ($)", 2500)
    original_loan_amount = _money("Original Loan Amount ($)", 400000)
    original_term = _term_years("Original Loan Term (years)", 30)
    years_remaining = _term_years("Time Remaining (years)", 25)
    months_remaining = _term_months()
    current_rate = _percent("Current Interest Rate (%)", 7)
    new_term = _term_years("New Loan Term (years)", 30)
    new_rate = _percent("New Interest Rate (%)", 5.5)
    points = _percent("Points (%)", 0)
    closing_costs = _money("Closing Costs ($)", 3500)
    cash_out = _money("Cash Out Amount ($)", 0)


class CreditCardForm(CalculatorForm):
    balance = _money("Credit Card Balance ($)", 5000, required=True)
    interest_rate = _percent("Interest Rate (APR %)", 18.5)
    mode = SelectField("Calculate", choices=[("amount", "Time to pay off with a fixed payment"),
                                             ("timeframe", "Payment to pay off in a set time")],
                       default="amount")
    monthly_payment = _money("Monthly Payment ($)", 150)
    payoff_years = _term_years("Pay off within (years)", 3, max_years=50)
    payoff_months = _term_months()
    start = DateField("Start Date (blank for today)", validators=[Optional()])


class DebtEntryForm(Form):
    name = StringField("Debt", validators=[Optional()])
    balance = FiniteFloatField("Balance ($)", validators=[Optional(), NumberRange(min=0)])
    minimum_payment = FiniteFloatField("Minimum Payment ($)", validators=[Optional(), NumberRange(min=0)])
    interest_rate = FiniteFloatField("Interest Rate (%)", validators=[Optional(), NumberRange(min=0, max=100)])


class DebtPayoffForm(CalculatorForm):
    debts = FieldList(
        FormField(DebtEntryForm),
        max_entries=MAX_DEBTS,
        default=[
            {"name": "Credit Card 1", "balance": 5000, "minimum_payment": 150, "interest_rate": 18.99},
            {"name": "Credit Card 2", "balance": 3500, "minimum_payment": 100, "interest_rate": 15.5},
            {"name": "Personal Loan", "balance": 8000, "minimum_payment": 200, "interest_rate": 12.0},
        ],
    )
    extra_monthly = _money("Extra Monthly Payment ($)", 200)
    extra_yearly = _money("Extra Yearly Payment ($)", 1000)
    one_time_payment = _money("One-time Payment ($)", 0)
    one_time_month = IntegerField("One-time Payment in Month", validators=[Optional(), NumberRange(min=0)],
                                  default=0)
    start = DateField("Start Date (blank for today)", validators=[Optional()])


class DebtConsolidationForm(CalculatorForm):
    debts = FieldList(
        FormField(DebtEntryForm),
        max_entries=MAX_DEBTS,
        default=[
            {"name": "Credit Card 1", "balance": 8000, "minimum_payment": 200, "interest_rate": 18.99},
            {"name": "Credit Card 2", "balance": 5000, "minimum_payment": 150, "interest_rate": 21.99},
            {"name": "Personal Loan", "balance": 12000, "minimum_payment": 350, "interest_rate": 14.5},
        ],
    )
    loan_amount = _money("Consolidation Loan Amount ($)", 25000, required=True)
    loan_interest_rate = _percent("Loan Interest Rate (%)", 9.5)
    loan_term_years = _term_years("Loan Term (years)", 5, max_years=30)
    loan_term_months = _term_months()
    loan_fee_type = _fee_type("Loan Fee Type")
    loan_fee = _money("Loan Fee", 3)


class SavingsForm(CalculatorForm):
    initial_deposit = _money("Initial Deposit ($)", 20000)
    monthly_contribution = _money("Monthly Contribution ($)", 500)
    interest_rate = _percent("Interest Rate (%)", 4.5)
    years = IntegerField("Years", validators=[Optional(), NumberRange(min=1, max=100)], default=10)
    compounding = SelectField(
        "Compounding",
        choices=[(1, "Annually"), (2, "Semiannually"), (4, "Quarterly"), (12, "Monthly"), (365, "Daily")],
        coerce=int,
        default=12,
    )
    contribution_increase = _percent("Yearly Contribution Increase (%)", 0)


class CDForm(CalculatorForm):
    initial_deposit = _money("Initial Deposit ($)", 10000, required=True)
    interest_rate = _percent("Interest Rate (%)", 4.89)
    compounding = SelectField("Compound", choices=[(key, FREQUENCY_LABELS[key]) for key in CD_COMPOUNDING],
                              default="monthly")
    years = _term_years("Term (years)", 3, max_years=30)
    months = _term_months()
    tax_rate = _percent("Marginal Tax Rate (%)", 0)


class InvestmentForm(CalculatorForm):
    starting_amount = _money("Starting Amount ($)", 20000)
    contribution = _money("Additional Contribution ($)", 1000)
    contribution_frequency = SelectField("Contribute", choices=[("monthly", "Each month"),
                                                                ("annually", "Each year")],
                                         default="monthly")
    years = IntegerField("Years", validators=[Optional(), NumberRange(min=1, max=100)], default=10)
    return_rate = _percent("Return Rate (%)", 6)
    compound_frequency = SelectField(
        "Compound",
        choices=[(key, FREQUENCY_LABELS[key]) for key in COMPOUNDING_PER_YEAR],
        default="annually",
    )
    contribution_timing = SelectField("Contribute at the", choices=TIMING_CHOICES, default="end")


class Retirement401kForm(CalculatorForm):
    current_age = _age("Current Age", 30)
    annual_salary = _money("Annual Salary ($)", 75000)
    current_balance = _money("Current 401(k) Balance ($)", 50000)
    contribution_percent = _percent("Your Contribution (% of salary)", 6)
    employer_match = _percent("Employer Match (%)", 50)
    employer_match_limit = _percent("Employer Match Limit (% of salary)", 6)
    retirement_age = _age("Retirement Age", 65)
    life_expectancy = _age("Life Expectancy", 85)
    salary_increase = _percent("Expected Salary Increase (%)", 2.5)
    annual_return = _percent("Expected Annual Return (%)", 7)
    inflation_rate = _percent("Expected Inflation (%)", 2.5)


class IRAForm(CalculatorForm):
    current_balance = _money("Current Balance ($)", 50000)
    annual_contribution = _money("Annual Contribution ($)", 6500)
    expected_return = _percent("Expected Return (%)", 7)
    current_age = _age("Current Age", 35)
    retirement_age = _age("Retirement Age", 65)
    current_tax_rate = _percent("Current Tax Rate (%)", 24)
    retirement_tax_rate = _percent("Tax Rate in Retirement (%)", 22)


class RothIRAForm(CalculatorForm):
    current_balance = _money("Current Balance ($)", 0)
    annual_contribution = _money("Annual Contribution ($)", 7000)
    maximize_contributions = BooleanField("Contribute the yearly maximum", default=False)
    expected_return = _percent("Expected Return (%)", 8)
    current_age = _age("Current Age", 30)
    retirement_age = _age("Retirement Age", 65)
    marginal_tax_rate = _percent("Marginal Tax Rate (%)", 22)


class RetirementForm(CalculatorForm):
    mode = SelectField(
        "Question",
        choices=[
            ("need", "How much do I need to retire?"),
            ("save", "How much will I have if I save a share of income?"),
            ("withdraw", "How much can I withdraw each month?"),
            ("longevity", "How long will my money last?"),
        ],
        default="need",
    )
    current_age = _age("Current Age", 35)
    retirement_age = _age("Retirement Age", 65)
    life_expectancy = _age("Life Expectancy", 85)
    current_income = _money("Pre-tax Income ($/year)", 75000)
    income_increase = _percent("Income Increase (%/year)", 2)
    retirement_income_percent = _percent("Income Needed in Retirement (% of income)", 80)
    investment_return = _percent("Investment Return (%)", 7)
    inflation_rate = _percent("Inflation Rate (%)", 3)
    other_income = _money("Other Retirement Income ($/month)", 2000)
    current_savings = _money("Current Retirement Savings ($)", 100000)
    amount_needed = _money("Amount Needed at Retirement ($)", 1500000)
    savings_percent = _percent("Future Savings (% of income)", 15)
    annual_contribution = _money("Annual Contribution ($)", 10000)
    monthly_contribution = _money("Monthly Contribution ($)", 833)
    savings_amount = _money("Amount in Savings ($)", 1000000)
    monthly_withdrawal = _money("Monthly Withdrawal ($)", 4000)
    withdrawal_return = _percent("Return During Retirement (%)", 5)


class CollegeCostForm(CalculatorForm):
    college_type = SelectField("College Type", choices=list(COLLEGE_TYPE_LABELS.items()),
                               default="public_in_state")
    custom_cost = _money("Custom Yearly Cost ($)", 29910)
    cost_increase = _percent("Yearly Cost Increase (%)", 5)
    years_to_college = IntegerField("Years Until College", validators=[Optional(), NumberRange(min=0, max=30)],
                                    default=10)
    college_duration = IntegerField("Years in College", validators=[Optional(), NumberRange(min=1, max=10)],
                                    default=4)
    current_savings = _money("Current College Savings ($)", 50000)
    percent_from_savings = _percent("Share of Costs Paid from Savings (%)", 75)
    investment_return = _percent("Investment Return (%)", 6)
    tax_rate = _percent("Tax Rate on Returns (%)", 0)


class DownPaymentForm(CalculatorForm):
    home_price = _money("Home Price ($)", 450000, required=True)
    down_payment_percent = _percent("Down Payment (%)", 20)
    closing_costs_percent = _percent("Closing Costs (%)", 3)
    interest_rate = _percent("Interest Rate (%)", 6.5)
    loan_term = _term_years("Loan Term (years)", 30)


class HouseAffordabilityForm(CalculatorForm):
    mode = SelectField("Based on", choices=[("income", "Household income"), ("budget", "Monthly budget")],
                       default="income")
    annual_income = _money("Annual Household Income ($)", 85000)
    monthly_debt = _money("Monthly Debt Payments ($)", 500)
    monthly_budget = _money("Monthly Housing Budget ($)", 2500)
    loan_term = _term_years("Mortgage Term (years)", 30)
    interest_rate = _percent("Interest Rate (%)", 7)
    down_payment_percent = _percent("Down Payment (%)", 20)
    property_tax_percent = _percent("Property Tax (% of price/year)", 1.2)
    hoa_fee = _money("HOA Fee ($/month)", 100)
    insurance = _money("Home Insurance ($/month)", 150)
    maintenance_percent = _percent("Maintenance (% of price/year)", 1)
    debt_to_income = _percent("Debt-to-Income Limit (%)", 36)
    front_end_ratio = _percent("Housing Cost Limit (% of income)", 28)


class RentForm(CalculatorForm):
    income = _money("Pre-tax Income ($)", 75000, required=True)
    income_type = SelectField("Income is", choices=[("annual", "Per year"), ("monthly", "Per month")],
                              default="annual")
    monthly_debt = _money("Monthly Debt Payments ($)", 500)


class BudgetForm(CalculatorForm):
    salary = _money("Salary and Earned Income ($/year)", 75000)
    pension = _money("Pension and Social Security ($/month)", 0)
    investment_income = _money("Investments and Savings ($/year)", 2400)
    other_income = _money("Other Income ($/month)", 0)
    tax_rate = _percent("Income Tax Rate (%)", 25)
    mortgage = _money("Mortgage or Rent", 2000)
    property_tax = _money("Property Tax", 400)
    home_insurance = _money("Home Insurance", 150)
    utilities = _money("Utilities", 250)
    home_maintenance = _money("Home Maintenance", 200)
    auto_loan = _money("Auto Loan", 450)
    auto_insurance = _money("Auto Insurance", 120)
    gasoline = _money("Gasoline", 200)
    auto_maintenance = _money("Auto Maintenance", 100)
    parking = _money("Parking and Tolls", 50)
    credit_cards = _money("Credit Cards", 200)
    student_loans = _money("Student Loans", 350)
    personal_loans = _money("Other Loans", 0)
    groceries = _money("Groceries", 600)
    dining_out = _money("Dining Out", 300)
    clothing = _money("Clothing", 150)
    household_supplies = _money("Household Supplies", 100)
    health_insurance = _money("Health Insurance", 400)
    medical_expenses = _money("Medical Expenses", 150)
    childcare = _money("Childcare", 0)
    tuition = _money("Tuition", 0)
    child_support = _money("Child Support", 0)
    retirement_401k = _money("401(k) and IRA", 625)
    college_savings = _money("College Savings", 0)
    investments = _money("Investments", 200)
    emergency_fund = _money("Emergency Fund", 300)
    pets = _money("Pets", 100)
    gifts = _money("Gifts and Donations", 100)
    entertainment = _money("Entertainment", 200)
    travel = _money("Travel", 150)
    other_expenses = _money("Other", 100)


class SalaryForm(CalculatorForm):
    amount = _money("Salary Amount ($)", 30, required=True)
    pay_frequency = SelectField(
        "Per",
        choices=[("hourly", "Hour"), ("daily", "Day"), ("weekly", "Week"), ("biweekly", "2 Weeks"),
                 ("semimonthly", "Half Month"), ("monthly", "Month"), ("quarterly", "Quarter"),
                 ("annual", "Year")],
        default="hourly",
    )
    hours_per_week = FiniteFloatField("Hours per Week", validators=[Optional(), NumberRange(min=1, max=168)],
                                      default=40)
    days_per_week = FiniteFloatField("Days per Week", validators=[Optional(), NumberRange(min=1, max=7)],
                                     default=5)
    holidays = IntegerField("Holidays per Year", validators=[Optional(), NumberRange(min=0, max=365)], default=10)
    vacation_days = IntegerField("Vacation Days per Year", validators=[Optional(), NumberRange(min=0, max=365)],
                                 default=15)
