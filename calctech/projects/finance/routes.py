"""
Financial calculators.
"""
from flask import Blueprint

from calctech.core.views import calculator_api, calculator_page
from calctech.projects.finance.core.borrowing import (
    calculate_apr,
    calculate_auto_loan,
    calculate_business_loan,
    calculate_interest_rate,
    calculate_personal_loan,
    calculate_refinance,
)
from calctech.projects.finance.core.budget import calculate_budget, calculate_salary
from calctech.projects.finance.core.housing import (
    calculate_down_payment,
    calculate_house_affordability,
    calculate_rent,
)
from calctech.projects.finance.core.interest import (
    calculate_compound_interest,
    calculate_future_value,
    calculate_present_value,
    calculate_roi,
    calculate_simple_interest,
)
from calctech.projects.finance.core.loans import calculate_loan, calculate_mortgage
from calctech.projects.finance.core.payoff import (
    calculate_amortization,
    calculate_credit_card,
    calculate_debt_consolidation,
    calculate_debt_payoff,
    calculate_payment,
    calculate_student_loan,
)
from calctech.projects.finance.core.retail import calculate_commission, calculate_discount, calculate_sales_tax
from calctech.projects.finance.core.retirement import (
    calculate_401k,
    calculate_college_cost,
    calculate_ira,
    calculate_retirement,
    calculate_roth_ira,
)
from calctech.projects.finance.core.saving import calculate_cd, calculate_investment, calculate_savings
from calctech.projects.finance.forms import (
    AmortizationForm,
    APRForm,
    AutoLoanForm,
    BudgetForm,
    BusinessLoanForm,
    CDForm,
    CollegeCostForm,
    CommissionForm,
    CompoundInterestForm,
    CreditCardForm,
    DebtConsolidationForm,
    DebtPayoffForm,
    DiscountForm,
    DownPaymentForm,
    FutureValueForm,
    HouseAffordabilityForm,
    InterestRateForm,
    InvestmentForm,
    IRAForm,
    LoanForm,
    MortgageForm,
    PaymentForm,
    PersonalLoanForm,
    PresentValueForm,
    RefinanceForm,
    RentForm,
    Retirement401kForm,
    RetirementForm,
    ROIForm,
    RothIRAForm,
    SalaryForm,
    SalesTaxForm,
    SavingsForm,
    SimpleInterestForm,
    StudentLoanForm,
)
from calctech.utils.dates import site_today

finance_bp = Blueprint('finance', __name__, template_folder='templates')


def _starting_today(calculate):
    """Blank start dates mean today in the site timezone."""
    def compute(start=None, **values):
        return calculate(start=start or site_today(), **values)
    return compute


_mortgage = _starting_today(calculate_mortgage)


def _college_cost(**values):
    return calculate_college_cost(today=site_today(), **values)


def _commission(sales=0, rate=0, has_base_salary=False, base_salary=0, is_tiered=False,
                tier1_max=0, tier1_rate=0, tier2_max=0, tier2_rate=0, tier3_rate=0):
    tiers = None
    if is_tiered:
        tiers = [
            {"up_to": tier1_max, "rate": tier1_rate},
            {"up_to": tier2_max, "rate": tier2_rate},
            {"up_to": None, "rate": tier3_rate},
        ]
    return calculate_commission(
        sales=sales,
        rate=rate,
        base_salary=base_salary if has_base_salary else 0,
        tiers=tiers,
    )


@finance_bp.route('/mortgage', methods=['GET', 'POST'])
def mortgage():
    return calculator_page('mortgage', MortgageForm, _mortgage)

@finance_bp.route('/api/mortgage', methods=['GET', 'POST'])
def api_mortgage():
    return calculator_api('mortgage', MortgageForm, _mortgage)


@finance_bp.route('/loan', methods=['GET', 'POST'])
def loan():
    return calculator_page('loan', LoanForm, calculate_loan)

@finance_bp.route('/api/loan', methods=['GET', 'POST'])
def api_loan():
    return calculator_api('loan', LoanForm, calculate_loan)


@finance_bp.route('/compound-interest', methods=['GET', 'POST'])
def compound_interest():
    return calculator_page('compound_interest', CompoundInterestForm, calculate_compound_interest)

@finance_bp.route('/api/compound-interest', methods=['GET', 'POST'])
def api_compound_interest():
    return calculator_api('compound_interest', CompoundInterestForm, calculate_compound_interest)


@finance_bp.route('/simple-interest', methods=['GET', 'POST'])
def simple_interest():
    return calculator_page('simple_interest', SimpleInterestForm, calculate_simple_interest)

@finance_bp.route('/api/simple-interest', methods=['GET', 'POST'])
def api_simple_interest():
    return calculator_api('simple_interest', SimpleInterestForm, calculate_simple_interest)


@finance_bp.route('/future-value', methods=['GET', 'POST'])
def future_value():
    return calculator_page('future_value', FutureValueForm, calculate_future_value)

@finance_bp.route('/api/future-value', methods=['GET', 'POST'])
def api_future_value():
    return calculator_api('future_value', FutureValueForm, calculate_future_value)


@finance_bp.route('/present-value', methods=['GET', 'POST'])
def present_value():
    return calculator_page('present_value', PresentValueForm, calculate_present_value)

@finance_bp.route('/api/present-value', methods=['GET', 'POST'])
def api_present_value():
    return calculator_api('present_value', PresentValueForm, calculate_present_value)


@finance_bp.route('/roi', methods=['GET', 'POST'])
def roi():
    return calculator_page('roi', ROIForm, calculate_roi)

@finance_bp.route('/api/roi', methods=['GET', 'POST'])
def api_roi():
    return calculator_api('roi', ROIForm, calculate_roi)


@finance_bp.route('/sales-tax', methods=['GET', 'POST'])
def sales_tax():
    return calculator_page('sales_tax', SalesTaxForm, calculate_sales_tax)

@finance_bp.route('/api/sales-tax', methods=['GET', 'POST'])
def api_sales_tax():
    return calculator_api('sales_tax', SalesTaxForm, calculate_sales_tax)


@finance_bp.route('/discount', methods=['GET', 'POST'])
def discount():
    return calculator_page('discount', DiscountForm, calculate_discount)

@finance_bp.route('/api/discount', methods=['GET', 'POST'])
def api_discount():
    return calculator_api('discount', DiscountForm, calculate_discount)


@finance_bp.route('/commission', methods=['GET', 'POST'])
def commission():
    return calculator_page('commission', CommissionForm, _commission)

@finance_bp.route('/api/commission', methods=['GET', 'POST'])
def api_commission():
    return calculator_api('commission', CommissionForm, _commission)


@finance_bp.route('/amortization', methods=['GET', 'POST'])
def amortization():
    return calculator_page('amortization', AmortizationForm, _starting_today(calculate_amortization))

@finance_bp.route('/api/amortization', methods=['GET', 'POST'])
def api_amortization():
    return calculator_api('amortization', AmortizationForm, _starting_today(calculate_amortization))


@finance_bp.route('/payment', methods=['GET', 'POST'])
def payment():
    return calculator_page('payment', PaymentForm, calculate_payment)

@finance_bp.route('/api/payment', methods=['GET', 'POST'])
def api_payment():
    return calculator_api('payment', PaymentForm, calculate_payment)


@finance_bp.route('/apr', methods=['GET', 'POST'])
def apr():
    return calculator_page('apr', APRForm, calculate_apr)

@finance_bp.route('/api/apr', methods=['GET', 'POST'])
def api_apr():
    return calculator_api('apr', APRForm, calculate_apr)


@finance_bp.route('/interest-rate', methods=['GET', 'POST'])
def interest_rate():
    return calculator_page('interest_rate', InterestRateForm, calculate_interest_rate)

@finance_bp.route('/api/interest-rate', methods=['GET', 'POST'])
def api_interest_rate():
    return calculator_api('interest_rate', InterestRateForm, calculate_interest_rate)


@finance_bp.route('/auto-loan', methods=['GET', 'POST'])
def auto_loan():
    return calculator_page('auto_loan', AutoLoanForm, _starting_today(calculate_auto_loan))

@finance_bp.route('/api/auto-loan', methods=['GET', 'POST'])
def api_auto_loan():
    return calculator_api('auto_loan', AutoLoanForm, _starting_today(calculate_auto_loan))


@finance_bp.route('/personal-loan', methods=['GET', 'POST'])
def personal_loan():
    return calculator_page('personal_loan', PersonalLoanForm, _starting_today(calculate_personal_loan))

@finance_bp.route('/api/personal-loan', methods=['GET', 'POST'])
def api_personal_loan():
    return calculator_api('personal_loan', PersonalLoanForm, _starting_today(calculate_personal_loan))


@finance_bp.route('/student-loan', methods=['GET', 'POST'])
def student_loan():
    return calculator_page('student_loan', StudentLoanForm, _starting_today(calculate_student_loan))

@finance_bp.route('/api/student-loan', methods=['GET', 'POST'])
def api_student_loan():
    return calculator_api('student_loan', StudentLoanForm, _starting_today(calculate_student_loan))


@finance_bp.route('/business-loan', methods=['GET', 'POST'])
def business_loan():
    return calculator_page('business_loan', BusinessLoanForm, calculate_business_loan)

@finance_bp.route('/api/business-loan', methods=['GET', 'POST'])
def api_business_loan():
    return calculator_api('business_loan', BusinessLoanForm, calculate_business_loan)


@finance_bp.route('/refinance', methods=['GET', 'POST'])
def refinance():
    return calculator_page('refinance', RefinanceForm, calculate_refinance)

@finance_bp.route('/api/refinance', methods=['GET', 'POST'])
def api_refinance():
    return calculator_api('refinance', RefinanceForm, calculate_refinance)


@finance_bp.route('/credit-card', methods=['GET', 'POST'])
def credit_card():
    return calculator_page('credit_card', CreditCardForm, _starting_today(calculate_credit_card))

@finance_bp.route('/api/credit-card', methods=['GET', 'POST'])
def api_credit_card():
    return calculator_api('credit_card', CreditCardForm, _starting_today(calculate_credit_card))


@finance_bp.route('/debt-payoff', methods=['GET', 'POST'])
def debt_payoff():
    return calculator_page('debt_payoff', DebtPayoffForm, _starting_today(calculate_debt_payoff))

@finance_bp.route('/api/debt-payoff', methods=['GET', 'POST'])
def api_debt_payoff():
    return calculator_api('debt_payoff', DebtPayoffForm, _starting_today(calculate_debt_payoff))


@finance_bp.route('/debt-consolidation', methods=['GET', 'POST'])
def debt_consolidation():
    return calculator_page('debt_consolidation', DebtConsolidationForm, calculate_debt_consolidation)

@finance_bp.route('/api/debt-consolidation', methods=['GET', 'POST'])
def api_debt_consolidation():
    return calculator_api('debt_consolidation', DebtConsolidationForm, calculate_debt_consolidation)


@finance_bp.route('/savings', methods=['GET', 'POST'])
def savings():
    return calculator_page('savings', SavingsForm, calculate_savings)

@finance_bp.route('/api/savings', methods=['GET', 'POST'])
def api_savings():
    return calculator_api('savings', SavingsForm, calculate_savings)


@finance_bp.route('/cd', methods=['GET', 'POST'])
def cd():
    return calculator_page('cd', CDForm, calculate_cd)

@finance_bp.route('/api/cd', methods=['GET', 'POST'])
def api_cd():
    return calculator_api('cd', CDForm, calculate_cd)


@finance_bp.route('/investment', methods=['GET', 'POST'])
def investment():
    return calculator_page('investment', InvestmentForm, calculate_investment)

@finance_bp.route('/api/investment', methods=['GET', 'POST'])
def api_investment():
    return calculator_api('investment', InvestmentForm, calculate_investment)


@finance_bp.route('/401k', methods=['GET', 'POST'])
def retirement_401k():
    return calculator_page('401k', Retirement401kForm, calculate_401k)

@finance_bp.route('/api/401k', methods=['GET', 'POST'])
def api_retirement_401k():
    return calculator_api('401k', Retirement401kForm, calculate_401k)


@finance_bp.route('/ira', methods=['GET', 'POST'])
def ira():
    return calculator_page('ira', IRAForm, calculate_ira)

@finance_bp.route('/api/ira', methods=['GET', 'POST'])
def api_ira():
    return calculator_api('ira', IRAForm, calculate_ira)


@finance_bp.route('/roth-ira', methods=['GET', 'POST'])
def roth_ira():
    return calculator_page('roth_ira', RothIRAForm, calculate_roth_ira)

@finance_bp.route('/api/roth-ira', methods=['GET', 'POST'])
def api_roth_ira():
    return calculator_api('roth_ira', RothIRAForm, calculate_roth_ira)


@finance_bp.route('/retirement', methods=['GET', 'POST'])
def retirement():
    return calculator_page('retirement', RetirementForm, calculate_retirement)

@finance_bp.route('/api/retirement', methods=['GET', 'POST'])
def api_retirement():
    return calculator_api('retirement', RetirementForm, calculate_retirement)


@finance_bp.route('/college-cost', methods=['GET', 'POST'])
def college_cost():
    return calculator_page('college_cost', CollegeCostForm, _college_cost)

@finance_bp.route('/api/college-cost', methods=['GET', 'POST'])
def api_college_cost():
    return calculator_api('college_cost', CollegeCostForm, _college_cost)


@finance_bp.route('/down-payment', methods=['GET', 'POST'])
def down_payment():
    return calculator_page('down_payment', DownPaymentForm, calculate_down_payment)

@finance_bp.route('/api/down-payment', methods=['GET', 'POST'])
def api_down_payment():
    return calculator_api('down_payment', DownPaymentForm, calculate_down_payment)


@finance_bp.route('/house-affordability', methods=['GET', 'POST'])
def house_affordability():
    return calculator_page('house_affordability', HouseAffordabilityForm, calculate_house_affordability)

@finance_bp.route('/api/house-affordability', methods=['GET', 'POST'])
def api_house_affordability():
    return calculator_api('house_affordability', HouseAffordabilityForm, calculate_house_affordability)


@finance_bp.route('/rent', methods=['GET', 'POST'])
def rent():
    return calculator_page('rent', RentForm, calculate_rent)

@finance_bp.route('/api/rent', methods=['GET', 'POST'])
def api_rent():
    return calculator_api('rent', RentForm, calculate_rent)


@finance_bp.route('/budget', methods=['GET', 'POST'])
def budget():
    return calculator_page('budget', BudgetForm, calculate_budget)

@finance_bp.route('/api/budget', methods=['GET', 'POST'])
def api_budget():
    return calculator_api('budget', BudgetForm, calculate_budget)


@finance_bp.route('/salary', methods=['GET', 'POST'])
def salary():
    return calculator_page('salary', SalaryForm, calculate_salary)

@finance_bp.route('/api/salary', methods=['GET', 'POST'])
def api_salary():
    return calculator_api('salary', SalaryForm, calculate_salary)
