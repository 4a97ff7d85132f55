"""
Calculator Registry - Centralized configuration for every page on the site.

To add a new calculator:
1. Add the calculation to the project's core/ package
2. Add a form and the page/API routes to the project's blueprint
3. Add an entry to PROJECTS list below

Project Types:
- 'category': Group of calculators that links to a listing page
- 'project': A calculator page

Every calculator belongs to a category through its 'parent' field.
"""

PROJECTS = [
    {
        'id': 'finance',
        'name': 'Financial Calculators',
        'description': 'Loans, debt, savings, retirement, budgeting and shopping math',
        'url': '/category/finance',
        'type': 'category',
        'icon': '💵',
        'order': 1
    },
    {
        'id': 'mortgage',
        'name': 'Mortgage Calculator',
        'description': 'Monthly payment, total interest and a full amortization schedule',
        'url': '/finance/mortgage',
        'type': 'project',
        'parent': 'finance',
        'order': 101
    },
    {
        'id': 'loan',
        'name': 'Loan Calculator',
        'description': 'Amortized loans, deferred payment loans and bonds',
        'url': '/finance/loan',
        'type': 'project',
        'parent': 'finance',
        'order': 102
    },
    {
        'id': 'compound_interest',
        'name': 'Compound Interest Calculator',
        'description': 'Growth of a balance with regular contributions',
        'url': '/finance/compound-interest',
        'type': 'project',
        'parent': 'finance',
        'order': 103
    },
    {
        'id': 'simple_interest',
        'name': 'Simple Interest Calculator',
        'description': 'Interest earned with I = P × r × t',
        'url': '/finance/simple-interest',
        'type': 'project',
        'parent': 'finance',
        'order': 104
    },
    {
        'id': 'future_value',
        'name': 'Future Value Calculator',
        'description': 'Future value of a lump sum plus periodic deposits',
        'url': '/finance/future-value',
        'type': 'project',
        'parent': 'finance',
        'order': 105
    },
    {
        'id': 'present_value',
        'name': 'Present Value Calculator',
        'description': 'Present value of a future sum or of an annuity',
        'url': '/finance/present-value',
        'type': 'project',
        'parent': 'finance',
        'order': 106
    },
    {
        'id': 'roi',
        'name': 'ROI Calculator',
        'description': 'Return on investment and annualized ROI',
        'url': '/finance/roi',
        'type': 'project',
        'parent': 'finance',
        'order': 107
    },
    {
        'id': 'sales_tax',
        'name': 'Sales Tax Calculator',
        'description': 'Add tax, back tax out of a price, or find the rate',
        'url': '/finance/sales-tax',
        'type': 'project',
        'parent': 'finance',
        'order': 108
    },
    {
        'id': 'discount',
        'name': 'Discount Calculator',
        'description': 'Sale price from a percent or fixed discount',
        'url': '/finance/discount',
        'type': 'project',
        'parent': 'finance',
        'order': 109
    },
    {
        'id': 'commission',
        'name': 'Commission Calculator',
        'description': 'Flat or tiered sales commission with base salary',
        'url': '/finance/commission',
        'type': 'project',
        'parent': 'finance',
        'order': 110
    },
    {
        'id': 'amortization',
        'name': 'Amortization Calculator',
        'description': 'Payment schedule with extra monthly and yearly payments',
        'url': '/finance/amortization',
        'type': 'project',
        'parent': 'finance',
        'order': 111
    },
    {
        'id': 'payment',
        'name': 'Payment Calculator',
        'description': 'Monthly payment for a term, or payoff time for a payment',
        'url': '/finance/payment',
        'type': 'project',
        'parent': 'finance',
        'order': 112
    },
    {
        'id': 'apr',
        'name': 'APR Calculator',
        'description': 'Real annual percentage rate once loan fees are counted',
        'url': '/finance/apr',
        'type': 'project',
        'parent': 'finance',
        'order': 113
    },
    {
        'id': 'interest_rate',
        'name': 'Interest Rate Calculator',
        'description': 'Interest rate implied by a loan amount, term and payment',
        'url': '/finance/interest-rate',
        'type': 'project',
        'parent': 'finance',
        'order': 114
    },
    {
        'id': 'auto_loan',
        'name': 'Auto Loan Calculator',
        'description': 'Car payments with trade-in, sales tax, fees and incentives',
        'url': '/finance/auto-loan',
        'type': 'project',
        'parent': 'finance',
        'order': 115
    },
    {
        'id': 'personal_loan',
        'name': 'Personal Loan Calculator',
        'description': 'Payments, origination fee and real APR of a personal loan',
        'url': '/finance/personal-loan',
        'type': 'project',
        'parent': 'finance',
        'order': 116
    },
    {
        'id': 'student_loan',
        'name': 'Student Loan Calculator',
        'description': 'Standard repayment compared with paying extra',
        'url': '/finance/student-loan',
        'type': 'project',
        'parent': 'finance',
        'order': 117
    },
    {
        'id': 'business_loan',
        'name': 'Business Loan Calculator',
        'description': 'Payments, fees and real APR, including interest-only loans',
        'url': '/finance/business-loan',
        'type': 'project',
        'parent': 'finance',
        'order': 118
    },
    {
        'id': 'refinance',
        'name': 'Refinance Calculator',
        'description': 'Monthly and lifetime savings and break-even time of refinancing',
        'url': '/finance/refinance',
        'type': 'project',
        'parent': 'finance',
        'order': 119
    },
    {
        'id': 'credit_card',
        'name': 'Credit Card Calculator',
        'description': 'Time to pay off a card, or the payment to clear it in time',
        'url': '/finance/credit-card',
        'type': 'project',
        'parent': 'finance',
        'order': 120
    },
    {
        'id': 'debt_payoff',
        'name': 'Debt Payoff Calculator',
        'description': 'Avalanche plan for several debts compared with minimum payments',
        'url': '/finance/debt-payoff',
        'type': 'project',
        'parent': 'finance',
        'order': 121
    },
    {
        'id': 'debt_consolidation',
        'name': 'Debt Consolidation Calculator',
        'description': 'Current debts compared with a single consolidation loan',
        'url': '/finance/debt-consolidation',
        'type': 'project',
        'parent': 'finance',
        'order': 122
    },
    {
        'id': 'savings',
        'name': 'Savings Calculator',
        'description': 'Savings growth with monthly deposits that increase every year',
        'url': '/finance/savings',
        'type': 'project',
        'parent': 'finance',
        'order': 123
    },
    {
        'id': 'cd',
        'name': 'CD Calculator',
        'description': 'Certificate of deposit value at maturity, before and after tax',
        'url': '/finance/cd',
        'type': 'project',
        'parent': 'finance',
        'order': 124
    },
    {
        'id': 'investment',
        'name': 'Investment Calculator',
        'description': 'Investment growth with monthly or yearly contributions',
        'url': '/finance/investment',
        'type': 'project',
        'parent': 'finance',
        'order': 125
    },
    {
        'id': '401k',
        'name': '401(k) Calculator',
        'description': '401(k) balance at retirement with employer match and the income it supports',
        'url': '/finance/401k',
        'type': 'project',
        'parent': 'finance',
        'order': 126
    },
    {
        'id': 'ira',
        'name': 'IRA Calculator',
        'description': 'Traditional IRA, Roth IRA and taxable account side by side',
        'url': '/finance/ira',
        'type': 'project',
        'parent': 'finance',
        'order': 127
    },
    {
        'id': 'roth_ira',
        'name': 'Roth IRA Calculator',
        'description': 'Roth IRA growth compared with a taxable account',
        'url': '/finance/roth-ira',
        'type': 'project',
        'parent': 'finance',
        'order': 128
    },
    {
        'id': 'retirement',
        'name': 'Retirement Calculator',
        'description': 'Retirement needs, savings, safe withdrawals and how long money lasts',
        'url': '/finance/retirement',
        'type': 'project',
        'parent': 'finance',
        'order': 129
    },
    {
        'id': 'college_cost',
        'name': 'College Cost Calculator',
        'description': 'Future college costs and how much savings will cover',
        'url': '/finance/college-cost',
        'type': 'project',
        'parent': 'finance',
        'order': 130
    },
    {
        'id': 'down_payment',
        'name': 'Down Payment Calculator',
        'description': 'Down payment, closing costs and monthly payment on a home',
        'url': '/finance/down-payment',
        'type': 'project',
        'parent': 'finance',
        'order': 131
    },
    {
        'id': 'house_affordability',
        'name': 'House Affordability Calculator',
        'description': 'Home price you can afford from income or a monthly budget',
        'url': '/finance/house-affordability',
        'type': 'project',
        'parent': 'finance',
        'order': 132
    },
    {
        'id': 'rent',
        'name': 'Rent Calculator',
        'description': 'Affordable rent at 25%, 30% and 33% of income',
        'url': '/finance/rent',
        'type': 'project',
        'parent': 'finance',
        'order': 133
    },
    {
        'id': 'budget',
        'name': 'Budget Calculator',
        'description': 'Monthly income, expenses by category and savings rate',
        'url': '/finance/budget',
        'type': 'project',
        'parent': 'finance',
        'order': 134
    },
    {
        'id': 'salary',
        'name': 'Salary Calculator',
        'description': 'Pay converted between hourly, daily, weekly, monthly and yearly',
        'url': '/finance/salary',
        'type': 'project',
        'parent': 'finance',
        'order': 135
    },
    {
        'id': 'health',
        'name': 'Fitness & Health',
        'description': 'BMI, body fat, calories, pace and pregnancy dates',
        'url': '/category/health',
        'type': 'category',
        'icon': '🏃',
        'order': 2
    },
    {
        'id': 'bmi',
        'name': 'BMI Calculator',
        'description': 'Body mass index with category and healthy weight range',
        'url': '/health/bmi',
        'type': 'project',
        'parent': 'health',
        'order': 201
    },
    {
        'id': 'bmr',
        'name': 'BMR Calculator',
        'description': 'Basal metabolic rate (Mifflin-St Jeor or Harris-Benedict)',
        'url': '/health/bmr',
        'type': 'project',
        'parent': 'health',
        'order': 202
    },
    {
        'id': 'body_fat',
        'name': 'Body Fat Calculator',
        'description': 'U.S. Navy body fat method',
        'url': '/health/body-fat',
        'type': 'project',
        'parent': 'health',
        'order': 203
    },
    {
        'id': 'calorie',
        'name': 'Calorie Calculator',
        'description': 'Daily calories to maintain, lose or gain weight',
        'url': '/health/calorie',
        'type': 'project',
        'parent': 'health',
        'order': 204
    },
    {
        'id': 'ideal_weight',
        'name': 'Ideal Weight Calculator',
        'description': 'Robinson, Miller, Devine and Hamwi formulas',
        'url': '/health/ideal-weight',
        'type': 'project',
        'parent': 'health',
        'order': 205
    },
    {
        'id': 'pace',
        'name': 'Pace Calculator',
        'description': 'Running pace, speed and race time projections',
        'url': '/health/pace',
        'type': 'project',
        'parent': 'health',
        'order': 206
    },
    {
        'id': 'due_date',
        'name': 'Due Date Calculator',
        'description': "Estimated due date by Naegele's rule, conception or ultrasound",
        'url': '/health/due-date',
        'type': 'project',
        'parent': 'health',
        'order': 207
    },
    {
        'id': 'conception',
        'name': 'Conception Calculator',
        'description': 'Likely conception window from LMP, due date or ultrasound',
        'url': '/health/conception',
        'type': 'project',
        'parent': 'health',
        'order': 208
    },
    {
        'id': 'math',
        'name': 'Math Calculators',
        'description': 'Scientific expressions, triangles, statistics, fractions and percentages',
        'url': '/category/math',
        'type': 'category',
        'icon': '➗',
        'order': 3
    },
    {
        'id': 'triangle',
        'name': 'Triangle Calculator',
        'description': 'Solve a triangle from SSS, SAS, ASA or base and height',
        'url': '/triangle/',
        'type': 'project',
        'parent': 'math',
        'order': 301
    },
    {
        'id': 'standard_deviation',
        'name': 'Standard Deviation Calculator',
        'description': 'Mean, median, mode, variance and standard deviation',
        'url': '/statistics/standard-deviation',
        'type': 'project',
        'parent': 'math',
        'order': 302
    },
    {
        'id': 'random_number',
        'name': 'Random Number Generator',
        'description': 'Random integers in a range, with or without repeats',
        'url': '/statistics/random-number',
        'type': 'project',
        'parent': 'math',
        'order': 303
    },
    {
        'id': 'percentage',
        'name': 'Percentage Calculator',
        'description': 'Percent of, percent change, increase and decrease',
        'url': '/math/percentage',
        'type': 'project',
        'parent': 'math',
        'order': 304
    },
    {
        'id': 'fraction',
        'name': 'Fraction Calculator',
        'description': 'Add, subtract, multiply and divide fractions',
        'url': '/math/fraction',
        'type': 'project',
        'parent': 'math',
        'order': 305
    },
    {
        'id': 'scientific',
        'name': 'Scientific Calculator',
        'description': 'Expressions with powers, roots, logarithms and trigonometry',
        'url': '/math/scientific',
        'type': 'project',
        'parent': 'math',
        'order': 306
    },
    {
        'id': 'polymarket',
        'name': 'Polymarket Trading',
        'description': 'Odds, expected value, arbitrage and position sizing for prediction markets',
        'url': '/category/polymarket',
        'type': 'category',
        'icon': '📈',
        'order': 4
    },
    {
        'id': 'polymarket_probability',
        'name': 'Polymarket Probability Calculator',
        'description': 'Share price to implied probability and odds',
        'url': '/polymarket/probability',
        'type': 'project',
        'parent': 'polymarket',
        'order': 401
    },
    {
        'id': 'polymarket_ev',
        'name': 'Polymarket EV Calculator',
        'description': 'Expected value of a YES position',
        'url': '/polymarket/ev',
        'type': 'project',
        'parent': 'polymarket',
        'order': 402
    },
    {
        'id': 'polymarket_arbitrage',
        'name': 'Polymarket Arbitrage Calculator',
        'description': 'Guaranteed profit when YES + NO costs less than $1',
        'url': '/polymarket/arbitrage',
        'type': 'project',
        'parent': 'polymarket',
        'order': 403
    },
    {
        'id': 'polymarket_kelly',
        'name': 'Polymarket Kelly Calculator',
        'description': 'Kelly criterion bet sizing for binary markets',
        'url': '/polymarket/kelly',
        'type': 'project',
        'parent': 'polymarket',
        'order': 404
    },
    {
        'id': 'date_time',
        'name': 'Date & Time',
        'description': 'Ages, date differences, time arithmetic and timesheets',
        'url': '/category/date_time',
        'type': 'category',
        'icon': '📅',
        'order': 5
    },
    {
        'id': 'age',
        'name': 'Age Calculator',
        'description': 'Exact age in years, months and days plus next birthday',
        'url': '/date-time/age',
        'type': 'project',
        'parent': 'date_time',
        'order': 501
    },
    {
        'id': 'date',
        'name': 'Date Calculator',
        'description': 'Add or subtract time from a date, or count between dates',
        'url': '/date-time/date',
        'type': 'project',
        'parent': 'date_time',
        'order': 502
    },
    {
        'id': 'time',
        'name': 'Time Calculator',
        'description': 'Add, subtract or convert hours, minutes and seconds',
        'url': '/date-time/time',
        'type': 'project',
        'parent': 'date_time',
        'order': 503
    },
    {
        'id': 'hours',
        'name': 'Hours Calculator',
        'description': 'Timesheet hours, overtime and pay',
        'url': '/date-time/hours',
        'type': 'project',
        'parent': 'date_time',
        'order': 504
    },
    {
        'id': 'education',
        'name': 'School',
        'description': 'Course grades and GPA',
        'url': '/category/education',
        'type': 'category',
        'icon': '🎓',
        'order': 6
    },
    {
        'id': 'grade',
        'name': 'Grade Calculator',
        'description': 'Weighted course grade and the score needed on the final',
        'url': '/education/grade',
        'type': 'project',
        'parent': 'education',
        'order': 601
    },
    {
        'id': 'gpa',
        'name': 'GPA Calculator',
        'description': 'Credit-weighted GPA on a 4.0 or 5.0 scale',
        'url': '/education/gpa',
        'type': 'project',
        'parent': 'education',
        'order': 602
    },
    {
        'id': 'tools',
        'name': 'Everyday Tools',
        'description': 'Unit conversion, networking, passwords and building materials',
        'url': '/category/tools',
        'type': 'category',
        'icon': '🧰',
        'order': 7
    },
    {
        'id': 'conversion',
        'name': 'Unit Conversion Calculator',
        'description': 'Length, weight, temperature, area, volume, speed, time and data',
        'url': '/conversion/',
        'type': 'project',
        'parent': 'tools',
        'order': 701
    },
    {
        'id': 'subnet',
        'name': 'Subnet Calculator',
        'description': 'Network, broadcast and host range for an IPv4 subnet',
        'url': '/subnet/',
        'type': 'project',
        'parent': 'tools',
        'order': 702
    },
    {
        'id': 'password',
        'name': 'Password Generator',
        'description': 'Random passwords with a strength rating',
        'url': '/password/',
        'type': 'project',
        'parent': 'tools',
        'order': 703
    },
    {
        'id': 'concrete',
        'name': 'Concrete Calculator',
        'description': 'Concrete volume, bag counts and cost for slabs, columns and stairs',
        'url': '/construction/concrete',
        'type': 'project',
        'parent': 'tools',
        'order': 704
    },
]


def get_all_projects():
    """
    Get all projects from the registry.

    Returns:
        list: List of all projects sorted by order
    """
    return sorted(PROJECTS, key=lambda x: x['order'])


def get_project_by_id(project_id):
    """
    Get a specific project by its ID.

    Args:
        project_id (str): The project ID to look up

    Returns:
        dict: Project data or None if not found
    """
    return next((p for p in PROJECTS if p['id'] == project_id), None)


def get_calculators(category_id=None):
    """
    Get calculator entries, optionally limited to one category.

    Args:
        category_id (str, optional): Only calculators whose parent is this category

    Returns:
        list: Calculator projects sorted by order
    """
    return [
        p for p in get_all_projects()
        if p['type'] == 'project' and (category_id is None or p.get('parent') == category_id)
    ]


def get_homepage_items():
    """
    Get items to display on the homepage (categories only; calculators are
    shown on their category pages).

    Returns:
        list: Categories with a calculator count
    """
    items = []
    for project in get_all_projects():
        if project.get('parent'):
            continue

        project_copy = project.copy()
        project_copy['count'] = len(get_calculators(project['id']))
        items.append(project_copy)

    return items


def get_children_of_category(category_id):
    """
    Get all calculators belonging to a specific category.

    Args:
        category_id (str): The category ID

    Returns:
        list: Child projects sorted by order
    """
    return [p.copy() for p in get_all_projects() if p.get('parent') == category_id]
