from calctech.core.errors import CalculatorInputError

SALES_TAX_MODES = ("add_tax", "remove_tax", "find_rate")


def calculate_sales_tax(mode="add_tax", before_tax=0, tax_rate=0, after_tax=0):
    before = before_tax or 0
    rate = tax_rate or 0
    after = after_tax or 0

    if mode == "add_tax":
        tax = before * rate / 100
        after = before + tax
    elif mode == "remove_tax":
        before = after / (1 + rate / 100)
        tax = after - before
    elif mode == "find_rate":
        tax = 0
        rate = 0
        if before > 0:
            tax = after - before
            rate = tax / before * 100
    else:
        raise CalculatorInputError(f"Unknown sales tax mode: {mode}")

    return {
        "before_tax": before,
        "tax_rate": rate,
        "tax_amount": tax,
        "after_tax": after,
    }


def calculate_discount(price=0, discount=0, discount_type="percent"):
    price = price or 0
    discount = discount or 0
    if discount_type == "percent":
        amount = price * discount / 100
        percent = discount
    elif discount_type == "fixed":
        amount = discount
        percent = discount / price * 100 if price > 0 else 0
    else:
        raise CalculatorInputError(f"Unknown discount type: {discount_type}")

    return {
        "original_price": price,
        "discount_amount": amount,
        "discount_percentage": percent,
        "final_price": max(0, price - amount),
        "savings": amount,
    }


def tiered_commission(sales, tiers):
    """
    Marginal commission over tiers of {"up_to": limit, "rate": percent}.
    The last tier's up_to is None and covers everything above.
    """
    commission = 0
    lower = 0
    for tier in tiers:
        upper = tier.get("up_to")
        top = sales if upper is None else min(sales, upper)
        if top > lower:
            commission += (top - lower) * (tier.get("rate") or 0) / 100
        if upper is None or sales <= upper:
            break
        lower = upper
    return commission


def calculate_commission(sales=0, rate=0, base_salary=0, tiers=None):
    sales = sales or 0
    base = base_salary or 0
    if tiers and sales > 0:
        commission = tiered_commission(sales, tiers)
    else:
        commission = sales * (rate or 0) / 100

    return {
        "commission_amount": commission,
        "base_salary": base,
        "total_compensation": base + commission,
        "effective_commission_rate": commission / sales * 100 if sales > 0 else 0,
    }
