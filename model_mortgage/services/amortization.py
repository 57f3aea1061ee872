# This project was developed with assistance from AI tools.
"""Standard fixed-rate amortization math shared by every calculator.

Pure math, no I/O. Rates are annual percentages (6.5 means 6.5%); the monthly
rate is ``annual / 100 / 12``. At a zero monthly rate the loan amortizes in a
straight line. ``zero_rate_epsilon`` widens what counts as zero: the
rent-vs-buy comparison treats monthly rates below 1e-6 as zero, the other
calculators only an exact zero.
"""


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly fractional rate."""
    return annual_rate_percent / 100 / 12


def monthly_payment(
    principal: float,
    annual_rate_percent: float,
    number_of_payments: float,
    *,
    zero_rate_epsilon: float = 0.0,
) -> float:
    """Monthly principal and interest payment for a fully amortizing loan.

    M = P * [r(1+r)^n] / [(1+r)^n - 1]
    """
    if principal == 0:
        return 0.0

    rate = monthly_rate(annual_rate_percent)
    if rate == 0 or rate < zero_rate_epsilon:
        return principal / number_of_payments

    compound = (1 + rate) ** number_of_payments
    return principal * (rate * compound) / (compound - 1)


def max_principal(
    payment: float,
    annual_rate_percent: float,
    number_of_payments: float,
    *,
    zero_rate_epsilon: float = 0.0,
) -> float:
    """Largest principal a given monthly payment can amortize.

    P = M * [1 - (1+r)^-n] / r
    """
    rate = monthly_rate(annual_rate_percent)
    if rate == 0 or rate < zero_rate_epsilon:
        return payment * number_of_payments
    return payment * (1 - (1 + rate) ** -number_of_payments) / rate


def remaining_balance(
    principal: float,
    payment: float,
    annual_rate_percent: float,
    total_payments: float,
    payments_made: float,
    *,
    zero_rate_epsilon: float = 0.0,
) -> float:
    """Outstanding balance after ``payments_made`` scheduled payments.

    Computed as the present value of the payments still owed; zero once the
    schedule is complete.
    """
    if principal == 0:
        return 0.0

    rate = monthly_rate(annual_rate_percent)
    if rate == 0 or rate < zero_rate_epsilon:
        return max(0.0, principal - payment * payments_made)

    payments_left = total_payments - payments_made
    if payments_left <= 0:
        return 0.0
    return payment * (1 - (1 + rate) ** -payments_left) / rate


def total_interest(payment: float, number_of_payments: float, principal: float) -> float:
    """Interest paid over the life of a loan: everything paid minus principal."""
    return payment * number_of_payments - principal
