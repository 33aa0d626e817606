"""Amortization schedule computation.

Pure functions: floats in, dataclasses out. No I/O.
Rates are monthly fractions (3% annual -> 0.0025). No rounding here;
rounding belongs to presentation.
"""

from inmocalc.models.results import AmortizationYear


def monthly_payment(loan_amount: float, monthly_rate: float, total_months: int) -> float:
    """Fixed monthly payment (principal + interest)."""
    if monthly_rate == 0:
        return loan_amount / total_months
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + monthly_rate) ** total_months
    if factor == 1:
        # Rate too small to register in float arithmetic
        return loan_amount / total_months
    return loan_amount * (monthly_rate * factor) / (factor - 1)


def amortization_schedule(
    loan_amount: float,
    monthly_rate: float,
    total_months: int,
    years: int,
) -> list[AmortizationYear]:
    """Yearly interest/principal/balance breakdown of a fixed-payment loan.

    Once the balance is paid off, every remaining year is zero-filled.
    """
    pmt = monthly_payment(loan_amount, monthly_rate, total_months)
    balance = loan_amount
    schedule: list[AmortizationYear] = []

    for year in range(1, years + 1):
        year_interest = 0.0
        year_principal = 0.0
        for _ in range(12):
            if balance <= 0:
                break
            interest = balance * monthly_rate
            principal = min(pmt - interest, balance)
            year_interest += interest
            year_principal += principal
            balance -= principal

        schedule.append(AmortizationYear(
            year=year,
            interest_paid=year_interest,
            principal_paid=year_principal,
            ending_balance=max(0.0, balance),
        ))

        if balance <= 0:
            schedule.extend(AmortizationYear(year=y) for y in range(year + 1, years + 1))
            break

    return schedule


def total_interest(schedule: list[AmortizationYear]) -> float:
    return sum(y.interest_paid for y in schedule)
