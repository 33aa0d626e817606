"""Year-by-year rental cash-flow projection.

Pure computation. No I/O.
"""

import math

from inmocalc.engine.numbers import safe
from inmocalc.engine.tax import rental_income_tax
from inmocalc.models.rental import RentalInputs
from inmocalc.models.results import AmortizationYear, ProjectionYear

EXPENSE_INFLATION = 0.02


def _horizon(projection_years: float) -> int:
    years = safe(projection_years)
    if not math.isfinite(years) or years < 1:
        return 0
    return int(years)


def project(
    rental: RentalInputs,
    monthly_payment: float,
    amortization: list[AmortizationYear],
    reform_cost: float = 0.0,
    expense_inflation: float = EXPENSE_INFLATION,
) -> list[ProjectionYear]:
    """Project income, expenses, tax and net cash flow for each year.

    Mortgage interest of the matching amortization year is deductible;
    principal is not. Rent grows after each year is emitted.
    """
    current_rent = safe(rental.monthly_rent)
    annual_mortgage = safe(monthly_payment) * 12
    fixed_base = rental.fixed_costs.total
    maintenance_share = safe(rental.maintenance_pct) / 100
    growth = safe(rental.rent_growth_pct) / 100
    reform = safe(reform_cost)

    projections: list[ProjectionYear] = []
    for year in range(1, _horizon(rental.projection_years) + 1):
        gross = current_rent * 12
        maintenance = maintenance_share * gross
        fixed = fixed_base * (1 + expense_inflation) ** (year - 1)
        opex = maintenance + fixed
        total_expenses = opex + annual_mortgage
        net_before_tax = gross - total_expenses

        interest = amortization[year - 1].interest_paid if year <= len(amortization) else 0.0
        taxable = max(0.0, gross - (opex + interest))
        tax = rental_income_tax(taxable, reform)

        projections.append(ProjectionYear(
            year=year,
            gross_rent=gross,
            maintenance=maintenance,
            fixed_costs=fixed,
            operating_expenses=opex,
            mortgage_payment=annual_mortgage,
            total_expenses=total_expenses,
            interest_deduction=interest,
            taxable_base=taxable,
            reduced_base=tax.reduced_base,
            marginal_rate=tax.rate,
            income_tax_paid=tax.tax,
            net_before_tax=net_before_tax,
            net_cash_flow=net_before_tax - tax.tax,
        ))
        current_rent *= 1 + growth

    return projections
