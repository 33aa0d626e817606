"""Simplified personal income tax on rental income.

A single marginal rate is applied to the whole reduced base. This is a
deliberate approximation, not cumulative bracket math.

Pure functions. No I/O.
"""

from dataclasses import dataclass

# (upper bound of base, rate), ascending
TAX_BRACKETS: tuple[tuple[float, float], ...] = (
    (12450, 0.19),
    (20200, 0.24),
    (35200, 0.30),
    (60000, 0.37),
    (300000, 0.45),
)
TOP_RATE = 0.47

# Share of net rental income exempt from tax
REDUCTION_DEFAULT = 0.50
REDUCTION_WITH_REFORM = 0.60


@dataclass(frozen=True)
class RentalTax:
    reduction: float
    reduced_base: float
    rate: float
    tax: float


def marginal_rate(annual_net: float) -> float:
    """Rate of the first bracket whose upper bound covers the base."""
    base = max(0.0, annual_net)
    for upper, rate in TAX_BRACKETS:
        if base <= upper:
            return rate
    return TOP_RATE


def rental_reduction(reform_cost: float) -> float:
    return REDUCTION_WITH_REFORM if reform_cost > 0 else REDUCTION_DEFAULT


def rental_income_tax(taxable_base: float, reform_cost: float = 0.0) -> RentalTax:
    """Tax due on a year's taxable rental income.

    Args:
        taxable_base: Rent minus deductible expenses and mortgage interest (>= 0)
        reform_cost: Any positive reform spend raises the reduction to 60%
    """
    reduction = rental_reduction(reform_cost)
    reduced = taxable_base * (1 - reduction)
    rate = marginal_rate(reduced)
    return RentalTax(reduction=reduction, reduced_base=reduced, rate=rate, tax=reduced * rate)
