"""Summary investment metrics, recommendations and the deal grade.

Pure functions. No I/O. Yields are in percent; divisions by cash invested
use a floor of 1 so an empty purchase never yields infinity.
"""

import math

from inmocalc.engine.irr import internal_rate_of_return
from inmocalc.engine.numbers import NAN, safe
from inmocalc.models.results import InvestmentMetrics, ProjectionYear

TARGET_GROSS_YIELD = 0.065

# (minimum year-one net yield %, label), descending
GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (10, "Excellent"),
    (7, "Good"),
    (4, "Acceptable"),
    (2, "Poor"),
)
LOWEST_GRADE = "Very poor"
UNDEFINED_GRADE = "–"


def average_net_yield(
    projection: list[ProjectionYear],
    cash_invested: float,
    horizon_years: int = 10,
) -> float:
    """Mean net cash flow of the first years over cash invested, in percent."""
    n_years = min(horizon_years, len(projection) or 1)
    avg_net = sum(p.net_cash_flow for p in projection[:n_years]) / n_years
    return avg_net / max(1.0, cash_invested) * 100


def year_one_yield(projection: list[ProjectionYear], cash_invested: float) -> float:
    if not projection:
        return NAN
    return projection[0].net_cash_flow / max(1.0, cash_invested) * 100


def investment_grade(yield_pct: float) -> str:
    if math.isnan(yield_pct):
        return UNDEFINED_GRADE
    for threshold, label in GRADE_THRESHOLDS:
        if yield_pct >= threshold:
            return label
    return LOWEST_GRADE


def recommended_max_price(monthly_rent: float, target_yield: float = TARGET_GROSS_YIELD) -> float:
    """Price (incl. reform) at which the current rent hits the target gross yield."""
    annual_rent = safe(monthly_rent) * 12
    if annual_rent <= 0:
        return NAN
    return annual_rent / target_yield


def recommended_rent(total_acquisition_cost: float, target_yield: float = TARGET_GROSS_YIELD) -> float:
    """Monthly rent that reaches the target gross yield on the cost paid."""
    return total_acquisition_cost * target_yield / 12


def annual_irr(cash_invested: float, projection: list[ProjectionYear], guess: float = 0.06) -> float:
    """IRR of the initial outlay followed by the yearly net cash flows."""
    flows = [-cash_invested] + [p.net_cash_flow for p in projection]
    rate = internal_rate_of_return(flows, guess)
    return rate if math.isfinite(rate) else NAN


def compute_metrics(
    price: float,
    monthly_rent: float,
    closing_costs: float,
    reform_cost: float,
    cash_invested: float,
    total_interest: float,
    projection: list[ProjectionYear],
    target_yield: float = TARGET_GROSS_YIELD,
    horizon_years: int = 10,
    irr_guess: float = 0.06,
) -> InvestmentMetrics:
    acquisition = safe(price) + closing_costs + safe(reform_cost)
    first_year = year_one_yield(projection, cash_invested)

    return InvestmentMetrics(
        total_cash_invested=cash_invested,
        average_net_yield_10y=average_net_yield(projection, cash_invested, horizon_years),
        year_one_yield=first_year,
        irr=annual_irr(cash_invested, projection, irr_guess),
        total_interest=total_interest,
        total_acquisition_cost=acquisition,
        total_cost_of_ownership=acquisition + total_interest,
        recommended_max_price=recommended_max_price(monthly_rent, target_yield),
        recommended_rent=recommended_rent(acquisition, target_yield),
        grade=investment_grade(first_year),
    )
