"""Analysis orchestrator: composes the engine sub-modules into a full result.

Pure computation. No I/O. Inputs in, AnalysisResult out.
"""

import logging

from inmocalc.config import Settings, settings as default_settings
from inmocalc.engine.closing_costs import compute_purchase_costs, effective_rates
from inmocalc.engine.debt import amortization_schedule, monthly_payment, total_interest
from inmocalc.engine.metrics import compute_metrics
from inmocalc.engine.projection import project
from inmocalc.models.purchase import PurchaseInputs
from inmocalc.models.rental import RentalInputs
from inmocalc.models.results import AnalysisResult

logger = logging.getLogger(__name__)


def run_analysis(
    purchase: PurchaseInputs,
    rental: RentalInputs,
    settings: Settings | None = None,
) -> AnalysisResult:
    """Run the complete purchase + rental analysis.

    Recomputes everything from the inputs; nothing is cached between calls.
    """
    settings = settings or default_settings

    rates = effective_rates(purchase)
    costs = compute_purchase_costs(purchase, rates, iva_rate=settings.iva_new_build)

    # Full-term schedule: total interest covers the whole mortgage, not just the horizon
    loan = purchase.loan_amount
    pmt = monthly_payment(loan, purchase.monthly_rate, purchase.total_months)
    amort = amortization_schedule(
        loan_amount=loan,
        monthly_rate=purchase.monthly_rate,
        total_months=purchase.total_months,
        years=purchase.schedule_years,
    )

    projection = project(
        rental,
        monthly_payment=pmt,
        amortization=amort,
        reform_cost=costs.reform_cost,
        expense_inflation=settings.expense_inflation,
    )

    metrics = compute_metrics(
        price=purchase.price,
        monthly_rent=rental.monthly_rent,
        closing_costs=costs.closing_costs,
        reform_cost=costs.reform_cost,
        cash_invested=costs.cash_invested,
        total_interest=total_interest(amort),
        projection=projection,
        target_yield=settings.target_gross_yield,
        horizon_years=settings.metrics_horizon_years,
        irr_guess=settings.irr_guess,
    )

    logger.debug(
        "Analysis: loan=%.2f payment=%.2f cash_invested=%.2f years=%d irr=%.4f grade=%s",
        loan, pmt, costs.cash_invested, len(projection), metrics.irr, metrics.grade,
    )

    return AnalysisResult(
        purchase_costs=costs,
        itp_pct=rates.itp,
        ajd_pct=rates.ajd,
        loan_amount=loan,
        monthly_payment=pmt,
        amortization=amort,
        projection=projection,
        metrics=metrics,
    )
