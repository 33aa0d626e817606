"""CLI for the purchase + rental investment calculator.

Numbers accept es-ES formatting ("250.000", "3,2").

Usage:
    python -m inmocalc.cli --region "La Rioja" --price 250.000 --down 20 --rate 3 --years 25 --rent 1.200
    python -m inmocalc.cli --region Cataluña --price 180000 --down 30 --rate 3,5 --years 20 \
        --rent 950 --type new --reform 12000 --ibi 400
"""

import argparse
import logging
import sys

from inmocalc.config import settings
from inmocalc.data.regional_taxes import REGIONS
from inmocalc.engine.analysis import run_analysis
from inmocalc.engine.numbers import format_currency as _eur
from inmocalc.engine.numbers import format_pct as _pct
from inmocalc.engine.numbers import clamp_with_error, is_num, parse_locale_number
from inmocalc.models.purchase import ClosingCostInputs, PropertyType, PurchaseInputs
from inmocalc.models.rental import RentalInputs
from inmocalc.models.results import AnalysisResult
from inmocalc.validation import validate_purchase, validate_rent

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

FIXED_COST_FLAGS = {
    "ibi": "IBI (annual)",
    "community_fees": "Community fees (annual)",
    "home_insurance": "Home insurance (annual)",
    "life_insurance": "Life insurance (annual)",
    "unpaid_rent_insurance": "Unpaid-rent insurance (annual)",
    "misc_expenses": "Other expenses (annual)",
}


# ── Helpers ──────────────────────────────────────────────────────────────────

def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def _number(text: str) -> float:
    """argparse type: locale-formatted number; junk becomes NaN."""
    return parse_locale_number(text)


# ── Report sections ──────────────────────────────────────────────────────────

def print_purchase_summary(purchase: PurchaseInputs, result: AnalysisResult) -> None:
    costs = result.purchase_costs
    _header("Purchase")
    print(f"  Region:             {purchase.region}")
    print(f"  Price:              {_eur(purchase.price)}")
    if purchase.property_type == PropertyType.EXISTING:
        print(f"  ITP ({_pct(result.itp_pct)}):       {_eur(costs.itp)}")
    else:
        print(f"  IVA:                {_eur(costs.iva)}")
        print(f"  AJD ({_pct(result.ajd_pct)}):       {_eur(costs.ajd)}")
    print(f"  Notary / Registry:  {_eur(costs.notary)} / {_eur(costs.registry)}")
    print(f"  Gestoría:           {_eur(costs.gestoria)}")
    print(f"  Appraisal:          {_eur(costs.appraisal)}")
    if costs.agency_commission or costs.other_closing:
        print(f"  Agency / Other:     {_eur(costs.agency_commission)} / {_eur(costs.other_closing)}")
    print(f"  Closing Costs:      {_eur(costs.closing_costs)}")
    print(f"  Down Payment:       {_eur(costs.down_payment)}")
    print(f"  Cash at Signing:    {_eur(costs.initial_cash_needed)}")
    print(f"  Cash Invested:      {_eur(costs.cash_invested)}  (incl. reform {_eur(costs.reform_cost)})")


def print_mortgage(result: AnalysisResult) -> None:
    _header("Mortgage")
    print(f"  Loan Amount:        {_eur(result.loan_amount)}")
    print(f"  Monthly Payment:    {_eur(result.monthly_payment)}")
    print(f"  Total Interest:     {_eur(result.metrics.total_interest)}")
    print(f"  Total Cost of Home: {_eur(result.metrics.total_cost_of_ownership)}")


def print_metrics(result: AnalysisResult) -> None:
    m = result.metrics
    _header("Investment Metrics")
    print(f"  Year-1 Net Yield:   {_pct(m.year_one_yield)}")
    print(f"  Avg Net Yield:      {_pct(m.average_net_yield_10y)}")
    print(f"  IRR:                {_pct(m.irr_pct)}")
    print(f"  Grade:              {m.grade}")
    print()
    print(f"  Recommended Max Price (incl. reform): {_eur(m.recommended_max_price) or '–'}")
    print(f"  Recommended Rent:                     {_eur(m.recommended_rent)}/mo")


def print_projection_table(result: AnalysisResult) -> None:
    if not result.projection:
        return
    _header("Cash Flow Projection")
    print(
        f"  {'Yr':>3}  {'Rent':>11}  {'Mortgage':>11}  {'Tax':>9}  "
        f"{'Expenses':>11}  {'Net':>11}"
    )
    print(f"  {'---':>3}  {'-' * 11}  {'-' * 11}  {'-' * 9}  {'-' * 11}  {'-' * 11}")
    for p in result.projection:
        print(
            f"  {p.year:>3}  {_eur(p.gross_rent):>11}  {_eur(p.mortgage_payment):>11}  "
            f"{_eur(p.income_tax_paid):>9}  {_eur(p.total_expenses):>11}  "
            f"{_eur(p.net_cash_flow):>11}"
        )


# ── Input assembly ───────────────────────────────────────────────────────────

def build_inputs(args: argparse.Namespace) -> tuple[PurchaseInputs, RentalInputs]:
    down_pct, down_error = clamp_with_error(args.down, 0, 100)
    if down_error:
        print(f"Warning: down payment (%): {down_error}; using {down_pct}", file=sys.stderr)

    closing = ClosingCostInputs(
        auto_mode=not args.manual_closing,
        notary=args.notary,
        registry=args.registry,
        gestoria=args.gestoria,
        appraisal=args.appraisal,
        agency_commission=args.agency,
        other_closing=args.other_closing,
    )
    purchase = PurchaseInputs(
        price=args.price,
        down_payment_pct=down_pct,
        mortgage_rate_pct=args.rate,
        mortgage_years=args.years,
        reform_cost=args.reform,
        property_type=PropertyType(args.property_type),
        region=args.region or "",
        use_official_rates=args.itp is None and args.ajd is None,
        manual_itp_pct=args.itp if args.itp is not None else 7.0,
        manual_ajd_pct=args.ajd if args.ajd is not None else 1.0,
        closing=closing,
    )

    rental = RentalInputs(
        monthly_rent=args.rent,
        rent_growth_pct=args.growth,
        projection_years=args.horizon,
        maintenance_pct=args.maintenance,
    )
    for name in FIXED_COST_FLAGS:
        value = getattr(args, name)
        if value is not None:
            getattr(rental.fixed_costs, name).set(value)
    return purchase, rental


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rental property investment calculator (Spain)")

    purchase = parser.add_argument_group("purchase")
    purchase.add_argument("--region", choices=REGIONS, help="Autonomous community")
    purchase.add_argument("--price", type=_number, default=float("nan"), help="Purchase price")
    purchase.add_argument("--down", type=_number, default=float("nan"), help="Down payment (%%)")
    purchase.add_argument("--rate", type=_number, default=float("nan"), help="Mortgage rate (annual %%)")
    purchase.add_argument("--years", type=_number, default=float("nan"), help="Mortgage term in years")
    purchase.add_argument("--reform", type=_number, default=float("nan"), help="Reform cost")
    purchase.add_argument(
        "--type",
        dest="property_type",
        choices=[t.value for t in PropertyType],
        default=PropertyType.EXISTING.value,
        help="existing (ITP) or new (IVA + AJD) (default: existing)",
    )
    purchase.add_argument("--itp", type=_number, help="Manual ITP %% (disables official rates)")
    purchase.add_argument("--ajd", type=_number, help="Manual AJD %% (disables official rates)")

    closing = parser.add_argument_group("closing costs")
    closing.add_argument("--manual-closing", action="store_true", help="Use the fee flags below instead of estimates")
    closing.add_argument("--notary", type=_number, default=float("nan"))
    closing.add_argument("--registry", type=_number, default=float("nan"))
    closing.add_argument("--gestoria", type=_number, default=float("nan"))
    closing.add_argument("--appraisal", type=_number, default=float("nan"), help="Default: estimated from price")
    closing.add_argument("--agency", type=_number, default=float("nan"), help="Agency commission")
    closing.add_argument("--other-closing", type=_number, default=float("nan"))

    rental = parser.add_argument_group("rental")
    rental.add_argument("--rent", type=_number, default=float("nan"), help="Monthly rent")
    rental.add_argument("--growth", type=_number, default=2.0, help="Annual rent growth %% (default: 2)")
    rental.add_argument("--horizon", type=_number, default=10.0, help="Projection years (default: 10)")
    rental.add_argument("--maintenance", type=_number, default=5.0, help="Maintenance %% of rent (default: 5)")
    for name, label in FIXED_COST_FLAGS.items():
        rental.add_argument(f"--{name.replace('_', '-')}", dest=name, type=_number, help=f"{label}; default derived from rent")

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level.upper(),
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


# ── Main ─────────────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    purchase, rental = build_inputs(args)

    error = validate_purchase(purchase) or validate_rent(rental)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    result = run_analysis(purchase, rental)

    print_purchase_summary(purchase, result)
    print_mortgage(result)
    print_metrics(result)
    print_projection_table(result)
    print()
    if not is_num(result.metrics.irr):
        print("  Note: IRR could not be computed for these cash flows.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
