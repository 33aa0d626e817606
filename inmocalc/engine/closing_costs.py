"""Purchase-side costs: transfer taxes and closing fees.

Fee defaults scale with price and are clamped to typical market ranges.
Pure functions. No I/O.
"""

from dataclasses import dataclass

from inmocalc.data.regional_taxes import TaxRates, regional_rates
from inmocalc.engine.numbers import is_num, round_half_up, safe
from inmocalc.models.purchase import PropertyType, PurchaseInputs
from inmocalc.models.results import PurchaseCosts

GESTORIA_FEE = 350
IVA_NEW_BUILD = 0.10


@dataclass(frozen=True)
class ClosingEstimate:
    notary: int
    registry: int
    gestoria: int

    @property
    def total(self) -> int:
        return self.notary + self.registry + self.gestoria


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def estimate_closing_costs(price: float) -> ClosingEstimate:
    """Default notary, registry and gestoria fees for a price."""
    price = safe(price)
    notary = _clamp(400 + price * 0.0012, 600, 1500)
    registry = _clamp(200 + price * 0.0006, 300, 900)
    return ClosingEstimate(
        notary=round_half_up(notary),
        registry=round_half_up(registry),
        gestoria=GESTORIA_FEE,
    )


def estimate_appraisal(price: float) -> int:
    return round_half_up(_clamp(200 + safe(price) * 0.001, 250, 600))


def effective_rates(purchase: PurchaseInputs) -> TaxRates:
    """Official regional rates, or the manual ones when the user opted out."""
    if purchase.use_official_rates:
        return regional_rates(purchase.region)
    return TaxRates(itp=safe(purchase.manual_itp_pct), ajd=safe(purchase.manual_ajd_pct))


def compute_purchase_costs(
    purchase: PurchaseInputs,
    rates: TaxRates,
    iva_rate: float = IVA_NEW_BUILD,
) -> PurchaseCosts:
    """Itemized acquisition costs.

    Existing homes pay ITP; new builds pay VAT plus AJD. In auto mode the
    notary/registry/gestoria estimate replaces whatever the caller supplied.
    """
    price = safe(purchase.price)
    closing = purchase.closing

    itp = iva = ajd = 0.0
    if purchase.property_type == PropertyType.EXISTING:
        itp = price * rates.itp / 100
    elif purchase.property_type == PropertyType.NEW:
        iva = price * iva_rate
        ajd = price * rates.ajd / 100

    if closing.auto_mode:
        est = estimate_closing_costs(price)
        notary, registry, gestoria = float(est.notary), float(est.registry), float(est.gestoria)
    else:
        notary, registry, gestoria = safe(closing.notary), safe(closing.registry), safe(closing.gestoria)

    appraisal = closing.appraisal if is_num(closing.appraisal) else estimate_appraisal(price)

    return PurchaseCosts(
        itp=itp,
        iva=iva,
        ajd=ajd,
        notary=notary,
        registry=registry,
        gestoria=gestoria,
        appraisal=float(appraisal),
        agency_commission=safe(closing.agency_commission),
        other_closing=safe(closing.other_closing),
        down_payment=purchase.down_payment,
        reform_cost=safe(purchase.reform_cost),
    )
