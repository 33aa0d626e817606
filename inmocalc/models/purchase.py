import math
from dataclasses import dataclass, field
from enum import Enum

from inmocalc.engine.numbers import NAN, safe, round_half_up


class PropertyType(Enum):
    EXISTING = "existing"  # Resale: pays ITP
    NEW = "new"  # New build: pays VAT + AJD


@dataclass(frozen=True)
class ClosingCostInputs:
    auto_mode: bool = True  # Notary/registry/gestoria from the price-based estimate
    notary: float = NAN
    registry: float = NAN
    gestoria: float = NAN
    appraisal: float = NAN  # NaN -> estimated from price
    agency_commission: float = NAN
    other_closing: float = NAN


@dataclass(frozen=True)
class PurchaseInputs:
    price: float = NAN
    down_payment_pct: float = NAN  # 0-100
    mortgage_rate_pct: float = NAN  # Annual nominal, e.g. 3.0 for 3%
    mortgage_years: float = NAN
    reform_cost: float = NAN
    property_type: PropertyType = PropertyType.EXISTING
    region: str = ""

    # Purchase taxes
    use_official_rates: bool = True
    manual_itp_pct: float = 7.0
    manual_ajd_pct: float = 1.0

    closing: ClosingCostInputs = field(default_factory=ClosingCostInputs)

    @property
    def loan_amount(self) -> float:
        return max(0.0, safe(self.price) * (1 - safe(self.down_payment_pct) / 100))

    @property
    def down_payment(self) -> float:
        return safe(self.price) * (safe(self.down_payment_pct) / 100)

    @property
    def monthly_rate(self) -> float:
        return safe(self.mortgage_rate_pct) / 100 / 12

    @property
    def total_months(self) -> int:
        years = safe(self.mortgage_years)
        if not math.isfinite(years):
            return 1
        return max(1, round_half_up(years * 12))

    @property
    def schedule_years(self) -> int:
        """Years in the amortization schedule (at least one)."""
        years = safe(self.mortgage_years)
        if not math.isfinite(years):
            return 1
        return max(1, round_half_up(years))
