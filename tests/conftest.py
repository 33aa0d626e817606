"""Canonical test fixtures used across all engine tests.

Fixture: 250.000 € resale flat in La Rioja (ITP 7%, AJD 1%), 20% down,
3% fixed for 25 years. Rent 1.200 €/month growing 2%/yr, 10-year horizon.
"""

import pytest

from inmocalc.models.purchase import PropertyType, PurchaseInputs
from inmocalc.models.rental import RentalInputs


@pytest.fixture
def canonical_purchase() -> PurchaseInputs:
    return PurchaseInputs(
        price=250000,
        down_payment_pct=20,
        mortgage_rate_pct=3,
        mortgage_years=25,
        reform_cost=0,
        property_type=PropertyType.EXISTING,
        region="La Rioja",
    )


@pytest.fixture
def canonical_rental() -> RentalInputs:
    return RentalInputs(
        monthly_rent=1200,
        rent_growth_pct=2,
        projection_years=10,
    )


@pytest.fixture
def bare_rental() -> RentalInputs:
    """No growth, no maintenance, all fixed costs forced to zero."""
    rental = RentalInputs(monthly_rent=1000, rent_growth_pct=0, projection_years=5, maintenance_pct=0)
    costs = rental.fixed_costs
    for f in (costs.ibi, costs.community_fees, costs.home_insurance,
              costs.life_insurance, costs.unpaid_rent_insurance, costs.misc_expenses):
        f.set(0)
    return rental
