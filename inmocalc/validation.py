"""Required-field checks run by the front end before showing results.

The engine never calls these; it degrades missing values to zero instead.
Each check returns the first problem found, or "" when the inputs are complete.
"""

from inmocalc.engine.numbers import is_num
from inmocalc.models.purchase import PurchaseInputs
from inmocalc.models.rental import RentalInputs


def validate_purchase(purchase: PurchaseInputs) -> str:
    if not purchase.region:
        return "Missing required purchase data: region"
    required = (
        ("price", purchase.price),
        ("down payment (%)", purchase.down_payment_pct),
        ("interest rate", purchase.mortgage_rate_pct),
        ("mortgage years", purchase.mortgage_years),
    )
    for label, value in required:
        if not is_num(value):
            return f"Missing required purchase data: {label}"
    return ""


def validate_rent(rental: RentalInputs) -> str:
    if not is_num(rental.monthly_rent):
        return "Missing required rental data: monthly rent"
    if not is_num(rental.projection_years):
        return "Missing required rental data: projection years"
    return ""
