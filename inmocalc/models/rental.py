from dataclasses import dataclass, field

from inmocalc.engine.numbers import NAN, is_num, round_half_up, safe


@dataclass
class AutoField:
    """A value derived automatically until the user edits it.

    Auto -> Manual on the first external write; never back.
    """
    value: float = NAN
    touched: bool = False

    def derive(self, value: float) -> None:
        if not self.touched:
            self.value = value

    def set(self, value: float) -> None:
        self.value = value
        self.touched = True


# Annual cost as a multiple of the monthly rent
AUTO_COST_FACTORS: dict[str, float] = {
    "ibi": 0.60,
    "community_fees": 0.50,
    "home_insurance": 0.25,
    "life_insurance": 0.30,
    "unpaid_rent_insurance": 0.50,
}


@dataclass
class FixedCosts:
    """Annual fixed costs of the rental (year-1 euros)."""
    ibi: AutoField = field(default_factory=AutoField)  # Municipal property tax
    community_fees: AutoField = field(default_factory=AutoField)
    home_insurance: AutoField = field(default_factory=AutoField)
    life_insurance: AutoField = field(default_factory=AutoField)
    unpaid_rent_insurance: AutoField = field(default_factory=AutoField)
    misc_expenses: AutoField = field(default_factory=AutoField)  # No auto rule

    def apply_rent(self, monthly_rent: float) -> None:
        """Re-derive untouched fields from the monthly rent."""
        if not is_num(monthly_rent):
            return
        for name, factor in AUTO_COST_FACTORS.items():
            getattr(self, name).derive(round_half_up(monthly_rent * factor))

    @property
    def total(self) -> float:
        return (
            safe(self.ibi.value)
            + safe(self.community_fees.value)
            + safe(self.home_insurance.value)
            + safe(self.life_insurance.value)
            + safe(self.unpaid_rent_insurance.value)
            + safe(self.misc_expenses.value)
        )


@dataclass
class RentalInputs:
    monthly_rent: float = NAN
    rent_growth_pct: float = 2.0  # Annual, percent
    projection_years: float = 10
    fixed_costs: FixedCosts = field(default_factory=FixedCosts)
    maintenance_pct: float = 5.0  # % of annual rent

    def __post_init__(self) -> None:
        self.fixed_costs.apply_rent(self.monthly_rent)

    def __setattr__(self, name: str, value) -> None:
        super().__setattr__(name, value)
        # Every rent change re-derives the untouched fixed costs
        if name == "monthly_rent" and "fixed_costs" in self.__dict__:
            self.fixed_costs.apply_rent(value)

    def set_monthly_rent(self, monthly_rent: float) -> None:
        """Update the rent and re-derive the untouched fixed costs."""
        self.monthly_rent = monthly_rent
