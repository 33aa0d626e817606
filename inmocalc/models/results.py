from dataclasses import dataclass, field

from inmocalc.engine.numbers import NAN


@dataclass(frozen=True)
class AmortizationYear:
    year: int
    interest_paid: float = 0.0
    principal_paid: float = 0.0
    ending_balance: float = 0.0


@dataclass
class ProjectionYear:
    year: int

    # Income
    gross_rent: float = 0.0

    # Expenses
    maintenance: float = 0.0
    fixed_costs: float = 0.0
    operating_expenses: float = 0.0  # Maintenance + fixed costs
    mortgage_payment: float = 0.0  # Annual debt service
    total_expenses: float = 0.0  # Operating expenses + mortgage

    # Tax
    interest_deduction: float = 0.0
    taxable_base: float = 0.0
    reduced_base: float = 0.0  # After the rental-income reduction
    marginal_rate: float = 0.0
    income_tax_paid: float = 0.0

    # Cash flow
    net_before_tax: float = 0.0
    net_cash_flow: float = 0.0


@dataclass
class PurchaseCosts:
    # Taxes
    itp: float = 0.0
    iva: float = 0.0
    ajd: float = 0.0

    # Fees
    notary: float = 0.0
    registry: float = 0.0
    gestoria: float = 0.0
    appraisal: float = 0.0
    agency_commission: float = 0.0
    other_closing: float = 0.0

    down_payment: float = 0.0
    reform_cost: float = 0.0

    @property
    def taxes(self) -> float:
        return self.itp + self.iva + self.ajd

    @property
    def fees(self) -> float:
        return (
            self.notary + self.registry + self.gestoria
            + self.appraisal + self.agency_commission + self.other_closing
        )

    @property
    def closing_costs(self) -> float:
        return self.taxes + self.fees

    @property
    def initial_cash_needed(self) -> float:
        """Cash at signing, before any reform."""
        return self.down_payment + self.closing_costs

    @property
    def cash_invested(self) -> float:
        return self.initial_cash_needed + self.reform_cost


@dataclass
class InvestmentMetrics:
    total_cash_invested: float = 0.0
    average_net_yield_10y: float = NAN  # Percent
    year_one_yield: float = NAN  # Percent
    irr: float = NAN  # Annual, fraction
    total_interest: float = 0.0  # Over the full mortgage term
    total_acquisition_cost: float = 0.0  # Price + closing + reform
    total_cost_of_ownership: float = 0.0  # Acquisition + total interest
    recommended_max_price: float = NAN
    recommended_rent: float = NAN  # Monthly
    grade: str = "–"

    @property
    def irr_pct(self) -> float:
        return self.irr * 100


@dataclass
class AnalysisResult:
    purchase_costs: PurchaseCosts = field(default_factory=PurchaseCosts)
    itp_pct: float = 0.0
    ajd_pct: float = 0.0
    loan_amount: float = 0.0
    monthly_payment: float = 0.0
    amortization: list[AmortizationYear] = field(default_factory=list)
    projection: list[ProjectionYear] = field(default_factory=list)
    metrics: InvestmentMetrics = field(default_factory=InvestmentMetrics)
