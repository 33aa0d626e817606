import pytest

from inmocalc.engine.debt import amortization_schedule, monthly_payment
from inmocalc.engine.projection import project
from inmocalc.engine.tax import marginal_rate
from inmocalc.models.rental import RentalInputs
from inmocalc.models.results import AmortizationYear


class TestProjectBare:
    def test_no_costs_no_mortgage(self, bare_rental):
        projection = project(bare_rental, monthly_payment=0, amortization=[])
        assert len(projection) == 5
        for p in projection:
            assert p.gross_rent == 12000
            assert p.total_expenses == 0
            assert p.net_cash_flow == pytest.approx(p.gross_rent - p.income_tax_paid)

    def test_tax_on_half_of_rent(self, bare_rental):
        p = project(bare_rental, monthly_payment=0, amortization=[])[0]
        assert p.reduced_base == pytest.approx(6000)
        assert p.income_tax_paid == pytest.approx(6000 * 0.19)

    def test_reform_raises_reduction(self, bare_rental):
        p = project(bare_rental, monthly_payment=0, amortization=[], reform_cost=5000)[0]
        assert p.reduced_base == pytest.approx(4800)


class TestProjectCanonical:
    @pytest.fixture
    def projection(self, canonical_rental):
        loan, r, n = 200000, 0.03 / 12, 300
        pmt = monthly_payment(loan, r, n)
        amort = amortization_schedule(loan, r, n, 25)
        return project(canonical_rental, pmt, amort), pmt, amort

    def test_length_and_order(self, projection):
        rows, _, _ = projection
        assert [p.year for p in rows] == list(range(1, 11))

    def test_year_one_rent(self, projection):
        rows, _, _ = projection
        assert rows[0].gross_rent == pytest.approx(14400)

    def test_rent_grows(self, projection):
        rows, _, _ = projection
        assert rows[1].gross_rent == pytest.approx(14400 * 1.02)
        assert rows[9].gross_rent == pytest.approx(14400 * 1.02 ** 9)

    def test_fixed_costs_inflate(self, projection, canonical_rental):
        rows, _, _ = projection
        base = canonical_rental.fixed_costs.total
        assert base == 720 + 600 + 300 + 360 + 600
        assert rows[0].fixed_costs == pytest.approx(base)
        assert rows[2].fixed_costs == pytest.approx(base * 1.02 ** 2)

    def test_mortgage_constant(self, projection):
        rows, pmt, _ = projection
        assert all(p.mortgage_payment == pytest.approx(pmt * 12) for p in rows)

    def test_net_identity(self, projection):
        rows, _, _ = projection
        for p in rows:
            assert p.total_expenses == pytest.approx(p.operating_expenses + p.mortgage_payment)
            assert p.net_cash_flow == pytest.approx(p.gross_rent - p.total_expenses - p.income_tax_paid)

    def test_interest_deducted(self, projection):
        rows, _, amort = projection
        p = rows[0]
        assert p.interest_deduction == amort[0].interest_paid
        expected_base = max(0.0, p.gross_rent - (p.operating_expenses + amort[0].interest_paid))
        assert p.taxable_base == pytest.approx(expected_base)
        assert p.marginal_rate == marginal_rate(p.reduced_base)


class TestProjectEdges:
    def test_interest_zero_beyond_schedule(self, bare_rental):
        amort = [AmortizationYear(year=1, interest_paid=2000, principal_paid=0, ending_balance=0)]
        rows = project(bare_rental, monthly_payment=0, amortization=amort)
        assert rows[0].interest_deduction == 2000
        assert rows[0].taxable_base == pytest.approx(10000)
        assert rows[1].interest_deduction == 0
        assert rows[1].taxable_base == pytest.approx(12000)

    def test_taxable_base_never_negative(self, bare_rental):
        rows = project(bare_rental, monthly_payment=2000, amortization=[
            AmortizationYear(year=1, interest_paid=50000),
        ])
        assert rows[0].taxable_base == 0
        assert rows[0].income_tax_paid == 0
        assert rows[0].net_cash_flow == pytest.approx(12000 - 24000)

    def test_missing_rent_yields_zero_income(self):
        rows = project(RentalInputs(projection_years=3), monthly_payment=0, amortization=[])
        assert len(rows) == 3
        assert all(p.gross_rent == 0 and p.net_cash_flow == 0 for p in rows)

    def test_missing_horizon_is_empty(self):
        rental = RentalInputs(monthly_rent=800, projection_years=float("nan"))
        assert project(rental, monthly_payment=0, amortization=[]) == []
