import pytest

from inmocalc.engine.tax import marginal_rate, rental_income_tax


class TestMarginalRate:
    @pytest.mark.parametrize("base,expected", [
        (10000, 0.19),
        (12450, 0.19),
        (12451, 0.24),
        (20200, 0.24),
        (35000, 0.30),
        (60000, 0.37),
        (150000, 0.45),
        (500000, 0.47),
    ])
    def test_brackets(self, base, expected):
        assert marginal_rate(base) == expected

    def test_negative_base_clamped(self):
        assert marginal_rate(-5000) == 0.19


class TestRentalIncomeTax:
    def test_default_reduction(self):
        tax = rental_income_tax(20000, reform_cost=0)
        assert tax.reduction == 0.50
        assert tax.reduced_base == pytest.approx(10000)
        assert tax.rate == 0.19
        assert tax.tax == pytest.approx(1900)

    def test_reform_reduction(self):
        tax = rental_income_tax(20000, reform_cost=15000)
        assert tax.reduction == 0.60
        assert tax.reduced_base == pytest.approx(8000)
        assert tax.tax == pytest.approx(1520)

    def test_flat_rate_on_whole_base(self):
        """Whole reduced base taxed at its bracket rate, not cumulatively."""
        tax = rental_income_tax(80000)
        assert tax.reduced_base == pytest.approx(40000)
        assert tax.tax == pytest.approx(40000 * 0.37)

    def test_zero_base(self):
        assert rental_income_tax(0).tax == 0
