"""Regional purchase-tax rates (Spain).

ITP applies to resale homes; AJD applies, together with VAT, to new builds.
Rates are in percent of the purchase price.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxRates:
    itp: float  # % of price, existing homes
    ajd: float  # % of price, new builds


REGIONS: tuple[str, ...] = (
    "Andalucía",
    "Aragón",
    "Asturias",
    "Baleares",
    "Canarias",
    "Cantabria",
    "Castilla-La Mancha",
    "Castilla y León",
    "Cataluña",
    "Comunidad Valenciana",
    "Extremadura",
    "Galicia",
    "La Rioja",
    "Comunidad de Madrid",
    "Murcia",
    "Navarra",
    "País Vasco",
    "Ceuta",
    "Melilla",
)

# Simplified general rates; reduced rates (young buyers, large families, etc.) are ignored
OFFICIAL_TAXES: dict[str, TaxRates] = {
    "Andalucía": TaxRates(itp=7.0, ajd=1.2),
    "Aragón": TaxRates(itp=8.0, ajd=1.0),
    "Asturias": TaxRates(itp=8.0, ajd=1.2),
    "Baleares": TaxRates(itp=8.0, ajd=1.5),
    "Canarias": TaxRates(itp=6.5, ajd=1.0),
    "Cantabria": TaxRates(itp=10.0, ajd=1.5),
    "Castilla-La Mancha": TaxRates(itp=9.0, ajd=1.5),
    "Castilla y León": TaxRates(itp=8.0, ajd=1.5),
    "Cataluña": TaxRates(itp=10.0, ajd=1.5),
    "Comunidad Valenciana": TaxRates(itp=10.0, ajd=1.5),
    "Extremadura": TaxRates(itp=8.0, ajd=1.5),
    "Galicia": TaxRates(itp=9.0, ajd=1.5),
    "La Rioja": TaxRates(itp=7.0, ajd=1.0),
    "Comunidad de Madrid": TaxRates(itp=6.0, ajd=0.75),
    "Murcia": TaxRates(itp=8.0, ajd=1.5),
    "Navarra": TaxRates(itp=6.0, ajd=0.5),
    "País Vasco": TaxRates(itp=4.0, ajd=0.5),
    "Ceuta": TaxRates(itp=6.0, ajd=1.0),
    "Melilla": TaxRates(itp=6.0, ajd=1.0),
}

NO_RATES = TaxRates(itp=0.0, ajd=0.0)


def regional_rates(region: str | None) -> TaxRates:
    """Official ITP/AJD for a region. Unknown or empty region -> zero rates."""
    return OFFICIAL_TAXES.get(region or "", NO_RATES)
