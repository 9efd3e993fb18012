"""
Lignes d'exploitation : ventes, matières premières et charges externes.
"""

from pydantic import BaseModel


class ProductItem(BaseModel):
    name: str = ""
    price_unit: float = 0.0
    quantity_annual: float = 0.0

    @property
    def annual_revenue(self) -> float:
        return self.price_unit * self.quantity_annual


class RawMaterialItem(BaseModel):
    name: str = ""
    cost_unit: float = 0.0
    quantity_annual: float = 0.0

    @property
    def annual_cost(self) -> float:
        return self.cost_unit * self.quantity_annual


class ExternalCharges(BaseModel):
    """Charges externes annuelles de base (année 1)."""

    # Services extérieurs
    rent: float = 0.0
    utilities: float = 0.0
    maintenance: float = 0.0
    insurance: float = 0.0
    fuel: float = 0.0
    # Autres services extérieurs
    telecom: float = 0.0
    advertising: float = 0.0
    bank_fees: float = 0.0
    other: float = 0.0

    @property
    def services_exterieurs(self) -> float:
        return self.rent + self.utilities + self.maintenance + self.insurance + self.fuel

    @property
    def autres_services_exterieurs(self) -> float:
        return self.telecom + self.advertising + self.bank_fees + self.other
