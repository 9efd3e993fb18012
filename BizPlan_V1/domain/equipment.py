"""Équipements (investissements amortissables)."""

from pydantic import BaseModel, Field

from BizPlan_V1.data.finance_params import DEFAULT_AMORT_YEARS, DEFAULT_TVA_RATE


class EquipmentItem(BaseModel):
    """Une ligne d'investissement.

    Attributes:
        name: Libellé de l'équipement.
        price_unit_ht: Prix unitaire hors taxes.
        quantity: Nombre d'unités.
        tva_rate: Taux de TVA en %.
        duration: Durée d'amortissement en années (0 = non amortissable).
    """

    name: str = ""
    price_unit_ht: float = 0.0
    quantity: float = 1
    tva_rate: float = DEFAULT_TVA_RATE
    duration: int = Field(default=DEFAULT_AMORT_YEARS, ge=0)

    @property
    def total_ht(self) -> float:
        return self.price_unit_ht * self.quantity
