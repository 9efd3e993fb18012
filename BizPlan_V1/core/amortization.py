"""
Amortissement linéaire des équipements.

Annuité pleine dès l'année 1, sans prorata temporis ni valeur résiduelle :
la dotation s'arrête net une fois la durée épuisée.
"""

from typing import Iterable, List

from BizPlan_V1.core.results import AmortizationRow
from BizPlan_V1.domain.equipment import EquipmentItem


def annual_amortization(item: EquipmentItem) -> float:
    """Dotation annuelle d'un équipement (0 si la durée est nulle)."""
    if item.duration <= 0:
        return 0.0
    return item.total_ht / item.duration


def calculate_amortization(
    equipments: Iterable[EquipmentItem], year_offset: int = 0
) -> float:
    """Somme des dotations de l'année `year_offset` (0 = année 1).

    Un équipement ne contribue que si sa durée dépasse strictement l'offset.
    """
    return sum(
        annual_amortization(item) for item in equipments if item.duration > year_offset
    )


def calculate_detailed_amortization(
    equipments: Iterable[EquipmentItem], projection_years: int
) -> List[AmortizationRow]:
    """Tableau d'amortissement détaillé : une ligne par équipement."""
    rows: List[AmortizationRow] = []
    for item in equipments:
        annual_base = annual_amortization(item)
        rows.append(
            AmortizationRow(
                name=item.name,
                ht=item.total_ht,
                duration=item.duration,
                yearly_values=[
                    annual_base if y < item.duration else 0.0
                    for y in range(projection_years)
                ],
            )
        )
    return rows
