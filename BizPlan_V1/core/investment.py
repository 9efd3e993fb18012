"""
Investissement (HT / TVA / TTC) et équilibre du plan de financement.
"""

from typing import Iterable

from BizPlan_V1.core.results import FinancingPlan, InvestmentResults
from BizPlan_V1.data.finance_params import FINANCING_GAP_TOLERANCE
from BizPlan_V1.domain.equipment import EquipmentItem
from BizPlan_V1.domain.plan import BusinessPlanData


def calculate_investment(equipments: Iterable[EquipmentItem]) -> InvestmentResults:
    """Totalise les lignes d'équipement.

    Pour chaque ligne : HT = prix unitaire × quantité, TVA = HT × taux/100,
    TTC = HT + TVA. Une liste vide donne trois totaux nuls.
    """
    total_ht = 0.0
    total_tva = 0.0
    total_ttc = 0.0

    for item in equipments:
        ht = item.total_ht
        tva = ht * (item.tva_rate / 100)
        total_ht += ht
        total_tva += tva
        total_ttc += ht + tva

    return InvestmentResults(total_ht=total_ht, total_tva=total_tva, total_ttc=total_ttc)


def total_investment_ht(equipments: Iterable[EquipmentItem]) -> float:
    """Base en capital (HT) pour la VAN, le TRI et le délai de récupération."""
    return sum(item.total_ht for item in equipments)


def compute_financing_plan(plan: BusinessPlanData) -> FinancingPlan:
    """Compare les ressources aux emplois du plan de financement.

    Emplois = investissement TTC + frais d'établissement + fonds de roulement.
    Ressources = apport + subventions + dotation + crédits bancaires + autres.

    Args:
        plan: Plan d'affaires.

    Returns:
        FinancingPlan avec l'écart (ressources - emplois) ; le plan est
        équilibré si l'écart est inférieur à `FINANCING_GAP_TOLERANCE`.
    """
    investment = calculate_investment(plan.equipments)
    uses = investment.total_ttc + plan.startup_costs + plan.working_capital

    resources = (
        plan.personal_contribution
        + plan.grant_amount
        + plan.dotation
        + plan.bank_loan
        + plan.other_funding
    )
    gap = resources - uses

    return FinancingPlan(
        uses=uses,
        resources=resources,
        gap=gap,
        balanced=abs(gap) < FINANCING_GAP_TOLERANCE,
    )
