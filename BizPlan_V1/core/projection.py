"""
Composition du tableau d'exploitation d'une année de projection.

Fonction pure de (plan, offset d'année, intérêts de l'année) : elle ne
modifie rien et renvoie un `YearlyResults` complet.
"""

import logging
from typing import Dict

from BizPlan_V1.core.amortization import calculate_amortization
from BizPlan_V1.core.results import YearlyResults
from BizPlan_V1.core.rh import calculate_personnel_cost
from BizPlan_V1.core.tax import calculate_corporate_tax, calculate_total_taxes
from BizPlan_V1.domain.plan import BusinessPlanData, YearOverride
from BizPlan_V1.domain.types import CostMode

logger = logging.getLogger(__name__)


def growth_factor(rate: float, year_offset: int) -> float:
    """(1 + taux/100) ^ offset"""
    return (1 + rate / 100) ** year_offset


def _apply_override(lines: Dict[str, float], override: YearOverride | None) -> None:
    """Remplace les lignes calculées par les valeurs saisies à la main."""
    if override is None:
        return
    for name, value in override.model_dump(exclude_none=True).items():
        lines[name] = value


def calculate_yearly_results(
    plan: BusinessPlanData, year_offset: int, loan_interest: float = 0.0
) -> YearlyResults:
    """Calcule le compte de résultat prévisionnel de l'année `year_offset + 1`.

    Étapes : CA et charges indexés par leurs taux de croissance,
    dotations (non indexées), intérêts d'emprunt, corrections manuelles,
    puis impôts, résultat net, cash-flow et cash-flow actualisé.

    Args:
        plan: Plan d'affaires.
        year_offset: Offset 0-based de l'année projetée.
        loan_interest: Intérêts d'emprunt payés dans l'année.

    Returns:
        YearlyResults entièrement renseigné.
    """
    year = year_offset + 1
    growth_ventes = growth_factor(plan.turnover_growth_rate, year_offset)
    growth_charges = growth_factor(plan.expenses_growth_rate, year_offset)

    turnover = sum(p.annual_revenue for p in plan.products) * growth_ventes

    if plan.raw_materials_cost_mode is CostMode.PERCENTAGE:
        materials_cost = turnover * plan.raw_materials_cost_percentage / 100
    else:
        materials_cost = (
            sum(m.annual_cost for m in plan.raw_materials) * growth_charges
        )

    if plan.personnel_cost_mode is CostMode.PERCENTAGE:
        personnel_total = turnover * plan.personnel_cost_percentage / 100
        personnel = {
            "personnel_cost": personnel_total,
            "total_gross_salary": personnel_total,
            "cnss": 0.0,
            "tfp": 0.0,
            "foprolos": 0.0,
        }
    else:
        cost = calculate_personnel_cost(
            plan.personnel,
            plan.social_charges_rate,
            plan.tfp_rate,
            plan.foprolos_rate,
            target_year=year,
        )
        personnel = {
            "personnel_cost": cost.total_cost * growth_charges,
            "total_gross_salary": cost.total_gross_salary * growth_charges,
            "cnss": cost.cnss * growth_charges,
            "tfp": cost.tfp * growth_charges,
            "foprolos": cost.foprolos * growth_charges,
        }

    charges = plan.external_charges
    lines: Dict[str, float] = {
        "turnover": turnover,
        "materials_cost": materials_cost,
        **personnel,
        "services_exterieurs": charges.services_exterieurs * growth_charges,
        "autres_services_exterieurs": charges.autres_services_exterieurs
        * growth_charges,
        "amortization": calculate_amortization(plan.equipments, year_offset),
        "financial_charges": loan_interest,
    }
    _apply_override(lines, plan.override_for_year(year))

    turnover = lines["turnover"]
    tcl = turnover * (plan.tcl_rate / 100)
    itemized_taxes = tcl + plan.stamps_and_registration

    external_charges_total = lines.pop("external_charges_total", None)
    if external_charges_total is None:
        external_charges_total = (
            lines["services_exterieurs"] + lines["autres_services_exterieurs"]
        )
    total_expenses = (
        lines["materials_cost"]
        + lines["personnel_cost"]
        + external_charges_total
        + lines["amortization"]
        + lines["financial_charges"]
    )
    pre_tax_income = turnover - total_expenses

    corporate_tax = calculate_corporate_tax(
        plan.tax_regime, plan.legal_structure, turnover, pre_tax_income, plan.tax_rate
    )
    total_taxes = calculate_total_taxes(corporate_tax, itemized_taxes, plan.fixed_taxes)
    net_result = pre_tax_income - total_taxes

    # Les dotations ne sortent pas de la trésorerie
    cash_flow = net_result + lines["amortization"]
    discounted_cash_flow = cash_flow / growth_factor(plan.discount_rate, year)

    logger.debug(
        "Année %d : CA %.2f, charges %.2f, résultat net %.2f",
        year,
        turnover,
        total_expenses,
        net_result,
    )

    return YearlyResults(
        **lines,
        tcl=tcl,
        itemized_taxes=itemized_taxes,
        external_charges_total=external_charges_total,
        total_expenses=total_expenses,
        pre_tax_income=pre_tax_income,
        corporate_tax=corporate_tax,
        total_taxes=total_taxes,
        net_result=net_result,
        cash_flow=cash_flow,
        discounted_cash_flow=discounted_cash_flow,
    )
