"""
Orchestration de la projection : tableau d'exploitation sur tout l'horizon
et indicateurs de synthèse.
"""

import logging

from BizPlan_V1.core.amortization import calculate_detailed_amortization
from BizPlan_V1.core.indicators import (
    break_even_evolution,
    cost_structure,
    cumulative_cash_flow_series,
    cvp_curve,
    first_profitable_year,
    internal_rate_of_return,
    net_present_value,
    payback_period,
)
from BizPlan_V1.core.investment import total_investment_ht
from BizPlan_V1.core.loan import calculate_loan_repayment
from BizPlan_V1.core.projection import calculate_yearly_results
from BizPlan_V1.core.results import OperatingResults, Summary
from BizPlan_V1.domain.plan import BusinessPlanData
from BizPlan_V1.utils import safe_ratio

logger = logging.getLogger(__name__)


def clamp_cruise_year(cruise_year: int, projection_years: int) -> int:
    """Ramène l'année de croisière (1-based) dans [1, projection_years]."""
    return min(max(cruise_year, 1), projection_years)


def calculate_operating_results(plan: BusinessPlanData) -> OperatingResults:
    """Calcule la projection financière complète d'un plan d'affaires.

    1. Échéancier d'emprunt sur l'horizon.
    2. Tableau d'exploitation de chaque année (intérêts de l'année en charges
       financières, 0 au-delà de l'échéancier).
    3. Indicateurs : VAN, TRI, délai de récupération, ROI et seuil de
       rentabilité de l'année de croisière, évolution du seuil, courbe CVP
       et cumul des cash-flows.

    Aucune exception n'est levée pour un plan validé : les cas dégénérés
    donnent des valeurs sentinelles (0, inf ou None).

    Args:
        plan: Plan d'affaires (non modifié).

    Returns:
        OperatingResults recalculé entièrement à partir du plan.
    """
    horizon = plan.projection_years

    loan_repayment = calculate_loan_repayment(
        plan.effective_loan_amount,
        plan.loan_duration,
        plan.loan_interest_rate,
        horizon,
    )
    logger.debug(
        "Projection '%s' sur %d ans, échéancier de %d lignes",
        plan.project_title,
        horizon,
        len(loan_repayment),
    )

    years = [
        calculate_yearly_results(
            plan,
            offset,
            loan_repayment[offset].interest if offset < len(loan_repayment) else 0.0,
        )
        for offset in range(horizon)
    ]

    total_investment = total_investment_ht(plan.equipments)
    van = net_present_value(years, total_investment)
    irr = internal_rate_of_return(years, total_investment)
    payback = payback_period([y.cash_flow for y in years], total_investment)

    cruise_year = clamp_cruise_year(plan.cruise_year, horizon)
    cruise_year_data = years[cruise_year - 1]
    structure = cost_structure(cruise_year_data)
    if structure.contribution_margin <= 0:
        logger.warning(
            "Marge sur coûts variables non positive en année %d : seuil de rentabilité indéfini",
            cruise_year,
        )

    summary = Summary(
        van=van,
        payback=payback,
        irr=irr if irr is not None else 0.0,
        irr_converged=irr is not None,
        roi=safe_ratio(cruise_year_data.net_result, total_investment) * 100,
        break_even_point=structure.break_even_point,
        total_investment=total_investment,
        fixed_costs_cruise=structure.fixed_costs,
        variable_costs_cruise=structure.variable_costs,
        contribution_margin_cruise=structure.contribution_margin,
        cruise_year=cruise_year,
        cruise_year_data=cruise_year_data,
        first_profitable_year=first_profitable_year(years),
    )

    return OperatingResults(
        years=years,
        detailed_amortization=calculate_detailed_amortization(plan.equipments, horizon),
        loan_repayment=loan_repayment,
        summary=summary,
        cumulative_cf_series=cumulative_cash_flow_series(years, total_investment),
        break_even_evolution=break_even_evolution(years),
        cvp_data=cvp_curve(cruise_year_data),
    )
