"""
Indicateurs de rentabilité : VAN, TRI, délai de récupération, seuil de
rentabilité et courbe coût-volume-profit.
"""

import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from BizPlan_V1.core.results import (
    BreakEvenPoint,
    CostStructure,
    CumulativeCashFlowPoint,
    CVPPoint,
    Payback,
    YearlyResults,
)
from BizPlan_V1.data.finance_params import (
    CVP_MAX_SCALE,
    CVP_STEPS,
    IRR_DIVERGENCE_BOUND,
    IRR_INITIAL_GUESS,
    IRR_MAX_ITERATIONS,
    IRR_TOLERANCE,
)
from BizPlan_V1.utils import safe_ratio

logger = logging.getLogger(__name__)


def net_present_value(years: Sequence[YearlyResults], total_investment: float) -> float:
    """VAN = somme des cash-flows actualisés - investissement."""
    return float(sum(y.discounted_cash_flow for y in years)) - total_investment


def solve_irr(cash_flows: Sequence[float]) -> Optional[float]:
    """Taux annulant la VAN des flux `cash_flows` (flux t=0 en premier).

    Newton-Raphson à dérivée analytique, départ à 10%. Retourne None si la
    dérivée s'annule, si l'itéré sort de ±100 ou n'est plus fini, ou si
    le solveur n'a pas convergé au bout de `IRR_MAX_ITERATIONS`. Des flux
    tous nuls annulent la VAN pour tout taux : aucun TRI n'est retenu.
    """
    flows = np.asarray(cash_flows, dtype=float)
    if not np.any(flows):
        return None
    periods = np.arange(len(flows))
    rate = IRR_INITIAL_GUESS

    with np.errstate(all="ignore"):
        for _ in range(IRR_MAX_ITERATIONS):
            discount = np.power(1.0 + rate, periods)
            npv = float(np.sum(flows / discount))
            if not math.isfinite(npv):
                return None
            if abs(npv) < IRR_TOLERANCE:
                return rate

            derivative = float(np.sum(-periods * flows / (discount * (1.0 + rate))))
            if derivative == 0 or not math.isfinite(derivative):
                return None

            rate = rate - npv / derivative
            if not math.isfinite(rate) or abs(rate) > IRR_DIVERGENCE_BOUND:
                return None

    return None


def internal_rate_of_return(
    years: Sequence[YearlyResults], total_investment: float
) -> Optional[float]:
    """TRI en % sur tout l'horizon, None si le solveur échoue."""
    flows = [-total_investment] + [y.cash_flow for y in years]
    rate = solve_irr(flows)
    if rate is None:
        logger.warning(
            "TRI non concluant (pas de convergence) sur %d années de flux", len(years)
        )
        return None
    return rate * 100


def _months_of(fraction: float) -> int:
    return math.ceil(fraction * 12)


def payback_period(
    cash_flows: Sequence[float], total_investment: float
) -> Optional[Payback]:
    """Délai de récupération de l'investissement (années + mois).

    Parcourt le cumul des cash-flows ; la première année où il couvre
    l'investissement fixe le délai. Au-delà de l'horizon, extrapole avec
    le cash-flow de la dernière année s'il est positif.

    Returns:
        Payback, ou None si l'investissement n'est jamais récupéré.
    """
    if total_investment <= 0:
        return Payback(years=0, months=0)

    cumulative = 0.0
    for i, year_cf in enumerate(cash_flows):
        if cumulative + year_cf >= total_investment:
            needed = total_investment - cumulative
            fraction = needed / year_cf if year_cf > 0 else 0.0
            years, months = i, _months_of(fraction)
            if months >= 12:
                years, months = years + 1, 0
            return Payback(years=years, months=months)
        cumulative += year_cf

    last_cf = cash_flows[-1] if cash_flows else 0.0
    if last_cf <= 0:
        return None

    extra_years = (total_investment - cumulative) / last_cf
    years = len(cash_flows) + math.floor(extra_years)
    months = _months_of(extra_years % 1)
    if months >= 12:
        years, months = years + 1, 0
    return Payback(years=years, months=months)


def fixed_costs_of(year: YearlyResults) -> float:
    """Charges fixes approchées : tout sauf les matières et l'IS."""
    return year.total_expenses - year.materials_cost + year.total_taxes - year.corporate_tax


def cost_structure(
    year: YearlyResults, undefined_break_even: float = math.inf
) -> CostStructure:
    """Charges fixes / variables et seuil de rentabilité d'une année.

    Seuil = charges fixes × CA / marge sur coûts variables ; vaut
    `undefined_break_even` si la marge est nulle ou négative.
    """
    fixed = fixed_costs_of(year)
    variable = year.materials_cost
    margin = year.turnover - variable
    if margin > 0:
        break_even = fixed * year.turnover / margin
    else:
        break_even = undefined_break_even

    return CostStructure(
        fixed_costs=fixed,
        variable_costs=variable,
        contribution_margin=margin,
        break_even_point=break_even,
    )


def break_even_evolution(years: Sequence[YearlyResults]) -> List[BreakEvenPoint]:
    """Seuil de rentabilité année par année (0 si la marge est non positive)."""
    return [
        BreakEvenPoint(
            year=i + 1,
            turnover=y.turnover,
            break_even_point=cost_structure(y, undefined_break_even=0.0).break_even_point,
        )
        for i, y in enumerate(years)
    ]


def cvp_curve(year: YearlyResults, steps: int = CVP_STEPS) -> List[CVPPoint]:
    """Points coût-volume-profit de 0% à 120% du CA de l'année.

    Le coût variable est supposé proportionnel au CA (ratio matières / CA
    observé à 100%).
    """
    fixed = fixed_costs_of(year)
    variable_ratio = safe_ratio(year.materials_cost, year.turnover)
    scales = np.linspace(0.0, CVP_MAX_SCALE, steps + 1)

    return [
        CVPPoint(
            percentage=round(float(scale) * 100),
            revenue=float(year.turnover * scale),
            fixed_costs=fixed,
            total_costs=float(fixed + year.turnover * scale * variable_ratio),
        )
        for scale in scales
    ]


def cumulative_cash_flow_series(
    years: Sequence[YearlyResults], total_investment: float
) -> List[CumulativeCashFlowPoint]:
    """Cash-flow cumulé année par année, comparé à l'investissement initial."""
    cumulative = np.cumsum([y.cash_flow for y in years])
    return [
        CumulativeCashFlowPoint(
            year=i + 1, cumulative=float(value), investment=total_investment
        )
        for i, value in enumerate(cumulative)
    ]


def first_profitable_year(years: Sequence[YearlyResults]) -> Optional[int]:
    """Première année (1-based) à résultat net positif."""
    return next((i + 1 for i, y in enumerate(years) if y.net_result > 0), None)
