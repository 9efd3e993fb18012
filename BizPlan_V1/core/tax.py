"""
Calcul de l'impôt : régime forfaitaire ou régime réel (IS / IRPP).
"""

from typing import List, Tuple

from BizPlan_V1.data.tax_params import (
    FORFAIT_BASE_TAX,
    FORFAIT_EXCESS_RATE,
    FORFAIT_TURNOVER_THRESHOLD,
    IRPP_BRACKETS,
    MIN_TAX_BY_STRUCTURE,
)
from BizPlan_V1.domain.types import LegalStructure, TaxRegime


def forfait_tax(turnover: float) -> float:
    """Impôt forfaitaire : base fixe, plus 3% du CA au-delà du seuil."""
    if turnover <= FORFAIT_TURNOVER_THRESHOLD:
        return FORFAIT_BASE_TAX
    return FORFAIT_BASE_TAX + (turnover - FORFAIT_TURNOVER_THRESHOLD) * FORFAIT_EXCESS_RATE


def progressive_tax(
    income: float, brackets: List[Tuple[float, float]] = IRPP_BRACKETS
) -> float:
    """Barème progressif par tranches marginales.

    Chaque taux ne s'applique qu'à la part du revenu comprise dans sa tranche.

    Example:
        Pour 12 000 : 0% sur 0-5 000, 15% sur 5 000-10 000, 25% sur
        10 000-12 000, soit 750 + 500 = 1 250.
    """
    if income <= 0:
        return 0.0

    tax = 0.0
    previous_limit = 0.0
    for limit, rate in brackets:
        in_bracket = min(income, limit) - previous_limit
        if in_bracket <= 0:
            break
        tax += in_bracket * rate
        previous_limit = limit
    return tax


def minimum_tax(legal_structure: LegalStructure) -> float:
    """Minimum d'impôt du régime réel selon la forme juridique."""
    return MIN_TAX_BY_STRUCTURE.get(LegalStructure(legal_structure).value, 0.0)


def calculate_corporate_tax(
    tax_regime: TaxRegime,
    legal_structure: LegalStructure,
    turnover: float,
    pre_tax_income: float,
    tax_rate: float,
) -> float:
    """Impôt sur les bénéfices (IS) ou sur le revenu (IRPP) de l'année.

    Args:
        tax_regime: Régime forfaitaire ou réel.
        legal_structure: Forme juridique (PP = barème progressif).
        turnover: Chiffre d'affaires de l'année (base du forfait).
        pre_tax_income: Résultat avant impôt (base du réel).
        tax_rate: Taux d'IS en % pour les sociétés.

    Returns:
        L'impôt, jamais inférieur au minimum d'impôt au régime réel.
    """
    if TaxRegime(tax_regime) is TaxRegime.FORFAITAIRE:
        return forfait_tax(turnover)

    structure = LegalStructure(legal_structure)
    tax = 0.0
    if pre_tax_income > 0:
        if structure.is_individual:
            tax = progressive_tax(pre_tax_income)
        else:
            tax = pre_tax_income * (tax_rate / 100)

    return max(tax, minimum_tax(structure))


def calculate_total_taxes(
    corporate_tax: float, itemized_taxes: float, fixed_taxes: float
) -> float:
    """Charge fiscale totale : IS/IRPP + taxes ponctuelles + taxes fixes."""
    return corporate_tax + itemized_taxes + fixed_taxes
