"""
Plan d'affaires : agrégat racine des hypothèses saisies par l'utilisateur.

Le moteur de projection ne lit que ce modèle ; l'UI le crée et le modifie,
puis redemande un calcul complet après chaque édition.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from BizPlan_V1.data.finance_params import (
    DEFAULT_CRUISE_YEAR,
    DEFAULT_DISCOUNT_RATE,
    DEFAULT_FOPROLOS_RATE,
    DEFAULT_LOAN_DURATION_MONTHS,
    DEFAULT_LOAN_RATE_ANNUAL,
    DEFAULT_PROJECTION_YEARS,
    DEFAULT_TAX_RATE,
    DEFAULT_TCL_RATE,
    DEFAULT_TFP_RATE,
)
from BizPlan_V1.domain.equipment import EquipmentItem
from BizPlan_V1.domain.operations import ExternalCharges, ProductItem, RawMaterialItem
from BizPlan_V1.domain.staff import PersonnelItem
from BizPlan_V1.domain.types import CostMode, LegalStructure, TaxRegime
from BizPlan_V1.utils import load_and_validate

logger = logging.getLogger(__name__)


class YearOverride(BaseModel):
    """Corrections manuelles d'une année du tableau d'exploitation.

    Un champ à None garde la valeur calculée. Les valeurs renseignées
    remplacent le calcul avant le calcul des impôts ; une ligne inconnue
    (impôts, résultat, cash-flow) est refusée au chargement.
    """

    model_config = ConfigDict(extra="forbid")

    turnover: Optional[float] = None
    materials_cost: Optional[float] = None
    personnel_cost: Optional[float] = None
    total_gross_salary: Optional[float] = None
    cnss: Optional[float] = None
    tfp: Optional[float] = None
    foprolos: Optional[float] = None
    services_exterieurs: Optional[float] = None
    autres_services_exterieurs: Optional[float] = None
    external_charges_total: Optional[float] = None
    amortization: Optional[float] = None
    financial_charges: Optional[float] = None


class BusinessPlanData(BaseModel):
    project_title: str = ""
    legal_structure: LegalStructure = LegalStructure.PP

    # Investissement et financement
    equipments: List[EquipmentItem] = Field(default_factory=list)
    startup_costs: float = 0.0  # frais d'établissement
    working_capital: float = 0.0  # fonds de roulement (BFR)
    personal_contribution: float = 0.0
    grant_amount: float = 0.0  # subventions
    dotation: float = 0.0
    bank_loan: float = 0.0  # crédits bancaires (plan de financement)
    other_funding: float = 0.0

    # Crédit
    loan_amount: float = 0.0  # 0 => on reprend bank_loan
    loan_duration: int = DEFAULT_LOAN_DURATION_MONTHS  # mois
    loan_interest_rate: float = DEFAULT_LOAN_RATE_ANNUAL  # % annuel

    # Exploitation
    products: List[ProductItem] = Field(default_factory=list)
    raw_materials: List[RawMaterialItem] = Field(default_factory=list)
    raw_materials_cost_mode: CostMode = CostMode.DETAILED
    raw_materials_cost_percentage: float = 0.0
    personnel: List[PersonnelItem] = Field(default_factory=list)
    personnel_cost_mode: CostMode = CostMode.DETAILED
    personnel_cost_percentage: float = 0.0
    external_charges: ExternalCharges = Field(default_factory=ExternalCharges)

    # Charges sociales (% de la masse salariale brute)
    social_charges_rate: float = 0.0  # CNSS
    tfp_rate: float = DEFAULT_TFP_RATE  # formation professionnelle
    foprolos_rate: float = DEFAULT_FOPROLOS_RATE  # fonds de logement

    # Fiscalité
    tax_regime: TaxRegime = TaxRegime.REEL
    tax_rate: float = DEFAULT_TAX_RATE
    fixed_taxes: float = 0.0
    tcl_rate: float = DEFAULT_TCL_RATE  # taxe locale, % du CA
    stamps_and_registration: float = 0.0

    # Prévisions
    turnover_growth_rate: float = 0.0
    expenses_growth_rate: float = 0.0
    discount_rate: float = DEFAULT_DISCOUNT_RATE
    projection_years: int = Field(default=DEFAULT_PROJECTION_YEARS, ge=1)
    cruise_year: int = DEFAULT_CRUISE_YEAR

    # Corrections manuelles, clé = année (1-based)
    manual_projections: Dict[int, YearOverride] = Field(default_factory=dict)

    @property
    def effective_loan_amount(self) -> float:
        """Montant emprunté : le crédit saisi, sinon le crédit du plan de financement."""
        return self.loan_amount or self.bank_loan

    def override_for_year(self, year: int) -> Optional[YearOverride]:
        return self.manual_projections.get(year)


def load_plan(path: Path | str) -> BusinessPlanData:
    """Charge un plan d'affaires depuis un fichier JSON et le valide via Pydantic.

    Args:
        path: Chemin du fichier JSON (objet racine = champs de `BusinessPlanData`).

    Returns:
        Le plan validé.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ValueError: Si le contenu ne respecte pas le modèle.
    """
    path = Path(path)
    try:
        plan = load_and_validate(path, BusinessPlanData)
    except ValidationError as e:
        raise ValueError(f"Plan d'affaires invalide ({path.name}): {e}") from e
    logger.debug(
        "Plan '%s' chargé : %d équipements, %d produits, horizon %d ans",
        plan.project_title,
        len(plan.equipments),
        len(plan.products),
        plan.projection_years,
    )
    return plan
