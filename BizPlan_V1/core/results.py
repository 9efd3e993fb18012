"""
Structures de sortie du moteur de projection.

Tous les modèles sont figés (frozen) : un résultat n'est jamais modifié
après calcul, il est recalculé en entier si le plan change.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class InvestmentResults(_Frozen):
    total_ht: float
    total_tva: float
    total_ttc: float


class FinancingPlan(_Frozen):
    """Équilibre emplois / ressources du plan de financement."""

    uses: float
    resources: float
    gap: float  # ressources - emplois
    balanced: bool


class AmortizationRow(_Frozen):
    name: str
    ht: float
    duration: int
    yearly_values: List[float]


class LoanRepaymentRow(_Frozen):
    year: int
    principal: float
    interest: float
    total: float
    remaining_balance: float


class PersonnelCost(_Frozen):
    total_gross_salary: float
    cnss: float  # sécurité sociale
    tfp: float  # taxe de formation professionnelle
    foprolos: float  # fonds de promotion du logement
    total_cost: float


class YearlyResults(_Frozen):
    """Tableau d'exploitation d'une année de projection."""

    turnover: float
    materials_cost: float
    personnel_cost: float
    total_gross_salary: float
    cnss: float
    tfp: float
    foprolos: float
    tcl: float
    itemized_taxes: float
    services_exterieurs: float
    autres_services_exterieurs: float
    external_charges_total: float
    amortization: float
    financial_charges: float
    total_expenses: float
    pre_tax_income: float
    corporate_tax: float
    total_taxes: float
    net_result: float
    cash_flow: float
    discounted_cash_flow: float


class Payback(_Frozen):
    years: int
    months: int


class CostStructure(_Frozen):
    """Décomposition charges fixes / variables d'une année."""

    fixed_costs: float
    variable_costs: float
    contribution_margin: float
    break_even_point: float


class Summary(_Frozen):
    van: float  # valeur actuelle nette
    payback: Optional[Payback]  # None = investissement non récupéré
    irr: float  # TRI en %, 0 si le solveur ne converge pas
    irr_converged: bool
    roi: float  # résultat net de l'année de croisière / investissement, en %
    break_even_point: float  # inf si marge sur coûts variables <= 0
    total_investment: float
    fixed_costs_cruise: float
    variable_costs_cruise: float
    contribution_margin_cruise: float
    cruise_year: int
    cruise_year_data: YearlyResults
    first_profitable_year: Optional[int]


class CumulativeCashFlowPoint(_Frozen):
    year: int
    cumulative: float
    investment: float


class BreakEvenPoint(_Frozen):
    year: int
    turnover: float
    break_even_point: float


class CVPPoint(_Frozen):
    percentage: int
    revenue: float
    fixed_costs: float
    total_costs: float


class OperatingResults(_Frozen):
    years: List[YearlyResults]
    detailed_amortization: List[AmortizationRow]
    loan_repayment: List[LoanRepaymentRow]
    summary: Summary
    cumulative_cf_series: List[CumulativeCashFlowPoint]
    break_even_evolution: List[BreakEvenPoint]
    cvp_data: List[CVPPoint]
