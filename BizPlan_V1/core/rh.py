"""
Moteur RH : masse salariale brute et charges sociales par année.
"""

from typing import Iterable

from BizPlan_V1.core.results import PersonnelCost
from BizPlan_V1.data.finance_params import DEFAULT_FOPROLOS_RATE, DEFAULT_TFP_RATE
from BizPlan_V1.domain.staff import PersonnelItem


def gross_salary_for_year(employe: PersonnelItem, target_year: int) -> float:
    """Salaire brut annuel d'une ligne de personnel pour `target_year` (1-based).

    Rien avant l'année d'embauche ; sinon effectif × salaire × mois travaillés,
    avec la surcharge de l'année si elle existe.
    """
    if employe.first_year > target_year:
        return 0.0

    year_data = employe.data_for_year(target_year)
    if year_data is not None:
        return year_data.salary_brut * year_data.count * employe.months_worked
    return employe.salary_brut * employe.count * employe.months_worked


def calculate_personnel_cost(
    personnel: Iterable[PersonnelItem],
    social_charges_rate: float,
    tfp_rate: float = DEFAULT_TFP_RATE,
    foprolos_rate: float = DEFAULT_FOPROLOS_RATE,
    target_year: int = 1,
) -> PersonnelCost:
    """Calcule le coût du personnel d'une année.

    Args:
        personnel: Lignes de personnel du plan.
        social_charges_rate: Taux CNSS en % du brut.
        tfp_rate: Taux de la taxe de formation professionnelle en %.
        foprolos_rate: Taux FOPROLOS en %.
        target_year: Année ciblée (1-based).

    Returns:
        PersonnelCost : brut, chaque charge, et coût total (brut + charges).
    """
    total_gross_salary = sum(gross_salary_for_year(p, target_year) for p in personnel)

    cnss = total_gross_salary * (social_charges_rate / 100)
    tfp = total_gross_salary * (tfp_rate / 100)
    foprolos = total_gross_salary * (foprolos_rate / 100)

    return PersonnelCost(
        total_gross_salary=total_gross_salary,
        cnss=cnss,
        tfp=tfp,
        foprolos=foprolos,
        total_cost=total_gross_salary + cnss + tfp + foprolos,
    )
