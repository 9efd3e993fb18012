"""
Échéancier d'emprunt à annuités constantes (mensualités, cumul annuel).
"""

import logging
from typing import List

from BizPlan_V1.core.results import LoanRepaymentRow

logger = logging.getLogger(__name__)


def monthly_payment(amount: float, duration_months: int, monthly_rate: float) -> float:
    """Mensualité constante M = P·i·(1+i)^n / ((1+i)^n - 1), ou P/n sans intérêt."""
    if monthly_rate <= 0:
        return amount / duration_months
    factor = (1 + monthly_rate) ** duration_months
    return amount * monthly_rate * factor / (factor - 1)


def calculate_loan_repayment(
    amount: float,
    duration_months: int,
    annual_rate: float,
    projection_years: int,
) -> List[LoanRepaymentRow]:
    """Simule le remboursement mois par mois et le cumule par année.

    L'échéancier couvre `projection_years` années, même si le prêt court
    plus longtemps : le capital restant dû est alors non nul en fin d'horizon.

    Args:
        amount: Capital emprunté.
        duration_months: Durée du prêt en mois.
        annual_rate: Taux d'intérêt annuel en %.
        projection_years: Nombre d'années à produire.

    Returns:
        Une ligne par année, vide si le capital ou la durée est nul(le).
    """
    if amount <= 0 or duration_months <= 0:
        return []

    monthly_rate = annual_rate / 100 / 12
    payment = monthly_payment(amount, duration_months, monthly_rate)

    remaining_balance = amount
    schedule: List[LoanRepaymentRow] = []

    for year in range(1, projection_years + 1):
        yearly_principal = 0.0
        yearly_interest = 0.0

        for _ in range(12):
            if remaining_balance <= 0:
                break
            interest = remaining_balance * monthly_rate
            principal = min(remaining_balance, payment - interest)

            yearly_interest += interest
            yearly_principal += principal
            remaining_balance -= principal

        schedule.append(
            LoanRepaymentRow(
                year=year,
                principal=yearly_principal,
                interest=yearly_interest,
                total=yearly_principal + yearly_interest,
                remaining_balance=max(0.0, remaining_balance),
            )
        )

    logger.debug(
        "Emprunt %.2f sur %d mois à %.2f%% : mensualité %.2f, reste dû fin d'horizon %.2f",
        amount,
        duration_months,
        annual_rate,
        payment,
        max(0.0, remaining_balance),
    )
    return schedule
