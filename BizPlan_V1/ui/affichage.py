import math
from typing import List, Sequence, Tuple

from BizPlan_V1.console_style import by_sign, style
from BizPlan_V1.core.results import (
    AmortizationRow,
    FinancingPlan,
    InvestmentResults,
    LoanRepaymentRow,
    OperatingResults,
    Summary,
    YearlyResults,
)

LABEL_WIDTH = 34
COL_WIDTH = 13


def format_amount(x: float) -> str:
    """Format a float as an amount string (no decimals, thin spaces)."""
    if math.isinf(x):
        return "∞"
    return f"{x:,.0f}".replace(",", " ")


def _pct(x: float) -> str:
    return f"{x:5.1f}%"


def _row(label: str, values: Sequence[float]) -> str:
    cells = "".join(f"{format_amount(v):>{COL_WIDTH}}" for v in values)
    return f"{label:<{LABEL_WIDTH}}{cells}"


def _header(title: str, n_years: int) -> str:
    cells = "".join(f"{'An ' + str(i + 1):>{COL_WIDTH}}" for i in range(n_years))
    return style(f"{title:<{LABEL_WIDTH}}{cells}", "bold")


# Lignes du tableau d'exploitation : (libellé, attribut)
INCOME_STATEMENT_LINES: List[Tuple[str, str]] = [
    ("Chiffre d'affaires", "turnover"),
    ("Achats consommés (matières)", "materials_cost"),
    ("Charges de personnel", "personnel_cost"),
    ("  dont salaires bruts", "total_gross_salary"),
    ("  dont CNSS", "cnss"),
    ("  dont TFP", "tfp"),
    ("  dont FOPROLOS", "foprolos"),
    ("Services extérieurs", "services_exterieurs"),
    ("Autres services extérieurs", "autres_services_exterieurs"),
    ("Dotations aux amortissements", "amortization"),
    ("Charges financières", "financial_charges"),
    ("Total charges", "total_expenses"),
    ("Résultat avant impôt", "pre_tax_income"),
    ("Impôt sur les bénéfices", "corporate_tax"),
    ("Total impôts et taxes", "total_taxes"),
    ("Résultat net", "net_result"),
    ("Cash-flow", "cash_flow"),
    ("Cash-flow actualisé", "discounted_cash_flow"),
]


def print_income_statement(years: Sequence[YearlyResults], title: str) -> None:
    print()
    print(_header(title, len(years)))
    print("=" * (LABEL_WIDTH + COL_WIDTH * len(years)))
    for label, attr in INCOME_STATEMENT_LINES:
        print(_row(label, [getattr(y, attr) for y in years]))
    print("=" * (LABEL_WIDTH + COL_WIDTH * len(years)))


def print_amortization_table(rows: Sequence[AmortizationRow], n_years: int) -> None:
    print()
    print(_header("Tableau d'amortissement", n_years))
    print("-" * (LABEL_WIDTH + COL_WIDTH * n_years))
    for row in rows:
        label = f"{row.name[:20]} ({row.duration} ans)"
        print(_row(label, row.yearly_values))
    totals = [sum(r.yearly_values[i] for r in rows) for i in range(n_years)]
    print(_row("Total dotations", totals))


def print_loan_schedule(rows: Sequence[LoanRepaymentRow]) -> None:
    print("\n🏦 Échéancier de l'emprunt")
    if not rows:
        print("   (aucun emprunt)")
        return
    print(
        f"{'Année':>6}{'Capital':>{COL_WIDTH}}{'Intérêts':>{COL_WIDTH}}"
        f"{'Annuité':>{COL_WIDTH}}{'Reste dû':>{COL_WIDTH}}"
    )
    for r in rows:
        print(
            f"{r.year:>6}{format_amount(r.principal):>{COL_WIDTH}}"
            f"{format_amount(r.interest):>{COL_WIDTH}}"
            f"{format_amount(r.total):>{COL_WIDTH}}"
            f"{format_amount(r.remaining_balance):>{COL_WIDTH}}"
        )


def print_financing_plan(investment: InvestmentResults, plan: FinancingPlan) -> None:
    print("\n💼 Plan de financement")
    print(f"🧰 Investissement HT : {format_amount(investment.total_ht)}")
    print(f"   TVA               : {format_amount(investment.total_tva)}")
    print(f"   Investissement TTC: {format_amount(investment.total_ttc)}")
    print(f"📥 Emplois           : {format_amount(plan.uses)}")
    print(f"📤 Ressources        : {format_amount(plan.resources)}")
    gap = format_amount(plan.gap)
    if plan.balanced:
        print(f"✔ Écart             : {style(gap, 'green')}")
    else:
        print(f"⚠ Écart             : {style(gap, 'yellow')} (plan non équilibré)")


def print_summary(summary: Summary) -> None:
    print(f"\n{'─' * 60}")
    print(style("📊 Indicateurs de rentabilité", "bold", "cyan"))
    print(f"{'─' * 60}")
    print(f"Investissement (HT)          : {format_amount(summary.total_investment)}")
    print(f"VAN                          : {by_sign(summary.van, format_amount(summary.van))}")
    if summary.irr_converged:
        print(f"TRI                          : {_pct(summary.irr)}")
    else:
        print("TRI                          : non concluant")
    if summary.payback is None:
        print("Délai de récupération        : " + style("non récupéré", "red"))
    else:
        print(
            f"Délai de récupération        : {summary.payback.years} an(s) "
            f"{summary.payback.months} mois"
        )
    print(f"Année de croisière           : {summary.cruise_year}")
    print(f"ROI (année de croisière)     : {_pct(summary.roi)}")
    print(f"Charges fixes                : {format_amount(summary.fixed_costs_cruise)}")
    print(f"Charges variables            : {format_amount(summary.variable_costs_cruise)}")
    print(f"Marge sur coûts variables    : {format_amount(summary.contribution_margin_cruise)}")
    print(f"Seuil de rentabilité         : {format_amount(summary.break_even_point)}")
    if summary.first_profitable_year is not None:
        print(f"1ère année bénéficiaire      : {summary.first_profitable_year}")
    print(f"{'─' * 60}\n")


def print_operating_results(results: OperatingResults, title: str = "") -> None:
    """Affiche la projection complète (tableaux + synthèse)."""
    n_years = len(results.years)
    print_income_statement(
        results.years, f"Tableau d'exploitation {title}".strip()
    )
    print_amortization_table(results.detailed_amortization, n_years)
    print_loan_schedule(results.loan_repayment)
    print_summary(results.summary)
