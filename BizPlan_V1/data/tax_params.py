"""
Paramètres fiscaux (simplifiés) utilisés par le calculateur d'impôt.
"""

from typing import Dict, List, Tuple

# --- Régime forfaitaire ---
FORFAIT_TURNOVER_THRESHOLD = 10_000.0  # CA couvert par l'impôt de base
FORFAIT_BASE_TAX = 400.0
FORFAIT_EXCESS_RATE = 0.03  # sur la part de CA au-delà du seuil

# --- Régime réel : barème progressif IRPP (personnes physiques) ---
# (plafond de la tranche, taux marginal)
IRPP_BRACKETS: List[Tuple[float, float]] = [
    (5_000.0, 0.0),
    (10_000.0, 0.15),
    (20_000.0, 0.25),
    (30_000.0, 0.30),
    (40_000.0, 0.33),
    (50_000.0, 0.36),
    (70_000.0, 0.38),
    (float("inf"), 0.40),
]

# --- Minimum d'impôt par forme juridique ---
MIN_TAX_INDIVIDUAL = 300.0
MIN_TAX_COMPANY = 500.0
MIN_TAX_BY_STRUCTURE: Dict[str, float] = {
    "PP": MIN_TAX_INDIVIDUAL,
    "SUARL": MIN_TAX_COMPANY,
    "SARL": MIN_TAX_COMPANY,
    "SA": MIN_TAX_COMPANY,
}
