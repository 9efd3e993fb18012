# bizplan/domain/types.py
from enum import Enum


class TaxRegime(str, Enum):
    # Values aligned with the JSON plan files
    FORFAITAIRE = "forfaitaire"
    REEL = "reel"


class LegalStructure(str, Enum):
    PP = "PP"  # personne physique (entreprise individuelle)
    SUARL = "SUARL"
    SARL = "SARL"
    SA = "SA"
    AUTO_ENTREPRENEUR = "Auto entrepreneur"

    @property
    def is_individual(self) -> bool:
        return self is LegalStructure.PP


class CostMode(str, Enum):
    """Saisie détaillée (lignes) ou en pourcentage du CA."""

    DETAILED = "detailed"
    PERCENTAGE = "percentage"
