"""
Cache de résultats côté appelant, indexé par l'empreinte du plan.

Une instance par session/requête : le moteur lui-même reste sans état.
"""

import hashlib
from typing import Dict

from BizPlan_V1.core.operating import calculate_operating_results
from BizPlan_V1.core.results import OperatingResults
from BizPlan_V1.domain.plan import BusinessPlanData


def plan_fingerprint(plan: BusinessPlanData) -> str:
    """Empreinte SHA-256 du plan sérialisé en JSON."""
    return hashlib.sha256(plan.model_dump_json().encode("utf-8")).hexdigest()


class ResultsCache:
    """Mémorise les `OperatingResults` des derniers plans calculés."""

    def __init__(self, max_entries: int = 32):
        self.max_entries = max_entries
        self._entries: Dict[str, OperatingResults] = {}
        self.hits = 0
        self.misses = 0

    def get(self, plan: BusinessPlanData) -> OperatingResults:
        key = plan_fingerprint(plan)
        results = self._entries.get(key)
        if results is not None:
            self.hits += 1
            return results

        self.misses += 1
        results = calculate_operating_results(plan)
        if len(self._entries) >= self.max_entries:
            # plus ancienne entrée d'abord (ordre d'insertion)
            self._entries.pop(next(iter(self._entries)))
        self._entries[key] = results
        return results

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
