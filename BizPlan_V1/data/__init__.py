"""
Point d'entrée data : tables de paramètres fiscaux/financiers et plan de démo.
"""

from pathlib import Path

DEMO_PLAN_PATH = Path(__file__).parent / "demo_plan.json"
