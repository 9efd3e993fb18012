"""
Domain objects for BizPlan.

The domain layer holds the records the user fills in: equipment,
staff, products, raw materials, external charges and the business
plan aggregate.  These are pydantic models with no behaviour beyond
small derived properties, so they stay trivially serializable.
"""

from .equipment import EquipmentItem
from .operations import ExternalCharges, ProductItem, RawMaterialItem
from .plan import BusinessPlanData, YearOverride, load_plan
from .staff import PersonnelItem, YearlyStaffData
from .types import CostMode, LegalStructure, TaxRegime

__all__ = [
    "BusinessPlanData",
    "CostMode",
    "EquipmentItem",
    "ExternalCharges",
    "LegalStructure",
    "PersonnelItem",
    "ProductItem",
    "RawMaterialItem",
    "TaxRegime",
    "YearOverride",
    "YearlyStaffData",
    "load_plan",
]
