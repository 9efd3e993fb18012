import pytest

from BizPlan_V1.core.results import YearlyResults
from BizPlan_V1.domain import (
    BusinessPlanData,
    EquipmentItem,
    ExternalCharges,
    ProductItem,
    RawMaterialItem,
)


def _make_year(**values) -> YearlyResults:
    fields = {name: 0.0 for name in YearlyResults.model_fields}
    fields.update(values)
    return YearlyResults(**fields)


@pytest.fixture
def make_year():
    """Build a YearlyResults with every line at 0 except the given ones."""
    return _make_year


@pytest.fixture
def simple_plan() -> BusinessPlanData:
    """One product, one material, two charges, one machine, no staff, no loan."""
    return BusinessPlanData(
        project_title="Atelier test",
        legal_structure="SARL",
        equipments=[
            EquipmentItem(name="Machine", price_unit_ht=10000, quantity=1, tva_rate=19, duration=5)
        ],
        products=[ProductItem(name="Produit", price_unit=100, quantity_annual=1000)],
        raw_materials=[RawMaterialItem(name="Matière", cost_unit=20, quantity_annual=1000)],
        external_charges=ExternalCharges(rent=10000, telecom=2000),
        tax_regime="reel",
        tax_rate=20,
        tcl_rate=1,
        stamps_and_registration=100,
        fixed_taxes=50,
        discount_rate=10,
        projection_years=3,
        cruise_year=2,
        loan_amount=0,
        bank_loan=0,
    )
