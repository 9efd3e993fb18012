import pytest

from BizPlan_V1.core.loan import calculate_loan_repayment
from BizPlan_V1.core.operating import calculate_operating_results, clamp_cruise_year
from BizPlan_V1.domain import BusinessPlanData, EquipmentItem, LegalStructure


def test_one_yearly_result_per_projection_year(simple_plan):
    results = calculate_operating_results(simple_plan)

    assert len(results.years) == 3
    assert len(results.break_even_evolution) == 3
    assert len(results.cumulative_cf_series) == 3
    assert len(results.cvp_data) == 7
    assert results.detailed_amortization[0].yearly_values == pytest.approx([2000] * 3)
    assert results.loan_repayment == []
    assert all(y.financial_charges == 0 for y in results.years)


def test_recomputation_is_identical(simple_plan):
    first = calculate_operating_results(simple_plan)
    second = calculate_operating_results(simple_plan)

    assert first.model_dump() == second.model_dump()


def test_investment_base_excludes_vat_and_feeds_npv(simple_plan):
    results = calculate_operating_results(simple_plan)
    summary = results.summary

    assert summary.total_investment == pytest.approx(10000)
    assert summary.van == pytest.approx(
        sum(y.discounted_cash_flow for y in results.years) - 10000
    )


def test_loan_interest_becomes_financial_charges(simple_plan):
    plan = simple_plan.model_copy(
        update={"loan_amount": 20000, "loan_duration": 24, "loan_interest_rate": 12}
    )

    results = calculate_operating_results(plan)
    expected = calculate_loan_repayment(20000, 24, 12, 3)

    assert len(results.loan_repayment) == 3
    for year, row in zip(results.years, expected):
        assert year.financial_charges == pytest.approx(row.interest)
    assert results.years[0].financial_charges > results.years[1].financial_charges


def test_bank_loan_used_when_no_loan_amount(simple_plan):
    plan = simple_plan.model_copy(update={"bank_loan": 10000, "loan_interest_rate": 0})

    results = calculate_operating_results(plan)

    assert results.loan_repayment[0].principal == pytest.approx(10000 * 12 / 84)
    assert results.loan_repayment[0].interest == 0


def test_cruise_year_summary(simple_plan):
    results = calculate_operating_results(simple_plan)
    summary = results.summary
    cruise = results.years[1]

    assert summary.cruise_year == 2
    assert summary.cruise_year_data == cruise
    assert summary.variable_costs_cruise == pytest.approx(cruise.materials_cost)
    assert summary.contribution_margin_cruise == pytest.approx(
        cruise.turnover - cruise.materials_cost
    )
    assert summary.break_even_point == pytest.approx(
        summary.fixed_costs_cruise * cruise.turnover / summary.contribution_margin_cruise
    )
    assert summary.roi == pytest.approx(cruise.net_result / 10000 * 100)
    assert summary.first_profitable_year == 1


@pytest.mark.parametrize("requested, expected", [(0, 1), (-2, 1), (2, 2), (10, 3)])
def test_cruise_year_is_clamped_into_horizon(requested, expected):
    assert clamp_cruise_year(requested, 3) == expected


def test_out_of_range_cruise_year_uses_last_year(simple_plan):
    plan = simple_plan.model_copy(update={"cruise_year": 9})

    results = calculate_operating_results(plan)

    assert results.summary.cruise_year == 3
    assert results.summary.cruise_year_data == results.years[-1]


def test_profitable_plan_has_irr_and_quick_payback(simple_plan):
    summary = calculate_operating_results(simple_plan).summary

    assert summary.irr_converged is True
    assert summary.irr > 0
    assert summary.payback is not None
    assert (summary.payback.years, summary.payback.months) == (0, 3)
    assert summary.van > 0


def test_irr_falls_back_to_zero_without_investment(simple_plan):
    plan = simple_plan.model_copy(update={"equipments": []})

    summary = calculate_operating_results(plan).summary

    assert summary.total_investment == 0
    assert summary.irr == 0
    assert summary.irr_converged is False
    assert (summary.payback.years, summary.payback.months) == (0, 0)
    assert summary.roi == 0


def test_unprofitable_plan_is_never_paid_back(simple_plan):
    plan = simple_plan.model_copy(
        update={
            "products": [],
            "equipments": [EquipmentItem(price_unit_ht=50000, quantity=1, duration=10)],
        }
    )

    results = calculate_operating_results(plan)

    assert results.summary.payback is None
    assert results.summary.van < -50000
    assert results.summary.first_profitable_year is None
    assert all(p.break_even_point == 0 for p in results.break_even_evolution)


def test_cumulative_series_tracks_investment(simple_plan):
    results = calculate_operating_results(simple_plan)

    cash_flows = [y.cash_flow for y in results.years]
    assert results.cumulative_cf_series[-1].cumulative == pytest.approx(sum(cash_flows))
    assert {p.investment for p in results.cumulative_cf_series} == {10000}


def test_irr_falls_back_to_zero_when_flows_never_recover_the_investment():
    plan = BusinessPlanData(
        legal_structure=LegalStructure.SARL,
        equipments=[EquipmentItem(name="Machine", price_unit_ht=10000)],
        projection_years=3,
    )

    results = calculate_operating_results(plan)

    assert all(y.cash_flow < 0 for y in results.years)
    assert results.summary.total_investment == 10000
    assert results.summary.irr == 0
    assert results.summary.irr_converged is False


def test_plan_without_any_flow_has_no_conclusive_irr():
    plan = BusinessPlanData(
        legal_structure=LegalStructure.AUTO_ENTREPRENEUR, tcl_rate=0
    )

    summary = calculate_operating_results(plan).summary

    assert summary.irr == 0
    assert summary.irr_converged is False
