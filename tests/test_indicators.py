import math

import pytest

from BizPlan_V1.core.indicators import (
    break_even_evolution,
    cost_structure,
    cumulative_cash_flow_series,
    cvp_curve,
    first_profitable_year,
    payback_period,
    solve_irr,
)


def test_break_even_at_cruise_year(make_year):
    year = make_year(turnover=100000, materials_cost=20000, total_expenses=70000)

    structure = cost_structure(year)

    assert structure.fixed_costs == pytest.approx(50000)
    assert structure.variable_costs == pytest.approx(20000)
    assert structure.contribution_margin == pytest.approx(80000)
    assert structure.break_even_point == pytest.approx(62500)


def test_fixed_costs_include_taxes_except_corporate_tax(make_year):
    year = make_year(
        turnover=100000,
        materials_cost=20000,
        total_expenses=70000,
        corporate_tax=3000,
        total_taxes=4000,
    )

    assert cost_structure(year).fixed_costs == pytest.approx(51000)


def test_break_even_undefined_without_contribution_margin(make_year):
    year = make_year(turnover=10000, materials_cost=12000, total_expenses=30000)

    assert math.isinf(cost_structure(year).break_even_point)
    assert break_even_evolution([year])[0].break_even_point == 0


def test_break_even_evolution_one_point_per_year(make_year):
    years = [
        make_year(turnover=100000, materials_cost=20000, total_expenses=70000),
        make_year(turnover=200000, materials_cost=40000, total_expenses=90000),
    ]

    evolution = break_even_evolution(years)

    assert [p.year for p in evolution] == [1, 2]
    assert evolution[0].break_even_point == pytest.approx(62500)
    assert evolution[1].turnover == pytest.approx(200000)
    assert evolution[1].break_even_point == pytest.approx(50000 * 200000 / 160000)


def test_cvp_curve_spans_zero_to_120_percent(make_year):
    year = make_year(turnover=100000, materials_cost=20000, total_expenses=70000)

    points = cvp_curve(year)

    assert [p.percentage for p in points] == [0, 20, 40, 60, 80, 100, 120]
    assert points[0].revenue == 0
    assert points[0].total_costs == pytest.approx(50000)
    assert points[5].revenue == pytest.approx(100000)
    assert points[5].total_costs == pytest.approx(70000)
    assert points[-1].revenue == pytest.approx(120000)
    assert all(p.fixed_costs == pytest.approx(50000) for p in points)


def test_cvp_curve_with_zero_turnover_has_no_variable_cost(make_year):
    points = cvp_curve(make_year(total_expenses=1000))

    assert all(p.total_costs == pytest.approx(1000) for p in points)


def test_payback_within_horizon():
    payback = payback_period([400, 800], 1000)

    assert (payback.years, payback.months) == (1, 9)


def test_payback_month_rounding_carries_into_next_year():
    payback = payback_period([500, 500, 500], 1000)

    assert (payback.years, payback.months) == (2, 0)


def test_payback_extrapolated_beyond_horizon():
    payback = payback_period([100, 200], 1000)

    assert (payback.years, payback.months) == (5, 6)


def test_payback_never_recovered():
    assert payback_period([100, -50], 1000) is None


def test_payback_without_investment_is_immediate():
    payback = payback_period([-100, -100], 0)

    assert (payback.years, payback.months) == (0, 0)


def test_irr_simple_cases():
    assert solve_irr([-1000, 1100]) == pytest.approx(0.10)
    assert solve_irr([-1000, 0, 1210]) == pytest.approx(0.10, abs=1e-6)


def test_irr_zeroes_net_present_value():
    rate = solve_irr([-100, 60, 60])

    assert rate is not None
    assert -100 + 60 / (1 + rate) + 60 / (1 + rate) ** 2 == pytest.approx(0, abs=1e-4)


def test_irr_diverging_solver_reports_failure():
    assert solve_irr([100, 100]) is None


def test_cumulative_series_and_first_profitable_year(make_year):
    years = [
        make_year(cash_flow=-500, net_result=-800),
        make_year(cash_flow=1500, net_result=1200),
        make_year(cash_flow=2000, net_result=1700),
    ]

    series = cumulative_cash_flow_series(years, 3000)

    assert [p.cumulative for p in series] == pytest.approx([-500, 1000, 3000])
    assert all(p.investment == 3000 for p in series)
    assert first_profitable_year(years) == 2
    assert first_profitable_year(years[:1]) is None


def test_irr_without_any_future_flow_has_no_rate():
    # dérivée nulle : un seul flux à t=0
    assert solve_irr([-1000]) is None


def test_irr_gives_up_after_the_iteration_limit(monkeypatch):
    assert solve_irr([-1000, 1500]) == pytest.approx(0.5)

    monkeypatch.setattr("BizPlan_V1.core.indicators.IRR_MAX_ITERATIONS", 1)

    assert solve_irr([-1000, 1500]) is None


def test_irr_of_all_zero_flows_is_not_a_rate():
    assert solve_irr([0, 0, 0]) is None
