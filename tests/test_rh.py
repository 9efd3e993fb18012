import pytest

from BizPlan_V1.core.rh import calculate_personnel_cost
from BizPlan_V1.domain import PersonnelItem, YearlyStaffData


def test_gross_salary_and_statutory_charges():
    staff = [PersonnelItem(position="Vendeur", salary_brut=1000, count=2, months_worked=12)]

    cost = calculate_personnel_cost(staff, 10, 2, 1, target_year=1)

    assert cost.total_gross_salary == pytest.approx(24000)
    assert cost.cnss == pytest.approx(2400)
    assert cost.tfp == pytest.approx(480)
    assert cost.foprolos == pytest.approx(240)
    assert cost.total_cost == pytest.approx(27120)


def test_employee_costs_nothing_before_start_year():
    staff = [PersonnelItem(salary_brut=1500, count=1, months_worked=12, start_year=3)]

    costs = [
        calculate_personnel_cost(staff, 17.07, 2, 1, target_year=year).total_cost
        for year in (1, 2, 3, 4)
    ]

    assert costs[0] == 0
    assert costs[1] == 0
    assert costs[2] == pytest.approx(18000 * 1.2007)
    assert costs[3] == pytest.approx(costs[2])


def test_missing_start_year_means_year_one():
    staff = [PersonnelItem(salary_brut=1000, count=1, months_worked=10, start_year=None)]

    cost = calculate_personnel_cost(staff, 0, 0, 0, target_year=1)

    assert cost.total_gross_salary == pytest.approx(10000)


def test_yearly_override_replaces_count_and_salary_for_that_year_only():
    staff = [
        PersonnelItem(
            salary_brut=1000,
            count=1,
            months_worked=12,
            yearly_data=[YearlyStaffData(year=2, count=3, salary_brut=1200)],
        )
    ]

    year1 = calculate_personnel_cost(staff, 0, 0, 0, target_year=1)
    year2 = calculate_personnel_cost(staff, 0, 0, 0, target_year=2)
    year3 = calculate_personnel_cost(staff, 0, 0, 0, target_year=3)

    assert year1.total_gross_salary == pytest.approx(12000)
    assert year2.total_gross_salary == pytest.approx(3 * 1200 * 12)
    assert year3.total_gross_salary == pytest.approx(12000)
