import pytest

from reporting import compare_penetration_scenarios, market_opportunity, scenarios_to_frame


@pytest.fixture
def scenarios(ramped_assumptions, cash):
    return compare_penetration_scenarios(ramped_assumptions, cash=cash)


def test_default_comparison_points(scenarios):
    assert [s.penetration_percent for s in scenarios] == [5.0, 10.0, 15.0, 25.0, 35.0]
    assert [s.dealer_count for s in scenarios] == [191, 382, 572, 954, 1336]


def test_annual_revenue_matches_opportunity(scenarios, ramped_assumptions):
    opp = market_opportunity(ramped_assumptions.with_values(market_penetration=25.0))
    assert scenarios[3].annual_revenue_millions == pytest.approx(opp.total_revenue / 1e6)


def test_higher_penetration_projects_more_revenue(scenarios):
    assert scenarios[-1].projected_revenue_millions > scenarios[0].projected_revenue_millions
    assert scenarios[-1].ending_cash_balance > scenarios[0].ending_cash_balance


def test_custom_points(flat_assumptions):
    points = compare_penetration_scenarios(flat_assumptions, points=[15])
    assert len(points) == 1
    assert points[0].dealer_count == 572


def test_scenarios_to_frame(scenarios):
    df = scenarios_to_frame(scenarios)
    assert list(df.columns) == [
        "penetration_percent",
        "dealer_count",
        "annual_revenue_millions",
        "projected_revenue_millions",
        "ending_cash_balance",
    ]
    assert len(df) == 5
