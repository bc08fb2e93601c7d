import pytest

from assumptions import AssumptionSet
from core.config import MarketData
from reporting import market_opportunity


def test_saas_run_rate(flat_assumptions, small_market):
    opp = market_opportunity(flat_assumptions, small_market)
    assert opp.target_dealerships == 570
    assert opp.marketplace_users == 570
    assert opp.monthly_saas_revenue == pytest.approx(569_430.0)
    assert opp.annual_saas_revenue == pytest.approx(6_833_160.0)


def test_other_streams(flat_assumptions, small_market):
    opp = market_opportunity(flat_assumptions, small_market)
    assert opp.website_revenue == pytest.approx(570 * 500 * 12)
    assert opp.total_transactions == pytest.approx(11_400)
    assert opp.total_transaction_value == pytest.approx(1.14e9)
    assert opp.transaction_fee_revenue == pytest.approx(5.7e6)
    assert opp.total_leads == 570 * 500
    assert opp.lead_gen_revenue == pytest.approx(42_750_000.0)


def test_missing_price_uses_market_truck_price(small_market):
    opp = market_opportunity(AssumptionSet(avg_transaction_price=None), small_market)
    assert opp.total_transaction_value == pytest.approx(11_400 * 158993.0)


def test_first_year_implementations():
    plan = (1,) + (0,) * 11 + (1,)
    opp = market_opportunity(AssumptionSet(implementation_plan=plan))
    assert opp.implementation_annual_revenue == pytest.approx(500000.0)
    # months 3..11 of the first year
    assert opp.maintenance_annual_revenue == pytest.approx(9 * 7500.0)


def test_totals(flat_assumptions):
    opp = market_opportunity(flat_assumptions)
    assert opp.total_revenue - opp.income_statement_revenue == pytest.approx(opp.lead_gen_revenue)
    assert opp.subscription_revenue == pytest.approx(opp.annual_saas_revenue + opp.website_revenue)


def test_total_addressable_market(flat_assumptions):
    opp = market_opportunity(flat_assumptions, MarketData())
    assert opp.total_addressable_market == pytest.approx(3_410_392_000.0)


def test_ltv_cac():
    opp = market_opportunity(AssumptionSet())
    assert opp.ltv_cac_ratio == pytest.approx(153_916.0 / 15000.0)
    assert market_opportunity(AssumptionSet(customer_acquisition_cost=0.0)).ltv_cac_ratio is None
