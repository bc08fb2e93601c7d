import pytest

from assumptions import AssumptionSet
from core.utils import MonthPeriod, build_timeline
from engine.revenue import SEASONAL_FACTORS, ImplementationLedger, RevenueBreakdown, compose_month


@pytest.fixture
def may_2026():
    return MonthPeriod(index=9, year=2026, month=5)


def test_seasonal_factors_cover_calendar_year():
    assert len(SEASONAL_FACTORS) == 12
    assert SEASONAL_FACTORS[4] == 1.2


class TestComposeMonth:
    def test_seasonal_transaction_revenue(self, may_2026):
        a = AssumptionSet(
            transactions_per_customer=168.0,
            avg_transaction_price=158993.0,
            transaction_fee_rate=0.5,
        )
        rev = compose_month(9, may_2026, 100, a, ImplementationLedger())
        # 100 * (168/12 * 1.2) * 158993 * 0.005
        assert rev.transactions == pytest.approx(1680.0)
        assert rev.transaction_revenue == pytest.approx(1_335_541.2)

    def test_subscription_and_lead_gen(self, may_2026, flat_assumptions):
        rev = compose_month(9, may_2026, 100, flat_assumptions, ImplementationLedger())
        assert rev.saas_revenue == pytest.approx(99_900.0)
        assert rev.website_revenue == pytest.approx(50_000.0)
        assert rev.subscription_revenue == pytest.approx(149_900.0)
        assert rev.lead_gen_revenue == pytest.approx(100 * 500 / 12 * 150)

    def test_total_excludes_lead_gen(self, may_2026, flat_assumptions):
        rev = compose_month(9, may_2026, 100, flat_assumptions, ImplementationLedger())
        expected = (
            rev.subscription_revenue
            + rev.transaction_revenue
            + rev.implementation_revenue
            + rev.maintenance_revenue
        )
        assert rev.total_revenue == pytest.approx(expected)
        assert rev.total_revenue_with_lead_gen == pytest.approx(expected + rev.lead_gen_revenue)

    def test_no_customers_no_recurring_revenue(self, may_2026, flat_assumptions):
        rev = compose_month(9, may_2026, 0, flat_assumptions, ImplementationLedger())
        assert rev == RevenueBreakdown()

    def test_missing_transaction_inputs_use_fallbacks(self, may_2026):
        a = AssumptionSet(avg_transaction_price=None, transactions_per_customer=None)
        rev = compose_month(9, may_2026, 100, a, ImplementationLedger())
        assert rev.transaction_revenue == pytest.approx(1_335_541.2)


class TestImplementationsAndMaintenance:
    def _run(self, assumptions, n_months=29):
        ledger = ImplementationLedger()
        out = []
        for period in build_timeline("2025-08-01", n_months):
            out.append(compose_month(period.index, period, 0, assumptions, ledger))
        return out, ledger

    def test_maintenance_delay(self):
        plan = (0, 0, 0, 0, 0, 1)
        a = AssumptionSet(
            implementation_plan=plan,
            implementation_price=500000.0,
            maintenance_percentage=18.0,
            maintenance_start_month=3.0,
        )
        months, ledger = self._run(a)

        assert months[5].implementation_count == 1
        assert months[5].implementation_revenue == 500000.0
        for i in range(0, 8):
            assert months[i].maintenance_revenue == 0.0
        for i in range(8, 29):
            assert months[i].maintenance_revenue == pytest.approx(7500.0)
        assert len(ledger.projects) == 1

    def test_projects_accumulate(self):
        a = AssumptionSet(implementation_plan=(1, 0, 1), maintenance_start_month=3.0)
        months, _ = self._run(a, n_months=8)
        assert months[3].maintenance_revenue == pytest.approx(7500.0)
        assert months[4].maintenance_revenue == pytest.approx(7500.0)
        assert months[5].maintenance_revenue == pytest.approx(15000.0)

    def test_multiple_implementations_in_one_month(self):
        a = AssumptionSet(implementation_plan=(2,), implementation_price=250000.0)
        months, ledger = self._run(a, n_months=1)
        assert months[0].implementation_revenue == 500000.0
        assert ledger.projects[0].revenue == 500000.0

    def test_ledger_ignores_future_projects(self):
        ledger = ImplementationLedger()
        ledger.record(10, 500000.0)
        assert ledger.maintenance_revenue(5, start_delay=0, annual_percentage=18.0) == 0.0
        assert ledger.maintenance_revenue(10, start_delay=0, annual_percentage=18.0) == pytest.approx(7500.0)
