import pytest

from assumptions import AssumptionSet, OnboardingSchedule, default_assumptions
from core.config import CashSettings, MarketData, ProjectionConfig
from core.utils import build_timeline


@pytest.fixture
def config():
    return ProjectionConfig()


@pytest.fixture
def timeline(config):
    return build_timeline(config.start, config.n_months)


@pytest.fixture
def flat_assumptions():
    """Dashboard defaults with no ramps or overrides."""
    return AssumptionSet()


@pytest.fixture
def ramped_assumptions():
    return default_assumptions().with_values(implementation_plan=(0, 0, 1, 0, 0, 1, 0, 0, 0, 2))


@pytest.fixture
def scheduled_assumptions():
    return AssumptionSet(customer_model=OnboardingSchedule(additions=(10, 10, 0)))


@pytest.fixture
def cash():
    return CashSettings(
        initial_cash=250000.0,
        initial_cash_date="2025-08-01",
        investment_amount=2_000_000.0,
        investment_month="2025-11",
    )


@pytest.fixture
def small_market():
    return MarketData(total_dealerships=3798)
