import pytest
from pydantic import ValidationError

from assumptions import (
    EXPENSE_KEYS,
    AssumptionKey,
    AssumptionSet,
    default_assumptions,
    resolve,
    resolve_or,
)

K = AssumptionKey


@pytest.fixture
def payroll_ramp():
    return AssumptionSet(expense_payroll=1000.0).with_ramp(K.EXPENSE_PAYROLL, 2.0, 10)


class TestRampCompounding:
    def test_flat_before_and_at_start(self, payroll_ramp):
        assert resolve(payroll_ramp, K.EXPENSE_PAYROLL, 0) == 1000.0
        assert resolve(payroll_ramp, K.EXPENSE_PAYROLL, 9) == 1000.0
        assert resolve(payroll_ramp, K.EXPENSE_PAYROLL, 10) == 1000.0

    def test_compounds_after_start(self, payroll_ramp):
        assert resolve(payroll_ramp, K.EXPENSE_PAYROLL, 11) == pytest.approx(1020.0)
        assert resolve(payroll_ramp, K.EXPENSE_PAYROLL, 12) == pytest.approx(1040.4)

    def test_disabled_ramp_returns_base(self):
        a = AssumptionSet(expense_payroll=1000.0).with_ramp(K.EXPENSE_PAYROLL, 2.0, 0, enabled=False)
        assert resolve(a, K.EXPENSE_PAYROLL, 20) == 1000.0

    def test_clear_ramp(self, payroll_ramp):
        cleared = payroll_ramp.clear_ramp(K.EXPENSE_PAYROLL)
        assert resolve(cleared, K.EXPENSE_PAYROLL, 20) == 1000.0
        assert K.EXPENSE_PAYROLL not in cleared.adjustments


class TestOverridePrecedence:
    def test_override_beats_ramp(self, payroll_ramp):
        a = payroll_ramp.with_override(K.EXPENSE_PAYROLL, 12, 5.0)
        assert resolve(a, K.EXPENSE_PAYROLL, 12) == 5.0
        # neighbouring months still ramp
        assert resolve(a, K.EXPENSE_PAYROLL, 11) == pytest.approx(1020.0)

    def test_clearing_override_falls_through_to_ramp(self, payroll_ramp):
        a = payroll_ramp.with_override(K.EXPENSE_PAYROLL, 12, 5.0)
        cleared = a.clear_override(K.EXPENSE_PAYROLL, 12)
        assert resolve(cleared, K.EXPENSE_PAYROLL, 12) == pytest.approx(1040.4)

    def test_zero_override_is_honoured(self, flat_assumptions):
        a = flat_assumptions.with_override(K.SAAS_BASE_PRICING, 3, 0.0)
        assert resolve(a, K.SAAS_BASE_PRICING, 3) == 0.0
        assert resolve(a, K.SAAS_BASE_PRICING, 4) == 999.0

    def test_override_slots_span_timeline(self, flat_assumptions):
        a = flat_assumptions.with_override(K.EXPENSE_LEGAL, 4, 25000.0)
        assert len(a.adjustments[K.EXPENSE_LEGAL].overrides) == 29

    @pytest.mark.parametrize("month_index", [-1, 29])
    def test_override_month_outside_timeline_rejected(self, flat_assumptions, month_index):
        with pytest.raises(ValueError, match="outside 0..28"):
            flat_assumptions.with_override(K.EXPENSE_LEGAL, month_index, 1.0)

    def test_negative_month_does_not_touch_last_slot(self, flat_assumptions):
        with pytest.raises(ValueError):
            flat_assumptions.with_override(K.EXPENSE_LEGAL, -1, 1.0)
        assert resolve(flat_assumptions, K.EXPENSE_LEGAL, 28) == 10000.0

    def test_override_on_shorter_timeline(self, flat_assumptions):
        a = flat_assumptions.with_override(K.EXPENSE_LEGAL, 5, 1.0, n_months=6)
        assert len(a.adjustments[K.EXPENSE_LEGAL].overrides) == 6
        with pytest.raises(ValueError, match="outside 0..5"):
            flat_assumptions.with_override(K.EXPENSE_LEGAL, 6, 1.0, n_months=6)

    def test_clear_override_negative_month_rejected(self, flat_assumptions):
        a = flat_assumptions.with_override(K.EXPENSE_LEGAL, 28, 1.0)
        with pytest.raises(ValueError):
            a.clear_override(K.EXPENSE_LEGAL, -1)
        assert a.clear_override(K.EXPENSE_LEGAL, 40) == a

    def test_clear_all_overrides_drops_adjustment(self, flat_assumptions):
        a = (
            flat_assumptions
            .with_override(K.EXPENSE_LEGAL, 4, 25000.0)
            .with_override(K.EXPENSE_LEGAL, 5, 26000.0)
        )
        cleared = a.clear_override(K.EXPENSE_LEGAL)
        assert K.EXPENSE_LEGAL not in cleared.adjustments
        assert resolve(cleared, K.EXPENSE_LEGAL, 4) == 10000.0


class TestMissingValues:
    def test_missing_base_resolves_to_none(self):
        a = AssumptionSet(avg_transaction_price=None)
        assert resolve(a, K.AVG_TRANSACTION_PRICE, 0) is None

    def test_resolve_or_uses_fallback_table(self):
        a = AssumptionSet(avg_transaction_price=None, transactions_per_customer=None)
        assert resolve_or(a, K.AVG_TRANSACTION_PRICE, 0) == 158993
        assert resolve_or(a, K.TRANSACTIONS_PER_CUSTOMER, 0) == 168

    def test_resolve_or_caller_default(self):
        a = AssumptionSet(avg_transaction_price=None)
        assert resolve_or(a, K.AVG_TRANSACTION_PRICE, 0, default=1.0) == 1.0

    def test_zero_is_not_missing(self):
        a = AssumptionSet(avg_transaction_price=0.0)
        assert resolve_or(a, K.AVG_TRANSACTION_PRICE, 0) == 0.0

    def test_ramp_on_missing_base(self):
        a = AssumptionSet(expense_legal=None).with_ramp(K.EXPENSE_LEGAL, 5.0, 0)
        assert resolve(a, K.EXPENSE_LEGAL, 6) is None


class TestSnapshots:
    def test_updates_return_new_snapshot(self, flat_assumptions):
        updated = flat_assumptions.with_override(K.EXPENSE_LEGAL, 4, 25000.0)
        assert updated is not flat_assumptions
        assert flat_assumptions.adjustments == {}

    def test_snapshot_is_frozen(self, flat_assumptions):
        with pytest.raises(ValidationError):
            flat_assumptions.saas_base_pricing = 1.0

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            AssumptionSet(not_a_field=1.0)

    def test_expense_ramp_applies_to_every_category(self, flat_assumptions):
        a = flat_assumptions.with_expense_ramp(2.0, 10)
        assert set(a.adjustments) == set(EXPENSE_KEYS)
        assert a.clear_expense_ramps().adjustments == {}

    def test_default_assumptions_ramp_expenses(self):
        a = default_assumptions()
        assert resolve(a, K.EXPENSE_PAYROLL, 10) == pytest.approx(110000.0)
        assert resolve(a, K.EXPENSE_PAYROLL, 11) == pytest.approx(112200.0)
        assert resolve(a, K.SAAS_BASE_PRICING, 11) == 999.0

    def test_default_assumptions_flat(self):
        assert default_assumptions(expense_ramp_percent=None).adjustments == {}
