"""Unit tests for ReportAggregator."""

from datetime import date
from decimal import Decimal

import pytest

from src.core.entities.report import UNASSIGNED_SERVICE_TYPE, ReportPeriod
from src.core.entities.service import ServiceType
from src.core.entities.transaction import PaymentMethod
from src.core.services.report_aggregator import MONTH_LABELS, ReportAggregator

TODAY = date(2024, 3, 10)


@pytest.fixture
def aggregator() -> ReportAggregator:
    return ReportAggregator()


class TestDailyReport:
    """Rolling per-day buckets."""

    def test_seven_buckets_oldest_first(self, aggregator):
        buckets = aggregator.daily_report([], TODAY)

        assert len(buckets) == 7
        assert [b.label for b in buckets] == [
            "2024-03-04", "2024-03-05", "2024-03-06", "2024-03-07",
            "2024-03-08", "2024-03-09", "2024-03-10",
        ]
        assert buckets[-1].period_start == TODAY
        assert all(b.period is ReportPeriod.DAY for b in buckets)

    def test_empty_buckets_are_zero_filled(self, aggregator):
        bucket = aggregator.daily_report([], TODAY, days=1)[0]

        assert bucket.total == Decimal("0")
        assert bucket.transaction_count == 0
        assert bucket.by_payment_method == {"Cash": Decimal("0"), "PhonePe": Decimal("0")}
        assert set(bucket.by_service_type) == {t.value for t in ServiceType}
        assert all(v == Decimal("0") for v in bucket.by_service_type.values())

    def test_cash_and_phonepe_across_days(self, aggregator, make_transaction):
        """Rs. 15 cash two days ago, Rs. 40 PhonePe today."""
        transactions = [
            make_transaction(date(2024, 3, 8), "15", PaymentMethod.CASH, quantity=10),
            make_transaction(
                TODAY, "40", PaymentMethod.PHONEPE,
                service_type=ServiceType.LAMINATION, quantity=11,
            ),
        ]

        buckets = aggregator.daily_report(transactions, TODAY)
        by_label = {b.label: b for b in buckets}

        day = by_label["2024-03-08"]
        assert day.by_payment_method["Cash"] == Decimal("15")
        assert day.by_payment_method["PhonePe"] == Decimal("0")
        assert day.by_service_type["xerox"] == Decimal("15")
        assert day.total == Decimal("15")
        assert day.total_quantity == 10

        today = by_label["2024-03-10"]
        assert today.by_payment_method["PhonePe"] == Decimal("40")
        assert today.by_service_type["lamination"] == Decimal("40")
        assert today.transaction_count == 1

        assert by_label["2024-03-09"].total == Decimal("0")

    def test_outside_window_ignored(self, aggregator, make_transaction):
        transactions = [
            make_transaction(date(2024, 3, 3), "99"),
            make_transaction(date(2024, 3, 11), "99"),
        ]
        buckets = aggregator.daily_report(transactions, TODAY)
        assert sum(b.total for b in buckets) == Decimal("0")

    def test_method_totals_equal_type_totals(self, aggregator, make_transaction):
        transactions = [
            make_transaction(TODAY, "15", PaymentMethod.CASH),
            make_transaction(TODAY, "40", PaymentMethod.PHONEPE, ServiceType.SCANNING),
            make_transaction(TODAY, "7.50", PaymentMethod.CASH, ServiceType.RUBBER_STAMPS),
        ]
        bucket = aggregator.daily_report(transactions, TODAY, days=1)[0]

        assert sum(bucket.by_payment_method.values()) == bucket.total
        assert sum(bucket.by_service_type.values()) == bucket.total
        assert bucket.total == Decimal("62.50")

    def test_missing_service_type_is_unassigned(self, aggregator, make_transaction):
        transactions = [make_transaction(TODAY, "12", service_type=None)]
        bucket = aggregator.daily_report(transactions, TODAY, days=1)[0]

        assert bucket.by_service_type[UNASSIGNED_SERVICE_TYPE] == Decimal("12")
        assert sum(bucket.by_service_type.values()) == bucket.total

    def test_unassigned_key_only_when_needed(self, aggregator, make_transaction):
        bucket = aggregator.daily_report([make_transaction(TODAY, "5")], TODAY, days=1)[0]
        assert UNASSIGNED_SERVICE_TYPE not in bucket.by_service_type

    def test_discounted_sale_counts_final_cost(self, aggregator, make_transaction):
        t = make_transaction(TODAY, "20", discount=Decimal("5"))
        bucket = aggregator.daily_report([t], TODAY, days=1)[0]
        assert bucket.total == Decimal("15")

    def test_custom_window(self, aggregator):
        buckets = aggregator.daily_report([], TODAY, days=30)
        assert len(buckets) == 30
        assert buckets[0].label == "2024-02-10"

    @pytest.mark.parametrize("days", [0, -3])
    def test_window_must_be_positive(self, aggregator, days):
        with pytest.raises(ValueError):
            aggregator.daily_report([], TODAY, days=days)


class TestMonthlyReport:
    """Calendar-year buckets."""

    def test_twelve_buckets(self, aggregator):
        buckets = aggregator.monthly_report([], 2024)

        assert len(buckets) == 12
        assert [b.label for b in buckets] == list(MONTH_LABELS)
        assert buckets[0].period_start == date(2024, 1, 1)
        assert buckets[11].period_start == date(2024, 12, 1)
        assert all(b.period is ReportPeriod.MONTH for b in buckets)

    def test_groups_by_month_and_ignores_other_years(self, aggregator, make_transaction):
        transactions = [
            make_transaction(date(2024, 3, 1), "10"),
            make_transaction(date(2024, 3, 31), "20", PaymentMethod.PHONEPE),
            make_transaction(date(2024, 12, 25), "5"),
            make_transaction(date(2023, 3, 15), "1000"),
        ]
        buckets = aggregator.monthly_report(transactions, 2024)

        assert buckets[2].label == "Mar"
        assert buckets[2].total == Decimal("30")
        assert buckets[2].by_payment_method == {
            "Cash": Decimal("10"),
            "PhonePe": Decimal("20"),
        }
        assert buckets[11].total == Decimal("5")
        assert sum(b.total for b in buckets) == Decimal("35")

    def test_daily_and_monthly_agree(self, aggregator, make_transaction):
        transactions = [
            make_transaction(date(2024, 3, 5), "15"),
            make_transaction(date(2024, 3, 9), "40", PaymentMethod.PHONEPE),
            make_transaction(date(2024, 3, 10), "8"),
        ]
        daily = aggregator.daily_report(transactions, TODAY, days=10)
        monthly = aggregator.monthly_report(transactions, 2024)

        assert sum(b.total for b in daily) == monthly[2].total


class TestSummary:
    def test_zero_transactions_average_zero(self, aggregator):
        summary = aggregator.summary(aggregator.daily_report([], TODAY))
        assert summary.total_revenue == Decimal("0")
        assert summary.transaction_count == 0
        assert summary.average_transaction == Decimal("0")

    def test_average(self, aggregator, make_transaction):
        transactions = [
            make_transaction(TODAY, "10"),
            make_transaction(TODAY, "10"),
            make_transaction(TODAY, "15"),
        ]
        summary = aggregator.summary(aggregator.daily_report(transactions, TODAY))
        assert summary.total_revenue == Decimal("35")
        assert summary.transaction_count == 3
        assert summary.average_transaction == Decimal("11.67")


class TestTodayTransactions:
    def test_filters_and_orders_by_time(self, aggregator, make_transaction):
        late = make_transaction(TODAY, "5", sale_time="17:45:00")
        early = make_transaction(TODAY, "5", sale_time="09:15:00")
        yesterday = make_transaction(date(2024, 3, 9), "5")

        result = aggregator.today_transactions([late, yesterday, early], TODAY)

        assert [t.id for t in result] == [early.id, late.id]
