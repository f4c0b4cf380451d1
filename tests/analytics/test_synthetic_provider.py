from __future__ import annotations

import random
from datetime import date, datetime, timedelta

from classroom_attendance.analytics.synthetic_provider import SyntheticAnalyticsProvider
from classroom_attendance.common.datetime_utils import parse_iso_date


def test_monthly_skips_weekends_and_counts_add_up():
    provider = SyntheticAnalyticsProvider(rng=random.Random(42))

    days = provider.monthly_attendance(date(2024, 1, 1), date(2024, 1, 31))

    assert len(days) == 23
    for key, counts in days.items():
        assert parse_iso_date(key).weekday() < 5
        assert 25 <= counts.total < 30
        assert counts.present + counts.absent + counts.tardy + counts.excused == counts.total
        assert int(counts.total * 0.8) <= counts.present <= int(counts.total * 0.95)
        assert min(counts.absent, counts.tardy, counts.excused) >= 0


def test_monthly_range_is_inclusive_and_empty_when_reversed():
    provider = SyntheticAnalyticsProvider(rng=random.Random(1))

    # Friday to Monday
    assert list(provider.monthly_attendance(date(2024, 1, 5), date(2024, 1, 8))) == ["2024-01-05", "2024-01-08"]
    assert provider.monthly_attendance(date(2024, 1, 8), date(2024, 1, 5)) == {}


def test_monthly_range_may_end_on_last_representable_date():
    provider = SyntheticAnalyticsProvider(rng=random.Random(1))

    # Thursday and Friday
    assert list(provider.monthly_attendance(date(9999, 12, 30), date.max)) == ["9999-12-30", "9999-12-31"]


def test_monthly_is_reproducible_with_seeded_rng():
    a = SyntheticAnalyticsProvider(rng=random.Random(7)).monthly_attendance(date(2024, 3, 1), date(2024, 3, 31))
    b = SyntheticAnalyticsProvider(rng=random.Random(7)).monthly_attendance(date(2024, 3, 1), date(2024, 3, 31))
    assert a == b


def test_analytics_ignores_time_range():
    provider = SyntheticAnalyticsProvider()

    week = provider.analytics("week")

    assert week == provider.analytics("term")
    assert week["overview"]["averageAttendance"] == 87
    assert len(week["distribution"]["values"]) == 4
    assert [s["status"] for s in week["studentPerformance"]] == ["at-risk", "warning", "warning"]


def test_reports_are_dated_relative_to_clock():
    now = datetime(2024, 1, 15, 9, 0, 0)
    provider = SyntheticAnalyticsProvider(clock=lambda: now)

    reports = provider.reports()

    assert [r.id for r in reports] == [1, 2, 3]
    assert reports[0].created_at == (now - timedelta(days=2)).isoformat()
    assert reports[2].created_at == (now - timedelta(days=14)).isoformat()
    assert reports[1].to_dict()["fileSize"] == "5.1 MB"
