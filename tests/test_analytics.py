"""Tests for the growth analytics series and forecast."""

import unittest
from datetime import date

from ministry_hub.core.database import SessionLocal
from ministry_hub.services.analytics import FORECAST_DAYS, build_growth_series, growth_analytics
from tests.support import add_church, add_member, reset_database

TODAY = date(2026, 3, 10)


class TestBuildGrowthSeries(unittest.TestCase):
    def test_zero_filled_days_with_running_totals(self) -> None:
        historical, forecast = build_growth_series({"2026-03-08": 2, "2026-03-10": 1}, None, 5, TODAY)
        self.assertEqual([p.date for p in historical], [f"2026-03-0{d}" for d in range(6, 10)] + ["2026-03-10"])
        self.assertEqual([p.members for p in historical], [0, 0, 2, 0, 1])
        self.assertEqual([p.members_cumulative for p in historical], [0, 0, 2, 2, 3])
        self.assertTrue(all(p.ministers is None for p in historical))
        self.assertEqual(historical[-1].date_formatted, "Mar 10")
        self.assertEqual(len(forecast), FORECAST_DAYS)

    def test_forecast_is_trailing_average(self) -> None:
        counts = {f"2026-03-{d:02d}": 3 for d in range(4, 11)}
        historical, forecast = build_growth_series(counts, {}, 7, TODAY)
        self.assertEqual(historical[-1].members_cumulative, 21)
        self.assertEqual([p.members for p in forecast], [3] * FORECAST_DAYS)
        self.assertEqual(forecast[-1].members_cumulative, 21 + 3 * FORECAST_DAYS)
        self.assertEqual([p.ministers for p in forecast], [0] * FORECAST_DAYS)
        self.assertTrue(all(p.is_forecast for p in forecast))
        self.assertEqual(forecast[0].date, "2026-03-11")

    def test_forecast_is_deterministic(self) -> None:
        counts = {"2026-03-09": 1, "2026-03-10": 4}
        self.assertEqual(
            build_growth_series(counts, counts, 30, TODAY),
            build_growth_series(counts, counts, 30, TODAY),
        )


class TestGrowthAnalytics(unittest.TestCase):
    def setUp(self) -> None:
        reset_database()
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()

    def test_counts_todays_members(self) -> None:
        church = add_church(self.db)
        add_member(self.db, church.id)
        add_member(self.db, church.id, first_name="Bea")
        data = growth_analytics(self.db, 30, "members")
        self.assertEqual(len(data.historical), 30)
        self.assertEqual(data.historical[-1].members, 2)
        self.assertEqual(data.summary.total_members, 2)
        self.assertEqual(data.summary.period, "Last 30 days")
        self.assertEqual(len(data.combined), 30 + FORECAST_DAYS)
        self.assertIsNone(data.historical[-1].ministers)


if __name__ == "__main__":
    unittest.main()
