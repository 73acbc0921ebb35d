from __future__ import annotations

from pocketledger.engine.cashflow import BalanceTrend


def _seed(tracker):
    tracker.assets.add(type="Savings", value=10_000)
    tracker.liabilities.add(type="Car loan", amount=4_000, interest_rate=3, has_monthly_payment=True)
    tracker.incomes.record(type="salary", amount=3_000, year=2024, month=3)
    tracker.expenditures.record(expenditure_type="personal", name="Rent", amount=1_200, type="static", year=2024, month=3)
    tracker.expenditures.record(expenditure_type="personal", name="Trip", amount=500, type="static", year=2024, month=4)


def test_balance_is_period_scoped(tracker):
    _seed(tracker)

    assert tracker.aggregator.balance(2024, 3) == 1_800
    assert tracker.aggregator.balance(2024, 4) == -500
    assert tracker.aggregator.balance(2020, 1) == 0


def test_net_worth_is_period_independent(tracker):
    _seed(tracker)

    assert tracker.aggregator.net_worth() == 6_000
    assert tracker.aggregator.dashboard(2024, 3).net_worth == tracker.aggregator.dashboard(2024, 4).net_worth
    assert tracker.aggregator.dashboard(2024, 3).balance != tracker.aggregator.dashboard(2024, 4).balance


def test_net_worth_follows_linked_events(tracker):
    _seed(tracker)

    tracker.expenditures.record(
        expenditure_type="other", liability_type="Car loan", amount=1_000, type="static", year=2024, month=3
    )
    assert tracker.aggregator.net_worth() == 7_000

    tracker.incomes.record(type="asset", amount=500, asset_type="Savings", year=2024, month=3)
    assert tracker.aggregator.net_worth() == 6_500


def test_dashboard(tracker):
    _seed(tracker)

    d = tracker.aggregator.dashboard(2024, 3)

    assert (d.year, d.month) == (2024, 3)
    assert d.total_income == 3_000
    assert d.total_expenditure == 1_200
    assert d.balance == 1_800
    assert d.trend == BalanceTrend.POSITIVE
    assert d.total_assets == 10_000
    assert d.total_liabilities == 4_000


def test_empty_tracker(tracker):
    assert tracker.aggregator.net_worth() == 0
    assert tracker.aggregator.dashboard(2024, 3).trend == BalanceTrend.EVEN
    tiers = tracker.aggregator.tiered_totals(2024, 3)
    assert (tiers.essential, tiers.tight, tiers.light) == (0, 0, 0)


def test_components_sharing_a_store_see_each_other(store, clock):
    from pocketledger.services.tracker import build_tracker

    assets_view = build_tracker(store, clock=clock)
    income_view = build_tracker(store, clock=clock)

    assets_view.assets.add(type="Stocks", value=1_000)
    income_view.incomes.record(type="asset", amount=250, asset_type="Stocks", year=2024, month=3)

    assert assets_view.assets.find_by_type("Stocks").value == 750
