from __future__ import annotations

import json

import pytest


def test_add_assigns_unique_increasing_ids(tracker):
    a = tracker.assets.add(type="Stocks", value=100)
    b = tracker.assets.add(type="Bonds", value=200)

    assert a is not None and b is not None
    assert b.id > a.id
    assert [x.type for x in tracker.assets.list()] == ["Stocks", "Bonds"]


def test_add_derives_monthly_income(tracker):
    a = tracker.assets.add(type="Bonds", value=12_000, is_monthly_income=True, interest_rate=6)
    assert a.monthly_income_amount == pytest.approx(60.00)


def test_add_invalid_is_rejected_without_side_effect(tracker, store):
    assert tracker.assets.add(type="", value=100) is None
    assert tracker.assets.add(type="Stocks", value=None) is None
    assert store.get("assets") is None
    assert store.get("incomeAssetTypes") is None


def test_add_persists_and_publishes_distinct_types(tracker, store):
    tracker.assets.add(type="Stocks", value=1)
    tracker.assets.add(type="Bonds", value=2)
    tracker.assets.add(type="Stocks", value=3)

    assert len(json.loads(store.get("assets"))) == 3
    assert store.get("incomeAssetTypes") == '["Stocks","Bonds"]'


def test_remove(tracker, store):
    a = tracker.assets.add(type="Stocks", value=1)
    tracker.assets.add(type="Bonds", value=2)

    assert tracker.assets.remove(a.id) is True
    assert tracker.assets.remove(a.id) is False
    assert [x.type for x in tracker.assets.list()] == ["Bonds"]
    assert store.get("incomeAssetTypes") == '["Bonds"]'


def test_deduct_floors_at_zero_and_recomputes(tracker):
    tracker.assets.add(type="Bonds", value=12_000, is_monthly_income=True, interest_rate=6)

    after = tracker.assets.deduct("Bonds", 6_000)
    assert after.value == 6_000
    assert after.monthly_income_amount == pytest.approx(30.0)

    after = tracker.assets.deduct("Bonds", 10_000)
    assert after.value == 0
    assert after.monthly_income_amount == 0


def test_restore_is_unfloored(tracker):
    tracker.assets.add(type="Cash", value=10)
    assert tracker.assets.restore("Cash", 15).value == 25


def test_deduct_unknown_type_is_silent_noop(tracker, store):
    tracker.assets.add(type="Stocks", value=100)
    before = store.get("assets")

    assert tracker.assets.deduct("Crypto", 50) is None
    assert tracker.assets.restore("Crypto", 50) is None
    assert store.get("assets") == before


def test_deduct_targets_first_matching_type_only(tracker):
    first = tracker.assets.add(type="Stocks", value=100)
    second = tracker.assets.add(type="Stocks", value=200)

    tracker.assets.deduct("Stocks", 50)

    assert tracker.assets.get(first.id).value == 50
    assert tracker.assets.get(second.id).value == 200


def test_summaries(tracker):
    tracker.assets.add(type="Bonds", value=12_000, is_monthly_income=True, interest_rate=6)
    tracker.assets.add(type="Savings", value=2_400, is_monthly_income=True, interest_rate=5)
    tracker.assets.add(type="Car", value=5_000)

    assert tracker.assets.total_value() == 19_400
    assert tracker.assets.total_monthly_income() == pytest.approx(70.0)
    assert tracker.assets.preview_monthly_income(1_200, 10) == pytest.approx(10.0)


def test_find_by_type(tracker):
    tracker.assets.add(type="Stocks", value=1)
    assert tracker.assets.find_by_type("Stocks").value == 1
    assert tracker.assets.find_by_type("Nope") is None


def test_add_with_zero_rate_stores_zero_income(tracker, store):
    tracker.assets.add(type="Savings", value=1000, is_monthly_income=True, interest_rate=0)

    (rec,) = json.loads(store.get("assets"))
    assert rec["interestRate"] == 0
    assert rec["monthlyIncomeAmount"] == 0
    assert tracker.assets.total_monthly_income() == 0
