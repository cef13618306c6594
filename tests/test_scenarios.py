"""Tests for calculator/calculators/scenarios.py"""

import pytest

from calculator.calculators import CalculationInputs, ScenarioStore


def test_empty_store():
    store = ScenarioStore()
    assert not store.has_any()
    assert store.compare() == []


def test_compare_rows_in_slot_order():
    store = ScenarioStore()
    store.save(2, CalculationInputs(product_cost=5, selling_price=10))
    store.save(1, CalculationInputs(product_cost=5, selling_price=20))

    rows = store.compare()
    assert [r["scenario"] for r in rows] == ["Scenario 1", "Scenario 2"]
    assert rows[0]["net_profit"] == 15
    assert rows[1]["profit_margin"] == pytest.approx(50.0)


def test_save_overwrites_slot():
    store = ScenarioStore()
    store.save(1, CalculationInputs(selling_price=10))
    store.save(1, CalculationInputs(selling_price=12))
    assert store.get(1).selling_price == 12


def test_invalid_slot():
    with pytest.raises(ValueError):
        ScenarioStore().save(3, CalculationInputs())


def test_store_writes_through_to_backing_dict():
    backing = {}
    ScenarioStore(backing).save(1, CalculationInputs(selling_price=9))
    assert backing[1].selling_price == 9
