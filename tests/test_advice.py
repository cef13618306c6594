"""Tests for calculator/calculators/advice.py"""

from calculator.calculators import (
    CalculationInputs,
    CalculationResults,
    calculate_results,
    format_units,
    get_contextual_advice,
)
from calculator.calculators.advice import format_whole_dollars


def _advice(**kwargs):
    inputs = CalculationInputs(**kwargs)
    return get_contextual_advice(calculate_results(inputs), inputs)


def test_negative_profit_warns():
    advice = _advice(product_cost=30, selling_price=20)
    assert advice[0].startswith("⚠️ Negative profit!")
    assert any("Low profit margin" in a for a in advice)
    assert not any("break even" in a for a in advice)


def test_excellent_margin():
    # margin 50%
    advice = _advice(product_cost=5, selling_price=20, fba_fee=5)
    assert any("Excellent profit margin" in a for a in advice)


def test_good_margin_band():
    # margin 25%
    advice = _advice(product_cost=5, selling_price=20, referral_fee=3, fba_fee=4, shipping_cost=1,
                     ppc_budget=1, other_fees=1)
    assert any("Good profit margin" in a for a in advice)
    assert not any("Excellent" in a for a in advice)


def test_margin_between_15_and_20_is_silent():
    # margin 17.5%
    advice = _advice(product_cost=10, selling_price=20, fba_fee=6.5)
    assert not any(a.startswith(("⚠️ Low", "✅")) for a in advice)


def test_profitable_projection_lines():
    advice = _advice(product_cost=5, selling_price=20, referral_fee=3, fba_fee=4, shipping_cost=1,
                     ppc_budget=1, other_fees=1)
    assert "💡 At this margin, you'd need to sell 1 units monthly to break even." in advice
    assert "📈 Selling 100 units monthly would net you $500." in advice


def test_projection_rounds_half_up():
    # net 0.125 -> 12.5 over 100 units
    advice = _advice(product_cost=9.875, selling_price=10)
    assert "📈 Selling 100 units monthly would net you $13." in advice


def test_format_whole_dollars():
    assert format_whole_dollars(12.5) == "13"
    assert format_whole_dollars(12.49) == "12"
    assert format_whole_dollars(500.0) == "500"


def test_high_referral_fee():
    advice = _advice(product_cost=1, selling_price=10, referral_fee=2.5)
    assert advice[-1].startswith("⚠️ High referral fee percentage")


def test_referral_check_skipped_without_selling_price():
    results = CalculationResults(net_profit=-5, profit_margin=0, break_even_units=0, total_costs=5)
    advice = get_contextual_advice(results, CalculationInputs(referral_fee=5))
    assert not any("referral" in a for a in advice)


def test_format_units():
    assert format_units(3) == "3"
    assert format_units(float("inf")) == "∞"
