"""Tests for services/utils/url_state.py"""

from urllib.parse import parse_qs, urlsplit

import pytest

from calculator.calculators import CalculationInputs
from services.utils.url_state import decode_state_from_url, encode_state_to_url

BASE = "https://calc.example.com/"


def test_encode_skips_zero_fields():
    url = encode_state_to_url(CalculationInputs(product_cost=5, selling_price=20), BASE)
    assert url == "https://calc.example.com/?productCost=5&sellingPrice=20"


def test_encode_drops_existing_query():
    url = encode_state_to_url(CalculationInputs(fba_fee=2.5), BASE + "?old=1")
    assert url == "https://calc.example.com/?fbaFee=2.5"


@pytest.mark.parametrize("inputs", [
    CalculationInputs(product_cost=5, selling_price=20, referral_fee=3, fba_fee=4,
                      shipping_cost=1, ppc_budget=1, other_fees=1),
    CalculationInputs(product_cost=0.1, selling_price=29.99, referral_fee=4.4985),
    CalculationInputs(selling_price=1e-05, other_fees=123456789.125),
])
def test_round_trip_reproduces_non_zero_fields(inputs):
    decoded = decode_state_from_url(encode_state_to_url(inputs, BASE))
    expected = {k: v for k, v in inputs.to_dict().items() if v != 0}
    assert decoded == expected


def test_decode_bare_query_string():
    assert decode_state_from_url("sellingPrice=12.5&fbaFee=3") == {"selling_price": 12.5, "fba_fee": 3.0}


def test_decode_mapping_like_query_params():
    assert decode_state_from_url({"productCost": "7", "utm_source": "x"}) == {"product_cost": 7.0}


def test_decode_unparsable_value_is_zero():
    assert decode_state_from_url(BASE + "?sellingPrice=abc&ppcBudget=2x") == {
        "selling_price": 0.0,
        "ppc_budget": 2.0,
    }


def test_decode_without_query():
    assert decode_state_from_url(BASE) == {}


def test_encoded_keys_are_camel_case():
    url = encode_state_to_url(CalculationInputs(shipping_cost=1, ppc_budget=2, other_fees=3), BASE)
    assert set(parse_qs(urlsplit(url).query)) == {"shippingCost", "ppcBudget", "otherFees"}
