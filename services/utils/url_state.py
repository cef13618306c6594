"""Share-link encoding of calculator inputs."""

from __future__ import annotations
from typing import Any, Dict, Mapping, Union
from urllib.parse import parse_qs, urlencode, urlsplit

from calculator.calculators import CalculationInputs, parse_number


# Field name -> query-string key (camelCase keeps old links working)
URL_KEYS: Dict[str, str] = {
    "product_cost": "productCost",
    "selling_price": "sellingPrice",
    "referral_fee": "referralFee",
    "fba_fee": "fbaFee",
    "shipping_cost": "shippingCost",
    "ppc_budget": "ppcBudget",
    "other_fees": "otherFees",
}


def _format_number(value: float) -> str:
    """Shortest round-trip text: 5.0 -> '5', 2.5 -> '2.5'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def encode_state_to_url(inputs: CalculationInputs, base_url: str) -> str:
    """
    Build a share link carrying every non-zero input.

    Args:
        inputs: Current calculator inputs
        base_url: Origin and path of the app, without a query string

    Returns:
        Full URL, e.g. 'https://app/?productCost=5&sellingPrice=20'
    """
    params = {
        key: _format_number(getattr(inputs, field))
        for field, key in URL_KEYS.items()
        if getattr(inputs, field) != 0
    }
    return f"{base_url.split('?', 1)[0]}?{urlencode(params)}"


def decode_state_from_url(source: Union[str, Mapping[str, Any]]) -> Dict[str, float]:
    """
    Read inputs back from a share link.

    Args:
        source: Full URL, bare query string, or a mapping such as
            ``st.query_params``

    Returns:
        Dict of field name -> value for the keys present; unparsable
        values become 0.0
    """
    if isinstance(source, str):
        query = urlsplit(source).query if "?" in source or "://" in source else source
        params = {k: v[0] for k, v in parse_qs(query, keep_blank_values=True).items()}
    else:
        params = dict(source)

    decoded: Dict[str, float] = {}
    for field, key in URL_KEYS.items():
        if key not in params:
            continue
        value = params[key]
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        decoded[field] = parse_number(value)
    return decoded
