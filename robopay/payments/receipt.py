"""Fiscal receipt encoding."""

import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import quote_plus


def _json_default(value: Any) -> Any:
    # Decimal stays a JSON number only when float keeps it exact
    if isinstance(value, Decimal):
        as_float = float(value)
        if Decimal(repr(as_float)) == value:
            return as_float
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_receipt(receipt: Mapping[str, Any]) -> str:
    """Serialize receipt to JSON and escape it for a query string.

    The result is opaque to the rest of the package: it goes into the
    signature as-is and is escaped once more when placed into a URL.
    Keys are sorted so the same receipt always yields the same string.
    Decimal amounts are written as numbers when a float represents them
    exactly, otherwise as strings so no precision is lost.
    """
    receipt_json = json.dumps(
        receipt,
        ensure_ascii=False,
        separators=(",", ":"),
        sort_keys=True,
        default=_json_default,
    )
    return quote_plus(receipt_json)
