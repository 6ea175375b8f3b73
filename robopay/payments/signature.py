"""Robokassa-compatible MD5 signature utilities."""

import hashlib
from collections.abc import Mapping
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from robopay.core.exceptions import InvalidSumError

CENT = Decimal("0.01")


def truncate_sum(amount: Decimal | int | float | str) -> Decimal:
    """Cut amount down to 2 decimal places.

    Truncates, never rounds: 10.567 -> 10.56.
    Floats go through ``str`` so binary noise does not leak in.

    Raises:
        InvalidSumError: If amount is not a finite number
    """
    try:
        value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
        if not value.is_finite():
            raise InvalidSumError(details={"out_sum": str(amount)})
        return value.quantize(CENT, rounding=ROUND_DOWN)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidSumError(details={"out_sum": str(amount)}) from e


def format_sum(amount: Decimal) -> str:
    """Format amount for signature calculation.

    Exactly two digits after the decimal point, fixed-point notation.
    Examples: 100 -> "100.00", 99.5 -> "99.50", 1E+3 -> "1000.00"
    """
    return f"{truncate_sum(amount):.2f}"


def build_shp_string(shp_params: Mapping[str, str]) -> str:
    """Build shp_* parameters string for signature.

    Parameters must be sorted by key.
    Format: shp_key1=value1:shp_key2=value2
    """
    if not shp_params:
        return ""

    sorted_params = sorted(shp_params.items())
    return ":".join(f"{k}={v}" for k, v in sorted_params)


def md5_hex(data: str) -> str:
    """MD5 hex digest of a signing string, lowercase."""
    return hashlib.md5(data.encode()).hexdigest()


def sign_parts(parts: list[str], shp_params: Mapping[str, str] | None = None) -> str:
    """Join signing string parts, append shp_* segment and hash."""
    parts = list(parts)

    if shp_params:
        shp_string = build_shp_string(shp_params)
        if shp_string:
            parts.append(shp_string)

    return md5_hex(":".join(parts))


def generate_init_signature(
    merchant_login: str,
    out_sum: Decimal,
    inv_id: int,
    receipt: str,
    password_1: str,
    shp_params: Mapping[str, str] | None = None,
) -> str:
    """Generate signature for payment URL (init).

    Formula: MD5(MerchantLogin:OutSum:InvId:Receipt:Password_1[:shp_*])

    Args:
        merchant_login: Merchant login
        out_sum: Payment amount, rendered with 2 decimal places
        inv_id: Invoice ID
        receipt: Encoded fiscal receipt
        password_1: First password
        shp_params: Optional shp_* parameters (sorted by key)

    Returns:
        MD5 hash in lowercase
    """
    parts = [merchant_login, format_sum(out_sum), str(inv_id), receipt, password_1]
    return sign_parts(parts, shp_params)
