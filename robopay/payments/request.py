"""Payment request assembly: redirect URLs and recurring charge params."""

from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from robopay.core.exceptions import InvalidParamError
from robopay.payments.schemas import PaymentType

if TYPE_CHECKING:
    from robopay.payments.payment import Payment

ENCODING = "utf-8"


class Endpoints(BaseModel):
    """Gateway endpoints for each payment type."""

    payment_url: str = Field(default="https://auth.robokassa.ru/Merchant/Index.aspx")
    init_recurring_url: str = Field(default="https://auth.robokassa.ru/Merchant/Index.aspx")
    recurring_url: str = Field(default="https://auth.robokassa.ru/Merchant/Recurring")


def parse_payment_type(payment_type: PaymentType | str) -> PaymentType:
    """Resolve payment type.

    Raises:
        InvalidParamError: If payment type is unknown
    """
    try:
        return PaymentType(payment_type)
    except ValueError as e:
        raise InvalidParamError(
            message=f"Unknown payment type: {payment_type}",
            details={"payment_type": str(payment_type)},
        ) from e


def stringify(value: Any) -> str:
    """Render field value for the wire.

    Locale-independent; decimals never use exponent notation.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def build_query_params(payment: "Payment") -> dict[str, str]:
    """Build gateway parameters from a signed payment.

    Standard fields come first in wire order, then optional ones,
    then shp_* parameters sorted by key.
    """
    params: dict[str, Any] = {
        "MerchantLogin": payment.merchant_login,
        "InvId": payment.inv_id,
        "OutSum": payment.out_sum,
        "Desc": payment.description,
        "SignatureValue": payment.signature_value,
        "Encoding": ENCODING,
        "Culture": payment.culture,
        "IncCurrLabel": payment.inc_curr_label,
        "IsTest": payment.is_test,
        "Receipt": payment.receipt,
    }

    if payment.email:
        params["Email"] = payment.email
    if payment.recurring:
        params["Recurring"] = "true"
    if payment.previous_inv_id is not None:
        params["PreviousInvoiceID"] = payment.previous_inv_id

    for key, value in sorted(payment.custom_params.items()):
        params[key] = value

    return {key: stringify(value) for key, value in params.items()}


def build_url(endpoint: str, params: dict[str, str]) -> str:
    """Append urlencoded params to endpoint."""
    return f"{endpoint}?{urlencode(params)}"
