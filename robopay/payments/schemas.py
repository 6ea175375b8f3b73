"""Payment schemas for gateway communication."""

from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

SHP_PREFIX = "shp_"


class Culture(StrEnum):
    """Payment page interface language."""

    EN = "en"
    RU = "ru"


class PaymentType(StrEnum):
    """Output mode for payment request assembly."""

    BASE = "base"
    INIT_RECURRING = "init_recurring"
    RECURRING = "recurring"


class TrustTier(StrEnum):
    """Which shared secret applies to an inbound callback."""

    VALIDATION = "validation"  # ResultURL, checked with password #2
    PAYMENT = "payment"  # SuccessURL, checked with password #1


class WebhookData(BaseModel):
    """ResultURL / SuccessURL callback data (Robokassa format).

    ``out_sum`` and ``inv_id`` are kept as the raw strings received, since
    the signature is computed over them verbatim.
    """

    out_sum: str = Field(..., description="Payment amount as received")
    inv_id: str = Field(..., description="Invoice ID as received")
    signature: str = Field(..., description="Signature for verification")

    # Optional from Robokassa
    fee: Decimal | None = Field(default=None, description="Payment fee")
    email: str | None = Field(default=None, description="Customer email")
    payment_method: str | None = Field(default=None, description="Payment method used")

    # Custom shp_* parameters, prefixed keys
    shp_params: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_fields(cls, raw_data: Mapping[str, Any]) -> "WebhookData":
        """Parse raw form/query fields."""
        return cls(
            out_sum=str(raw_data["OutSum"]),
            inv_id=str(raw_data["InvId"]),
            signature=str(raw_data["SignatureValue"]),
            fee=raw_data.get("Fee") or None,
            email=raw_data.get("EMail") or raw_data.get("Email"),
            payment_method=raw_data.get("PaymentMethod"),
            shp_params={
                key: str(value)
                for key, value in raw_data.items()
                if key.startswith(SHP_PREFIX)
            },
        )

    @property
    def invoice_id(self) -> int:
        """Invoice ID as integer."""
        return int(self.inv_id)

    def get_custom_param(self, name: str) -> str | None:
        """Get custom parameter by its unprefixed name."""
        return self.shp_params.get(SHP_PREFIX + name)

    def to_fields(self) -> dict[str, str]:
        """Fields participating in signature verification."""
        return {
            "OutSum": self.out_sum,
            "InvId": self.inv_id,
            "SignatureValue": self.signature,
            **self.shp_params,
        }
