"""Inbound callback signature verification."""

import logging
from collections.abc import Mapping
from typing import Any

from robopay.payments.schemas import SHP_PREFIX, TrustTier
from robopay.payments.signature import sign_parts

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("OutSum", "InvId", "SignatureValue")


def extract_shp_params(fields: Mapping[str, Any]) -> dict[str, str]:
    """Pick shp_* fields out of a callback field set, values verbatim."""
    return {
        key: str(value)
        for key, value in fields.items()
        if key.startswith(SHP_PREFIX)
    }


def generate_result_signature(
    out_sum: str,
    inv_id: str,
    password: str,
    shp_params: Mapping[str, str] | None = None,
) -> str:
    """Generate signature for callback verification.

    Formula: MD5(OutSum:InvId:Password[:shp_*])

    OutSum and InvId are used exactly as the gateway sent them;
    reformatting the amount would break the comparison.

    Args:
        out_sum: Payment amount from callback
        inv_id: Invoice ID from callback
        password: Password of the trust tier
        shp_params: shp_* parameters (sorted by key)

    Returns:
        MD5 hash in lowercase
    """
    return sign_parts([str(out_sum), str(inv_id), password], shp_params)


def format_success_response(inv_id: int) -> str:
    """Acknowledgment body for a processed ResultURL callback."""
    return f"OK{inv_id}\n"


class CallbackVerifier:
    """Verifies ResultURL / SuccessURL callbacks.

    Both tiers share the algorithm and differ only in the password:
    ResultURL (validation) uses password #2, SuccessURL (payment) uses
    password #1.
    """

    def __init__(self, password_1: str, password_2: str) -> None:
        self._password_1 = password_1
        self._password_2 = password_2
        self._valid = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(is_valid={self._valid!r})"

    @property
    def is_valid(self) -> bool:
        """Outcome of the last verification."""
        return self._valid

    def _password_for(self, tier: TrustTier) -> str:
        if tier == TrustTier.VALIDATION:
            return self._password_2
        return self._password_1

    def verify(self, fields: Mapping[str, Any], tier: TrustTier) -> bool:
        """Check callback signature for the given trust tier.

        Args:
            fields: Raw callback fields (query or form)
            tier: Trust tier selecting the password

        Returns:
            True if signature is valid
        """
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            logger.warning("Callback rejected, missing fields: %s", ", ".join(missing))
            self._valid = False
            return False

        expected = generate_result_signature(
            out_sum=str(fields["OutSum"]),
            inv_id=str(fields["InvId"]),
            password=self._password_for(TrustTier(tier)),
            shp_params=extract_shp_params(fields),
        )
        self._valid = str(fields["SignatureValue"]).lower() == expected

        if not self._valid:
            logger.warning(
                "Invalid %s signature for inv_id=%s",
                TrustTier(tier).value,
                fields["InvId"],
            )

        return self._valid

    def validate_result(self, fields: Mapping[str, Any]) -> bool:
        """Verify ResultURL callback (before funds are confirmed)."""
        return self.verify(fields, TrustTier.VALIDATION)

    def validate_success(self, fields: Mapping[str, Any]) -> bool:
        """Verify SuccessURL redirect (settlement confirmation)."""
        return self.verify(fields, TrustTier.PAYMENT)
