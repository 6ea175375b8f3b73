"""Outbound payment transaction."""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from robopay.core.exceptions import (
    EmptyDescriptionError,
    EmptyReceiptError,
    InvalidInvoiceIdError,
    InvalidParamError,
    InvalidSumError,
)
from robopay.payments.receipt import encode_receipt
from robopay.payments.request import (
    Endpoints,
    build_query_params,
    build_url,
    parse_payment_type,
)
from robopay.payments.schemas import SHP_PREFIX, Culture, PaymentType
from robopay.payments.signature import generate_init_signature, truncate_sum
from robopay.payments.verifier import CallbackVerifier, format_success_response

logger = logging.getLogger(__name__)


class Payment:
    """Mutable state of a single payment plus signing and URL generation.

    Created with the merchant login and both passwords, filled in through
    attribute setters, then turned into a redirect URL or recurring charge
    params. Not thread-safe; owned by one request/response cycle.
    """

    def __init__(
        self,
        merchant_login: str,
        password_1: str,
        password_2: str,
        is_test: bool = False,
        endpoints: Endpoints | None = None,
    ) -> None:
        self._merchant_login = merchant_login
        self._password_1 = password_1
        self._is_test = is_test
        self.endpoints = endpoints or Endpoints()
        self.verifier = CallbackVerifier(password_1, password_2)

        self._out_sum = Decimal(0)
        self._culture = Culture.RU
        self.inv_id: int = 0
        self.description: str = ""
        self.receipt: str | None = None
        self.inc_curr_label: str = ""
        self.email: str | None = None
        self.recurring: bool = False
        self.previous_inv_id: int | None = None
        self.signature_value: str = ""
        self.custom_params: dict[str, str] = {}

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(merchant_login={self._merchant_login!r}, "
            f"inv_id={self.inv_id!r}, out_sum={self._out_sum!r}, is_test={self._is_test!r})"
        )

    @property
    def merchant_login(self) -> str:
        return self._merchant_login

    @property
    def is_test(self) -> bool:
        return self._is_test

    @property
    def out_sum(self) -> Decimal:
        """Payment amount, 2 decimal places."""
        return self._out_sum

    @out_sum.setter
    def out_sum(self, value: Decimal | int | float | str) -> None:
        amount = truncate_sum(value)
        if amount <= 0:
            raise InvalidSumError(details={"out_sum": str(value)})
        self._out_sum = amount

    @property
    def culture(self) -> Culture:
        return self._culture

    @culture.setter
    def culture(self, value: Culture | str) -> None:
        try:
            self._culture = Culture(value)
        except ValueError as e:
            raise InvalidParamError(
                message=f"Unknown culture: {value}",
                details={"culture": str(value)},
            ) from e

    def set_receipt(self, receipt: Mapping[str, Any]) -> None:
        """Encode fiscal receipt structure and store it."""
        self.receipt = encode_receipt(receipt)

    def set_recurring(self) -> None:
        """Mark payment as the first one of a recurring chain."""
        self.recurring = True

    def add_custom_parameters(self, params: Mapping[str, str] | None) -> None:
        """Merge custom parameters, prefixing every key with shp_.

        Existing keys are overwritten (last write wins).

        Raises:
            InvalidParamError: If params is None
        """
        if params is None:
            raise InvalidParamError(message="Custom parameters are required")

        for key, value in params.items():
            self.custom_params[SHP_PREFIX + key] = value

    def get_custom_param(self, name: str) -> str | None:
        """Get custom parameter by its unprefixed name."""
        return self.custom_params.get(SHP_PREFIX + name)

    def validate(self) -> None:
        """Check that all signed fields are set.

        Raises:
            InvalidSumError: If out_sum is not positive
            EmptyDescriptionError: If description is empty
            InvalidInvoiceIdError: If inv_id is not positive
            EmptyReceiptError: If receipt is not set
        """
        if self._out_sum <= 0:
            raise InvalidSumError(details={"out_sum": str(self._out_sum)})

        if not self.description:
            raise EmptyDescriptionError()

        if self.inv_id <= 0:
            raise InvalidInvoiceIdError(details={"inv_id": self.inv_id})

        if not self.receipt:
            raise EmptyReceiptError(details={"inv_id": self.inv_id})

    def sign(self) -> str:
        """Compute outbound signature and store it in signature_value."""
        self.validate()

        self.signature_value = generate_init_signature(
            merchant_login=self._merchant_login,
            out_sum=self._out_sum,
            inv_id=self.inv_id,
            receipt=self.receipt,
            password_1=self._password_1,
            shp_params=self.custom_params,
        )
        logger.debug("Payment signed: inv_id=%d, signature=%s", self.inv_id, self.signature_value)
        return self.signature_value

    def get_payment_url(self, payment_type: PaymentType | str = PaymentType.BASE) -> str:
        """Generate URL for the given payment type.

        base and init_recurring return the redirect URL with all params;
        recurring returns the bare endpoint, params go via
        get_recurring_params().

        Raises:
            InvalidParamError: If payment type is unknown
            PaymentValidationError: If required fields are missing
        """
        payment_type = parse_payment_type(payment_type)
        self.sign()

        if payment_type == PaymentType.RECURRING:
            return self.endpoints.recurring_url

        if payment_type == PaymentType.INIT_RECURRING:
            endpoint = self.endpoints.init_recurring_url
        else:
            endpoint = self.endpoints.payment_url

        url = build_url(endpoint, build_query_params(self))
        logger.info("Payment URL generated: type=%s, inv_id=%d", payment_type.value, self.inv_id)
        return url

    def get_recurring_params(self) -> dict[str, str]:
        """Signed params for a server-to-server recurring charge POST."""
        self.sign()
        return build_query_params(self)

    def validate_result(self, fields: Mapping[str, Any]) -> bool:
        """Verify ResultURL callback with password #2."""
        return self.verifier.validate_result(fields)

    def validate_success(self, fields: Mapping[str, Any]) -> bool:
        """Verify SuccessURL redirect with password #1."""
        return self.verifier.validate_success(fields)

    @property
    def is_valid(self) -> bool:
        """Outcome of the last callback verification."""
        return self.verifier.is_valid

    def get_success_answer(self) -> str:
        """Acknowledgment body for the gateway: OK<InvId>."""
        return format_success_response(self.inv_id)
