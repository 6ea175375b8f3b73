"""Robokassa payment provider implementation."""

import logging
from collections.abc import Mapping
from typing import Any

from robopay.core.config import settings
from robopay.payments.payment import Payment
from robopay.payments.providers.base import PaymentProvider
from robopay.payments.request import Endpoints
from robopay.payments.schemas import WebhookData
from robopay.payments.verifier import CallbackVerifier, format_success_response

logger = logging.getLogger(__name__)


class RobokassaProvider(PaymentProvider):
    """Robokassa gateway.

    Credentials and endpoints default to settings; explicit arguments
    take precedence.
    """

    def __init__(
        self,
        merchant_login: str | None = None,
        password_1: str | None = None,
        password_2: str | None = None,
        is_test: bool | None = None,
        endpoints: Endpoints | None = None,
    ) -> None:
        self.merchant_login = merchant_login if merchant_login is not None else settings.robokassa_merchant_login
        self._password_1 = password_1 if password_1 is not None else settings.robokassa_password_1
        self._password_2 = password_2 if password_2 is not None else settings.robokassa_password_2
        self.is_test = is_test if is_test is not None else settings.robokassa_is_test
        self.endpoints = endpoints or Endpoints(
            payment_url=settings.robokassa_payment_url,
            init_recurring_url=settings.robokassa_init_recurring_url,
            recurring_url=settings.robokassa_recurring_url,
        )
        self._verifier = CallbackVerifier(self._password_1, self._password_2)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(merchant_login={self.merchant_login!r}, is_test={self.is_test!r})"

    def create_payment(self) -> Payment:
        """Create payment with provider credentials."""
        return Payment(
            merchant_login=self.merchant_login,
            password_1=self._password_1,
            password_2=self._password_2,
            is_test=self.is_test,
            endpoints=self.endpoints,
        )

    def verify_result(self, raw_data: Mapping[str, Any]) -> bool:
        """Verify ResultURL callback."""
        return self._verifier.validate_result(raw_data)

    def verify_success(self, raw_data: Mapping[str, Any]) -> bool:
        """Verify SuccessURL redirect."""
        return self._verifier.validate_success(raw_data)

    def parse_webhook(self, raw_data: Mapping[str, Any]) -> WebhookData:
        """Parse webhook form data to WebhookData."""
        return WebhookData.from_fields(raw_data)

    def format_success_response(self, inv_id: int) -> str:
        """Format success response for webhook."""
        return format_success_response(inv_id)
