"""Base payment provider interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from robopay.payments.payment import Payment
from robopay.payments.schemas import WebhookData


class PaymentProvider(ABC):
    """Abstract base class for payment providers.

    All payment providers (Mock, Robokassa) must implement this interface.
    """

    @abstractmethod
    def create_payment(self) -> Payment:
        """Create an empty payment bound to provider credentials.

        Returns:
            Payment ready to be filled in and signed
        """

    @abstractmethod
    def verify_result(self, raw_data: Mapping[str, Any]) -> bool:
        """Verify ResultURL callback signature.

        Args:
            raw_data: Raw form data from webhook

        Returns:
            True if signature is valid
        """

    @abstractmethod
    def verify_success(self, raw_data: Mapping[str, Any]) -> bool:
        """Verify SuccessURL redirect signature.

        Args:
            raw_data: Raw query data from redirect

        Returns:
            True if signature is valid
        """

    @abstractmethod
    def parse_webhook(self, raw_data: Mapping[str, Any]) -> WebhookData:
        """Parse incoming webhook to unified format.

        Args:
            raw_data: Raw form data from webhook

        Returns:
            Parsed WebhookData
        """

    @abstractmethod
    def format_success_response(self, inv_id: int) -> str:
        """Format response for successful webhook processing.

        Args:
            inv_id: Invoice ID that was processed

        Returns:
            Response string (e.g., 'OK12345\\n' for Robokassa)
        """
