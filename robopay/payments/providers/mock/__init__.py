"""Mock payment provider."""

from robopay.payments.providers.mock.provider import MockPaymentProvider

__all__ = [
    "MockPaymentProvider",
]
