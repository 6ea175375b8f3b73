"""Payment providers module."""

from robopay.payments.providers.base import PaymentProvider


def get_payment_provider() -> PaymentProvider:
    """Factory function to get configured payment provider.

    Returns provider based on PAYMENT_PROVIDER setting.
    """
    from robopay.core.config import settings

    if settings.payment_provider == "mock":
        from robopay.payments.providers.mock.provider import MockPaymentProvider

        return MockPaymentProvider()

    if settings.payment_provider == "robokassa":
        from robopay.payments.providers.robokassa.provider import RobokassaProvider

        return RobokassaProvider()

    raise ValueError(f"Unknown payment provider: {settings.payment_provider}")


__all__ = [
    "PaymentProvider",
    "get_payment_provider",
]
