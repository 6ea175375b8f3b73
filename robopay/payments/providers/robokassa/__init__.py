"""Robokassa payment provider."""

from robopay.payments.providers.robokassa.provider import RobokassaProvider

__all__ = [
    "RobokassaProvider",
]
