"""Payment processing module."""

from robopay.payments.payment import Payment
from robopay.payments.providers import get_payment_provider
from robopay.payments.receipt import encode_receipt
from robopay.payments.request import Endpoints
from robopay.payments.schemas import Culture, PaymentType, TrustTier, WebhookData
from robopay.payments.verifier import CallbackVerifier, format_success_response

__all__ = [
    "CallbackVerifier",
    "Culture",
    "Endpoints",
    "Payment",
    "PaymentType",
    "TrustTier",
    "WebhookData",
    "encode_receipt",
    "format_success_response",
    "get_payment_provider",
]
