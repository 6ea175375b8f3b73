"""Mock payment provider implementation."""

from collections.abc import Mapping

from robopay.core.config import settings
from robopay.payments.providers.robokassa.provider import RobokassaProvider
from robopay.payments.request import Endpoints
from robopay.payments.verifier import generate_result_signature


class MockPaymentProvider(RobokassaProvider):
    """Mock payment provider for testing.

    Implements the same interface and signature algorithms as Robokassa,
    but uses local endpoints for payment simulation.
    """

    def __init__(self) -> None:
        base_url = settings.webhook_base_url.rstrip("/")
        super().__init__(
            merchant_login=settings.mock_merchant_login,
            password_1=settings.mock_password_1,
            password_2=settings.mock_password_2,
            is_test=settings.robokassa_is_test,
            endpoints=Endpoints(
                payment_url=f"{base_url}/mock-payment",
                init_recurring_url=f"{base_url}/mock-payment",
                recurring_url=f"{base_url}/mock-payment/recurring",
            ),
        )

    def generate_webhook_signature(
        self,
        out_sum: str,
        inv_id: int,
        shp_params: Mapping[str, str] | None = None,
    ) -> str:
        """Generate signature for webhook (result URL).

        Used by the mock payment page to simulate a Robokassa callback.
        """
        return generate_result_signature(
            out_sum=out_sum,
            inv_id=str(inv_id),
            password=self._password_2,
            shp_params=shp_params,
        )
