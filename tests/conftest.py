"""Pytest fixtures for payment tests."""

import pytest

from robopay.payments.payment import Payment

MERCHANT_LOGIN = "shop1"
PASSWORD_1 = "pw"
PASSWORD_2 = "pw2"


@pytest.fixture
def payment() -> Payment:
    """Empty payment with test credentials."""
    return Payment(
        merchant_login=MERCHANT_LOGIN,
        password_1=PASSWORD_1,
        password_2=PASSWORD_2,
        is_test=True,
    )


@pytest.fixture
def filled_payment(payment: Payment) -> Payment:
    """Payment with every signed field set."""
    payment.out_sum = "100.00"
    payment.description = "Tariff #7"
    payment.inv_id = 7
    payment.receipt = "r"
    return payment
