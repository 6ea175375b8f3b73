"""Inbound callback verification."""

import hashlib

import pytest

from robopay.payments.schemas import TrustTier
from robopay.payments.verifier import (
    CallbackVerifier,
    extract_shp_params,
    format_success_response,
    generate_result_signature,
)

PASSWORD_1 = "pw"
PASSWORD_2 = "pw2"


def md5(data: str) -> str:
    return hashlib.md5(data.encode()).hexdigest()


def mutate(value: str) -> str:
    """Change the last character of a string."""
    last = "1" if value[-1] != "1" else "2"
    return value[:-1] + last


@pytest.fixture
def verifier() -> CallbackVerifier:
    return CallbackVerifier(PASSWORD_1, PASSWORD_2)


@pytest.fixture
def result_fields() -> dict[str, str]:
    """ResultURL callback signed with password #2."""
    fields = {
        "OutSum": "100.000000",
        "InvId": "7",
        "shp_user": "42",
        "shp_order": "abc",
        "Fee": "3.50",
    }
    fields["SignatureValue"] = md5(f"100.000000:7:{PASSWORD_2}:shp_order=abc:shp_user=42")
    return fields


class TestResultSignature:
    """Test inbound signing string."""

    def test_without_custom_params(self):
        assert generate_result_signature("100.00", "7", "pw") == md5("100.00:7:pw")

    def test_values_used_verbatim(self):
        assert generate_result_signature("100.000000", "7", "pw") == md5("100.000000:7:pw")

    def test_extract_shp_params(self, result_fields):
        assert extract_shp_params(result_fields) == {"shp_user": "42", "shp_order": "abc"}


class TestCallbackVerifier:
    """Test trust tiers and comparison."""

    def test_result_accepted(self, verifier, result_fields):
        assert verifier.validate_result(result_fields) is True
        assert verifier.is_valid is True

    def test_result_tier_uses_password_2(self, verifier, result_fields):
        assert verifier.validate_success(result_fields) is False
        assert verifier.is_valid is False

    def test_success_tier_uses_password_1(self, verifier):
        fields = {"OutSum": "10.00", "InvId": "3"}
        fields["SignatureValue"] = md5(f"10.00:3:{PASSWORD_1}")

        assert verifier.validate_success(fields) is True
        assert verifier.verify(fields, TrustTier.PAYMENT) is True
        assert verifier.validate_result(fields) is False

    def test_case_insensitive(self, verifier, result_fields):
        result_fields["SignatureValue"] = result_fields["SignatureValue"].upper()
        assert verifier.validate_result(result_fields) is True

    @pytest.mark.parametrize("field", ["SignatureValue", "OutSum", "InvId", "shp_user", "shp_order"])
    def test_single_char_mutation_rejected(self, verifier, result_fields, field):
        result_fields[field] = mutate(result_fields[field])
        assert verifier.validate_result(result_fields) is False

    def test_extra_custom_param_rejected(self, verifier, result_fields):
        result_fields["shp_extra"] = "1"
        assert verifier.validate_result(result_fields) is False

    def test_non_shp_fields_ignored(self, verifier, result_fields):
        result_fields["PaymentMethod"] = "BankCard"
        assert verifier.validate_result(result_fields) is True

    @pytest.mark.parametrize("field", ["OutSum", "InvId", "SignatureValue"])
    def test_missing_field_is_invalid(self, verifier, result_fields, field):
        verifier.validate_result(result_fields)
        del result_fields[field]

        assert verifier.validate_result(result_fields) is False
        assert verifier.is_valid is False

    def test_is_valid_tracks_last_check(self, verifier, result_fields):
        assert verifier.is_valid is False
        verifier.validate_result(result_fields)
        assert verifier.is_valid is True

        result_fields["OutSum"] = "1.00"
        verifier.validate_result(result_fields)
        assert verifier.is_valid is False

    def test_repr_hides_passwords(self, verifier):
        assert PASSWORD_2 not in repr(verifier)


class TestPaymentDelegation:
    """Test verification through a Payment."""

    def test_validate_result(self, payment, result_fields):
        assert payment.validate_result(result_fields) is True
        assert payment.is_valid is True

    def test_validate_success(self, payment, result_fields):
        assert payment.validate_success(result_fields) is False
        assert payment.is_valid is False


class TestSuccessResponse:
    """Test acknowledgment body."""

    def test_format(self):
        assert format_success_response(12345) == "OK12345\n"
