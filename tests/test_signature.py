"""Outbound signature: formatting, truncation, signing string."""

import hashlib
from decimal import Decimal

import pytest

from robopay.core.exceptions import InvalidSumError
from robopay.payments.signature import (
    build_shp_string,
    format_sum,
    generate_init_signature,
    truncate_sum,
)


def md5(data: str) -> str:
    return hashlib.md5(data.encode()).hexdigest()


class TestTruncateSum:
    """Test amount truncation."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (10, Decimal("10.00")),
            (10.567, Decimal("10.56")),
            ("10.999", Decimal("10.99")),
            (Decimal("0.019"), Decimal("0.01")),
            (Decimal("1E+3"), Decimal("1000.00")),
        ],
    )
    def test_truncates_not_rounds(self, amount, expected):
        assert truncate_sum(amount) == expected

    @pytest.mark.parametrize("amount", [10.567, "99.999", Decimal("0.5"), 3])
    def test_idempotent(self, amount):
        once = truncate_sum(amount)
        assert truncate_sum(once) == once

    @pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity", None, "1e30"])
    def test_rejects_non_numbers(self, amount):
        with pytest.raises(InvalidSumError):
            truncate_sum(amount)


class TestFormatSum:
    """Test amount formatting for the signing string."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("100"), "100.00"),
            (Decimal("99.5"), "99.50"),
            (Decimal("199.99"), "199.99"),
            (Decimal("1E+6"), "1000000.00"),
        ],
    )
    def test_two_decimal_places(self, amount, expected):
        assert format_sum(amount) == expected


class TestShpString:
    """Test custom parameter segment."""

    def test_empty(self):
        assert build_shp_string({}) == ""

    def test_sorted_by_key(self):
        params = {"shp_b": "2", "shp_a": "1", "shp_C": "3"}
        assert build_shp_string(params) == "shp_C=3:shp_a=1:shp_b=2"


class TestInitSignature:
    """Test outbound signature generation."""

    def test_reference_example(self):
        signature = generate_init_signature("shop1", Decimal("100.00"), 7, "r", "pw")
        assert signature == md5("shop1:100.00:7:r:pw")

    def test_with_custom_params(self):
        signature = generate_init_signature(
            "shop1",
            Decimal("100"),
            7,
            "r",
            "pw",
            {"shp_user": "42", "shp_order": "abc"},
        )
        assert signature == md5("shop1:100.00:7:r:pw:shp_order=abc:shp_user=42")

    def test_lowercase_hex(self):
        signature = generate_init_signature("shop1", Decimal("1"), 1, "r", "pw")
        assert signature == signature.lower()
        assert len(signature) == 32

    def test_custom_param_order_irrelevant(self):
        first = {"shp_a": "1", "shp_b": "2", "shp_c": "3"}
        second = {"shp_c": "3", "shp_a": "1", "shp_b": "2"}

        assert generate_init_signature("m", Decimal("5"), 1, "r", "pw", first) == generate_init_signature(
            "m", Decimal("5"), 1, "r", "pw", second
        )
