from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from storefront.shared.money import format_money, line_total, to_decimal


class TestToDecimal:
    def test_string_amount_is_quantized(self):
        assert to_decimal("5.5") == Decimal("5.50")

    def test_float_does_not_leak_binary_expansion(self):
        assert to_decimal(0.1) == Decimal("0.10")

    def test_half_up_rounding(self):
        assert to_decimal("2.005") == Decimal("2.01")

    @pytest.mark.parametrize("value", ["abc", "", None, "NaN", "Infinity"])
    def test_invalid_amount_is_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            to_decimal(value, "price")
        assert "price" in exc.value.messages


def test_format_money_always_has_two_places():
    assert format_money("1299.9") == "1299.90"
    assert format_money(Decimal("7")) == "7.00"


def test_line_total_is_exact():
    assert line_total("10.00", 3) == Decimal("30.00")
    assert line_total("0.10", 3) == Decimal("0.30")
