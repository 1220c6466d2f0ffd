"""
Tests para ledger_context.domain.shared.amount
"""

from decimal import Decimal

import pytest

from ledger_context.domain.shared.amount import is_amount_string, parse_amount


class TestParseAmount:
    """Pruebas para parse_amount."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("$-42.50", ("$", Decimal("-42.50"))),
            ("-$1,234.56", ("$", Decimal("-1234.56"))),
            ("$1,200.00", ("$", Decimal("1200.00"))),
            ("-42.50 USD", ("USD", Decimal("-42.50"))),
            ("10 AAPL @ $150.00", ("AAPL", Decimal("10"))),
            ("5 AAPL {$148.00}", ("AAPL", Decimal("5"))),
            ("42", ("", Decimal("42"))),
            ('3 "MUTUAL FUND"', ("MUTUAL FUND", Decimal("3"))),
            ("€ 15", ("€", Decimal("15"))),
        ],
    )
    def test_montos(self, text, expected):
        assert parse_amount(text) == expected

    def test_doble_signo(self):
        assert parse_amount("-$-5.00") == ("$", Decimal("5.00"))

    def test_texto_sin_monto(self):
        with pytest.raises(ValueError, match="No se pudo extraer"):
            parse_amount("Assets:Checking")

    def test_texto_vacio(self):
        with pytest.raises(ValueError):
            parse_amount("   ")

    def test_tipo_invalido(self):
        with pytest.raises(TypeError, match="espera str"):
            parse_amount(42.5)


class TestIsAmountString:
    """Pruebas para is_amount_string."""

    @pytest.mark.parametrize("text", ["$-42.50", "-42.50 USD", "10 AAPL @ $150.00"])
    def test_si_es_monto(self, text):
        assert is_amount_string(text)

    @pytest.mark.parametrize("text", ["Assets:Checking", "", "   ", "@ $5"])
    def test_no_es_monto(self, text):
        assert not is_amount_string(text)
