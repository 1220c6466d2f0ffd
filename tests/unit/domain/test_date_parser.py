"""
Tests para ledger_context.domain.shared.date_parser
"""

from datetime import date

import pytest

from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.shared.date_parser import (
    format_date,
    is_date_token,
    parse_ledger_date,
    parse_partial_date,
)

SESSION = EditingSession(default_year=2024, default_month=3)


class TestIsDateToken:
    """Pruebas para is_date_token."""

    @pytest.mark.parametrize("text", ["2024-01-15", "2024/01/15", "2024.1.5"])
    def test_fechas_validas(self, text):
        assert is_date_token(text)

    @pytest.mark.parametrize("text", ["01/15", "24-01-15", "2024-01-15 ", "", "hoy"])
    def test_no_son_fechas(self, text):
        assert not is_date_token(text)


class TestParseLedgerDate:
    """Pruebas para parse_ledger_date."""

    def test_guiones(self):
        assert parse_ledger_date("2024-01-15") == date(2024, 1, 15)

    def test_diagonales_sin_ceros(self):
        assert parse_ledger_date("2024/1/5") == date(2024, 1, 5)

    def test_fecha_inexistente(self):
        with pytest.raises(ValueError, match="Fecha inválida"):
            parse_ledger_date("2024-02-30")

    def test_fecha_parcial_no_es_valida(self):
        with pytest.raises(ValueError, match="no reconocido"):
            parse_ledger_date("01/15")


class TestParsePartialDate:
    """Pruebas para parse_partial_date."""

    def test_fecha_completa(self):
        assert parse_partial_date("2023-12-31", SESSION) == date(2023, 12, 31)

    def test_mes_y_dia_usa_anio_de_la_sesion(self):
        assert parse_partial_date("01/20", SESSION) == date(2024, 1, 20)

    def test_mes_y_dia_con_guion(self):
        assert parse_partial_date("1-20", SESSION) == date(2024, 1, 20)

    def test_solo_dia_usa_anio_y_mes_de_la_sesion(self):
        assert parse_partial_date("20", SESSION) == date(2024, 3, 20)

    def test_espacios_alrededor(self):
        assert parse_partial_date("  20 ", SESSION) == date(2024, 3, 20)

    def test_texto_vacio(self):
        with pytest.raises(ValueError, match="vacío"):
            parse_partial_date("   ", SESSION)

    def test_formato_no_reconocido(self):
        with pytest.raises(ValueError, match="no reconocido"):
            parse_partial_date("mañana", SESSION)

    def test_dia_inexistente_en_el_mes(self):
        session = EditingSession(default_year=2023, default_month=2)
        with pytest.raises(ValueError, match="Fecha inválida"):
            parse_partial_date("29", session)


class TestFormatDate:
    """Pruebas para format_date."""

    def test_formato_por_defecto(self):
        assert format_date(date(2024, 1, 20), SESSION) == "2024-01-20"

    def test_formato_con_diagonales(self):
        session = EditingSession(default_year=2024, default_month=1, date_format="%Y/%m/%d")
        assert format_date(date(2024, 1, 20), session) == "2024/01/20"

    def test_formato_que_no_es_fecha_ledger(self):
        session = EditingSession(default_year=2024, default_month=1, date_format="%d/%m/%Y")
        with pytest.raises(ValueError, match="no es una fecha ledger"):
            format_date(date(2024, 1, 20), session)
