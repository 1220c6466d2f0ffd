"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas e inmutabilidad
funcionan correctamente.
"""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from ledger_context.domain.models import (
    CursorContext,
    EditingSession,
    FieldKind,
    FieldSpan,
    LedgerDocument,
    LedgerEntry,
    LedgerLine,
    LineKind,
    ReportCommand,
)


def _line(kind: LineKind, text: str, start: int = 0) -> LedgerLine:
    return LedgerLine(kind=kind, raw_text=text, start_offset=start, end_offset=start + len(text))


class TestLedgerLine:
    """Pruebas para el modelo LedgerLine."""

    def test_propiedades(self):
        line = _line(LineKind.POSTING, "    Assets:Cash", start=10)
        assert line.length == 15
        assert line.column(14) == 4

    def test_fin_de_linea_pertenece_a_la_linea(self):
        line = _line(LineKind.BLANK, "abc", start=4)
        assert line.contains(4)
        assert line.contains(7)
        assert not line.contains(8)
        assert not line.contains(3)

    def test_salto_de_linea_lanza_error(self):
        with pytest.raises(ValueError, match="saltos de línea"):
            _line(LineKind.OTHER, "a\nb")

    def test_offsets_inconsistentes_lanzan_error(self):
        with pytest.raises(ValueError, match="longitud"):
            LedgerLine(kind=LineKind.OTHER, raw_text="abc", start_offset=0, end_offset=5)

    def test_offset_negativo_lanza_error(self):
        with pytest.raises(ValueError, match="negativo"):
            LedgerLine(kind=LineKind.OTHER, raw_text="", start_offset=-1, end_offset=-1)

    def test_inmutable(self):
        line = _line(LineKind.BLANK, "")
        with pytest.raises(FrozenInstanceError):
            line.raw_text = "x"


class TestFieldSpan:
    """Pruebas para el modelo FieldSpan."""

    def test_rango_exterior_por_defecto(self):
        field = FieldSpan(FieldKind.DATE, "2024-01-15", 0, 10)
        assert field.outer_span == field.span == (0, 10)

    def test_rango_exterior_con_delimitadores(self):
        field = FieldSpan(FieldKind.EFFECTIVE_DATE, "2024-01-20", 36, 46, 34, 47)
        assert field.outer_span == (34, 47)

    def test_contains_es_semiabierto(self):
        field = FieldSpan(FieldKind.ACCOUNT, "Assets", 4, 10)
        assert field.contains(4)
        assert field.contains(9)
        assert not field.contains(10)

    def test_texto_y_rango_inconsistentes(self):
        with pytest.raises(ValueError, match="no corresponde"):
            FieldSpan(FieldKind.PAYEE, "Grocery", 0, 3)

    def test_rango_exterior_que_no_contiene_al_valor(self):
        with pytest.raises(ValueError, match="exterior"):
            FieldSpan(FieldKind.EFFECTIVE_DATE, "2024-01-20", 11, 21, 12, 21)


class TestCursorContext:
    """Pruebas para el modelo CursorContext."""

    def test_sin_campo(self):
        context = CursorContext(line=_line(LineKind.BLANK, "  "), field=None)
        assert context.line_kind is LineKind.BLANK
        assert context.field_kind is None
        assert context.text is None

    def test_con_campo(self):
        line = _line(LineKind.TRANSACTION_HEADER, "2024-01-15 Shop")
        context = CursorContext(line=line, field=FieldSpan(FieldKind.DATE, "2024-01-15", 0, 10))
        assert context.field_kind is FieldKind.DATE
        assert context.text == "2024-01-15"

    def test_campo_fuera_de_la_linea_lanza_error(self):
        line = _line(LineKind.TRANSACTION_HEADER, "2024-01-15", start=20)
        with pytest.raises(ValueError, match="fuera de la línea"):
            CursorContext(line=line, field=FieldSpan(FieldKind.DATE, "2024-01-15", 0, 10))


class TestEditingSession:
    """Pruebas para el modelo EditingSession."""

    def test_for_today(self):
        session = EditingSession.for_today(date(2024, 3, 5))
        assert session.default_year == 2024
        assert session.default_month == 3
        assert session.comment_chars == ";"

    def test_for_today_con_overrides(self):
        session = EditingSession.for_today(date(2024, 3, 5), comment_chars=";#")
        assert session.is_comment_lead("#")

    def test_is_comment_lead(self):
        session = EditingSession(default_year=2024, default_month=1)
        assert session.is_comment_lead(";")
        assert not session.is_comment_lead("#")
        assert not session.is_comment_lead("")

    def test_mes_invalido(self):
        with pytest.raises(ValueError, match="Mes fuera de rango"):
            EditingSession(default_year=2024, default_month=13)

    def test_sin_caracteres_de_comentario(self):
        with pytest.raises(ValueError, match="al menos un carácter"):
            EditingSession(default_year=2024, default_month=1, comment_chars="")

    def test_caracter_de_comentario_y_estado_a_la_vez(self):
        with pytest.raises(ValueError, match="a la vez"):
            EditingSession(default_year=2024, default_month=1, comment_chars=";*")

    def test_espacio_como_comentario(self):
        with pytest.raises(ValueError, match="espacios"):
            EditingSession(default_year=2024, default_month=1, comment_chars="; ")


class TestLedgerEntry:
    """Pruebas para el modelo LedgerEntry."""

    def test_postings_y_rango(self):
        header = _line(LineKind.TRANSACTION_HEADER, "2024-01-15 Shop")
        note = _line(LineKind.COMMENT, "    ; nota", start=16)
        posting = _line(LineKind.POSTING, "    Assets:Cash", start=27)
        entry = LedgerEntry(header=header, body=(note, posting))
        assert entry.postings == [posting]
        assert entry.start_offset == 0
        assert entry.end_offset == 42

    def test_sin_cuerpo(self):
        header = _line(LineKind.TRANSACTION_HEADER, "2024-01-15 Shop", start=5)
        entry = LedgerEntry(header=header)
        assert entry.end_offset == 20

    def test_encabezado_invalido(self):
        with pytest.raises(ValueError, match="TRANSACTION_HEADER"):
            LedgerEntry(header=_line(LineKind.POSTING, "    Assets:Cash"))


class TestLedgerDocument:
    """Pruebas para el modelo LedgerDocument."""

    def test_documento_vacio(self):
        assert LedgerDocument(text="  \n").is_empty

    def test_conteo_de_lineas(self):
        assert LedgerDocument(text="a\nb\n").line_count == 3
        assert LedgerDocument(text="a").line_count == 1


class TestReportCommand:
    """Pruebas para el modelo ReportCommand."""

    def test_argumentos_con_cuenta(self):
        command = ReportCommand("cleared", requires_account=True)
        assert command.build_args("Assets:Checking") == ["Assets:Checking"]

    def test_cuenta_requerida(self):
        with pytest.raises(ValueError, match="requiere una cuenta"):
            ReportCommand("cleared", requires_account=True).build_args()

    def test_sin_cuenta(self):
        assert ReportCommand("stats").build_args() == []

    def test_verbo_con_espacios(self):
        with pytest.raises(ValueError, match="inválido"):
            ReportCommand("bal ance")
