"""
Tests para PlainTextSource (lectura y escritura de archivos ledger).
"""

from pathlib import Path

import pytest

from ledger_context.adapters.input.document_sources.plain_text_source import PlainTextSource
from ledger_context.domain.exceptions import DocumentError


@pytest.fixture
def source():
    return PlainTextSource()


class TestPlainTextSource:
    """Pruebas para PlainTextSource."""

    @pytest.mark.parametrize("name", ["a.ledger", "a.journal", "a.dat", "a.LDG", "a.txt"])
    def test_extensiones_soportadas(self, source, name):
        assert source.can_handle(Path(name))

    def test_extension_no_soportada(self, source, tmp_path):
        path = tmp_path / "estado.pdf"
        path.write_bytes(b"%PDF")
        assert not source.can_handle(path)
        with pytest.raises(DocumentError, match="Extensión no soportada"):
            source.read(path)

    def test_normaliza_saltos_de_linea(self, source, tmp_path):
        path = tmp_path / "diario.ledger"
        path.write_bytes(b"2024-01-15 Shop\r\n    Assets:Cash  $10\r\n")
        document = source.read(path)
        assert document.text == "2024-01-15 Shop\n    Assets:Cash  $10\n"
        assert document.source == str(path)

    def test_archivo_inexistente(self, source, tmp_path):
        with pytest.raises(DocumentError, match="no existe"):
            source.read(tmp_path / "falta.ledger")

    def test_archivo_no_utf8(self, source, tmp_path):
        path = tmp_path / "latin1.ledger"
        path.write_bytes("2024-01-15 Café".encode("latin-1"))
        with pytest.raises(DocumentError, match="utf-8"):
            source.read(path)

    def test_escribir_y_leer(self, source, tmp_path):
        path = tmp_path / "diario.ledger"
        source.write(path, "2024-01-15 Café\n")
        assert source.read(path).text == "2024-01-15 Café\n"

    def test_escribir_en_directorio_inexistente(self, source, tmp_path):
        with pytest.raises(DocumentError, match="No se pudo escribir"):
            source.write(tmp_path / "no" / "existe.ledger", "x")
