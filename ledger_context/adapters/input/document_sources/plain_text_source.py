"""
Adaptador de entrada: Archivos ledger de texto plano.

Lee el archivo como UTF-8 y normaliza los saltos de línea para que
los offsets que devuelve el parser correspondan a un texto con '\\n'.
"""

from pathlib import Path

from ledger_context.domain.exceptions import DocumentError
from ledger_context.domain.models.ledger_document import LedgerDocument
from ledger_context.domain.ports.document_source import DocumentSource
from ledger_context.domain.shared.text_cleaner import normalize_line_endings


class PlainTextSource(DocumentSource):
    """Lee y escribe archivos ledger de texto plano."""

    # Extensiones habituales de archivos ledger/hledger
    _SUFFIXES: tuple[str, ...] = (".ledger", ".journal", ".dat", ".ldg", ".txt")

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "plain-text"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self._SUFFIXES

    def read(self, file_path: Path) -> LedgerDocument:
        """Lee el archivo completo.

        Raises:
            DocumentError: Si la extensión no es de ledger, el archivo no
                           existe o no se puede decodificar.
        """
        if not self.can_handle(file_path):
            raise DocumentError(
                str(file_path),
                f"Extensión no soportada '{file_path.suffix}'. "
                f"Esperado: {', '.join(self._SUFFIXES)}",
            )
        if not file_path.is_file():
            raise DocumentError(str(file_path), "El archivo no existe")

        try:
            raw = file_path.read_text(encoding=self._encoding)
        except UnicodeDecodeError as e:
            raise DocumentError(str(file_path), f"No es texto {self._encoding} válido: {e}")
        except OSError as e:
            raise DocumentError(str(file_path), str(e))

        return LedgerDocument(text=normalize_line_endings(raw), source=str(file_path))

    def write(self, file_path: Path, text: str) -> None:
        try:
            file_path.write_text(text, encoding=self._encoding)
        except OSError as e:
            raise DocumentError(str(file_path), f"No se pudo escribir: {e}")
