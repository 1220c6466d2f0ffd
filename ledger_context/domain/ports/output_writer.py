"""
Puerto de salida: Exportación del contenido de un documento ledger.

El dominio produce transacciones y campos localizados; este puerto decide
en qué formato se guardan. Hoy es Excel; podría ser CSV sin tocar el
dominio.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.ledger_document import LedgerDocument


class OutputWriter(ABC):
    """Interfaz para exportar un documento ledger."""

    @abstractmethod
    def write(
        self,
        document: LedgerDocument,
        output_path: Path,
        session: EditingSession | None = None,
    ) -> Path:
        """Exporta las transacciones y postings del documento.

        Args:
            document: Documento a exportar.
            output_path: Ruta del archivo de salida.
            session: Sesión con los caracteres de comentario/estado.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura.
        """
        ...
