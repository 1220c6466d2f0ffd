"""
Puerto de entrada: Fuente de documentos ledger.

Define el contrato para obtener el texto de un archivo ledger. El host
(el CLI, un plugin de editor, un test) decide de dónde sale el texto:

    DocumentSource (interfaz)
    └── PlainTextSource     → archivos .ledger, .journal, .dat, .ldg, .txt

¿Por qué una Abstract Base Class (ABC)?
Para que Python falle al instanciar un adaptador que no implementa
todos los métodos, en lugar de fallar a mitad del procesamiento.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ledger_context.domain.models.ledger_document import LedgerDocument


class DocumentSource(ABC):
    """Interfaz para leer documentos ledger."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si esta fuente puede leer el archivo dado.

        Args:
            file_path: Ruta al archivo a evaluar.

        Returns:
            True si la fuente puede leer el archivo.
        """
        ...

    @abstractmethod
    def read(self, file_path: Path) -> LedgerDocument:
        """Lee el archivo y devuelve el documento con saltos de línea normalizados.

        Raises:
            DocumentError: Si el archivo no existe o no se puede decodificar.
        """
        ...

    @abstractmethod
    def write(self, file_path: Path, text: str) -> None:
        """Guarda el texto editado en el archivo.

        Raises:
            DocumentError: Si no se puede escribir.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible de la fuente. Para logging y debugging."""
        ...
