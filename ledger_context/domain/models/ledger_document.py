"""
Modelo de dominio: Documento ledger.

El "puente" entre los DocumentSource (lectura de archivos) y los
servicios del dominio, como PageText lo es para un extractor de texto.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerDocument:
    """Texto completo de un archivo ledger."""

    text: str
    """Contenido con saltos de línea normalizados a '\\n'."""

    source: str = ""
    """Nombre o ruta del archivo de origen. Para trazabilidad en la bitácora."""

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    @property
    def line_count(self) -> int:
        return self.text.count("\n") + 1
