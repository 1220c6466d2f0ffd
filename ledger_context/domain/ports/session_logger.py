"""
Puerto de salida: Bitácora de la sesión.

Define los EVENTOS que interesan (se cargó un documento, se editó una
línea, el motor falló...) sin decir cómo se registran. La implementación
puede imprimir a consola, escribir con `logging` o acumular en memoria
para los tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from ledger_context.domain.models.cursor_context import CursorContext


class SessionLogger(ABC):
    """Interfaz para la bitácora de una sesión de edición."""

    # --- Documentos ---

    @abstractmethod
    def log_document_loaded(self, file_path: Path, num_lines: int) -> None:
        """Registra que se leyó un documento."""
        ...

    @abstractmethod
    def log_context_resolved(self, file_path: Path, offset: int, context: CursorContext) -> None:
        """Registra el resultado de una consulta de contexto."""
        ...

    @abstractmethod
    def log_line_edited(self, file_path: Path, line_number: int, description: str) -> None:
        """Registra una edición aplicada a una línea.

        Args:
            file_path: Documento editado.
            line_number: Número de línea (1-indexed).
            description: Qué se hizo. Ejemplo: "fecha efectiva 2024-01-20".
        """
        ...

    # --- Motor externo ---

    @abstractmethod
    def log_report_start(self, verb: str, args: list[str]) -> None:
        """Registra la invocación del motor."""
        ...

    @abstractmethod
    def log_report_complete(self, verb: str, num_lines: int) -> None:
        """Registra el fin exitoso de un reporte."""
        ...

    # --- Exportación ---

    @abstractmethod
    def log_export_complete(self, output_path: Path, num_entries: int) -> None:
        """Registra que se generó un archivo de exportación."""
        ...

    # --- Errores ---

    @abstractmethod
    def log_error(self, source: str, error: Exception) -> None:
        """Registra un error. `source` es el archivo o el verbo involucrado."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de la sesión.

        Returns:
            Diccionario con métricas:
            {
                'documentos_leidos': int,
                'consultas': int,
                'ediciones': int,
                'reportes': int,
                'exportaciones': int,
                'errores': list[dict],  # [{origen, error}]
            }
        """
        ...
