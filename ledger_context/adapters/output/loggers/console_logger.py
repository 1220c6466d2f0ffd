"""
Adaptador de salida: Bitácora a consola.

Implementación simple de SessionLogger que escribe eventos a stderr
(stdout se reserva para la salida del comando) y acumula un resumen.
"""

import sys
from pathlib import Path
from typing import TextIO

from ledger_context.domain.models.cursor_context import CursorContext
from ledger_context.domain.ports.session_logger import SessionLogger


class ConsoleLogger(SessionLogger):
    """Logger que imprime eventos de la sesión a consola."""

    def __init__(self, stream: TextIO | None = None, verbose: bool = True) -> None:
        self._stream = stream
        self._verbose = verbose
        self._documentos_leidos: int = 0
        self._consultas: int = 0
        self._ediciones: int = 0
        self._reportes: int = 0
        self._exportaciones: int = 0
        self._errores: list[dict] = []

    # --- Documentos ---

    def log_document_loaded(self, file_path: Path, num_lines: int) -> None:
        self._documentos_leidos += 1
        self._emit(f"  📄 Leído: {file_path.name} ({num_lines} líneas)")

    def log_context_resolved(self, file_path: Path, offset: int, context: CursorContext) -> None:
        self._consultas += 1
        campo = context.field_kind.value if context.field_kind else "ninguno"
        self._emit(
            f"  🔍 Contexto en {file_path.name}@{offset}: "
            f"{context.line_kind.value} / {campo}"
        )

    def log_line_edited(self, file_path: Path, line_number: int, description: str) -> None:
        self._ediciones += 1
        self._emit(f"  ✏️  Editado: {file_path.name}:{line_number} — {description}")

    # --- Motor externo ---

    def log_report_start(self, verb: str, args: list[str]) -> None:
        detalle = f" {' '.join(args)}" if args else ""
        self._emit(f"  ⚙️  Ejecutando reporte: {verb}{detalle}")

    def log_report_complete(self, verb: str, num_lines: int) -> None:
        self._reportes += 1
        self._emit(f"  ✅ Reporte {verb}: {num_lines} líneas")

    # --- Exportación ---

    def log_export_complete(self, output_path: Path, num_entries: int) -> None:
        self._exportaciones += 1
        self._emit(f"  📁 Exportado: {output_path} ({num_entries} transacciones)")

    # --- Errores ---

    def log_error(self, source: str, error: Exception) -> None:
        self._errores.append({"origen": source, "error": str(error)})
        self._emit(f"  ❌ Error: {source} — {error}")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "documentos_leidos": self._documentos_leidos,
            "consultas": self._consultas,
            "ediciones": self._ediciones,
            "reportes": self._reportes,
            "exportaciones": self._exportaciones,
            "errores": self._errores,
        }

    def _emit(self, message: str) -> None:
        if self._verbose:
            print(message, file=self._stream or sys.stderr)
