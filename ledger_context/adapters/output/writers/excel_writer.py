"""
Adaptador de salida: Exportación a Excel.

Genera un archivo Excel con 2 hojas a partir de lo que el parser
localiza en el documento:
- Hoja "Resumen": cuántas líneas hay de cada tipo, transacciones y postings.
- Hoja "Transacciones": una fila por posting con los campos de su
  encabezado (fecha, fecha efectiva, estado, beneficiario).

Los montos se exportan como texto (tal cual en el archivo) y además,
cuando se pueden leer, como commodity + cantidad numérica. No se calcula
ningún saldo: eso es trabajo del motor.
"""

from pathlib import Path

import pandas as pd

from ledger_context.domain.exceptions import OutputError
from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.kinds import FieldKind, LineKind
from ledger_context.domain.models.ledger_document import LedgerDocument
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.ports.output_writer import OutputWriter
from ledger_context.domain.services.context_parser import iter_entries, split_lines
from ledger_context.domain.services.field_locator import LineLayout, scan_line
from ledger_context.domain.shared.amount import is_amount_string, parse_amount

TRANSACTION_COLUMNS: list[str] = [
    "Línea",
    "Fecha",
    "Fecha efectiva",
    "Estado",
    "Beneficiario",
    "Cuenta",
    "Monto",
    "Commodity",
    "Cantidad",
    "Comentario",
]


class ExcelWriter(OutputWriter):
    """Exporta las transacciones de un documento ledger a Excel."""

    def write(
        self,
        document: LedgerDocument,
        output_path: Path,
        session: EditingSession | None = None,
    ) -> Path:
        """Escribe el documento a Excel.

        Args:
            document: Documento ledger.
            output_path: Ruta del archivo. Si no termina en .xlsx, se le
                         agrega la extensión.
            session: Sesión con caracteres de comentario/estado.

        Returns:
            Ruta del archivo creado.
        """
        session = session or EditingSession.for_today()

        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._escribir_excel(document, output_path, session)
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    def build_transaction_rows(
        self,
        document: LedgerDocument,
        session: EditingSession | None = None,
    ) -> list[dict]:
        """Filas de la hoja Transacciones: una por posting.

        La fecha efectiva y el estado del posting, si los tiene, tienen
        prioridad sobre los del encabezado.
        """
        session = session or EditingSession.for_today()
        text = document.text
        filas: list[dict] = []

        for entry in iter_entries(text, session):
            header = scan_line(entry.header, session)
            fecha = _field_text(header, FieldKind.DATE)
            fecha_efectiva = _field_text(header, FieldKind.EFFECTIVE_DATE)
            estado = _status(header)
            beneficiario = _field_text(header, FieldKind.PAYEE)

            for posting_line in entry.postings:
                posting = scan_line(posting_line, session)
                monto = _field_text(posting, FieldKind.AMOUNT)
                commodity, cantidad = "", None
                if monto and is_amount_string(monto):
                    commodity, quantity = parse_amount(monto)
                    cantidad = float(quantity)

                filas.append(
                    {
                        "Línea": _line_number(text, posting_line),
                        "Fecha": fecha,
                        "Fecha efectiva": _field_text(posting, FieldKind.EFFECTIVE_DATE)
                        or fecha_efectiva,
                        "Estado": _status(posting) or estado,
                        "Beneficiario": beneficiario,
                        "Cuenta": _field_text(posting, FieldKind.ACCOUNT),
                        "Monto": monto,
                        "Commodity": commodity,
                        "Cantidad": cantidad,
                        "Comentario": " ".join(
                            f.text for f in posting.fields if f.kind is FieldKind.COMMENT_TEXT
                        ),
                    }
                )

        return filas

    def build_summary_rows(
        self,
        document: LedgerDocument,
        session: EditingSession | None = None,
    ) -> list[dict]:
        """Filas de la hoja Resumen: conteos por tipo de línea."""
        session = session or EditingSession.for_today()
        lines = split_lines(document.text, session)
        entries = iter_entries(document.text, session)

        filas = [
            {"Concepto": f"Líneas {kind.value}", "Total": sum(1 for line in lines if line.kind is kind)}
            for kind in LineKind
        ]
        filas.append({"Concepto": "Transacciones", "Total": len(entries)})
        filas.append(
            {"Concepto": "Postings", "Total": sum(len(entry.postings) for entry in entries)}
        )
        return filas

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(
        self,
        document: LedgerDocument,
        output_path: Path,
        session: EditingSession,
    ) -> None:
        df_transacciones = pd.DataFrame(
            self.build_transaction_rows(document, session), columns=TRANSACTION_COLUMNS
        )
        df_resumen = pd.DataFrame(
            self.build_summary_rows(document, session), columns=["Concepto", "Total"]
        )

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_transacciones.to_excel(writer, index=False, sheet_name="Transacciones")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_transacciones = writer.sheets["Transacciones"]

            # Texto para fechas y montos: se exportan tal cual en el archivo
            text_format = workbook.add_format({"num_format": "@"})
            quantity_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_resumen.set_column("A:A", 28)  # Concepto
            ws_resumen.set_column("B:B", 10)  # Total

            ws_transacciones.set_column("A:A", 8)  # Línea
            ws_transacciones.set_column("B:C", 12, text_format)  # Fechas
            ws_transacciones.set_column("D:D", 7)  # Estado
            ws_transacciones.set_column("E:E", 35)  # Beneficiario
            ws_transacciones.set_column("F:F", 35)  # Cuenta
            ws_transacciones.set_column("G:G", 18, text_format)  # Monto
            ws_transacciones.set_column("H:H", 10)  # Commodity
            ws_transacciones.set_column("I:I", 15, quantity_format)  # Cantidad
            ws_transacciones.set_column("J:J", 40)  # Comentario


def _field_text(layout: LineLayout, kind: FieldKind) -> str:
    field = layout.field(kind)
    return field.text if field is not None else ""


def _status(layout: LineLayout) -> str:
    if layout.status_offset is None:
        return ""
    return layout.line.raw_text[layout.line.column(layout.status_offset)]


def _line_number(text: str, line: LedgerLine) -> int:
    return text.count("\n", 0, line.start_offset) + 1
