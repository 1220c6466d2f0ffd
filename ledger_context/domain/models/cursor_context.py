"""
Modelo de dominio: Contexto del cursor.

Es el resultado de consultar el parser en un offset. Es una "foto"
inmutable calculada desde el texto: no guarda ninguna referencia a un
buffer vivo. Si el documento cambia, se vuelve a calcular (es O(largo
de la línea), así que no hay nada que cachear).
"""

from dataclasses import dataclass

from ledger_context.domain.models.field_span import FieldSpan
from ledger_context.domain.models.kinds import FieldKind, LineKind
from ledger_context.domain.models.ledger_line import LedgerLine


@dataclass(frozen=True)
class CursorContext:
    """Línea y campo bajo el cursor."""

    line: LedgerLine
    """Línea que contiene el offset consultado."""

    field: FieldSpan | None
    """Campo que contiene el offset, o None si el cursor está sobre
    espacios o puntuación que no pertenecen a ningún campo."""

    @property
    def line_kind(self) -> LineKind:
        return self.line.kind

    @property
    def field_kind(self) -> FieldKind | None:
        return self.field.kind if self.field is not None else None

    @property
    def text(self) -> str | None:
        """Valor del campo bajo el cursor, o None."""
        return self.field.text if self.field is not None else None

    def __post_init__(self) -> None:
        if self.field is None:
            return
        if self.field.start < self.line.start_offset or self.field.end > self.line.end_offset:
            raise ValueError(
                f"El campo {self.field.kind.value} [{self.field.start}, {self.field.end}) "
                f"queda fuera de la línea [{self.line.start_offset}, {self.line.end_offset})"
            )
