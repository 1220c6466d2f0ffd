"""
Modelo de dominio: Transacción completa.

Una transacción es un encabezado en columna 0 más las líneas indentadas
que lo siguen (postings y comentarios de la transacción). La indentación
es la única pista estructural del formato.
"""

from dataclasses import dataclass

from ledger_context.domain.models.kinds import LineKind
from ledger_context.domain.models.ledger_line import LedgerLine


@dataclass(frozen=True)
class LedgerEntry:
    """Encabezado de transacción con sus líneas indentadas."""

    header: LedgerLine
    body: tuple[LedgerLine, ...] = ()
    """Líneas indentadas que siguen al encabezado (postings y comentarios)."""

    @property
    def postings(self) -> list[LedgerLine]:
        return [line for line in self.body if line.kind is LineKind.POSTING]

    @property
    def start_offset(self) -> int:
        return self.header.start_offset

    @property
    def end_offset(self) -> int:
        return self.body[-1].end_offset if self.body else self.header.end_offset

    def __post_init__(self) -> None:
        if self.header.kind is not LineKind.TRANSACTION_HEADER:
            raise ValueError(
                f"El encabezado debe ser TRANSACTION_HEADER, no {self.header.kind.value}"
            )
