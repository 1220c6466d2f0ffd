"""
Modelo de dominio: Una línea del documento ledger.

Es la unidad sobre la que trabajan el clasificador y el locator. Guarda
el texto crudo y sus offsets dentro del documento completo, de modo que
los campos localizados (FieldSpan) se expresen directamente en offsets
del documento y el host pueda aplicar ediciones sin recalcular nada.

Los offsets son índices de str de Python (code points), no bytes.
"""

from dataclasses import dataclass

from ledger_context.domain.models.kinds import LineKind


@dataclass(frozen=True)
class LedgerLine:
    """Una línea del archivo ledger, sin el salto de línea final."""

    kind: LineKind
    """Clasificación de la línea (encabezado, posting, comentario...)."""

    raw_text: str
    """Texto de la línea tal cual, sin el '\\n' terminador."""

    start_offset: int
    """Offset del primer carácter de la línea en el documento."""

    end_offset: int
    """Offset justo después del último carácter (posición del '\\n')."""

    @property
    def length(self) -> int:
        return self.end_offset - self.start_offset

    def contains(self, offset: int) -> bool:
        """Indica si el offset cae en la línea. El fin de línea cuenta
        como parte de la línea (es donde queda el cursor al final)."""
        return self.start_offset <= offset <= self.end_offset

    def column(self, offset: int) -> int:
        """Convierte un offset del documento a columna dentro de la línea."""
        return offset - self.start_offset

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if "\n" in self.raw_text:
            raise ValueError(f"Una línea no puede contener saltos de línea: {self.raw_text!r}")
        if self.start_offset < 0:
            raise ValueError(f"Offset inicial negativo: {self.start_offset}")
        if self.end_offset - self.start_offset != len(self.raw_text):
            raise ValueError(
                f"Los offsets [{self.start_offset}, {self.end_offset}) no "
                f"corresponden a la longitud del texto ({len(self.raw_text)})"
            )
