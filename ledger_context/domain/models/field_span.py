"""
Modelo de dominio: Campo localizado dentro de una línea.

Un FieldSpan tiene dos rangos:
- [start, end): el valor del campo, ya sin puntuación estructural.
  Es lo que se devuelve al consultar el cursor.
- [outer_start, outer_end): el campo CON sus delimitadores ('=', '[=', ']').
  Es lo que se borra al quitar una fecha efectiva.

Para la mayoría de los campos (fecha, cuenta, monto) ambos rangos
coinciden.
"""

from dataclasses import dataclass

from ledger_context.domain.models.kinds import FieldKind


@dataclass(frozen=True)
class FieldSpan:
    """Campo sintáctico localizado en el documento."""

    kind: FieldKind
    """Qué campo es: fecha, fecha efectiva, beneficiario, cuenta, monto o comentario."""

    text: str
    """Valor del campo, recortado de espacios y delimitadores."""

    start: int
    """Offset (documento) del primer carácter de `text`."""

    end: int
    """Offset (documento) justo después del último carácter de `text`."""

    outer_start: int | None = None
    """Inicio incluyendo delimitadores. None = igual a start."""

    outer_end: int | None = None
    """Fin incluyendo delimitadores. None = igual a end."""

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)

    @property
    def outer_span(self) -> tuple[int, int]:
        outer_start = self.start if self.outer_start is None else self.outer_start
        outer_end = self.end if self.outer_end is None else self.outer_end
        return (outer_start, outer_end)

    def contains(self, offset: int) -> bool:
        """Rango semiabierto: el offset `end` ya no pertenece al campo."""
        return self.start <= offset < self.end

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Rango inválido: [{self.start}, {self.end})")
        if self.end - self.start != len(self.text):
            raise ValueError(
                f"El rango [{self.start}, {self.end}) no corresponde al texto {self.text!r}"
            )
        outer_start, outer_end = self.outer_span
        if outer_start > self.start or outer_end < self.end:
            raise ValueError(
                f"El rango exterior [{outer_start}, {outer_end}) no contiene "
                f"al rango del valor [{self.start}, {self.end})"
            )
