"""
Modelo de dominio: Tipos de línea y tipos de campo.

Se usan Enum (y no strings sueltos) porque el locator y los mutadores
hacen dispatch sobre estos valores; un typo en un string fallaría en
silencio, un typo en un miembro del Enum falla al importar.
"""

from enum import Enum


class LineKind(Enum):
    """Clasificación de una línea de un archivo ledger."""

    TRANSACTION_HEADER = "transaction_header"
    POSTING = "posting"
    COMMENT = "comment"
    BLANK = "blank"
    OTHER = "other"

    @property
    def is_transaction(self) -> bool:
        """Encabezados y postings son las únicas líneas editables por los mutadores."""
        return self in (LineKind.TRANSACTION_HEADER, LineKind.POSTING)


class FieldKind(Enum):
    """Campo sintáctico dentro de una línea.

    No hay miembro NONE: la ausencia de campo se representa con None
    en CursorContext.field.
    """

    DATE = "date"
    EFFECTIVE_DATE = "effective_date"
    PAYEE = "payee"
    ACCOUNT = "account"
    AMOUNT = "amount"
    COMMENT_TEXT = "comment_text"
