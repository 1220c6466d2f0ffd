"""
Servicio de dominio: Insertar y quitar fechas efectivas.

Funciones puras sobre el texto de una línea: reciben un LedgerLine y
devuelven el texto nuevo de la línea. Aplicarlo al documento es tarea
del host (ver context_parser.replace_line).

Formas que se escriben:
    Encabezado:  "2024-01-15 * Grocery"   → "2024-01-15=2024-01-20 * Grocery"
    Posting:     "    Assets:Cash  $10"   → "    Assets:Cash  $10  ; [=2024-01-20]"
    Posting con comentario previo:
                 "    Assets:Cash  $10  ; nota" → "...  ; nota [=2024-01-20]"
    Posting con comentario vacío:
                 "    Assets:Cash  $10  ;"      → "    Assets:Cash  $10  ;[=2024-01-20]"

Quitar una fecha efectiva borra exactamente lo que insertar agregó, así
que insertar y luego quitar deja la línea original.
"""

from ledger_context.domain.exceptions import NotInTransactionError
from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.kinds import FieldKind, LineKind
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.services.field_locator import LineLayout, scan_line
from ledger_context.domain.shared.date_parser import is_date_token

_BLANKS = " \t"


def with_effective_date_inserted(
    line: LedgerLine,
    date_text: str,
    session: EditingSession | None = None,
) -> str:
    """Devuelve la línea con la fecha efectiva `date_text`.

    Si la línea ya tiene fecha efectiva, solo se reemplaza el valor.

    Args:
        line: Encabezado de transacción o posting.
        date_text: Fecha completa (YYYY-MM-DD, YYYY/MM/DD...).
        session: Sesión con el carácter de comentario a usar.

    Returns:
        Texto nuevo de la línea.

    Raises:
        ValueError: Si date_text no es una fecha de archivo ledger.
        NotInTransactionError: Si la línea no es encabezado ni posting.
    """
    if not is_date_token(date_text):
        raise ValueError(f"Fecha efectiva inválida: '{date_text}'. Esperado: YYYY-MM-DD")
    if not line.kind.is_transaction:
        raise NotInTransactionError(line.raw_text, "insertar fecha efectiva")

    session = session or EditingSession.for_today()
    layout = scan_line(line, session)
    text = line.raw_text

    existing = layout.field(FieldKind.EFFECTIVE_DATE)
    if existing is not None:
        start, end = line.column(existing.start), line.column(existing.end)
        return text[:start] + date_text + text[end:]

    if line.kind is LineKind.TRANSACTION_HEADER:
        date_end = line.column(layout.date_end)
        return text[:date_end] + "=" + date_text + text[date_end:]

    if layout.comment_offset is None:
        return f"{text}  {session.comment_chars[0]} [={date_text}]"
    if layout.field(FieldKind.COMMENT_TEXT) is None:
        # Comentario vacío: la anotación va pegada al carácter de comentario
        body = line.column(layout.comment_offset) + 1
        return text[:body] + f"[={date_text}]" + text[body:]
    return f"{text} [={date_text}]"


def with_effective_date_removed(line: LedgerLine, session: EditingSession | None = None) -> str:
    """Devuelve la línea sin su fecha efectiva (sin cambios si no tiene).

    Se borra el campo completo con sus delimitadores ('=' o '[=...]'),
    más el espacio o el comentario que quedarían huérfanos.
    """
    session = session or EditingSession.for_today()
    layout = scan_line(line, session)
    effective = layout.field(FieldKind.EFFECTIVE_DATE)
    if effective is None:
        return line.raw_text

    text = line.raw_text
    outer_start, outer_end = (line.column(o) for o in effective.outer_span)

    if line.kind is LineKind.TRANSACTION_HEADER:
        if text[outer_start] == "=" or (outer_start > 0 and text[outer_start - 1] not in _BLANKS):
            return text[:outer_start] + text[outer_end:]
        return _cut_with_blank(text, outer_start, outer_end)

    if _annotation_is_whole_comment(layout, text, outer_start, outer_end):
        comment_col = line.column(layout.comment_offset)
        if outer_start == comment_col + 1:
            return text[:outer_start] + text[outer_end:]
        if text[max(comment_col - 2, 0):comment_col] == "  ":
            cut_from = comment_col - 2
        else:
            cut_from = len(text[:comment_col].rstrip(_BLANKS))
        return text[:cut_from] + text[outer_end:]

    return _cut_with_blank(text, outer_start, outer_end)


def _annotation_is_whole_comment(
    layout: LineLayout,
    text: str,
    outer_start: int,
    outer_end: int,
) -> bool:
    """Indica si el comentario no tiene nada más que la anotación."""
    if layout.comment_offset is None:
        return False
    comment_col = layout.comment_offset - layout.line.start_offset
    rest = text[comment_col + 1:outer_start] + text[outer_end:]
    return not rest.strip()


def _cut_with_blank(text: str, start: int, end: int) -> str:
    """Quita text[start:end] y un espacio vecino para no dejar dos juntos.

    Se prefiere el espacio de la derecha; si la anotación está al final,
    se quita el de la izquierda.
    """
    if end < len(text) and text[end] in _BLANKS:
        end += 1
    elif start > 0 and text[start - 1] in _BLANKS:
        start -= 1
    return text[:start] + text[end:]
