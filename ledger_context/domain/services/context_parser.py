"""
Servicio de dominio: Parser de contexto sobre el documento completo.

Es la puerta de entrada para el host: recibe el texto completo y un
offset y responde qué hay bajo el cursor. Todo se recalcula desde el
texto en cada consulta; no se guarda ninguna referencia al documento.

También ofrece la navegación por transacciones (encabezado + líneas
indentadas) y el reemplazo puro de una línea, que es como el host
aplica el resultado de un mutador.
"""

from ledger_context.domain.models.cursor_context import CursorContext
from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.kinds import LineKind
from ledger_context.domain.models.ledger_entry import LedgerEntry
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.services.field_locator import locate_field
from ledger_context.domain.services.line_classifier import classify_line


def split_lines(text: str, session: EditingSession | None = None) -> list[LedgerLine]:
    """Divide el documento en líneas clasificadas.

    Un documento que termina en '\\n' tiene una última línea vacía, igual
    que str.split('\\n').
    """
    session = session or EditingSession.for_today()
    lines: list[LedgerLine] = []
    start = 0
    for raw in text.split("\n"):
        lines.append(_make_line(raw, start, session))
        start += len(raw) + 1
    return lines


def line_at(text: str, offset: int, session: EditingSession | None = None) -> LedgerLine:
    """Devuelve la línea que contiene el offset.

    Un offset sobre el '\\n' pertenece a la línea de la izquierda (es el
    fin de esa línea). Un offset más allá del texto se trata como el
    fin del documento.

    Raises:
        ValueError: Si el offset es negativo.
    """
    if offset < 0:
        raise ValueError(f"El offset no puede ser negativo: {offset}")
    session = session or EditingSession.for_today()
    offset = min(offset, len(text))

    line_start = text.rfind("\n", 0, offset) + 1
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)
    return _make_line(text[line_start:line_end], line_start, session)


def line_by_number(text: str, number: int, session: EditingSession | None = None) -> LedgerLine:
    """Devuelve la línea número `number` (1-indexed, como la muestra un editor).

    Raises:
        ValueError: Si el número está fuera del documento.
    """
    lines = split_lines(text, session)
    if not 1 <= number <= len(lines):
        raise ValueError(f"Línea fuera de rango: {number}. El documento tiene {len(lines)} líneas.")
    return lines[number - 1]


def parse_context(
    text: str,
    offset: int,
    session: EditingSession | None = None,
) -> CursorContext:
    """Calcula el contexto (línea y campo) en el offset del documento.

    Nunca falla para texto válido: si el cursor no está en un campo, el
    contexto trae field=None.

    Ejemplos:
        >>> ctx = parse_context("2024-01-15 * Grocery Store", 5)
        >>> ctx.field_kind, ctx.text
        (<FieldKind.DATE: 'date'>, '2024-01-15')
    """
    session = session or EditingSession.for_today()
    line = line_at(text, offset, session)
    return CursorContext(line=line, field=locate_field(line, offset, session))


def iter_entries(text: str, session: EditingSession | None = None) -> list[LedgerEntry]:
    """Agrupa el documento en transacciones.

    Una transacción es un encabezado seguido de todas las líneas
    indentadas no vacías que vienen inmediatamente después. Una línea
    vacía o cualquier línea en columna 0 la termina.
    """
    entries: list[LedgerEntry] = []
    header: LedgerLine | None = None
    body: list[LedgerLine] = []

    for line in split_lines(text, session):
        if header is not None and _is_entry_body(line):
            body.append(line)
            continue
        if header is not None:
            entries.append(LedgerEntry(header=header, body=tuple(body)))
            header, body = None, []
        if line.kind is LineKind.TRANSACTION_HEADER:
            header = line

    if header is not None:
        entries.append(LedgerEntry(header=header, body=tuple(body)))
    return entries


def entry_bounds(
    text: str,
    offset: int,
    session: EditingSession | None = None,
) -> tuple[int, int] | None:
    """Rango [inicio, fin) de la transacción que contiene el offset.

    Returns:
        Tupla de offsets del documento, o None si el offset no está
        dentro de una transacción (línea vacía, directiva, etc.).
    """
    for entry in iter_entries(text, session):
        if entry.start_offset <= offset <= entry.end_offset:
            return (entry.start_offset, entry.end_offset)
    return None


def replace_line(text: str, line: LedgerLine, new_line_text: str) -> str:
    """Devuelve el documento con `line` reemplazada por `new_line_text`.

    Se valida que la línea siga intacta en el texto: un LedgerLine es una
    foto, y aplicarlo sobre un documento que ya cambió corrompería el
    archivo.

    Raises:
        ValueError: Si la línea nueva contiene saltos de línea o si la
                    línea original ya no está en esos offsets.
    """
    if "\n" in new_line_text:
        raise ValueError("La línea de reemplazo no puede contener saltos de línea")
    if text[line.start_offset:line.end_offset] != line.raw_text:
        raise ValueError(
            f"La línea en [{line.start_offset}, {line.end_offset}) ya no coincide "
            f"con el documento; recalcular el contexto"
        )
    if line.end_offset < len(text) and text[line.end_offset] != "\n":
        raise ValueError("El fin de la línea no coincide con un salto de línea del documento")
    return text[: line.start_offset] + new_line_text + text[line.end_offset :]


def _make_line(raw: str, start: int, session: EditingSession) -> LedgerLine:
    return LedgerLine(
        kind=classify_line(raw, session),
        raw_text=raw,
        start_offset=start,
        end_offset=start + len(raw),
    )


def _is_entry_body(line: LedgerLine) -> bool:
    return line.kind is not LineKind.BLANK and line.raw_text[:1].isspace()
