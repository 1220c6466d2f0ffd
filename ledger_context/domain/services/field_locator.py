"""
Servicio de dominio: Localizador de campos.

Recorre UNA línea ya clasificada y la parte en campos (FieldSpan) con sus
offsets en el documento. Sobre esa partición se resuelve qué campo está
bajo el cursor.

ENCABEZADO DE TRANSACCIÓN:
    2024-01-15=2024-01-20 * Grocery Store  ; weekly
    |--DATE--| |--EFF---| ^ |--PAYEE----|    |COMMENT_TEXT|
                          estado (estructural)

    La fecha efectiva también puede escribirse como "[=2024-01-20]"
    después de la fecha o del marcador de estado.

POSTING:
    ····Assets:Checking    $-42.50  ; nota [=2024-01-20]
        |--ACCOUNT----|    |AMOUNT|   |CT|  |--EFF---|

    La cuenta termina en dos espacios seguidos o un tab. Es una heurística
    (una cuenta con dos espacios internos se cortaría) pero es la misma
    que usa la herramienta ledger, así que se conserva tal cual.

COMENTARIO DE LÍNEA COMPLETA:
    ; texto          → COMMENT_TEXT con lo que sigue al ';'

Los campos nunca se traslapan: cada carácter pertenece a lo sumo a uno.
"""

import re
from dataclasses import dataclass

from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.field_span import FieldSpan
from ledger_context.domain.models.kinds import FieldKind, LineKind
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.services.line_classifier import HEADER_PATTERN
from ledger_context.domain.shared.date_parser import DATE_TOKEN
from ledger_context.domain.shared.text_cleaner import leading_whitespace, trimmed_bounds

# Anotación de fecha efectiva: "[=2024-01-20]". Sin el "]" de cierre no es
# anotación y el texto queda como comentario normal.
_ANNOTATION: re.Pattern[str] = re.compile(rf"\[=(?P<date>{DATE_TOKEN})\]")


@dataclass(frozen=True)
class LineLayout:
    """Partición de una línea en campos, más las posiciones estructurales
    que los mutadores necesitan para editar sin volver a escanear."""

    line: LedgerLine
    fields: tuple[FieldSpan, ...] = ()

    status_offset: int | None = None
    """Offset del marcador de estado ('*' o '!'), si hay."""

    comment_offset: int | None = None
    """Offset del carácter que inicia el comentario, si hay."""

    date_end: int | None = None
    """Offset donde termina la fecha (y su '=fecha' pegada) del encabezado."""

    def field(self, kind: FieldKind) -> FieldSpan | None:
        """Primer campo del tipo pedido, o None."""
        for field in self.fields:
            if field.kind is kind:
                return field
        return None


def scan_line(line: LedgerLine, session: EditingSession | None = None) -> LineLayout:
    """Parte una línea en campos según su tipo.

    Returns:
        LineLayout con los campos en orden de aparición. Líneas BLANK y
        OTHER devuelven un layout sin campos.
    """
    session = session or EditingSession.for_today()

    if line.kind is LineKind.TRANSACTION_HEADER:
        return _scan_header(line, session)
    if line.kind is LineKind.POSTING:
        return _scan_posting(line, session)
    if line.kind is LineKind.COMMENT:
        return _scan_comment_line(line)
    return LineLayout(line=line)


def line_fields(line: LedgerLine, session: EditingSession | None = None) -> tuple[FieldSpan, ...]:
    """Todos los campos de la línea, en orden de aparición."""
    return scan_line(line, session).fields


def locate_field(
    line: LedgerLine,
    offset: int,
    session: EditingSession | None = None,
) -> FieldSpan | None:
    """Devuelve el campo de la línea que contiene el offset.

    Reglas de desempate:
    - Offset dentro de un campo → ese campo.
    - Offset sobre un delimitador (los dos espacios, el ';', un corchete)
      → el campo que termina justo ahí (el de la izquierda).
    - Offset igual al inicio de la línea → el primer campo.
    - Offset en o después del fin de la línea → None.

    Args:
        line: Línea clasificada.
        offset: Offset en el DOCUMENTO (no columna).
        session: Sesión con caracteres de comentario/estado.

    Returns:
        FieldSpan o None si el offset no cae en ningún campo.

    Ejemplos:
        Línea "2024-01-15 * Grocery Store", offset 5 → DATE "2024-01-15".
    """
    fields = line_fields(line, session)
    if not fields:
        return None

    if offset == line.start_offset:
        return fields[0]
    if offset < line.start_offset or offset >= line.end_offset:
        return None

    for field in fields:
        if field.contains(offset):
            return field

    # Sobre un delimitador: gana el campo que termina exactamente aquí
    for field in fields:
        if field.end == offset:
            return field

    return None


# =================================================================
# Escaneo por tipo de línea
# =================================================================


def _scan_header(line: LedgerLine, session: EditingSession) -> LineLayout:
    text = line.raw_text
    base = line.start_offset
    fields: list[FieldSpan] = []

    match = HEADER_PATTERN.match(text)
    if match is None:
        # El clasificador y este patrón son el mismo; no debería pasar.
        return LineLayout(line=line)

    fields.append(_span(FieldKind.DATE, text, base, match.start("date"), match.end("date")))

    effective_found = match.group("effective") is not None
    if effective_found:
        start, end = match.span("effective")
        fields.append(
            _span(FieldKind.EFFECTIVE_DATE, text, base, start, end, outer=(start - 1, end))
        )

    comment_col = _find_comment(text, match.end(), session)
    pos = _skip_blanks(text, match.end(), comment_col)
    status_col: int | None = None

    # El estado y la anotación "[=fecha]" pueden venir en cualquier orden
    # antes del beneficiario, cada uno a lo sumo una vez.
    progressed = True
    while progressed and pos < comment_col:
        progressed = False
        if status_col is None and _is_status_marker(text, pos, comment_col, session):
            status_col = pos
            pos = _skip_blanks(text, pos + 1, comment_col)
            progressed = True
            continue
        if not effective_found:
            annotation = _ANNOTATION.match(text, pos, comment_col)
            if annotation is not None:
                fields.append(
                    _span(
                        FieldKind.EFFECTIVE_DATE,
                        text,
                        base,
                        annotation.start("date"),
                        annotation.end("date"),
                        outer=annotation.span(),
                    )
                )
                effective_found = True
                pos = _skip_blanks(text, annotation.end(), comment_col)
                progressed = True

    payee_start, payee_end = trimmed_bounds(text, pos, comment_col)
    if payee_start < payee_end:
        fields.append(_span(FieldKind.PAYEE, text, base, payee_start, payee_end))

    if comment_col < len(text):
        fields.extend(_comment_fields(text, base, comment_col, allow_annotation=False))

    return LineLayout(
        line=line,
        fields=tuple(fields),
        status_offset=_absolute(base, status_col),
        comment_offset=_absolute(base, comment_col if comment_col < len(text) else None),
        date_end=base + match.end(),
    )


def _scan_posting(line: LedgerLine, session: EditingSession) -> LineLayout:
    text = line.raw_text
    base = line.start_offset
    fields: list[FieldSpan] = []

    pos = leading_whitespace(text)
    comment_col = _find_comment(text, pos, session)
    status_col: int | None = None

    if _is_status_marker(text, pos, comment_col, session):
        status_col = pos
        pos = _skip_blanks(text, pos + 1, comment_col)

    # Cuenta: hasta dos espacios, un tab o el comentario
    account_end = pos
    while account_end < comment_col:
        if text[account_end] == "\t" or text.startswith("  ", account_end):
            break
        account_end += 1

    account_start, account_stop = trimmed_bounds(text, pos, account_end)
    if account_start < account_stop:
        fields.append(_span(FieldKind.ACCOUNT, text, base, account_start, account_stop))

    amount_start, amount_end = trimmed_bounds(text, account_end, comment_col)
    if amount_start < amount_end:
        fields.append(_span(FieldKind.AMOUNT, text, base, amount_start, amount_end))

    if comment_col < len(text):
        fields.extend(_comment_fields(text, base, comment_col, allow_annotation=True))

    return LineLayout(
        line=line,
        fields=tuple(fields),
        status_offset=_absolute(base, status_col),
        comment_offset=_absolute(base, comment_col if comment_col < len(text) else None),
    )


def _scan_comment_line(line: LedgerLine) -> LineLayout:
    text = line.raw_text
    comment_col = leading_whitespace(text)
    fields = _comment_fields(text, line.start_offset, comment_col, allow_annotation=False)
    return LineLayout(
        line=line,
        fields=tuple(fields),
        comment_offset=line.start_offset + comment_col,
    )


# =================================================================
# Helpers
# =================================================================


def _comment_fields(
    text: str,
    base: int,
    comment_col: int,
    allow_annotation: bool,
) -> list[FieldSpan]:
    """Campos del comentario que empieza en comment_col (el ';' mismo no
    pertenece a ningún campo).

    Con allow_annotation, un "[=fecha]" bien cerrado se separa como
    EFFECTIVE_DATE y el resto del comentario queda en uno o dos
    COMMENT_TEXT (antes y después de la anotación).
    """
    body_start = comment_col + 1
    pieces: list[tuple[int, int]] = [(body_start, len(text))]
    effective: FieldSpan | None = None

    if allow_annotation:
        annotation = _ANNOTATION.search(text, body_start)
        if annotation is not None:
            effective = _span(
                FieldKind.EFFECTIVE_DATE,
                text,
                base,
                annotation.start("date"),
                annotation.end("date"),
                outer=annotation.span(),
            )
            pieces = [(body_start, annotation.start()), (annotation.end(), len(text))]

    fields: list[FieldSpan] = []
    for index, (start, end) in enumerate(pieces):
        start, end = trimmed_bounds(text, start, end)
        if start < end:
            fields.append(_span(FieldKind.COMMENT_TEXT, text, base, start, end))
        if index == 0 and effective is not None:
            fields.append(effective)
    return fields


def _span(
    kind: FieldKind,
    text: str,
    base: int,
    start: int,
    end: int,
    outer: tuple[int, int] | None = None,
) -> FieldSpan:
    """Crea un FieldSpan a partir de columnas de la línea."""
    outer_start, outer_end = outer if outer is not None else (None, None)
    return FieldSpan(
        kind=kind,
        text=text[start:end],
        start=base + start,
        end=base + end,
        outer_start=_absolute(base, outer_start),
        outer_end=_absolute(base, outer_end),
    )


def _find_comment(text: str, start: int, session: EditingSession) -> int:
    """Columna del primer carácter de comentario desde start, o len(text)."""
    for col in range(start, len(text)):
        if session.is_comment_lead(text[col]):
            return col
    return len(text)


def _skip_blanks(text: str, pos: int, limit: int) -> int:
    while pos < limit and text[pos] in " \t":
        pos += 1
    return pos


def _is_status_marker(text: str, pos: int, limit: int, session: EditingSession) -> bool:
    """Un marcador de estado es '*' o '!' seguido de espacio (o del fin)."""
    if pos >= limit or text[pos] not in session.status_chars:
        return False
    return pos + 1 >= limit or text[pos + 1] in " \t"


def _absolute(base: int, col: int | None) -> int | None:
    return None if col is None else base + col
