"""
Servicio de dominio: Alternar el marcador de estado.

    "2024-01-15 Grocery"     ⇄ "2024-01-15 * Grocery"
    "    Assets:Cash  $10"   ⇄ "    * Assets:Cash  $10"

Si la línea tiene un marcador distinto al pedido ('!' vs '*'), se
reemplaza en vez de quitarse.
"""

from ledger_context.domain.exceptions import NotInTransactionError
from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.kinds import FieldKind, LineKind
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.services.field_locator import scan_line
from ledger_context.domain.shared.text_cleaner import leading_whitespace


def with_status_toggled(
    line: LedgerLine,
    marker: str = "*",
    session: EditingSession | None = None,
) -> str:
    """Devuelve la línea con el marcador de estado alternado.

    Raises:
        ValueError: Si el marcador no es un carácter de estado de la sesión.
        NotInTransactionError: Si la línea no es encabezado ni posting.
    """
    session = session or EditingSession.for_today()
    if len(marker) != 1 or marker not in session.status_chars:
        raise ValueError(
            f"Marcador de estado inválido: '{marker}'. Válidos: {session.status_chars}"
        )
    if not line.kind.is_transaction:
        raise NotInTransactionError(line.raw_text, "cambiar estado")

    layout = scan_line(line, session)
    text = line.raw_text

    if layout.status_offset is not None:
        col = line.column(layout.status_offset)
        if text[col] != marker:
            return text[:col] + marker + text[col + 1:]
        end = col + 1
        if end < len(text) and text[end] in " \t":
            return text[:col] + text[end + 1:]
        return text[:col].rstrip(" \t") + text[end:]

    if line.kind is LineKind.TRANSACTION_HEADER:
        col = line.column(layout.date_end)
        return text[:col] + " " + marker + text[col:]

    account = layout.field(FieldKind.ACCOUNT)
    col = line.column(account.start) if account is not None else leading_whitespace(text)
    return text[:col] + marker + " " + text[col:]
