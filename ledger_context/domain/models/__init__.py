"""
Modelos de dominio del proyecto ledger-context.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos sin dependencias externas.

Uso:
    from ledger_context.domain.models import CursorContext, FieldSpan, LedgerLine
"""

from ledger_context.domain.models.cursor_context import CursorContext
from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.field_span import FieldSpan
from ledger_context.domain.models.kinds import FieldKind, LineKind
from ledger_context.domain.models.ledger_document import LedgerDocument
from ledger_context.domain.models.ledger_entry import LedgerEntry
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.models.report_command import ReportCommand

__all__ = [
    "CursorContext",
    "EditingSession",
    "FieldKind",
    "FieldSpan",
    "LedgerDocument",
    "LedgerEntry",
    "LedgerLine",
    "LineKind",
    "ReportCommand",
]
