"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from ledger_context.domain.ports import LedgerEngine, DocumentSource
"""

from ledger_context.domain.ports.document_source import DocumentSource
from ledger_context.domain.ports.host_interaction import HostInteraction
from ledger_context.domain.ports.ledger_engine import LedgerEngine
from ledger_context.domain.ports.output_writer import OutputWriter
from ledger_context.domain.ports.session_logger import SessionLogger

__all__ = [
    "DocumentSource",
    "HostInteraction",
    "LedgerEngine",
    "OutputWriter",
    "SessionLogger",
]
