"""
Servicio de dominio: Clasificador de líneas.

Decide el tipo de una línea mirando SOLO su texto. No hay estado entre
líneas: el host puede preguntar por cualquier línea de forma independiente,
y el formato ledger lo permite porque toda la estructura está en la
indentación (una línea indentada pertenece a la transacción de arriba).

Reglas, en orden de prioridad:
1. Vacía o solo espacios                         → BLANK
2. Primer carácter no-espacio es de comentario   → COMMENT
3. Columna 0 con fecha (y opcional =fecha)       → TRANSACTION_HEADER
4. Indentada y con un nombre de cuenta           → POSTING
5. Todo lo demás (directivas, precios, etc.)     → OTHER
"""

import re

from ledger_context.domain.models.editing_session import EditingSession
from ledger_context.domain.models.kinds import LineKind
from ledger_context.domain.shared.date_parser import DATE_TOKEN

# Encabezado: fecha en columna 0, opcionalmente "=fecha" pegada, seguida
# de espacio, de una anotación "[=" o del fin de línea.
# Ejemplo: "2024-01-15=2024-01-20 * Grocery Store"
HEADER_PATTERN: re.Pattern[str] = re.compile(
    rf"^(?P<date>{DATE_TOKEN})(?:=(?P<effective>{DATE_TOKEN}))?(?=\s|\[=|$)"
)


def classify_line(text: str, session: EditingSession | None = None) -> LineKind:
    """Clasifica una línea de un archivo ledger.

    Args:
        text: Texto de la línea, sin el salto de línea.
        session: Sesión con los caracteres de comentario. Si es None se
                 usa la configuración por defecto (';').

    Returns:
        El LineKind de la línea. Nunca lanza excepción: lo que no se
        reconoce es OTHER.

    Ejemplos:
        >>> classify_line("2024-01-15 * Grocery Store")
        <LineKind.TRANSACTION_HEADER: 'transaction_header'>
        >>> classify_line("    Assets:Checking    $-42.50")
        <LineKind.POSTING: 'posting'>
    """
    session = session or EditingSession.for_today()
    stripped = text.strip()

    if not stripped:
        return LineKind.BLANK

    if session.is_comment_lead(stripped[0]):
        return LineKind.COMMENT

    if not text[0].isspace():
        if HEADER_PATTERN.match(text):
            return LineKind.TRANSACTION_HEADER
        return LineKind.OTHER

    if _has_account_token(stripped, session):
        return LineKind.POSTING
    return LineKind.OTHER


def _has_account_token(stripped: str, session: EditingSession) -> bool:
    """Indica si el contenido de una línea indentada empieza con una cuenta.

    Un marcador de estado ('* ') antes de la cuenta se ignora.
    """
    if stripped[0] in session.status_chars and (len(stripped) == 1 or stripped[1] in " \t"):
        stripped = stripped[1:].lstrip(" \t")
    return bool(stripped) and not session.is_comment_lead(stripped[0])
