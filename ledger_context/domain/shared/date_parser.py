"""
Fechas de archivos ledger y lectura de fechas parciales.

Dos responsabilidades:
1. Definir QUÉ es una fecha en el archivo (DATE_TOKEN). El clasificador,
   el locator y los mutadores usan el mismo patrón, así una fecha que
   insertamos siempre se vuelve a reconocer al localizarla.
2. Completar lo que el usuario teclea con el año/mes por defecto de la
   EditingSession.

Formatos de fecha en el archivo (año de 4 dígitos, separador - / o .):
    "2024-01-15", "2024/01/15", "2024.1.5"
"""

import re
from datetime import date

from ledger_context.domain.models.editing_session import EditingSession

DATE_TOKEN = r"\d{4}[-/.]\d{1,2}[-/.]\d{1,2}"
"""Fragmento regex de una fecha completa. Se compone en otros patrones."""

_DATE_FULL: re.Pattern[str] = re.compile(rf"^{DATE_TOKEN}$")
_DATE_PARTS: re.Pattern[str] = re.compile(r"^(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})$")
_MONTH_DAY: re.Pattern[str] = re.compile(r"^(\d{1,2})[-/.](\d{1,2})$")
_DAY_ONLY: re.Pattern[str] = re.compile(r"^\d{1,2}$")


def is_date_token(text: str) -> bool:
    """Indica si el texto completo es una fecha de archivo ledger.

    Ejemplos:
        >>> is_date_token("2024-01-15")
        True
        >>> is_date_token("01/15")
        False
    """
    return bool(_DATE_FULL.match(text))


def parse_ledger_date(date_text: str) -> date:
    """Convierte una fecha completa del archivo ('2024/01/15') a `date`.

    Raises:
        ValueError: Si el texto no es una fecha completa o no existe
                    en el calendario (ej: 2024-02-30).
    """
    text = date_text.strip()
    m = _DATE_PARTS.match(text)
    if not m:
        raise ValueError(f"Formato de fecha no reconocido: '{text}'. Esperado: YYYY-MM-DD")
    return _build_date(int(m.group(1)), int(m.group(2)), int(m.group(3)), text)


def parse_partial_date(date_text: str, session: EditingSession) -> date:
    """Lee una fecha tecleada por el usuario, completando lo que falte.

    Formatos aceptados:
        "2024-01-20"  → fecha completa (también con / o .)
        "01/20"       → mes/día, año de session.default_year
        "20"          → solo día, año y mes de la sesión

    Args:
        date_text: Texto tecleado por el usuario.
        session: Sesión con el año/mes por defecto.

    Returns:
        Objeto date de Python.

    Raises:
        ValueError: Si el texto está vacío, no tiene un formato reconocido
                    o la fecha no existe.

    Ejemplos:
        >>> s = EditingSession(default_year=2024, default_month=3)
        >>> parse_partial_date("20", s)
        date(2024, 3, 20)
        >>> parse_partial_date("01/20", s)
        date(2024, 1, 20)
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    if _DATE_PARTS.match(text):
        return parse_ledger_date(text)

    m = _MONTH_DAY.match(text)
    if m:
        return _build_date(session.default_year, int(m.group(1)), int(m.group(2)), text)

    if _DAY_ONLY.match(text):
        return _build_date(session.default_year, session.default_month, int(text), text)

    raise ValueError(
        f"Formato de fecha no reconocido: '{text}'. "
        f"Formatos soportados: YYYY-MM-DD, MM-DD, DD"
    )


def format_date(value: date, session: EditingSession) -> str:
    """Formatea una fecha con el formato de la sesión.

    Raises:
        ValueError: Si el formato configurado no produce una fecha que el
                    archivo ledger reconozca (ej: '%d/%m/%Y').
    """
    text = value.strftime(session.date_format)
    if not is_date_token(text):
        raise ValueError(
            f"El formato de fecha '{session.date_format}' produce '{text}', "
            f"que no es una fecha ledger (YYYY-MM-DD)"
        )
    return text


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un date con un mensaje de error que incluye el texto original."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day}: {e}"
        )
