"""
Configuración desde variables de entorno.

Variables reconocidas (todas opcionales):
    LEDGER_MODE_BINARY          Ejecutable del motor (default: "ledger")
    LEDGER_FILE                 Archivo que recibe el motor con -f
    LEDGER_MODE_TIMEOUT         Segundos máximos por reporte (default: 60)
    LEDGER_MODE_DEFAULT_YEAR    Año para fechas sin año (default: hoy)
    LEDGER_MODE_DEFAULT_MONTH   Mes para fechas de solo día (default: hoy)
    LEDGER_MODE_DATE_FORMAT     Formato de fechas insertadas (default: %Y-%m-%d)
    LEDGER_MODE_COMMENT_CHARS   Caracteres de comentario (default: ";")

Las opciones del CLI tienen prioridad sobre estas variables.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from ledger_context.domain.models.editing_session import EditingSession


@dataclass(frozen=True)
class Settings:
    """Configuración completa de una ejecución."""

    session: EditingSession
    ledger_binary: str = "ledger"
    ledger_file: Path | None = None
    engine_timeout: int = 60

    def with_ledger_file(self, ledger_file: Path | None) -> "Settings":
        """Copia con otro archivo para el motor (None = conservar el actual)."""
        if ledger_file is None:
            return self
        return replace(self, ledger_file=ledger_file)


def load_settings(environ: Mapping[str, str] | None = None, today: date | None = None) -> Settings:
    """Construye Settings a partir del entorno.

    Args:
        environ: Variables de entorno. None = os.environ.
        today: Fecha de referencia para año/mes por defecto. None = hoy.

    Raises:
        ValueError: Si alguna variable tiene un valor inválido.
    """
    env = os.environ if environ is None else environ
    today = today or date.today()

    session = EditingSession(
        default_year=_int_var(env, "LEDGER_MODE_DEFAULT_YEAR", today.year),
        default_month=_int_var(env, "LEDGER_MODE_DEFAULT_MONTH", today.month),
        date_format=env.get("LEDGER_MODE_DATE_FORMAT") or "%Y-%m-%d",
        comment_chars=env.get("LEDGER_MODE_COMMENT_CHARS") or ";",
    )

    ledger_file = env.get("LEDGER_FILE")
    timeout = _int_var(env, "LEDGER_MODE_TIMEOUT", 60)
    if timeout <= 0:
        raise ValueError(f"LEDGER_MODE_TIMEOUT debe ser positivo, no {timeout}")

    return Settings(
        session=session,
        ledger_binary=env.get("LEDGER_MODE_BINARY") or "ledger",
        ledger_file=Path(ledger_file) if ledger_file else None,
        engine_timeout=timeout,
    )


def _int_var(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} debe ser un número entero, no '{raw}'")
