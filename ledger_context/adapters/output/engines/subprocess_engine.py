"""
Adaptador de salida: Motor `ledger` por subprocess.

Ejecuta:
    ledger [-f ARCHIVO] VERBO [ARGS...]

y devuelve su stdout. Cualquier falla (binario inexistente, código de
salida distinto de cero, tiempo agotado) se convierte en EngineError con
el stderr del motor intacto, para mostrarlo tal cual al usuario.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path

from ledger_context.domain.exceptions import EngineError, EngineNotFoundError
from ledger_context.domain.ports.ledger_engine import LedgerEngine


class SubprocessLedgerEngine(LedgerEngine):
    """Invoca el binario de ledger como proceso hijo."""

    def __init__(
        self,
        binary: str = "ledger",
        ledger_file: Path | None = None,
        timeout: int = 60,
    ) -> None:
        """
        Args:
            binary: Ejecutable del motor (nombre en PATH o ruta).
            ledger_file: Archivo a pasar con -f. None = el motor usa su
                         propia configuración (LEDGER_FILE, ~/.ledgerrc).
            timeout: Segundos máximos de ejecución.
        """
        self._binary = binary
        self._ledger_file = ledger_file
        self._timeout = timeout

    @property
    def name(self) -> str:
        return self._binary

    def build_command(self, verb: str, args: Sequence[str] = ()) -> list[str]:
        """Línea de comando completa que se ejecutaría."""
        command = [self._binary]
        if self._ledger_file is not None:
            command += ["-f", str(self._ledger_file)]
        return command + [verb, *args]

    def run(self, verb: str, args: Sequence[str] = ()) -> str:
        command = self.build_command(verb, args)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except FileNotFoundError:
            raise EngineNotFoundError(verb, self._binary)
        except subprocess.TimeoutExpired:
            raise EngineError(verb, f"tiempo agotado ({self._timeout}s)")

        if result.returncode != 0:
            raise EngineError(
                verb,
                f"código de salida {result.returncode}",
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result.stdout
