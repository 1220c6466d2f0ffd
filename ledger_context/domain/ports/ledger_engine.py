"""
Puerto de salida: Motor contable externo.

Todo el trabajo numérico (balances, reportes, estadísticas) lo hace un
programa externo. Este puerto lo modela como una caja negra: recibe un
verbo y argumentos, devuelve el texto de su salida estándar o falla.

    LedgerEngine (interfaz)
    └── SubprocessLedgerEngine  → ejecuta el binario `ledger`

Este proyecto no interpreta la salida del motor; solo la entrega al host.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class LedgerEngine(ABC):
    """Interfaz para invocar el motor contable."""

    @abstractmethod
    def run(self, verb: str, args: Sequence[str] = ()) -> str:
        """Ejecuta un verbo del motor ('cleared', 'stats', 'balance'...).

        Args:
            verb: Comando del motor.
            args: Argumentos adicionales (típicamente una cuenta).

        Returns:
            Salida estándar del motor, sin modificar.

        Raises:
            EngineError: Si el motor termina con código distinto de cero
                         o excede el tiempo límite. El mensaje incluye
                         el texto de error del motor.
            EngineNotFoundError: Si el binario no existe.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del motor. Para logging."""
        ...
