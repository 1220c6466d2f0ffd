"""
Adaptador de entrada: Interacción por terminal.

Implementa HostInteraction con input() y la salida estándar. Es el host
que usa el CLI; un plugin de editor tendría el suyo.
"""

import sys
from collections.abc import Callable
from typing import TextIO

from ledger_context.domain.ports.host_interaction import HostInteraction


class ConsoleHost(HostInteraction):
    """Pide datos con input() y muestra mensajes en un stream."""

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """
        Args:
            input_func: Función para leer del usuario. None = input().
                        Se inyecta para poder probar sin teclado.
            stream: Dónde se muestran los mensajes. None = sys.stderr
                    (stdout queda libre para la salida del comando).
        """
        self._input = input_func or input
        self._stream = stream

    def prompt_for_string(self, prompt: str, default: str = "") -> str:
        suffix = f" [{default}]" if default else ""
        try:
            answer = self._input(f"{prompt}{suffix}: ")
        except EOFError:
            return default
        return answer.strip() or default

    def show_message(self, message: str) -> None:
        print(message, file=self._stream or sys.stderr)
