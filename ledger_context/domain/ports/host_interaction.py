"""
Puerto de entrada/salida: Interacción con el usuario del host.

Pedir un texto y mostrar un mensaje son capacidades que inyecta el host;
el dominio nunca lee de stdin ni escribe a la pantalla directamente.
"""

from abc import ABC, abstractmethod


class HostInteraction(ABC):
    """Interfaz para pedir datos y mostrar mensajes al usuario."""

    @abstractmethod
    def prompt_for_string(self, prompt: str, default: str = "") -> str:
        """Pide un texto al usuario.

        Args:
            prompt: Texto de la pregunta.
            default: Valor que se usa si el usuario no escribe nada.

        Returns:
            Lo que escribió el usuario, o `default`.
        """
        ...

    @abstractmethod
    def show_message(self, message: str) -> None:
        """Muestra un mensaje al usuario tal cual (sin reformatear)."""
        ...
