"""
Modelo de dominio: Sesión de edición.

Guarda el "año/mes actual" con el que se completan fechas parciales y los
caracteres de comentario y estado. Se pasa explícitamente a las funciones
que lo necesitan; nadie lo lee de una variable global.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class EditingSession:
    """Configuración del usuario para editar un archivo ledger."""

    default_year: int
    """Año usado cuando el usuario teclea una fecha sin año ('01/20')."""

    default_month: int
    """Mes usado cuando el usuario teclea solo el día ('20')."""

    date_format: str = "%Y-%m-%d"
    """Formato strftime con el que se escriben las fechas insertadas."""

    comment_chars: str = ";"
    """Caracteres que inician un comentario (de línea completa o al final)."""

    status_chars: str = "*!"
    """Marcadores de estado válidos: '*' conciliado, '!' pendiente."""

    @classmethod
    def for_today(cls, today: date | None = None, **overrides) -> "EditingSession":
        """Crea una sesión cuyo año/mes por defecto son los de hoy."""
        today = today or date.today()
        return cls(default_year=today.year, default_month=today.month, **overrides)

    def is_comment_lead(self, char: str) -> bool:
        return char != "" and char in self.comment_chars

    def __post_init__(self) -> None:
        """Validaciones al crear la instancia."""
        if not 1 <= self.default_month <= 12:
            raise ValueError(f"Mes fuera de rango: {self.default_month}. Debe ser 1-12.")
        if not 1 <= self.default_year <= 9999:
            raise ValueError(f"Año fuera de rango: {self.default_year}")
        if not self.comment_chars:
            raise ValueError("Se requiere al menos un carácter de comentario")
        if any(c.isspace() for c in self.comment_chars + self.status_chars):
            raise ValueError("Los caracteres de comentario/estado no pueden ser espacios")
        if set(self.comment_chars) & set(self.status_chars):
            raise ValueError(
                "Un carácter no puede ser a la vez de comentario y de estado: "
                f"{sorted(set(self.comment_chars) & set(self.status_chars))}"
            )
