"""
Modelo de dominio: Comando de reporte del motor externo.

Describe un verbo que el motor entiende y si necesita una cuenta como
argumento. El registro de reportes guarda estos objetos.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportCommand:
    """Un reporte disponible del motor contable."""

    verb: str
    """Verbo tal como lo recibe el motor: 'cleared', 'stats'..."""

    description: str = ""
    """Texto de ayuda para el CLI."""

    requires_account: bool = False
    """Si True, el reporte no se ejecuta sin una cuenta."""

    def build_args(self, account: str | None = None) -> list[str]:
        """Argumentos del motor para este reporte.

        Raises:
            ValueError: Si el reporte requiere cuenta y no se dio.
        """
        if account:
            return [account]
        if self.requires_account:
            raise ValueError(f"El reporte '{self.verb}' requiere una cuenta")
        return []

    def __post_init__(self) -> None:
        if not self.verb or any(c.isspace() for c in self.verb):
            raise ValueError(f"Verbo de reporte inválido: '{self.verb}'")
