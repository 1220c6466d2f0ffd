"""
Registro de reportes del motor externo.

Centraliza la relación verbo → ReportCommand. Agregar un reporte al
sistema es registrarlo aquí; el ReportService no sabe qué verbos existen,
solo pide "dame el comando para 'cleared'" y el registro se lo da.
"""

from ledger_context.domain.models.report_command import ReportCommand


class ReportRegistry:
    """Registro de reportes disponibles."""

    def __init__(self) -> None:
        self._commands: dict[str, ReportCommand] = {}

    def register(self, command: ReportCommand) -> None:
        """Registra un reporte. La clave es command.verb (minúsculas).

        Raises:
            ValueError: Si ya existe un reporte con ese verbo.
        """
        verb = command.verb.lower()
        if verb in self._commands:
            raise ValueError(f"Ya existe un reporte registrado para '{verb}'")
        self._commands[verb] = command

    def get(self, verb: str) -> ReportCommand | None:
        """Obtiene el comando de un verbo (case-insensitive), o None."""
        return self._commands.get(verb.lower())

    @property
    def available_reports(self) -> list[str]:
        """Lista de verbos registrados, ordenada."""
        return sorted(self._commands.keys())

    def __len__(self) -> int:
        return len(self._commands)


def create_default_registry() -> ReportRegistry:
    """Crea un registro con los reportes que expone el modo ledger.

    Returns:
        ReportRegistry con cleared, stats, balance y register.
    """
    registry = ReportRegistry()

    registry.register(
        ReportCommand(
            verb="cleared",
            description="Saldo conciliado vs. saldo total de una cuenta",
            requires_account=True,
        )
    )
    registry.register(
        ReportCommand(verb="stats", description="Estadísticas del archivo ledger")
    )
    registry.register(
        ReportCommand(verb="balance", description="Balance de una cuenta o de todo el archivo")
    )
    registry.register(
        ReportCommand(verb="register", description="Movimientos de una cuenta")
    )

    return registry
