"""
Servicio de dominio: Reportes del motor contable.

Orquesta una consulta al motor externo:
1. Busca el verbo en el registro de reportes.
2. Arma los argumentos (la cuenta, si el reporte la necesita).
3. Invoca el motor y devuelve su salida sin interpretarla.

Los errores del motor NO se tragan: se registran en la bitácora y se
vuelven a lanzar para que el host muestre el texto de error al usuario.
"""

from ledger_context.domain.exceptions import EngineError, UnknownReportError
from ledger_context.domain.ports.ledger_engine import LedgerEngine
from ledger_context.domain.ports.session_logger import SessionLogger
from ledger_context.infrastructure.registry import ReportRegistry


class ReportService:
    """Ejecuta reportes del motor contable.

    Recibe sus dependencias por constructor: no sabe si el motor es un
    subprocess real o un doble de prueba.
    """

    def __init__(
        self,
        engine: LedgerEngine,
        registry: ReportRegistry,
        logger: SessionLogger,
    ) -> None:
        self._engine = engine
        self._registry = registry
        self._logger = logger

    @property
    def available_reports(self) -> list[str]:
        return self._registry.available_reports

    def run(self, verb: str, account: str | None = None) -> str:
        """Ejecuta el reporte `verb`.

        Args:
            verb: Verbo registrado ('cleared', 'stats'...).
            account: Cuenta a consultar, si aplica.

        Returns:
            Salida del motor, verbatim.

        Raises:
            UnknownReportError: Si el verbo no está registrado.
            ValueError: Si el reporte requiere cuenta y no se dio.
            EngineError: Si el motor falla.
        """
        command = self._registry.get(verb)
        if command is None:
            raise UnknownReportError(verb, self._registry.available_reports)

        args = command.build_args(account)
        self._logger.log_report_start(command.verb, args)

        try:
            output = self._engine.run(command.verb, args)
        except EngineError as e:
            self._logger.log_error(command.verb, e)
            raise

        self._logger.log_report_complete(command.verb, len(output.splitlines()))
        return output

    def cleared(self, account: str) -> str:
        """Saldo conciliado de una cuenta."""
        return self.run("cleared", account)

    def stats(self) -> str:
        """Estadísticas del archivo."""
        return self.run("stats")
