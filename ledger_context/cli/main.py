"""
Punto de entrada CLI: ledger-context.

Uso:
    # Tipo de cada línea
    ledger-context classify diario.ledger

    # Campo bajo el cursor (offset o línea/columna)
    ledger-context context diario.ledger 5
    ledger-context context diario.ledger --line 3 --column 12

    # Fecha efectiva (pregunta la fecha si no se da --date)
    ledger-context effective-date diario.ledger 3 --date 2024-01-20 --in-place
    ledger-context effective-date diario.ledger 3 --remove

    # Marcador de estado
    ledger-context toggle-status diario.ledger 1 --in-place

    # Reportes del motor externo
    ledger-context report cleared Assets:Checking -f diario.ledger
    ledger-context report stats

    # Exportar transacciones a Excel
    ledger-context export diario.ledger -o salida/diario.xlsx

Este módulo juega el papel del "host" del editor: lee el archivo, le
pasa texto y offsets al dominio y aplica (o imprime) el resultado. Es el
ÚNICO lugar donde se ensamblan los adaptadores concretos.
"""

import argparse
import sys
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from ledger_context.adapters.input.document_sources.plain_text_source import PlainTextSource
from ledger_context.adapters.input.hosts.console_host import ConsoleHost
from ledger_context.adapters.output.engines.subprocess_engine import SubprocessLedgerEngine
from ledger_context.adapters.output.loggers.console_logger import ConsoleLogger
from ledger_context.adapters.output.writers.excel_writer import ExcelWriter
from ledger_context.domain.exceptions import LedgerContextError
from ledger_context.domain.models.ledger_document import LedgerDocument
from ledger_context.domain.models.ledger_line import LedgerLine
from ledger_context.domain.ports.document_source import DocumentSource
from ledger_context.domain.ports.host_interaction import HostInteraction
from ledger_context.domain.ports.session_logger import SessionLogger
from ledger_context.domain.services.context_parser import (
    iter_entries,
    line_by_number,
    parse_context,
    replace_line,
    split_lines,
)
from ledger_context.domain.services.effective_date import (
    with_effective_date_inserted,
    with_effective_date_removed,
)
from ledger_context.domain.services.report_service import ReportService
from ledger_context.domain.services.status_toggle import with_status_toggled
from ledger_context.domain.shared.date_parser import format_date, parse_partial_date
from ledger_context.infrastructure.config import Settings, load_settings
from ledger_context.infrastructure.registry import create_default_registry


@dataclass
class _App:
    """Componentes ensamblados para una ejecución."""

    settings: Settings
    source: DocumentSource
    host: HostInteraction
    logger: SessionLogger


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI.

    Returns:
        Código de salida: 0 éxito, 1 error de dominio, 2 configuración inválida.
    """
    args = _parse_args(argv)
    host = ConsoleHost()

    try:
        settings = _apply_overrides(load_settings(), args)
    except ValueError as e:
        host.show_message(f"Configuración inválida: {e}")
        return 2

    app = _App(
        settings=settings,
        source=PlainTextSource(),
        host=host,
        logger=ConsoleLogger(verbose=args.verbose),
    )

    try:
        return args.handler(args, app)
    except LedgerContextError as e:
        host.show_message(str(e))
        return 1
    except ValueError as e:
        host.show_message(f"❌ {e}")
        return 1


# =================================================================
# Comandos
# =================================================================


def _cmd_classify(args: argparse.Namespace, app: _App) -> int:
    document = _load(app, args.file)
    for number, line in enumerate(split_lines(document.text, app.settings.session), start=1):
        print(f"{number:>5}  {line.kind.value:<18}  {line.raw_text}")
    return 0


def _cmd_context(args: argparse.Namespace, app: _App) -> int:
    document = _load(app, args.file)
    session = app.settings.session

    if args.offset is not None and args.line is not None:
        raise ValueError("Indicar un OFFSET o --line/--column, no ambos")
    if args.offset is not None:
        offset = args.offset
    elif args.line is not None:
        line = line_by_number(document.text, args.line, session)
        if args.column < 0 or args.column > line.length:
            raise ValueError(f"Columna fuera de rango: {args.column} (línea de {line.length})")
        offset = line.start_offset + args.column
    else:
        raise ValueError("Indicar un OFFSET o --line/--column")

    context = parse_context(document.text, offset, session)
    app.logger.log_context_resolved(Path(args.file), offset, context)

    print(f"linea: {context.line_kind.value}")
    if context.field is None:
        print("campo: ninguno")
        return 0
    print(f"campo: {context.field.kind.value}")
    print(f"texto: {context.field.text}")
    print(f"rango: [{context.field.start}, {context.field.end})")
    return 0


def _cmd_effective_date(args: argparse.Namespace, app: _App) -> int:
    document = _load(app, args.file)
    session = app.settings.session
    line = line_by_number(document.text, args.line_number, session)

    if args.remove:
        new_line = with_effective_date_removed(line, session)
        description = "fecha efectiva eliminada"
    else:
        date_text = args.date
        if date_text is None:
            date_text = app.host.prompt_for_string(
                "Fecha efectiva", default=format_date(date.today(), session)
            )
        effective = format_date(parse_partial_date(date_text, session), session)
        new_line = with_effective_date_inserted(line, effective, session)
        description = f"fecha efectiva {effective}"

    return _apply_edit(args, app, document, line, new_line, description)


def _cmd_toggle_status(args: argparse.Namespace, app: _App) -> int:
    document = _load(app, args.file)
    session = app.settings.session
    line = line_by_number(document.text, args.line_number, session)
    new_line = with_status_toggled(line, args.marker, session)
    return _apply_edit(args, app, document, line, new_line, f"estado '{args.marker}'")


def _cmd_report(args: argparse.Namespace, app: _App) -> int:
    settings = app.settings.with_ledger_file(Path(args.ledger_file) if args.ledger_file else None)
    engine = SubprocessLedgerEngine(
        binary=settings.ledger_binary,
        ledger_file=settings.ledger_file,
        timeout=settings.engine_timeout,
    )
    service = ReportService(engine, create_default_registry(), app.logger)
    output = service.run(args.verb, args.account)
    print(output, end="" if output.endswith("\n") else "\n")
    return 0


def _cmd_export(args: argparse.Namespace, app: _App) -> int:
    document = _load(app, args.file)
    output_path = Path(args.output) if args.output else Path(args.file).with_suffix(".xlsx")
    writer = ExcelWriter()
    written = writer.write(document, output_path, app.settings.session)
    num_entries = len(iter_entries(document.text, app.settings.session))
    app.logger.log_export_complete(written, num_entries)
    print(written)
    return 0


# =================================================================
# Helpers
# =================================================================


def _load(app: _App, file_name: str) -> LedgerDocument:
    path = Path(file_name)
    document = app.source.read(path)
    app.logger.log_document_loaded(path, document.line_count)
    return document


def _apply_edit(
    args: argparse.Namespace,
    app: _App,
    document: LedgerDocument,
    line: LedgerLine,
    new_line: str,
    description: str,
) -> int:
    """Aplica la línea nueva al archivo (--in-place) o la imprime."""
    if not args.in_place:
        print(new_line)
        return 0

    path = Path(args.file)
    if new_line != line.raw_text:
        app.source.write(path, replace_line(document.text, line, new_line))
    app.logger.log_line_edited(path, args.line_number, description)
    return 0


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Las opciones del CLI tienen prioridad sobre el entorno."""
    session = settings.session
    if args.year is not None:
        session = replace(session, default_year=args.year)
    if args.month is not None:
        session = replace(session, default_month=args.month)
    settings = replace(settings, session=session)
    if args.binary:
        settings = replace(settings, ledger_binary=args.binary)
    return settings


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="ledger-context",
        description="Contexto de campos y edición de archivos ledger",
        epilog="Ejemplo: ledger-context context diario.ledger --line 3 --column 12",
    )
    parser.add_argument("--year", type=int, help="Año por defecto para fechas parciales")
    parser.add_argument("--month", type=int, help="Mes por defecto para fechas de solo día")
    parser.add_argument("--binary", help="Ejecutable del motor ledger")
    parser.add_argument(
        "-q",
        "--quiet",
        dest="verbose",
        action="store_false",
        help="No mostrar la bitácora (solo errores)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Tipo de cada línea")
    classify.add_argument("file", help="Archivo ledger")
    classify.set_defaults(handler=_cmd_classify)

    context = subparsers.add_parser("context", help="Campo bajo el cursor")
    context.add_argument("file", help="Archivo ledger")
    context.add_argument("offset", type=int, nargs="?", help="Offset en el documento")
    context.add_argument("--line", type=int, help="Número de línea (1-indexed)")
    context.add_argument("--column", type=int, default=0, help="Columna (0-indexed)")
    context.set_defaults(handler=_cmd_context)

    effective = subparsers.add_parser("effective-date", help="Insertar o quitar fecha efectiva")
    effective.add_argument("file", help="Archivo ledger")
    effective.add_argument("line_number", type=int, help="Número de línea (1-indexed)")
    effective.add_argument("--date", help="Fecha efectiva (YYYY-MM-DD, MM-DD o DD)")
    effective.add_argument("--remove", action="store_true", help="Quitar la fecha efectiva")
    effective.add_argument("--in-place", action="store_true", help="Guardar en el archivo")
    effective.set_defaults(handler=_cmd_effective_date)

    status = subparsers.add_parser("toggle-status", help="Alternar el marcador de estado")
    status.add_argument("file", help="Archivo ledger")
    status.add_argument("line_number", type=int, help="Número de línea (1-indexed)")
    status.add_argument("--marker", default="*", help="Marcador: '*' (default) o '!'")
    status.add_argument("--in-place", action="store_true", help="Guardar en el archivo")
    status.set_defaults(handler=_cmd_toggle_status)

    report = subparsers.add_parser("report", help="Ejecutar un reporte del motor")
    report.add_argument("verb", help="cleared, stats, balance, register")
    report.add_argument("account", nargs="?", help="Cuenta a consultar")
    report.add_argument("-f", "--file", dest="ledger_file", help="Archivo para el motor")
    report.set_defaults(handler=_cmd_report)

    export = subparsers.add_parser("export", help="Exportar transacciones a Excel")
    export.add_argument("file", help="Archivo ledger")
    export.add_argument("-o", "--output", help="Ruta del Excel (default: junto al archivo)")
    export.set_defaults(handler=_cmd_export)

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
