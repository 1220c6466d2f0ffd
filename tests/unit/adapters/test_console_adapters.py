"""
Tests para los adaptadores de consola: ConsoleLogger y ConsoleHost.
"""

import io
from pathlib import Path

from ledger_context.adapters.input.hosts.console_host import ConsoleHost
from ledger_context.adapters.output.loggers.console_logger import ConsoleLogger
from ledger_context.domain.exceptions import EngineError
from ledger_context.domain.services.context_parser import parse_context


class TestConsoleLogger:
    """Pruebas para ConsoleLogger."""

    def test_resumen_de_la_sesion(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream)

        logger.log_document_loaded(Path("diario.ledger"), 10)
        logger.log_context_resolved(Path("diario.ledger"), 5, parse_context("2024-01-15 X", 5))
        logger.log_line_edited(Path("diario.ledger"), 2, "estado '*'")
        logger.log_report_start("stats", [])
        logger.log_report_complete("stats", 8)
        logger.log_export_complete(Path("salida.xlsx"), 3)
        logger.log_error("stats", EngineError("stats", "código de salida 1"))

        summary = logger.get_summary()
        assert summary["documentos_leidos"] == 1
        assert summary["consultas"] == 1
        assert summary["ediciones"] == 1
        assert summary["reportes"] == 1
        assert summary["exportaciones"] == 1
        assert summary["errores"][0]["origen"] == "stats"

        output = stream.getvalue()
        assert "diario.ledger (10 líneas)" in output
        assert "transaction_header / date" in output

    def test_modo_silencioso(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream=stream, verbose=False)
        logger.log_document_loaded(Path("diario.ledger"), 10)
        logger.log_error("stats", ValueError("x"))
        assert stream.getvalue() == ""
        assert len(logger.get_summary()["errores"]) == 1

    def test_escribe_en_stderr_por_defecto(self, capsys):
        ConsoleLogger().log_report_complete("stats", 3)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Reporte stats: 3 líneas" in captured.err


class TestConsoleHost:
    """Pruebas para ConsoleHost."""

    def test_respuesta_del_usuario(self):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return " 2024-01-20 "

        host = ConsoleHost(input_func=fake_input)
        assert host.prompt_for_string("Fecha efectiva", default="2024-01-15") == "2024-01-20"
        assert prompts == ["Fecha efectiva [2024-01-15]: "]

    def test_respuesta_vacia_usa_el_default(self):
        host = ConsoleHost(input_func=lambda prompt: "")
        assert host.prompt_for_string("Fecha", default="2024-01-15") == "2024-01-15"

    def test_fin_de_entrada_usa_el_default(self):
        def eof(prompt):
            raise EOFError

        assert ConsoleHost(input_func=eof).prompt_for_string("Fecha", "15") == "15"

    def test_mensaje(self):
        stream = io.StringIO()
        ConsoleHost(stream=stream).show_message("Error: Unexpected whitespace")
        assert stream.getvalue() == "Error: Unexpected whitespace\n"
