"""
Tests para el motor ledger por subprocess.

subprocess.run se reemplaza con monkeypatch: no se necesita el binario
de ledger instalado.
"""

import subprocess
from pathlib import Path

import pytest

from ledger_context.adapters.output.engines.subprocess_engine import SubprocessLedgerEngine
from ledger_context.domain.exceptions import EngineError, EngineNotFoundError


def _fake_run(returncode=0, stdout="", stderr="", calls=None):
    def run(command, **kwargs):
        if calls is not None:
            calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, returncode, stdout, stderr)

    return run


class TestSubprocessLedgerEngine:
    """Pruebas para SubprocessLedgerEngine."""

    def test_comando_con_archivo(self):
        engine = SubprocessLedgerEngine(ledger_file=Path("diario.ledger"))
        assert engine.build_command("cleared", ["Assets:Checking"]) == [
            "ledger",
            "-f",
            "diario.ledger",
            "cleared",
            "Assets:Checking",
        ]

    def test_comando_sin_archivo(self):
        engine = SubprocessLedgerEngine(binary="hledger")
        assert engine.build_command("stats") == ["hledger", "stats"]
        assert engine.name == "hledger"

    def test_salida_verbatim(self, monkeypatch):
        calls = []
        output = "           $100.00  Assets:Checking\n"
        monkeypatch.setattr(subprocess, "run", _fake_run(stdout=output, calls=calls))

        result = SubprocessLedgerEngine(timeout=5).run("balance", ["Assets"])

        assert result == output
        command, kwargs = calls[0]
        assert command == ["ledger", "balance", "Assets"]
        assert kwargs["capture_output"] is True
        assert kwargs["text"] is True
        assert kwargs["timeout"] == 5

    def test_codigo_de_salida_distinto_de_cero(self, monkeypatch):
        stderr = "While parsing file \"diario.ledger\", line 3:\nError: Unexpected whitespace\n"
        monkeypatch.setattr(subprocess, "run", _fake_run(returncode=1, stderr=stderr))

        with pytest.raises(EngineError, match="código de salida 1") as exc_info:
            SubprocessLedgerEngine().run("stats")

        assert exc_info.value.returncode == 1
        assert exc_info.value.stderr == stderr
        assert str(exc_info.value).endswith("line 3:\nError: Unexpected whitespace")

    def test_binario_inexistente(self, monkeypatch):
        def run(command, **kwargs):
            raise FileNotFoundError(command[0])

        monkeypatch.setattr(subprocess, "run", run)

        with pytest.raises(EngineNotFoundError, match="no-existe"):
            SubprocessLedgerEngine(binary="no-existe").run("stats")

    def test_tiempo_agotado(self, monkeypatch):
        def run(command, **kwargs):
            raise subprocess.TimeoutExpired(command, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", run)

        with pytest.raises(EngineError, match="tiempo agotado"):
            SubprocessLedgerEngine(timeout=1).run("stats")
