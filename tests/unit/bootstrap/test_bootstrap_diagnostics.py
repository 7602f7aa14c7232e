"""Tests for the tooling version gate and diagnostic routing."""
from __future__ import annotations

import io

import pytest


class TestVersionParsing:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("24.0", (24, 0)),
            ("v2.5.20", (2, 5, 20)),
            ("2.5.20-rc1", (2, 5, 20)),
            ("24.1b1", (24, 1)),
            ("23.3.post1", (23, 3)),
            ("", ()),
        ],
    )
    def test_parse_version(self, raw: str, expected: tuple[int, ...]) -> None:
        from depboot.core.bootstrap.diagnostics import parse_version

        assert parse_version(raw) == expected

    def test_version_lt_is_numeric_not_lexical(self) -> None:
        from depboot.core.bootstrap.diagnostics import version_lt

        assert version_lt("2.5.9", "2.5.20")
        assert not version_lt("2.5.20", "2.5.9")

    def test_version_lt_zero_pads(self) -> None:
        from depboot.core.bootstrap.diagnostics import version_lt

        assert not version_lt("23", "23.0")
        assert not version_lt("23.0", "23")
        assert version_lt("23", "23.0.1")


class TestRequireMinimumToolingVersion:
    def test_equal_version_passes(self) -> None:
        from depboot.core.bootstrap.diagnostics import require_minimum_tooling_version

        require_minimum_tooling_version("2.5.20", "2.5.20")

    def test_newer_version_passes(self) -> None:
        from depboot.core.bootstrap.diagnostics import require_minimum_tooling_version

        require_minimum_tooling_version("24.0", "23.0")

    def test_older_version_raises_with_both_versions(self) -> None:
        from depboot.core.bootstrap.diagnostics import require_minimum_tooling_version
        from depboot.core.exceptions import ToolingTooOldError

        with pytest.raises(ToolingTooOldError, match="2.0.0 is too old") as excinfo:
            require_minimum_tooling_version("2.0.0", "2.5.20")

        assert excinfo.value.to_json_error() == {
            "message": "pip 2.0.0 is too old; 2.5.20 or newer is required.",
            "code": "ToolingTooOldError",
            "context": {"installed": "2.0.0", "minimum": "2.5.20"},
        }

    def test_missing_tooling_raises(self) -> None:
        from depboot.core.bootstrap.diagnostics import require_minimum_tooling_version
        from depboot.core.exceptions import ToolingTooOldError

        with pytest.raises(ToolingTooOldError, match="not installed"):
            require_minimum_tooling_version(None, "23.0")

    def test_installed_version_reads_distribution_metadata(self, monkeypatch) -> None:
        from importlib import metadata

        from depboot.core.bootstrap import diagnostics

        def fake_version(name: str) -> str:
            if name != "pip":
                raise metadata.PackageNotFoundError(name)
            return "24.2"

        monkeypatch.setattr(diagnostics.metadata, "version", fake_version)

        assert diagnostics.installed_tooling_version() == "24.2"

    def test_installed_version_is_none_without_pip(self, monkeypatch) -> None:
        from importlib import metadata

        from depboot.core.bootstrap import diagnostics

        def missing(name: str) -> str:
            raise metadata.PackageNotFoundError(name)

        monkeypatch.setattr(diagnostics.metadata, "version", missing)

        assert diagnostics.installed_tooling_version() is None


class RecordingHost:
    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))


class TestDiagnostics:
    def test_stream_prefixes(self) -> None:
        from depboot.core.bootstrap.diagnostics import StreamDiagnostics

        out = io.StringIO()
        diag = StreamDiagnostics(out)

        diag.info("Installing vendored packages")
        diag.warning("lockfile is newer")

        assert out.getvalue() == "==> Installing vendored packages\nWarning: lockfile is newer\n"

    def test_stream_fatal_exits_with_status_1(self) -> None:
        from depboot.core.bootstrap.diagnostics import StreamDiagnostics

        out = io.StringIO()

        with pytest.raises(SystemExit) as excinfo:
            StreamDiagnostics(out).fatal("pip is too old")

        assert excinfo.value.code == 1
        assert out.getvalue() == "Error: pip is too old\n"

    def test_stream_defaults_to_stderr(self, capsys) -> None:
        from depboot.core.bootstrap.diagnostics import StreamDiagnostics

        StreamDiagnostics().warning("careful")

        assert capsys.readouterr().err == "Warning: careful\n"

    def test_capable_host_is_selected(self) -> None:
        from depboot.core.bootstrap.diagnostics import LoggerDiagnostics, select_diagnostics

        host = RecordingHost()
        diag = select_diagnostics(host)

        assert isinstance(diag, LoggerDiagnostics)
        diag.info("hello")
        diag.warning("careful")
        with pytest.raises(SystemExit):
            diag.fatal("boom")
        assert host.records == [("info", "hello"), ("warning", "careful"), ("error", "boom")]

    def test_incapable_host_falls_back_to_stream(self) -> None:
        from depboot.core.bootstrap.diagnostics import StreamDiagnostics, select_diagnostics

        class InfoOnly:
            def info(self, message: str) -> None:
                pass

        assert isinstance(select_diagnostics(InfoOnly()), StreamDiagnostics)
        assert isinstance(select_diagnostics(None), StreamDiagnostics)

    def test_stdlib_logger_is_a_capable_host(self) -> None:
        import logging

        from depboot.core.bootstrap.diagnostics import has_logger_capability

        assert has_logger_capability(logging.getLogger("host"))

    def test_emit_routes_by_level(self) -> None:
        from depboot.core.bootstrap.diagnostics import DiagnosticLevel, LoggerDiagnostics, emit

        host = RecordingHost()
        diag = LoggerDiagnostics(host)

        emit(diag, DiagnosticLevel.INFO, "a")
        emit(diag, "warning", "b")
        with pytest.raises(SystemExit):
            emit(diag, DiagnosticLevel.FATAL, "c")

        assert host.records == [("info", "a"), ("warning", "b"), ("error", "c")]
