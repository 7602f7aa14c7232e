"""Bootstrap constants and diagnostics.

``depboot.core.bootstrap.environment`` holds the startup entry point; it is not
imported here so the vendor modules can depend on this package.
"""
from __future__ import annotations

from depboot.core.bootstrap.constants import MINIMUM_TOOLING_VERSION, VENDOR_FORMAT_VERSION
from depboot.core.bootstrap.diagnostics import (
    DiagnosticLevel,
    Diagnostics,
    LoggerDiagnostics,
    StreamDiagnostics,
    emit,
    require_minimum_tooling_version,
    select_diagnostics,
)

__all__ = [
    "VENDOR_FORMAT_VERSION",
    "MINIMUM_TOOLING_VERSION",
    "DiagnosticLevel",
    "Diagnostics",
    "LoggerDiagnostics",
    "StreamDiagnostics",
    "emit",
    "require_minimum_tooling_version",
    "select_diagnostics",
]
