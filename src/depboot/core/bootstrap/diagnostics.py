"""Bootstrap diagnostics: tooling version gate and message emission.

Messages are routed to a richer host logger when the hosting process provides
one; otherwise a plain-text line is written to stderr.
"""
from __future__ import annotations

import logging
import sys
from enum import Enum
from importlib import metadata
from typing import Any, NoReturn, Optional, Protocol, TextIO

from depboot.core.bootstrap.constants import MINIMUM_TOOLING_VERSION, TOOLING_DISTRIBUTION
from depboot.core.exceptions import ToolingTooOldError

logger = logging.getLogger(__name__)

_LOGGER_CAPABILITIES = ("info", "warning", "error")


def parse_version(v: str) -> tuple[int, ...]:
    """Parse a dotted release version into a tuple of ints.

    Only the leading numeric run of each segment counts, so ``"24.1b1"`` parses
    as ``(24, 1)`` and ``"2.5.20-rc1"`` as ``(2, 5, 20)``.
    """
    s = str(v).strip()
    if s and s[0] in "vV":
        s = s[1:]
    core = s.split("-")[0].split("+")[0]
    parts: list[int] = []
    for segment in core.split("."):
        digits = ""
        for ch in segment:
            if not ch.isdigit():
                break
            digits += ch
        if not digits:
            break
        parts.append(int(digits))
    return tuple(parts)


def version_lt(a: str, b: str) -> bool:
    """True when release version ``a`` sorts before ``b`` (zero-padded)."""
    pa, pb = parse_version(a), parse_version(b)
    width = max(len(pa), len(pb))
    return pa + (0,) * (width - len(pa)) < pb + (0,) * (width - len(pb))


def installed_tooling_version() -> Optional[str]:
    """Return the installed package manager version, or None when absent."""
    try:
        return metadata.version(TOOLING_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return None


def require_minimum_tooling_version(
    installed: Optional[str],
    minimum: str = MINIMUM_TOOLING_VERSION,
) -> None:
    """Fail unless the package manager is at least ``minimum``.

    Raises:
        ToolingTooOldError: If ``installed`` is missing or older than ``minimum``
    """
    if not installed:
        raise ToolingTooOldError(
            f"{TOOLING_DISTRIBUTION} is not installed; {minimum} or newer is required.",
            minimum=minimum,
        )
    if version_lt(installed, minimum):
        raise ToolingTooOldError(
            f"{TOOLING_DISTRIBUTION} {installed} is too old; {minimum} or newer is required.",
            installed=installed,
            minimum=minimum,
        )
    logger.debug("%s %s satisfies minimum %s", TOOLING_DISTRIBUTION, installed, minimum)


class DiagnosticLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    FATAL = "fatal"


class Diagnostics(Protocol):
    """Destination for user-visible bootstrap messages."""

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def fatal(self, message: str) -> NoReturn: ...


class StreamDiagnostics:
    """Plain-text diagnostics written to a stream (stderr by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the replaced sys.stderr.
        return self._stream if self._stream is not None else sys.stderr

    def info(self, message: str) -> None:
        print(f"==> {message}", file=self.stream)

    def warning(self, message: str) -> None:
        print(f"Warning: {message}", file=self.stream)

    def fatal(self, message: str) -> NoReturn:
        print(f"Error: {message}", file=self.stream)
        sys.exit(1)


class LoggerDiagnostics:
    """Diagnostics routed through a host-provided logger."""

    def __init__(self, host: Any) -> None:
        self.host = host

    def info(self, message: str) -> None:
        self.host.info(message)

    def warning(self, message: str) -> None:
        self.host.warning(message)

    def fatal(self, message: str) -> NoReturn:
        self.host.error(message)
        sys.exit(1)


def has_logger_capability(host: Any) -> bool:
    """True when ``host`` exposes callable info/warning/error methods."""
    if host is None:
        return False
    return all(callable(getattr(host, name, None)) for name in _LOGGER_CAPABILITIES)


def select_diagnostics(host: Any = None, *, stream: Optional[TextIO] = None) -> Diagnostics:
    """Pick the host logger when it has the capability, else plain stderr."""
    if has_logger_capability(host):
        return LoggerDiagnostics(host)
    return StreamDiagnostics(stream)


def emit(diagnostics: Diagnostics, level: DiagnosticLevel | str, message: str) -> None:
    """Route ``message`` to ``diagnostics`` at ``level``.

    A FATAL level does not return.
    """
    level = DiagnosticLevel(level)
    if level is DiagnosticLevel.INFO:
        diagnostics.info(message)
    elif level is DiagnosticLevel.WARNING:
        diagnostics.warning(message)
    else:
        diagnostics.fatal(message)


__all__ = [
    "parse_version",
    "version_lt",
    "installed_tooling_version",
    "require_minimum_tooling_version",
    "DiagnosticLevel",
    "Diagnostics",
    "StreamDiagnostics",
    "LoggerDiagnostics",
    "has_logger_capability",
    "select_diagnostics",
    "emit",
]
