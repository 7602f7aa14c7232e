from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_CONFIGURED_KEY: tuple[str, str] | None = None
_DEPBOOT_HANDLER: logging.Handler | None = None

PACKAGE_LOGGER = "depboot"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Attach one depboot-owned handler to the ``depboot`` logger.

    Writes to ``log_path`` when given, otherwise to stderr. Idempotent
    per-process: calling again with the same target and level is a no-op.
    """
    global _CONFIGURED_KEY, _DEPBOOT_HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    key = (target, str(level).upper())
    if _CONFIGURED_KEY == key and _DEPBOOT_HANDLER is not None:
        return

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    pkg_logger.setLevel(_level_from_name(level))

    # Replace the depboot-installed handler when switching targets.
    if _DEPBOOT_HANDLER is not None:
        pkg_logger.removeHandler(_DEPBOOT_HANDLER)
        _DEPBOOT_HANDLER.close()
        _DEPBOOT_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        Path(target).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    else:
        handler = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("%(levelname)s %(name)s: %(message)s")
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(fmt)
    pkg_logger.addHandler(handler)

    _DEPBOOT_HANDLER = handler
    _CONFIGURED_KEY = key


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: drop the depboot handler."""
    global _CONFIGURED_KEY, _DEPBOOT_HANDLER
    if _DEPBOOT_HANDLER is not None:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(_DEPBOOT_HANDLER)
        _DEPBOOT_HANDLER.close()
    _CONFIGURED_KEY = None
    _DEPBOOT_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests", "PACKAGE_LOGGER"]
