"""
Bootstrap settings.

Configuration sources (highest to lowest priority):
1. Environment variables: DEPBOOT_*
2. Library config: <library>/.depboot/config.yaml
3. Built-in defaults
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from depboot.core.bootstrap.constants import (
    INSTALL_TIMEOUT_ENV,
    LIBRARY_ENV,
    LOG_FILE_ENV,
    LOG_LEVEL_ENV,
    MANIFEST_ENV,
    MANIFEST_FILENAME,
)
from depboot.core.exceptions import ConfigError
from depboot.core.io import read_yaml
from depboot.core.vendor.installer import DEFAULT_INSTALL_TIMEOUT
from depboot.core.vendor.manifest import default_lockfile_for
from depboot.core.vendor.paths import VendorPaths

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def config_path_for(library_root: Path) -> Path:
    return Path(library_root) / ".depboot" / "config.yaml"


def _as_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, str) and re.fullmatch(r"[-+]?\d+", v.strip() or " "):
        return int(v)
    return None


def _load_overlay(path: Path) -> Dict[str, Any]:
    try:
        # Fail closed: a broken config file must not be silently ignored.
        data = read_yaml(path, default={}, raise_on_error=True)
    except FileNotFoundError:
        return {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read {path}: {e}", context={"path": str(path)}) from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a YAML mapping", context={"path": str(path)})
    return data


@dataclass(frozen=True)
class BootstrapSettings:
    """Resolved bootstrap configuration."""

    library_root: Path
    manifest_path: Path
    lockfile_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None
    install_timeout: int = DEFAULT_INSTALL_TIMEOUT

    @property
    def vendor_paths(self) -> VendorPaths:
        return VendorPaths.for_library(self.library_root)

    @classmethod
    def load(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        library_root: Optional[Path] = None,
    ) -> BootstrapSettings:
        """Resolve settings from the environment and the library config file.

        Args:
            environ: Environment mapping (defaults to os.environ)
            library_root: Explicit library root, overriding DEPBOOT_LIBRARY

        Raises:
            ConfigError: If no library root is available or a value is invalid
        """
        env = os.environ if environ is None else environ

        if library_root is None:
            raw_root = env.get(LIBRARY_ENV)
            if not raw_root:
                raise ConfigError(f"{LIBRARY_ENV} is not set.")
            library_root = Path(raw_root)
        library_root = Path(library_root).expanduser().resolve()

        overlay = _load_overlay(config_path_for(library_root))
        logging_cfg = overlay.get("logging") or {}
        install_cfg = overlay.get("install") or {}
        if not isinstance(logging_cfg, dict) or not isinstance(install_cfg, dict):
            raise ConfigError("'logging' and 'install' must be mappings in the depboot config")

        manifest_raw = env.get(MANIFEST_ENV) or overlay.get("manifest")
        manifest_path = Path(manifest_raw) if manifest_raw else Path(MANIFEST_FILENAME)
        if not manifest_path.is_absolute():
            manifest_path = library_root / manifest_path

        log_level = str(env.get(LOG_LEVEL_ENV) or logging_cfg.get("level") or DEFAULT_LOG_LEVEL).upper()
        if log_level not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {log_level}", context={"level": log_level})

        log_file_raw = env.get(LOG_FILE_ENV) or logging_cfg.get("file")
        log_file = Path(log_file_raw).expanduser() if log_file_raw else None

        timeout_raw = env.get(INSTALL_TIMEOUT_ENV)
        if timeout_raw is None:
            timeout_raw = install_cfg.get("timeout", DEFAULT_INSTALL_TIMEOUT)
        timeout = _as_int(timeout_raw)
        if timeout is None or timeout <= 0:
            raise ConfigError(
                f"Install timeout must be a positive integer, got {timeout_raw!r}",
                context={"timeout": timeout_raw},
            )

        return cls(
            library_root=library_root,
            manifest_path=manifest_path,
            lockfile_path=default_lockfile_for(manifest_path),
            log_level=log_level,
            log_file=log_file,
            install_timeout=timeout,
        )


__all__ = ["BootstrapSettings", "config_path_for", "DEFAULT_LOG_LEVEL", "DEFAULT_INSTALL_TIMEOUT"]
