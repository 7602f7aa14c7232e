"""Shared CLI utilities."""
from __future__ import annotations

import argparse
from pathlib import Path

from depboot.core.config import BootstrapSettings
from depboot.core.stdlib_logging import configure_stdlib_logging
from depboot.core.vendor.manifest import ManifestAccessor


def load_settings(args: argparse.Namespace) -> BootstrapSettings:
    """Resolve settings honouring ``--library`` and ``--verbose``.

    Raises:
        ConfigError: If no library root is given or configured
    """
    library = getattr(args, "library", None)
    settings = BootstrapSettings.load(library_root=Path(library) if library else None)

    level = "DEBUG" if getattr(args, "verbose", False) else settings.log_level
    configure_stdlib_logging(level=level, log_path=settings.log_file)
    return settings


def build_accessor(settings: BootstrapSettings) -> ManifestAccessor:
    return ManifestAccessor(settings.manifest_path, settings.lockfile_path)


__all__ = ["load_settings", "build_accessor"]
