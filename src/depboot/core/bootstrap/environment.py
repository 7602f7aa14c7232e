"""Startup entry point for the vendored package tree.

Call :func:`bootstrap` as the first thing an application does: it reconciles
the vendored tree, installs it through pip when stale and puts it on
``sys.path`` before anything that needs a vendored package is imported.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

from depboot.core.bootstrap.diagnostics import Diagnostics, select_diagnostics, version_lt
from depboot.core.config import BootstrapSettings
from depboot.core.exceptions import DepbootError
from depboot.core.runtime import RuntimeIdentity
from depboot.core.stdlib_logging import configure_stdlib_logging
from depboot.core.vendor.installer import VendorInstaller
from depboot.core.vendor.manifest import ManifestAccessor
from depboot.core.vendor.markers import VendorMarkerStore
from depboot.core.vendor.models import VendorVerdict
from depboot.core.vendor.reconciler import VendorReconciler

logger = logging.getLogger(__name__)


def activate_vendor_path(site_dir: Path) -> bool:
    """Prepend ``site_dir`` to ``sys.path``; False if it was already there."""
    entry = str(site_dir)
    if entry in sys.path:
        return False
    sys.path.insert(0, entry)
    logger.debug("Added %s to sys.path", entry)
    return True


def _warn_on_lockfile_tooling(accessor: ManifestAccessor, diagnostics: Diagnostics) -> None:
    locked_with = accessor.definition().tooling_version
    installed = accessor.installed_tooling_version()
    if locked_with and installed and version_lt(installed, locked_with):
        diagnostics.warning(
            f"{accessor.definition().lockfile_path.name} was written with pip {locked_with} "
            f"but pip {installed} is installed."
        )


def setup_vendor_environment(
    settings: BootstrapSettings,
    *,
    diagnostics: Optional[Diagnostics] = None,
    accessor: Optional[ManifestAccessor] = None,
    markers: Optional[VendorMarkerStore] = None,
    installer: Optional[VendorInstaller] = None,
    runtime: Optional[RuntimeIdentity] = None,
    setup_path: bool = True,
    force: bool = False,
) -> VendorVerdict:
    """Reconcile the vendored tree, install it if stale, and activate it.

    Any depboot failure (pip too old, invalid manifest, failed install) is
    reported through ``diagnostics.fatal``, which exits the process.

    Returns:
        The verdict computed before any install ran
    """
    diagnostics = diagnostics or select_diagnostics()
    runtime = runtime or RuntimeIdentity.current()
    paths = settings.vendor_paths
    accessor = accessor or ManifestAccessor(settings.manifest_path, settings.lockfile_path)
    markers = markers or VendorMarkerStore(paths)
    installer = installer or VendorInstaller(paths, timeout=settings.install_timeout)

    try:
        verdict = VendorReconciler(accessor, markers).check(runtime)
        if verdict.is_stale or force:
            why = verdict.reason.description if verdict.reason else "reinstall requested"
            diagnostics.info(f"Installing vendored packages ({why})")
            _warn_on_lockfile_tooling(accessor, diagnostics)
            result = installer.install(accessor.definition(), runtime)
            logger.info("Vendored %d requirement(s) into %s", len(result.requirements), result.site_dir)
    except DepbootError as e:
        diagnostics.fatal(str(e))
        raise AssertionError("unreachable: diagnostics.fatal returned")

    if setup_path:
        activate_vendor_path(paths.site_dir(runtime.version))
    return verdict


def bootstrap(
    environ: Optional[Mapping[str, str]] = None,
    *,
    host_logger: Any = None,
    setup_path: bool = True,
) -> VendorVerdict:
    """Load settings, configure logging and set up the vendored tree.

    Args:
        environ: Environment mapping (defaults to os.environ)
        host_logger: Optional host logger; used for messages when it provides
            info/warning/error
        setup_path: Whether to put the vendor site directory on sys.path
    """
    diagnostics = select_diagnostics(host_logger)
    try:
        settings = BootstrapSettings.load(environ)
    except DepbootError as e:
        diagnostics.fatal(str(e))
        raise AssertionError("unreachable: diagnostics.fatal returned")

    configure_stdlib_logging(level=settings.log_level, log_path=settings.log_file)
    return setup_vendor_environment(settings, diagnostics=diagnostics, setup_path=setup_path)


__all__ = ["bootstrap", "setup_vendor_environment", "activate_vendor_path"]
